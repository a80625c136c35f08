"""
Text analysis used when compiling conditions on ``text`` fields.

Provides the :class:`Analyzer` strategy interface and a registry that maps
analyzer names to instances. Schemas refer to analyzers by name; new
analyzers are added by subclassing :class:`Analyzer` and registering them.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from .exceptions import AnalyzerNotFoundError

_WORD_RE = re.compile(r"\w+", re.UNICODE)
_LETTERS_RE = re.compile(r"[^\W\d_]+", re.UNICODE)

ENGLISH_STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "if",
        "in", "into", "is", "it", "no", "not", "of", "on", "or", "such",
        "that", "the", "their", "then", "there", "these", "they", "this",
        "to", "was", "will", "with",
    }
)  # fmt: skip


class Analyzer(ABC):
    """Strategy interface turning a text value into index terms."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The name schemas use to refer to this analyzer."""
        ...

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split *text* into the terms it would be indexed as."""
        ...


class StandardAnalyzer(Analyzer):
    """Lower-cased word tokens."""

    @property
    def name(self) -> str:
        return "standard"

    def tokenize(self, text: str) -> list[str]:
        return _WORD_RE.findall(text.lower())


class SimpleAnalyzer(Analyzer):
    """Lower-cased runs of letters; digits and punctuation split tokens."""

    @property
    def name(self) -> str:
        return "simple"

    def tokenize(self, text: str) -> list[str]:
        return _LETTERS_RE.findall(text.lower())


class WhitespaceAnalyzer(Analyzer):
    """Splits on whitespace only, keeping case."""

    @property
    def name(self) -> str:
        return "whitespace"

    def tokenize(self, text: str) -> list[str]:
        return text.split()


class KeywordAnalyzer(Analyzer):
    """The whole value is a single term."""

    @property
    def name(self) -> str:
        return "keyword"

    def tokenize(self, text: str) -> list[str]:
        return [text] if text else []


class EnglishAnalyzer(StandardAnalyzer):
    """Standard tokens without English stop words."""

    @property
    def name(self) -> str:
        return "english"

    def tokenize(self, text: str) -> list[str]:
        return [t for t in super().tokenize(text) if t not in ENGLISH_STOP_WORDS]


class AnalyzerRegistry:
    """
    Registry of :class:`Analyzer` instances keyed by name.

    Usage::

        registry = AnalyzerRegistry()
        registry.register(StandardAnalyzer())

        terms = registry.get("standard").tokenize("Hello World")
    """

    def __init__(self) -> None:
        self._analyzers: dict[str, Analyzer] = {}

    def register(self, analyzer: Analyzer) -> None:
        """Register an analyzer instance under its name."""
        self._analyzers[analyzer.name] = analyzer

    def register_all(self, *analyzers: Analyzer) -> None:
        for analyzer in analyzers:
            self.register(analyzer)

    def get(self, name: str) -> Analyzer:
        """
        Return the analyzer registered as *name*.

        Raises:
            AnalyzerNotFoundError: If no analyzer has that name.
        """
        analyzer = self._analyzers.get(name)
        if analyzer is None:
            raise AnalyzerNotFoundError(name, list(self._analyzers))
        return analyzer

    def has(self, name: str) -> bool:
        return name in self._analyzers

    @property
    def names(self) -> set[str]:
        return set(self._analyzers)


def build_default_analyzers() -> AnalyzerRegistry:
    """Create a registry holding the built-in analyzers."""
    registry = AnalyzerRegistry()
    registry.register_all(
        StandardAnalyzer(),
        SimpleAnalyzer(),
        WhitespaceAnalyzer(),
        KeywordAnalyzer(),
        EnglishAnalyzer(),
    )
    return registry


DEFAULT_ANALYZERS = build_default_analyzers()
