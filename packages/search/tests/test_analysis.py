"""Tests for analyzers and the analyzer registry."""

from __future__ import annotations

import pytest

from cqrs_ddd_search import AnalyzerNotFoundError
from cqrs_ddd_search.analysis import (
    Analyzer,
    AnalyzerRegistry,
    KeywordAnalyzer,
    build_default_analyzers,
)


@pytest.fixture
def analyzers() -> AnalyzerRegistry:
    return build_default_analyzers()


@pytest.mark.parametrize(
    ("name", "text", "terms"),
    [
        ("standard", "Hello, World 42!", ["hello", "world", "42"]),
        ("simple", "R2-D2 rocks", ["r", "d", "rocks"]),
        ("whitespace", "Hello, World", ["Hello,", "World"]),
        ("keyword", "Hello, World", ["Hello, World"]),
        ("keyword", "", []),
        ("english", "The cat and the hat", ["cat", "hat"]),
    ],
)
def test_builtin_analyzers(analyzers, name, text, terms):
    assert analyzers.get(name).tokenize(text) == terms


def test_default_names(analyzers):
    assert analyzers.names == {"standard", "simple", "whitespace", "keyword", "english"}


def test_unknown_analyzer_suggests(analyzers):
    with pytest.raises(AnalyzerNotFoundError) as exc_info:
        analyzers.get("standrd")
    assert exc_info.value.suggestions[0] == "standard"
    assert exc_info.value.to_dict()["error"] == "ANALYZER_NOT_FOUND"


def test_register_custom_analyzer():
    class ReversedAnalyzer(Analyzer):
        @property
        def name(self) -> str:
            return "reversed"

        def tokenize(self, text: str) -> list[str]:
            return [t[::-1] for t in text.split()]

    registry = AnalyzerRegistry()
    registry.register_all(ReversedAnalyzer(), KeywordAnalyzer())
    assert registry.has("reversed")
    assert registry.get("reversed").tokenize("ab cd") == ["ba", "dc"]
    assert not registry.has("standard")
