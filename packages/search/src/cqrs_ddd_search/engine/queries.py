"""
Engine-level query values.

These are the objects handed to the text-search engine. They are immutable
and render to JSON-compatible query documents through ``to_dict()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Occur(str, Enum):
    """How a clause participates in a :class:`BooleanQuery`."""

    MUST = "must"
    FILTER = "filter"
    SHOULD = "should"
    MUST_NOT = "must_not"

    @property
    def scoring(self) -> bool:
        """True if clauses with this occur contribute to relevance."""
        return self in (Occur.MUST, Occur.SHOULD)

    @property
    def required(self) -> bool:
        """True if documents must satisfy clauses with this occur."""
        return self in (Occur.MUST, Occur.FILTER)


class Query(ABC):
    """Base class for engine queries."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible query document."""
        ...


@dataclass(frozen=True)
class MatchAllQuery(Query):
    """Matches every document."""

    def to_dict(self) -> dict[str, Any]:
        return {"match_all": {}}


@dataclass(frozen=True)
class MatchNoneQuery(Query):
    """Matches no document."""

    def to_dict(self) -> dict[str, Any]:
        return {"match_none": {}}


@dataclass(frozen=True)
class TermQuery(Query):
    field: str
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {"term": {self.field: self.value}}


@dataclass(frozen=True)
class RangeQuery(Query):
    """Open or closed range; a ``None`` bound is unbounded."""

    field: str
    lower: Any = None
    upper: Any = None
    include_lower: bool = False
    include_upper: bool = False

    def to_dict(self) -> dict[str, Any]:
        bounds: dict[str, Any] = {}
        if self.lower is not None:
            bounds["gte" if self.include_lower else "gt"] = self.lower
        if self.upper is not None:
            bounds["lte" if self.include_upper else "lt"] = self.upper
        return {"range": {self.field: bounds}}


@dataclass(frozen=True)
class PrefixQuery(Query):
    field: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"prefix": {self.field: self.value}}


@dataclass(frozen=True)
class WildcardQuery(Query):
    field: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"wildcard": {self.field: self.value}}


@dataclass(frozen=True)
class RegexpQuery(Query):
    field: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"regexp": {self.field: self.value}}


@dataclass(frozen=True)
class FuzzyQuery(Query):
    field: str
    value: str
    max_edits: int = 2
    prefix_length: int = 0
    max_expansions: int = 50
    transpositions: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "fuzzy": {
                self.field: {
                    "value": self.value,
                    "fuzziness": self.max_edits,
                    "prefix_length": self.prefix_length,
                    "max_expansions": self.max_expansions,
                    "transpositions": self.transpositions,
                }
            }
        }


@dataclass(frozen=True)
class PhraseQuery(Query):
    """Ordered terms, at most ``slop`` positions apart."""

    field: str
    terms: tuple[str, ...]
    slop: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "match_phrase": {
                self.field: {"query": " ".join(self.terms), "slop": self.slop}
            }
        }


@dataclass(frozen=True)
class BoostQuery(Query):
    """Multiplies the relevance of ``query`` by ``boost``."""

    query: Query
    boost: float

    def to_dict(self) -> dict[str, Any]:
        return {"boost": {"boost": self.boost, "query": self.query.to_dict()}}


@dataclass(frozen=True)
class ConstantScoreQuery(Query):
    """Matches the same documents as ``query`` without scoring them."""

    query: Query

    def to_dict(self) -> dict[str, Any]:
        return {"constant_score": {"filter": self.query.to_dict()}}


@dataclass(frozen=True)
class CachingWrapperQuery(Query):
    """Marks ``query`` as a reusable, cacheable restriction."""

    query: Query

    def to_dict(self) -> dict[str, Any]:
        return {"cached": {"query": self.query.to_dict()}}


@dataclass(frozen=True)
class BooleanClause:
    query: Query
    occur: Occur

    @property
    def scoring(self) -> bool:
        return self.occur.scoring


@dataclass(frozen=True)
class BooleanQuery(Query):
    """
    Boolean combination of clauses.

    An empty ``BooleanQuery`` matches nothing in most engines; callers that
    mean "no restriction" should use :class:`MatchAllQuery` instead.
    """

    clauses: tuple[BooleanClause, ...] = ()

    def clauses_for(self, occur: Occur) -> tuple[BooleanClause, ...]:
        return tuple(c for c in self.clauses if c.occur is occur)

    @property
    def scoring_clauses(self) -> tuple[BooleanClause, ...]:
        return tuple(c for c in self.clauses if c.scoring)

    def is_empty(self) -> bool:
        return not self.clauses

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for occur in Occur:
            queries = [c.query.to_dict() for c in self.clauses_for(occur)]
            if queries:
                body[occur.value] = queries
        return {"bool": body}
