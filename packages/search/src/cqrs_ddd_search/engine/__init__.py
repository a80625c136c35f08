"""Engine-level query and sort values produced by search compilation."""

from __future__ import annotations

from .queries import (
    BooleanClause,
    BooleanQuery,
    BoostQuery,
    CachingWrapperQuery,
    ConstantScoreQuery,
    FuzzyQuery,
    MatchAllQuery,
    MatchNoneQuery,
    Occur,
    PhraseQuery,
    PrefixQuery,
    Query,
    RangeQuery,
    RegexpQuery,
    TermQuery,
    WildcardQuery,
)
from .sorting import SortField, SortType

__all__ = [
    "BooleanClause",
    "BooleanQuery",
    "BoostQuery",
    "CachingWrapperQuery",
    "ConstantScoreQuery",
    "FuzzyQuery",
    "MatchAllQuery",
    "MatchNoneQuery",
    "Occur",
    "PhraseQuery",
    "PrefixQuery",
    "Query",
    "RangeQuery",
    "RegexpQuery",
    "SortField",
    "SortType",
    "TermQuery",
    "WildcardQuery",
]
