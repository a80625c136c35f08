"""Condition family compiled to engine queries against a schema."""

from __future__ import annotations

from .base import DEFAULT_BOOST, Condition, SingleFieldCondition
from .logical import AllCondition, BooleanCondition, NoneCondition
from .pattern import FuzzyCondition, PrefixCondition, RegexpCondition, WildcardCondition
from .range import RangeCondition
from .term import ContainsCondition, MatchCondition
from .text import PhraseCondition

__all__ = [
    "DEFAULT_BOOST",
    "AllCondition",
    "BooleanCondition",
    "Condition",
    "ContainsCondition",
    "FuzzyCondition",
    "MatchCondition",
    "NoneCondition",
    "PhraseCondition",
    "PrefixCondition",
    "RangeCondition",
    "RegexpCondition",
    "SingleFieldCondition",
    "WildcardCondition",
]
