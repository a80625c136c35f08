from .analysis import Analyzer, AnalyzerRegistry, build_default_analyzers
from .builder import SearchBuilder
from .conditions import (
    AllCondition,
    BooleanCondition,
    Condition,
    ContainsCondition,
    FuzzyCondition,
    MatchCondition,
    NoneCondition,
    PhraseCondition,
    PrefixCondition,
    RangeCondition,
    RegexpCondition,
    WildcardCondition,
)
from .exceptions import (
    AnalyzerNotFoundError,
    FieldNotFoundError,
    SchemaDefinitionError,
    SchemaResolutionError,
    SearchError,
    UnsupportedFieldTypeError,
    ValueValidationError,
)
from .schema import Schema
from .search import DEFAULT_FORCE_REFRESH, Search
from .sort import SimpleSortField, Sort

__all__ = [
    # Core types
    "Search",
    "DEFAULT_FORCE_REFRESH",
    "Schema",
    "Sort",
    "SimpleSortField",
    # Builder
    "SearchBuilder",
    # Conditions
    "Condition",
    "AllCondition",
    "NoneCondition",
    "BooleanCondition",
    "MatchCondition",
    "ContainsCondition",
    "RangeCondition",
    "PrefixCondition",
    "WildcardCondition",
    "RegexpCondition",
    "FuzzyCondition",
    "PhraseCondition",
    # Analysis
    "Analyzer",
    "AnalyzerRegistry",
    "build_default_analyzers",
    # Exceptions
    "SearchError",
    "SchemaDefinitionError",
    "SchemaResolutionError",
    "FieldNotFoundError",
    "UnsupportedFieldTypeError",
    "AnalyzerNotFoundError",
    "ValueValidationError",
]
