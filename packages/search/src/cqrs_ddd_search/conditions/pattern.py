"""Term-pattern conditions: prefix, wildcard, regexp and fuzzy."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from ..engine.queries import FuzzyQuery, PrefixQuery, Query, RegexpQuery, WildcardQuery
from ..exceptions import ValueValidationError
from ..schema.mappers import StringMapper, TextMapper
from .base import SingleFieldCondition

if TYPE_CHECKING:
    from ..schema import Schema


@dataclass(frozen=True)
class _PatternCondition(SingleFieldCondition):
    """Shared validation for conditions whose value is a term pattern."""

    operation: ClassVar[str] = "pattern queries"

    value: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.value, str):
            raise ValueValidationError(
                f"{type(self).__name__} value for field '{self.field}' "
                "must be a string",
                field=self.field,
                value=self.value,
            )

    def do_query(self, schema: Schema) -> Query:
        mapper = self.mapper(schema, self.operation, StringMapper, TextMapper)
        return self.build(mapper.base(self.field, self.value))

    @abstractmethod
    def build(self, value: str) -> Query:
        """Build the engine query for the normalized pattern."""
        ...


@dataclass(frozen=True)
class PrefixCondition(_PatternCondition):
    operation: ClassVar[str] = "prefix queries"

    def build(self, value: str) -> Query:
        return PrefixQuery(self.field, value)


@dataclass(frozen=True)
class WildcardCondition(_PatternCondition):
    """``*`` matches any character sequence, ``?`` any single character."""

    operation: ClassVar[str] = "wildcard queries"

    def build(self, value: str) -> Query:
        return WildcardQuery(self.field, value)


@dataclass(frozen=True)
class RegexpCondition(_PatternCondition):
    operation: ClassVar[str] = "regexp queries"

    def build(self, value: str) -> Query:
        return RegexpQuery(self.field, value)


@dataclass(frozen=True)
class FuzzyCondition(_PatternCondition):
    """
    Terms within ``max_edits`` (Damerau-)Levenshtein edits of ``value``.

    Attributes:
        max_edits: Maximum edit distance, 0 to 2.
        prefix_length: Leading characters that must match exactly.
        max_expansions: Maximum number of terms the query expands to.
        transpositions: Count a swap of adjacent characters as one edit.
    """

    operation: ClassVar[str] = "fuzzy queries"

    max_edits: int = 2
    prefix_length: int = 0
    max_expansions: int = 50
    transpositions: bool = True

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0 <= self.max_edits <= 2:
            raise ValueValidationError(
                f"max_edits must be between 0 and 2, got {self.max_edits}",
                field=self.field,
                value=self.max_edits,
            )
        if self.prefix_length < 0:
            raise ValueValidationError(
                f"prefix_length must be non-negative, got {self.prefix_length}",
                field=self.field,
                value=self.prefix_length,
            )
        if self.max_expansions <= 0:
            raise ValueValidationError(
                f"max_expansions must be positive, got {self.max_expansions}",
                field=self.field,
                value=self.max_expansions,
            )

    def build(self, value: str) -> Query:
        return FuzzyQuery(
            self.field,
            value,
            max_edits=self.max_edits,
            prefix_length=self.prefix_length,
            max_expansions=self.max_expansions,
            transpositions=self.transpositions,
        )
