"""Exact-value conditions: match and contains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..engine.queries import (
    BooleanClause,
    BooleanQuery,
    Occur,
    PhraseQuery,
    Query,
    TermQuery,
)
from ..exceptions import ValueValidationError
from ..schema.mappers import TextMapper
from .base import SingleFieldCondition

if TYPE_CHECKING:
    from ..schema import Schema


@dataclass(frozen=True)
class MatchCondition(SingleFieldCondition):
    """
    Field equals ``value``.

    On text fields the value is analyzed: a single term becomes a term
    query, several terms an exact phrase.
    """

    value: Any

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.value is None:
            raise ValueValidationError(
                f"Match value for field '{self.field}' is required", field=self.field
            )

    def do_query(self, schema: Schema) -> Query:
        mapper = self.mapper(schema, "match queries")
        if isinstance(mapper, TextMapper):
            terms = self.analyze(schema, mapper, self.value)
            if len(terms) == 1:
                return TermQuery(self.field, terms[0])
            return PhraseQuery(self.field, tuple(terms))
        return TermQuery(self.field, mapper.base(self.field, self.value))


@dataclass(frozen=True)
class ContainsCondition(SingleFieldCondition):
    """Field matches any of ``values``."""

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.values, (str, bytes)) or not self.values:
            raise ValueValidationError(
                f"Contains condition on '{self.field}' requires a non-empty "
                "sequence of values",
                field=self.field,
                value=self.values,
            )
        object.__setattr__(self, "values", tuple(self.values))
        if any(v is None for v in self.values):
            raise ValueValidationError(
                f"Contains values for field '{self.field}' must not be null",
                field=self.field,
                value=self.values,
            )

    def do_query(self, schema: Schema) -> Query:
        clauses = tuple(
            BooleanClause(MatchCondition(self.field, v).do_query(schema), Occur.SHOULD)
            for v in self.values
        )
        return BooleanQuery(clauses)
