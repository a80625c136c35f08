"""Phrase condition over analyzed text fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine.queries import PhraseQuery, Query
from ..exceptions import ValueValidationError
from ..schema.mappers import TextMapper
from .base import SingleFieldCondition

if TYPE_CHECKING:
    from ..schema import Schema


@dataclass(frozen=True)
class PhraseCondition(SingleFieldCondition):
    """Analyzed terms of ``value`` in order, at most ``slop`` positions apart."""

    value: str
    slop: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.value, str):
            raise ValueValidationError(
                f"Phrase value for field '{self.field}' must be a string",
                field=self.field,
                value=self.value,
            )
        if self.slop < 0:
            raise ValueValidationError(
                f"slop must be non-negative, got {self.slop}",
                field=self.field,
                value=self.slop,
            )

    def do_query(self, schema: Schema) -> Query:
        mapper = self.mapper(schema, "phrase queries", TextMapper)
        terms = self.analyze(schema, mapper, self.value)
        return PhraseQuery(self.field, tuple(terms), slop=self.slop)
