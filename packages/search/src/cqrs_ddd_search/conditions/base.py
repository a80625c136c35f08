"""
Condition base classes.

A condition is a predicate over indexed fields that can be compiled two
ways against a :class:`~cqrs_ddd_search.schema.Schema`:

- ``query(schema)``: the scoring form, contributing to relevance;
- ``filter(schema)``: the non-scoring form, restricting results only.

Both forms are built from the same ``do_query`` so they reject exactly the
same fields and values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..engine.queries import BoostQuery, ConstantScoreQuery, Query
from ..exceptions import (
    UnsupportedFieldTypeError,
    ValueValidationError,
)

if TYPE_CHECKING:
    from ..schema import Mapper, Schema

DEFAULT_BOOST = 1.0


@dataclass(frozen=True)
class Condition(ABC):
    """Base class for all conditions."""

    boost: float | None = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if self.boost is not None and self.boost < 0:
            raise ValueValidationError(
                f"Boost must be non-negative, got {self.boost}", value=self.boost
            )

    def query(self, schema: Schema) -> Query:
        """Return the scoring engine query for this condition."""
        query = self.do_query(schema)
        if self.boost is None or self.boost == DEFAULT_BOOST:
            return query
        return BoostQuery(query, self.boost)

    def filter(self, schema: Schema) -> Query:
        """Return the non-scoring engine query for this condition."""
        return ConstantScoreQuery(self.do_query(schema))

    @abstractmethod
    def do_query(self, schema: Schema) -> Query:
        """Build the underlying engine query, without boost or scoring wrapper."""
        ...


@dataclass(frozen=True)
class SingleFieldCondition(Condition):
    """Condition on exactly one schema field."""

    field: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.field, str) or not self.field.strip():
            raise ValueValidationError(
                "Field name must be a non-blank string", value=self.field
            )

    def mapper(
        self,
        schema: Schema,
        operation: str,
        *allowed: type[Mapper],
    ) -> Mapper:
        """
        Resolve this condition's field, checking it can serve *operation*.

        Raises:
            FieldNotFoundError: If the schema lacks the field.
            UnsupportedFieldTypeError: If the field is not indexed, or its
                mapper is not one of *allowed* (when given).
        """
        mapper = schema.mapper(self.field, operation)
        if allowed and not isinstance(mapper, allowed):
            raise UnsupportedFieldTypeError(self.field, mapper.type, operation)
        return mapper

    def analyze(self, schema: Schema, mapper: Mapper, value: object) -> list[str]:
        """Run *value* through the field's analyzer; empty results are rejected."""
        text = mapper.base(self.field, value)
        terms = schema.analyzer(self.field).tokenize(text)
        if not terms:
            raise ValueValidationError(
                f"Value {text!r} produces no terms for field '{self.field}'",
                field=self.field,
                value=value,
            )
        return terms
