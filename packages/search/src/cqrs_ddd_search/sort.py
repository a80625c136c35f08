"""
Sort directives: ordered field directives resolved against a schema.

Note that a sort defines the order in which data is read *before* any
query is applied, not the order of the results after ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import ValueValidationError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .engine.sorting import SortField
    from .schema import Schema


@dataclass(frozen=True)
class SimpleSortField:
    """Sort by one field, ascending unless ``reverse``."""

    field: str
    reverse: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field.strip():
            raise ValueValidationError(
                "Sort field name must be a non-blank string", value=self.field
            )

    @classmethod
    def asc(cls, field: str) -> SimpleSortField:
        return cls(field)

    @classmethod
    def desc(cls, field: str) -> SimpleSortField:
        return cls(field, reverse=True)

    def sort_field(self, schema: Schema) -> SortField:
        """
        Resolve to an engine sort directive.

        Raises:
            FieldNotFoundError: If the schema lacks the field.
            UnsupportedFieldTypeError: If the field is not indexed or not
                sortable.
        """
        mapper = schema.mapper(self.field, "sorting")
        return mapper.sort_field(self.field, self.reverse)


@dataclass(frozen=True)
class Sort:
    """Non-empty, ordered sequence of sort directives."""

    fields: tuple[SimpleSortField, ...]

    def __post_init__(self) -> None:
        if isinstance(self.fields, (str, SimpleSortField)):
            raise ValueValidationError(
                "Sort fields must be a sequence of directives", value=self.fields
            )
        fields = tuple(
            SimpleSortField(f) if isinstance(f, str) else f for f in self.fields
        )
        if not fields:
            raise ValueValidationError("Sort requires at least one field")
        for f in fields:
            if not isinstance(f, SimpleSortField):
                raise ValueValidationError(
                    f"Sort entries must be sort fields, got {type(f).__name__}",
                    value=f,
                )
        object.__setattr__(self, "fields", fields)

    @classmethod
    def of(cls, *fields: SimpleSortField | str) -> Sort:
        """Build a sort from directives; plain names sort ascending."""
        return cls(tuple(fields))

    def sort_fields(self, schema: Schema) -> list[SortField]:
        """Resolve every directive, preserving order."""
        return [f.sort_field(schema) for f in self.fields]

    def __iter__(self) -> Iterator[SimpleSortField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)
