"""Range condition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..engine.queries import Query, RangeQuery
from ..exceptions import UnsupportedFieldTypeError
from ..schema.mappers import TextMapper
from .base import SingleFieldCondition

if TYPE_CHECKING:
    from ..schema import Schema


@dataclass(frozen=True)
class RangeCondition(SingleFieldCondition):
    """
    Field value between ``lower`` and ``upper``.

    A ``None`` bound leaves that side open; bounds are exclusive unless the
    matching ``include_*`` flag is set.
    """

    lower: Any = None
    upper: Any = None
    include_lower: bool = False
    include_upper: bool = False

    def do_query(self, schema: Schema) -> Query:
        mapper = self.mapper(schema, "range queries")
        if isinstance(mapper, TextMapper):
            raise UnsupportedFieldTypeError(self.field, mapper.type, "range queries")
        lower = None if self.lower is None else mapper.base(self.field, self.lower)
        upper = None if self.upper is None else mapper.base(self.field, self.upper)
        return RangeQuery(
            self.field,
            lower=lower,
            upper=upper,
            include_lower=self.include_lower,
            include_upper=self.include_upper,
        )
