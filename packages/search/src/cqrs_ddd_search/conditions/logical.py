"""Conditions that are not tied to a single field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine.queries import (
    BooleanClause,
    BooleanQuery,
    MatchAllQuery,
    MatchNoneQuery,
    Occur,
    Query,
)
from ..exceptions import ValueValidationError
from .base import Condition

if TYPE_CHECKING:
    from ..schema import Schema


@dataclass(frozen=True)
class AllCondition(Condition):
    """Matches every document."""

    def do_query(self, schema: Schema) -> Query:
        return MatchAllQuery()


@dataclass(frozen=True)
class NoneCondition(Condition):
    """Matches no document."""

    def do_query(self, schema: Schema) -> Query:
        return MatchNoneQuery()


@dataclass(frozen=True)
class BooleanCondition(Condition):
    """
    Boolean combination of sub-conditions.

    ``must`` children are required and scored, ``should`` children are
    optional and scored, ``not_`` children exclude documents. A condition
    with only ``not_`` children matches everything else; one with no
    children matches everything.
    """

    must: tuple[Condition, ...] = ()
    should: tuple[Condition, ...] = ()
    not_: tuple[Condition, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("must", "should", "not_"):
            children = tuple(getattr(self, name))
            for child in children:
                if not isinstance(child, Condition):
                    raise ValueValidationError(
                        f"Boolean '{name}' entries must be conditions, "
                        f"got {type(child).__name__}",
                        value=child,
                    )
            object.__setattr__(self, name, children)

    def do_query(self, schema: Schema) -> Query:
        clauses = [BooleanClause(c.query(schema), Occur.MUST) for c in self.must]
        clauses += [BooleanClause(c.query(schema), Occur.SHOULD) for c in self.should]
        clauses += [BooleanClause(c.filter(schema), Occur.MUST_NOT) for c in self.not_]
        if not clauses:
            return MatchAllQuery()
        if not self.must and not self.should:
            clauses.insert(0, BooleanClause(MatchAllQuery(), Occur.MUST))
        return BooleanQuery(tuple(clauses))
