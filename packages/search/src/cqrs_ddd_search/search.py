"""
Search: a declarative index search request.

A search is formed by an optional querying condition, an optional filtering
condition, an optional sort and a refresh flag. It compiles to an engine
query using a schema, and tells the execution layer whether it has to scan
the full data range instead of an index-narrowed candidate set.

Typical use by an execution layer::

    search.validate(schema)
    if search.requires_full_scan():
        ...  # scan every range
    else:
        query = search.build_query(schema, pre_filter=token_range_filter)
        sort_fields = search.sort_fields(schema)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .engine.queries import (
    BooleanClause,
    BooleanQuery,
    CachingWrapperQuery,
    MatchAllQuery,
    Occur,
)

if TYPE_CHECKING:
    from .conditions import Condition
    from .engine.queries import Query
    from .engine.sorting import SortField
    from .schema import Schema
    from .sort import Sort

logger = logging.getLogger("cqrs_ddd.search")

DEFAULT_FORCE_REFRESH = False


@dataclass(frozen=True)
class Search:
    """
    Immutable search request.

    Attributes:
        query: Condition for querying; ``None`` means no relevance ranking.
        filter: Condition for filtering; ``None`` means no filtering.
        sort: Order in which data is read before querying, not the order
            of the results after querying. ``None`` means no sorting.
        refresh: Refresh the index before reading it. ``None`` resolves to
            ``DEFAULT_FORCE_REFRESH``.
    """

    query: Condition | None = None
    filter: Condition | None = None
    sort: Sort | None = None
    refresh: bool = DEFAULT_FORCE_REFRESH

    def __post_init__(self) -> None:
        refresh = DEFAULT_FORCE_REFRESH if self.refresh is None else bool(self.refresh)
        object.__setattr__(self, "refresh", refresh)

    # -- classification -------------------------------------------------------

    def uses_relevance(self) -> bool:
        """True if this search ranks results by relevance."""
        return self.query is not None

    def uses_sorting(self) -> bool:
        """True if this search uses field sorting."""
        return self.sort is not None

    def is_empty(self) -> bool:
        """True if this search specifies no query, filter or sort."""
        return self.query is None and self.filter is None and self.sort is None

    def requires_full_scan(self) -> bool:
        """
        True if this search must scan all the data ranges.

        Relevance ranking and sorting need every candidate; so does a
        refresh-only search, which has no predicate to narrow the range.
        A refresh with a filter alone does not force a full scan.
        """
        return (
            self.uses_relevance()
            or self.uses_sorting()
            or (self.refresh and self.is_empty())
        )

    # -- compilation ----------------------------------------------------------

    def sort_fields(self, schema: Schema) -> list[SortField] | None:
        """Engine sort directives, or ``None`` when there is no sort."""
        return None if self.sort is None else self.sort.sort_fields(schema)

    def build_query(self, schema: Schema, pre_filter: Query | None = None) -> Query:
        """
        Compile this search into a single engine query.

        ``pre_filter`` is an extra restriction supplied by the execution
        layer (e.g. a token range); it is cached and never scored. The
        filtering condition is added as a non-scoring clause and the
        querying condition as a required, scoring clause. Without any
        clause the result is a match-all query, never an empty boolean.
        """
        clauses: list[BooleanClause] = []
        if pre_filter is not None:
            clauses.append(BooleanClause(CachingWrapperQuery(pre_filter), Occur.FILTER))
        if self.filter is not None:
            clauses.append(BooleanClause(self.filter.filter(schema), Occur.FILTER))
        if self.query is not None:
            clauses.append(BooleanClause(self.query.query(schema), Occur.MUST))

        if not clauses:
            logger.debug("Search has no clauses, matching all documents")
            return MatchAllQuery()
        logger.debug("Built search query with %d clause(s)", len(clauses))
        return BooleanQuery(tuple(clauses))

    def validate(self, schema: Schema) -> None:
        """
        Validate this search against *schema*.

        Runs the same conversions as :meth:`build_query` and
        :meth:`sort_fields`, discarding the results, so it fails on exactly
        the same fields and values.
        """
        logger.debug("Validating search against schema %r", schema.name)
        if self.query is not None:
            self.query.filter(schema)
        if self.filter is not None:
            self.filter.filter(schema)
        if self.sort is not None:
            self.sort.sort_fields(schema)
