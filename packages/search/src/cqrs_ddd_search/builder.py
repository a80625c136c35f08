"""
Fluent builder for :class:`~cqrs_ddd_search.search.Search`.

Example::

    search = (
        SearchBuilder()
        .filter(RangeCondition("age", lower=18, include_lower=True))
        .query(MatchCondition("bio", "python"))
        .sort(SimpleSortField.desc("created_at"), "name")
        .refresh(True)
        .build()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .search import DEFAULT_FORCE_REFRESH, Search
from .sort import SimpleSortField, Sort

if TYPE_CHECKING:
    from .conditions import Condition


class SearchBuilder:
    """
    Accumulates the parts of a search; ``build()`` never fails.

    Each setter replaces the previous value, so a builder can be adjusted
    and built again.
    """

    def __init__(self) -> None:
        self._query: Condition | None = None
        self._filter: Condition | None = None
        self._sort: Sort | None = None
        self._refresh: bool = DEFAULT_FORCE_REFRESH

    def query(self, condition: Condition | None) -> SearchBuilder:
        """Set the querying (relevance) condition."""
        self._query = condition
        return self

    def filter(self, condition: Condition | None) -> SearchBuilder:
        """Set the filtering (non-scoring) condition."""
        self._filter = condition
        return self

    def sort(self, *fields: SimpleSortField | str) -> SearchBuilder:
        """Set the sort directives; plain names sort ascending, none clears."""
        self._sort = Sort.of(*fields) if fields else None
        return self

    def refresh(self, refresh: bool = True) -> SearchBuilder:
        self._refresh = refresh
        return self

    def build(self) -> Search:
        return Search(
            query=self._query,
            filter=self._filter,
            sort=self._sort,
            refresh=self._refresh,
        )

    def reset(self) -> SearchBuilder:
        """Clear all parts and return ``self`` for reuse."""
        self._query = None
        self._filter = None
        self._sort = None
        self._refresh = DEFAULT_FORCE_REFRESH
        return self
