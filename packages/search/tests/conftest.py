"""Shared fixtures for search tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_search import Schema
from cqrs_ddd_search.engine import RangeQuery


@pytest.fixture
def schema() -> Schema:
    """Schema covering every mapper type."""
    return Schema.from_dict(
        {
            "name": "users",
            "default_analyzer": "standard",
            "fields": {
                "id": {"type": "uuid"},
                "name": {"type": "string"},
                "email": {"type": "string", "case_sensitive": False},
                "title": {"type": "text"},
                "bio": {"type": "text", "analyzer": "english"},
                "age": {"type": "integer"},
                "visits": {"type": "long"},
                "rating": {"type": "float"},
                "score": {"type": "double"},
                "active": {"type": "boolean"},
                "created_at": {"type": "date", "pattern": "%Y-%m-%d"},
                "nickname": {"type": "string", "sorted": False},
                "secret": {"type": "string", "indexed": False},
            },
        }
    )


@pytest.fixture
def pre_filter() -> RangeQuery:
    """Token-range restriction as supplied by an execution layer."""
    return RangeQuery("_token", lower=-100, upper=100, include_lower=True)
