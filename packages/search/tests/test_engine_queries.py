"""Tests for engine query values and their query documents."""

from __future__ import annotations

import pytest

from cqrs_ddd_search.engine import (
    BooleanClause,
    BooleanQuery,
    BoostQuery,
    CachingWrapperQuery,
    ConstantScoreQuery,
    FuzzyQuery,
    MatchAllQuery,
    MatchNoneQuery,
    Occur,
    PhraseQuery,
    PrefixQuery,
    RangeQuery,
    RegexpQuery,
    TermQuery,
    WildcardQuery,
)


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        (MatchAllQuery(), {"match_all": {}}),
        (MatchNoneQuery(), {"match_none": {}}),
        (TermQuery("a", 1), {"term": {"a": 1}}),
        (PrefixQuery("a", "x"), {"prefix": {"a": "x"}}),
        (WildcardQuery("a", "x*"), {"wildcard": {"a": "x*"}}),
        (RegexpQuery("a", "x.+"), {"regexp": {"a": "x.+"}}),
        (RangeQuery("a"), {"range": {"a": {}}}),
        (RangeQuery("a", 1, 5), {"range": {"a": {"gt": 1, "lt": 5}}}),
        (
            RangeQuery("a", 1, 5, include_lower=True, include_upper=True),
            {"range": {"a": {"gte": 1, "lte": 5}}},
        ),
        (
            PhraseQuery("a", ("x", "y"), slop=2),
            {"match_phrase": {"a": {"query": "x y", "slop": 2}}},
        ),
        (
            BoostQuery(TermQuery("a", 1), 2.0),
            {"boost": {"boost": 2.0, "query": {"term": {"a": 1}}}},
        ),
        (
            ConstantScoreQuery(TermQuery("a", 1)),
            {"constant_score": {"filter": {"term": {"a": 1}}}},
        ),
        (
            CachingWrapperQuery(TermQuery("a", 1)),
            {"cached": {"query": {"term": {"a": 1}}}},
        ),
    ],
)
def test_to_dict(query, expected):
    assert query.to_dict() == expected


def test_fuzzy_to_dict():
    assert FuzzyQuery("a", "x", max_edits=1).to_dict() == {
        "fuzzy": {
            "a": {
                "value": "x",
                "fuzziness": 1,
                "prefix_length": 0,
                "max_expansions": 50,
                "transpositions": True,
            }
        }
    }


def test_occur_flags():
    assert Occur.MUST.scoring and Occur.MUST.required
    assert Occur.SHOULD.scoring and not Occur.SHOULD.required
    assert not Occur.FILTER.scoring and Occur.FILTER.required
    assert not Occur.MUST_NOT.scoring and not Occur.MUST_NOT.required


def test_boolean_query_groups_clauses_by_occur():
    query = BooleanQuery(
        (
            BooleanClause(TermQuery("a", 1), Occur.FILTER),
            BooleanClause(TermQuery("b", 2), Occur.MUST),
            BooleanClause(TermQuery("c", 3), Occur.FILTER),
        )
    )
    assert query.to_dict() == {
        "bool": {
            "must": [{"term": {"b": 2}}],
            "filter": [{"term": {"a": 1}}, {"term": {"c": 3}}],
        }
    }
    assert len(query.clauses_for(Occur.FILTER)) == 2
    assert [c.query for c in query.scoring_clauses] == [TermQuery("b", 2)]


def test_empty_boolean_query():
    query = BooleanQuery()
    assert query.is_empty()
    assert query.to_dict() == {"bool": {}}
