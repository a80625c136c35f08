"""Tests for exceptions module."""

from __future__ import annotations

from cqrs_ddd_search.exceptions import (
    AnalyzerNotFoundError,
    FieldNotFoundError,
    SchemaDefinitionError,
    SchemaResolutionError,
    SearchError,
    UnsupportedFieldTypeError,
    ValueValidationError,
)

# -- FieldNotFoundError ------------------------------------------------------


def test_field_not_found_fuzzy():
    err = FieldNotFoundError(
        invalid_field="nme",
        schema_name="users",
        available_fields=["name", "age", "status"],
    )
    assert "nme" in str(err)
    assert "name" in str(err)
    assert err.suggestions == ["name"]


def test_field_not_found_to_dict():
    err = FieldNotFoundError("emial", "users", ["name", "email"])
    d = err.to_dict()
    assert d["error"] == "FIELD_NOT_FOUND"
    assert d["field"] == "emial"
    assert d["schema"] == "users"
    assert d["suggestions"] == ["email"]
    assert d["available_fields"] == ["email", "name"]


def test_field_not_found_truncates_preview():
    fields = [f"field_{i:02d}" for i in range(20)]
    err = FieldNotFoundError("zzz", "big", fields)
    assert "..." in str(err)
    assert err.suggestions == []


# -- UnsupportedFieldTypeError -------------------------------------------------


def test_unsupported_field_type():
    err = UnsupportedFieldTypeError("bio", "text", "sorting")
    assert str(err) == "Field 'bio' of type 'text' does not support sorting"
    assert err.to_dict() == {
        "error": "UNSUPPORTED_FIELD_TYPE",
        "field": "bio",
        "field_type": "text",
        "operation": "sorting",
    }


# -- Misc ------------------------------------------------------------------------


def test_value_validation_error_to_dict():
    err = ValueValidationError("bad", field="age", value="old")
    assert err.to_dict() == {
        "error": "VALUE_VALIDATION_ERROR",
        "message": "bad",
        "field": "age",
        "value": "'old'",
    }


def test_analyzer_not_found_no_matches():
    err = AnalyzerNotFoundError("zzzz", ["standard", "keyword"])
    assert err.suggestions == []
    assert "keyword, standard" in str(err)


def test_schema_definition_error_to_dict():
    err = SchemaDefinitionError("broken", errors=["fields.x: bad"])
    assert err.to_dict()["errors"] == ["fields.x: bad"]


def test_hierarchy():
    assert issubclass(FieldNotFoundError, SchemaResolutionError)
    assert issubclass(UnsupportedFieldTypeError, SchemaResolutionError)
    for exc in (
        SchemaResolutionError,
        SchemaDefinitionError,
        AnalyzerNotFoundError,
        ValueValidationError,
    ):
        assert issubclass(exc, SearchError)


def test_base_to_dict():
    assert SearchError("boom").to_dict() == {"error": "SearchError", "message": "boom"}
