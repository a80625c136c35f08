"""
Search exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``SearchError`` and provide ``to_dict()`` for
API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SearchError(Exception):
    """Base exception for all search errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class SchemaDefinitionError(SearchError):
    """A schema document could not be loaded."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.message = message
        self.errors = errors or []
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SCHEMA_DEFINITION_ERROR",
            "message": self.message,
            "errors": self.errors,
        }


class SchemaResolutionError(SearchError):
    """A referenced field or its type is not recognized by the schema."""


class FieldNotFoundError(SchemaResolutionError):
    """
    Unknown field with helpful suggestions.

    Example error message::

        Invalid field 'nme' on schema 'users'.
        Did you mean one of these?
          • name

        Available fields: age, bio, name
    """

    def __init__(
        self,
        invalid_field: str,
        schema_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.schema_name = schema_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [
            f"Invalid field '{self.invalid_field}' on schema '{self.schema_name}'."
        ]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "schema": self.schema_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class UnsupportedFieldTypeError(SchemaResolutionError):
    """
    A field exists but its type does not support the requested operation.

    Raised e.g. for a prefix condition on a numeric field, a phrase
    condition on a non-text field, or sorting by an unsortable field.
    """

    def __init__(self, field: str, field_type: str, operation: str) -> None:
        self.field = field
        self.field_type = field_type
        self.operation = operation
        super().__init__(
            f"Field '{field}' of type '{field_type}' does not support {operation}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_FIELD_TYPE",
            "field": self.field,
            "field_type": self.field_type,
            "operation": self.operation,
        }


class AnalyzerNotFoundError(SearchError):
    """Unknown analyzer name, with fuzzy-matched suggestions."""

    def __init__(self, analyzer: str, valid_analyzers: list[str]) -> None:
        self.analyzer = analyzer
        self.valid_analyzers = valid_analyzers
        self.suggestions = get_close_matches(analyzer, valid_analyzers, n=3, cutoff=0.6)

        message = f"Unknown analyzer: '{analyzer}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid analyzers: {', '.join(sorted(valid_analyzers))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ANALYZER_NOT_FOUND",
            "analyzer": self.analyzer,
            "suggestions": self.suggestions,
            "valid_analyzers": sorted(self.valid_analyzers),
        }


class ValueValidationError(SearchError):
    """A condition or sort argument is incompatible with the field's type."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALUE_VALIDATION_ERROR",
            "message": self.message,
            "field": self.field,
            "value": repr(self.value) if self.value is not None else None,
        }
