"""
Schema: the mapping of field names to :mod:`mappers <.mappers>`.

Loaded from a dictionary or JSON document::

    schema = Schema.from_dict(
        {
            "name": "users",
            "default_analyzer": "standard",
            "fields": {
                "name": {"type": "string"},
                "bio": {"type": "text", "analyzer": "english"},
                "age": {"type": "integer"},
            },
        }
    )
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Union

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..analysis import DEFAULT_ANALYZERS, Analyzer
from ..exceptions import (
    FieldNotFoundError,
    SchemaDefinitionError,
    UnsupportedFieldTypeError,
)
from .mappers import (
    BooleanMapper,
    DateMapper,
    DoubleMapper,
    FloatMapper,
    IntegerMapper,
    LongMapper,
    Mapper,
    StringMapper,
    TextMapper,
    UUIDMapper,
)

logger = logging.getLogger("cqrs_ddd.search.schema")

FieldMapper = Annotated[
    Union[
        StringMapper,
        TextMapper,
        IntegerMapper,
        LongMapper,
        FloatMapper,
        DoubleMapper,
        BooleanMapper,
        DateMapper,
        UUIDMapper,
    ],
    Field(discriminator="type"),
]


class Schema(BaseModel):
    """
    Immutable field catalogue consulted by every condition and sort conversion.

    Attributes:
        name: Used in error messages.
        default_analyzer: Analyzer for text fields that do not name one.
        mappers: Field name to mapper (``fields`` in documents).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    name: str = "default"
    default_analyzer: str = "standard"
    mappers: dict[str, FieldMapper] = Field(default_factory=dict, alias="fields")

    @field_validator("default_analyzer")
    @classmethod
    def check_default_analyzer(cls, v: str) -> str:
        if not DEFAULT_ANALYZERS.has(v):
            raise ValueError(f"unknown analyzer '{v}'")
        return v

    @field_validator("mappers")
    @classmethod
    def check_field_names(cls, v: dict[str, Mapper]) -> dict[str, Mapper]:
        for name in v:
            if not name.strip():
                raise ValueError("field names must not be blank")
        return v

    # ------------------------------------------------------------------ #
    # Loading                                                             #
    # ------------------------------------------------------------------ #

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Schema:
        """
        Build a schema from a dictionary.

        Raises:
            SchemaDefinitionError: If the document is not a valid schema.
        """
        try:
            schema = cls.model_validate(data)
        except pydantic.ValidationError as exc:
            errors = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in exc.errors()
            ]
            raise SchemaDefinitionError(
                f"Invalid schema definition ({len(errors)} error(s))",
                errors=errors,
            ) from exc
        logger.debug(
            "Loaded schema %r with %d field(s)", schema.name, len(schema.mappers)
        )
        return schema

    @classmethod
    def from_json(cls, text: str) -> Schema:
        """Parse a JSON string and build a schema."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaDefinitionError(f"Invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise SchemaDefinitionError("Top-level JSON value must be an object")

        return cls.from_dict(data)

    # ------------------------------------------------------------------ #
    # Resolution                                                          #
    # ------------------------------------------------------------------ #

    @property
    def field_names(self) -> list[str]:
        return list(self.mappers)

    def mapper(self, field: str, operation: str = "searching") -> Mapper:
        """
        Return the mapper for *field*, which must be indexed.

        Raises:
            FieldNotFoundError: If the schema does not define the field.
            UnsupportedFieldTypeError: If the field is stored but not indexed.
        """
        mapper = self.mappers.get(field)
        if mapper is None:
            raise FieldNotFoundError(field, self.name, self.field_names)
        if not mapper.indexed:
            raise UnsupportedFieldTypeError(
                field, mapper.type, f"{operation} (field is not indexed)"
            )
        return mapper

    def analyzer(self, field: str) -> Analyzer:
        """Return the analyzer for *field*, falling back to the default."""
        mapper = self.mapper(field)
        name = self.default_analyzer
        if isinstance(mapper, TextMapper) and mapper.analyzer is not None:
            name = mapper.analyzer
        return DEFAULT_ANALYZERS.get(name)
