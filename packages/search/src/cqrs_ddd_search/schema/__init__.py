from .mappers import (
    DEFAULT_DATE_PATTERN,
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
from .schema import FieldMapper, Schema

__all__ = [
    "DEFAULT_DATE_PATTERN",
    "BooleanMapper",
    "DateMapper",
    "DoubleMapper",
    "FieldMapper",
    "FloatMapper",
    "IntegerMapper",
    "LongMapper",
    "Mapper",
    "Schema",
    "StringMapper",
    "TextMapper",
    "UUIDMapper",
]
