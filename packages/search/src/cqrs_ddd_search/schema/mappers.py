"""
Field mappers: per-field type information used to validate condition values
and to build sort directives.

Mappers are frozen pydantic models discriminated by ``type`` so a schema can
be loaded straight from a JSON document.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import Any, ClassVar, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from ..analysis import DEFAULT_ANALYZERS
from ..engine.sorting import SortField, SortType
from ..exceptions import UnsupportedFieldTypeError, ValueValidationError

DEFAULT_DATE_PATTERN = "%Y/%m/%d %H:%M:%S.%f %z"

_INT_BOUNDS = (-(2**31), 2**31 - 1)
_LONG_BOUNDS = (-(2**63), 2**63 - 1)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Mapper(BaseModel, ABC):
    """
    Base class for field mappers.

    Attributes:
        indexed: If ``False`` the field is stored but cannot be searched.
        sorted: If ``False`` the field cannot be used in a sort.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sort_type: ClassVar[SortType | None] = SortType.STRING

    type: str
    indexed: bool = True
    sorted: bool = True

    @abstractmethod
    def base(self, field: str, value: Any) -> Any:
        """
        Validate *value* for this field and return its indexed form.

        Raises:
            ValueValidationError: If the value is incompatible with the type.
        """
        ...

    def sort_field(self, field: str, reverse: bool = False) -> SortField:
        """Return the engine sort directive for this field."""
        if not self.sorted or self.sort_type is None:
            raise UnsupportedFieldTypeError(field, self.type, "sorting")
        return SortField(field=field, type=self.sort_type, reverse=reverse)

    def _reject(self, field: str, value: Any, reason: str = "") -> ValueValidationError:
        message = f"Value {value!r} is not a valid {self.type} for field '{field}'"
        if reason:
            message += f": {reason}"
        return ValueValidationError(message, field=field, value=value)


class StringMapper(Mapper):
    """Untokenized string; matched as a whole."""

    type: Literal["string"] = "string"
    case_sensitive: bool = True

    def base(self, field: str, value: Any) -> str:
        if isinstance(value, bool):
            text = str(value).lower()
        elif isinstance(value, (str, int, float, UUID)):
            text = str(value)
        else:
            raise self._reject(field, value)
        return text if self.case_sensitive else text.lower()


class TextMapper(Mapper):
    """Analyzed text; searched by terms, never sortable."""

    sort_type: ClassVar[SortType | None] = None

    type: Literal["text"] = "text"
    sorted: bool = False
    analyzer: str | None = None

    @field_validator("sorted")
    @classmethod
    def check_not_sortable(cls, v: bool) -> bool:
        if v:
            raise ValueError("text fields cannot be sorted")
        return v

    @field_validator("analyzer")
    @classmethod
    def check_analyzer(cls, v: str | None) -> str | None:
        if v is not None and not DEFAULT_ANALYZERS.has(v):
            raise ValueError(f"unknown analyzer '{v}'")
        return v

    def base(self, field: str, value: Any) -> str:
        if not isinstance(value, str):
            raise self._reject(field, value, "expected a string")
        return value


class _IntegralMapper(Mapper):
    bounds: ClassVar[tuple[int, int]] = _INT_BOUNDS

    def base(self, field: str, value: Any) -> int:
        if isinstance(value, bool):
            raise self._reject(field, value)
        if isinstance(value, int):
            number = value
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise self._reject(field, value, "not a finite number")
            number = int(value)
        elif isinstance(value, str):
            number = self._parse(field, value)
        else:
            raise self._reject(field, value)
        lo, hi = self.bounds
        if not lo <= number <= hi:
            raise self._reject(field, value, f"out of range [{lo}, {hi}]")
        return number

    def _parse(self, field: str, value: str) -> int:
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            parsed = float(value)
        except ValueError as exc:
            raise self._reject(field, value) from exc
        if not math.isfinite(parsed):
            raise self._reject(field, value, "not a finite number")
        return int(parsed)


class IntegerMapper(_IntegralMapper):
    sort_type: ClassVar[SortType | None] = SortType.INT

    type: Literal["integer"] = "integer"


class LongMapper(_IntegralMapper):
    sort_type: ClassVar[SortType | None] = SortType.LONG
    bounds: ClassVar[tuple[int, int]] = _LONG_BOUNDS

    type: Literal["long"] = "long"


class _DecimalMapper(Mapper):
    def base(self, field: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise self._reject(field, value)
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError) as exc:
            raise self._reject(field, value) from exc
        if not math.isfinite(number):
            raise self._reject(field, value, "not a finite number")
        return number


class FloatMapper(_DecimalMapper):
    sort_type: ClassVar[SortType | None] = SortType.FLOAT

    type: Literal["float"] = "float"


class DoubleMapper(_DecimalMapper):
    sort_type: ClassVar[SortType | None] = SortType.DOUBLE

    type: Literal["double"] = "double"


class BooleanMapper(Mapper):
    """Booleans are indexed as the strings ``"true"`` / ``"false"``."""

    type: Literal["boolean"] = "boolean"

    def base(self, field: str, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower()
        raise self._reject(field, value)


class DateMapper(Mapper):
    """
    Dates are indexed as epoch milliseconds.

    Strings are parsed with ``pattern`` (a ``strptime`` format). Naive
    datetimes are taken to be UTC; plain integers are already epoch millis.
    """

    sort_type: ClassVar[SortType | None] = SortType.LONG

    type: Literal["date"] = "date"
    pattern: str = DEFAULT_DATE_PATTERN

    def base(self, field: str, value: Any) -> int:
        if isinstance(value, bool):
            raise self._reject(field, value)
        if isinstance(value, int):
            lo, hi = _LONG_BOUNDS
            if not lo <= value <= hi:
                raise self._reject(field, value, f"out of range [{lo}, {hi}]")
            return value
        if isinstance(value, datetime):
            return _epoch_millis(value)
        if isinstance(value, date):
            return _epoch_millis(datetime(value.year, value.month, value.day))
        if isinstance(value, str):
            try:
                parsed = datetime.strptime(value, self.pattern)
            except ValueError as exc:
                raise self._reject(
                    field, value, f"does not match pattern '{self.pattern}'"
                ) from exc
            return _epoch_millis(parsed)
        raise self._reject(field, value)


class UUIDMapper(Mapper):
    type: Literal["uuid"] = "uuid"

    def base(self, field: str, value: Any) -> str:
        if isinstance(value, UUID):
            return str(value)
        if isinstance(value, str):
            try:
                return str(UUID(value))
            except ValueError as exc:
                raise self._reject(field, value) from exc
        raise self._reject(field, value)


def _epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // timedelta(milliseconds=1)
