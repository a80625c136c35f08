"""Engine-level sort directives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SortType(str, Enum):
    """How the engine compares values of a sorted field."""

    STRING = "string"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"


@dataclass(frozen=True)
class SortField:
    field: str
    type: SortType
    reverse: bool = False

    @property
    def order(self) -> str:
        return "desc" if self.reverse else "asc"

    def to_dict(self) -> dict[str, Any]:
        return {self.field: {"order": self.order, "type": self.type.value}}
