"""Shared JSON-compatible type aliases and table enums used across JsonTableDoc."""

from __future__ import annotations

from enum import Enum

JsonPrimitive = str | int | float | bool | None
JsonStructure = JsonPrimitive | list["JsonStructure"] | dict[str, "JsonStructure"]
JsonObject = dict[str, JsonStructure]


class DataType(str, Enum):
    """Display data type of a field."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    ARRAY = "Array"
    ARRAY_STRING = "Array String"
    ARRAY_NUMBER = "Array Number"
    ARRAY_BOOLEAN = "Array Boolean"
    ARRAY_OBJECT = "Array Object"


class Requirement(str, Enum):
    """Required column value.

    Inferred from the current value only: zero/empty values read as optional.
    """

    MANDATORY = "M"
    OPTIONAL = "O"


__all__ = ["JsonPrimitive", "JsonStructure", "JsonObject", "DataType", "Requirement"]
