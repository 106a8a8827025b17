from __future__ import annotations

from ..models.types import DataType, JsonStructure, Requirement

OBJECT_EXAMPLE = "Refer to sub-structure"
LIST_EXAMPLE = "Refer to list"
NULL_TEXT = "null"


def is_zero(value: JsonStructure) -> bool:
    """Return True when the value is null or the zero value of its own kind.

    Zero values are ``""``, ``0``/``0.0``, ``False``, ``{}`` and ``[]``.

    Args:
        value: Parsed JSON value.

    Returns:
        True for null and zero values, False otherwise.
    """
    match value:
        case None:
            return True
        case bool():
            return value is False
        case int() | float():
            return value == 0
        case str() | list() | dict():
            return len(value) == 0
        case _:
            return False


def infer_required(value: JsonStructure) -> Requirement:
    """Classify a field as mandatory or optional from its current value.

    This is a presentation heuristic, not schema-derived requiredness: a
    field that legitimately holds ``0`` or ``""`` is reported as optional.

    Args:
        value: Parsed JSON value.

    Returns:
        Requirement.OPTIONAL for null/zero values, Requirement.MANDATORY otherwise.
    """
    if is_zero(value):
        return Requirement.OPTIONAL
    return Requirement.MANDATORY


def format_scalar(value: JsonStructure, *, null_text: str = NULL_TEXT) -> str:
    """Return the example text for a scalar value."""
    match value:
        case None:
            return null_text
        case bool():
            return "true" if value else "false"
        case float():
            return repr(value)
        case _:
            return str(value)


def _classify_array(items: list[JsonStructure]) -> DataType:
    """Classify a non-empty array by scanning every element.

    Each element is checked as string, then boolean, then number; the last
    match in the scan decides the type. No scalar match keeps ``Array Object``.
    """
    data_type = DataType.ARRAY_OBJECT
    for item in items:
        match item:
            case str():
                data_type = DataType.ARRAY_STRING
            case bool():
                data_type = DataType.ARRAY_BOOLEAN
            case int() | float():
                data_type = DataType.ARRAY_NUMBER
    return data_type


def classify(
    value: JsonStructure, *, null_text: str = NULL_TEXT
) -> tuple[DataType, str]:
    """Map a JSON value to its display data type and example text.

    Args:
        value: Parsed JSON value.
        null_text: Example text used for null values.

    Returns:
        Tuple of (data type, example text).
    """
    match value:
        case bool():
            return DataType.BOOLEAN, format_scalar(value)
        case int() | float():
            return DataType.NUMBER, format_scalar(value)
        case str():
            return DataType.STRING, value
        case dict():
            return DataType.OBJECT, OBJECT_EXAMPLE
        case list():
            if not value:
                return DataType.ARRAY, LIST_EXAMPLE
            return _classify_array(value), LIST_EXAMPLE
        case _:
            return DataType.STRING, format_scalar(value, null_text=null_text)


__all__ = [
    "LIST_EXAMPLE",
    "NULL_TEXT",
    "OBJECT_EXAMPLE",
    "classify",
    "format_scalar",
    "infer_required",
    "is_zero",
]
