from __future__ import annotations

import json
import logging
from typing import NoReturn

from ..errors import ParseError
from ..models.types import JsonObject

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json_object(text: str | bytes) -> JsonObject:
    """Parse JSON text and return its top-level object.

    NaN and Infinity literals are rejected, as strict JSON does not allow them.

    Args:
        text: JSON document (str, or UTF-8 bytes).

    Returns:
        Top-level object as a dict, keys in document order.

    Raises:
        ParseError: If the text is not valid JSON or the top level is not an object.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ParseError("Error parsing JSON: document is nested too deeply") from e
    except ValueError as e:
        raise ParseError(f"Error parsing JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(
            f"Error parsing JSON: top-level value must be an object, got {_kind(data)}"
        )
    logger.debug("Parsed JSON object with %d top-level fields.", len(data))
    return data


def _kind(value: object) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case _:
            return type(value).__name__
