"""Project-specific exception hierarchy for JsonTableDoc."""

from __future__ import annotations

from enum import Enum


class JsonTableDocError(Exception):
    """Base exception for JsonTableDoc."""


class ParseError(JsonTableDocError, ValueError):
    """Raised when input is not well-formed JSON or its top level is not an object."""


class StructureError(JsonTableDocError):
    """Raised when rendering the table tree fails (e.g. nesting deeper than allowed)."""


class ConfigError(JsonTableDocError):
    """Raised when user-provided configuration or parameters are invalid."""


class SerializationError(JsonTableDocError):
    """Raised when serialization fails or an unsupported format is requested."""


class MissingDependencyError(JsonTableDocError):
    """Raised when an optional dependency required for the requested operation is missing."""


class InputError(JsonTableDocError):
    """Raised when reading the JSON input fails."""


class OutputError(JsonTableDocError):
    """Raised when writing outputs to disk or streams fails."""


class SkipReason(str, Enum):
    """Reason codes for array fields that do not produce a nested table."""

    EMPTY_ARRAY = "empty_array"
    SCALAR_ARRAY = "scalar_array"
