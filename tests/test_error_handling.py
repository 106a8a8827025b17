from __future__ import annotations

import pytest

from jsontabledoc import generate_markdown
from jsontabledoc.errors import (
    ConfigError,
    InputError,
    JsonTableDocError,
    MissingDependencyError,
    OutputError,
    ParseError,
    SerializationError,
    StructureError,
)
from tests.utils import parametrize


@parametrize(
    "error_type",
    [
        ParseError,
        StructureError,
        ConfigError,
        SerializationError,
        MissingDependencyError,
        InputError,
        OutputError,
    ],
)
def test_errors_share_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, JsonTableDocError)


def test_deep_document_fails_cleanly() -> None:
    depth = 500
    text = '{"n": ' * depth + "1" + "}" * depth
    with pytest.raises(StructureError, match="Maximum nesting depth"):
        generate_markdown(text)


def test_absurdly_deep_document_is_parse_error() -> None:
    depth = 100_000
    text = '{"n": ' * depth + "1" + "}" * depth
    with pytest.raises(ParseError):
        generate_markdown(text)
