from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import IO, Literal

from ..errors import InputError, OutputError
from ..models import TableDocument
from .serialize import SUPPORTED_FORMATS, normalize_format, serialize_document

logger = logging.getLogger(__name__)

OutputFormat = Literal["markdown", "md", "json", "yaml", "yml"]
JsonSource = str | Path | IO[str] | IO[bytes]

STDIN_SOURCE = "-"


def read_json_source(source: JsonSource) -> str:
    """Read JSON text from a path, stdin ("-"), or a readable stream.

    Args:
        source: File path, "-" for stdin, or an object with ``read()``.

    Returns:
        JSON text (bytes are decoded as UTF-8).

    Raises:
        InputError: If the source cannot be read.
    """
    if hasattr(source, "read"):
        content = source.read()  # type: ignore[union-attr]
        return _decode(content)

    if str(source) == STDIN_SOURCE:
        return sys.stdin.read()

    path = Path(source)  # type: ignore[arg-type]
    if not path.exists():
        raise InputError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read JSON input: {path} ({e})") from e


def _decode(content: str | bytes) -> str:
    if isinstance(content, bytes):
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputError(f"JSON input is not valid UTF-8: {e}") from e
    return content


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write output: {path} ({e})") from e
    logger.debug("Wrote %d characters to %s", len(text), path)


def save_as_markdown(
    document: TableDocument, path: Path, *, escape_cells: bool = True
) -> None:
    text = serialize_document(document, fmt="markdown", escape_cells=escape_cells)
    _write_text(path, text)


def save_as_json(
    document: TableDocument, path: Path, *, pretty: bool = False, indent: int | None = None
) -> None:
    text = serialize_document(document, fmt="json", pretty=pretty, indent=indent)
    _write_text(path, text)


def save_as_yaml(document: TableDocument, path: Path) -> None:
    text = serialize_document(document, fmt="yaml")
    _write_text(path, text)


def write_text(text: str, output_path: Path | None = None, stream: IO[str] | None = None) -> None:
    """
    Write text to a file, or to a stream (stdout by default) when no path is given.
    """
    if output_path is not None:
        _write_text(output_path, text)
        return
    target = stream or sys.stdout
    try:
        target.write(text)
        if not text.endswith("\n"):
            target.write("\n")
    except OSError as e:
        raise OutputError(f"Failed to write output stream: {e}") from e


__all__ = [
    "JsonSource",
    "OutputFormat",
    "STDIN_SOURCE",
    "SUPPORTED_FORMATS",
    "normalize_format",
    "read_json_source",
    "save_as_json",
    "save_as_markdown",
    "save_as_yaml",
    "serialize_document",
    "write_text",
]
