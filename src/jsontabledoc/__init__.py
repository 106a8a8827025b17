from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from .core.classify import classify, infer_required, is_zero
from .core.render import MAIN_TITLE, TableRenderer, render_document
from .engine import OutputOptions, RenderOptions, TableDocEngine
from .errors import (
    ConfigError,
    InputError,
    JsonTableDocError,
    MissingDependencyError,
    OutputError,
    ParseError,
    SerializationError,
    StructureError,
)
from .io import (
    JsonSource,
    OutputFormat,
    normalize_format,
    read_json_source,
    save_as_json,
    save_as_markdown,
    save_as_yaml,
    serialize_document,
)
from .models import FieldRow, StructureTable, TableDocument
from .models.types import DataType, JsonObject, Requirement

logger = logging.getLogger(__name__)

__all__ = [
    "generate_markdown",
    "render",
    "export",
    "process_json",
    "classify",
    "infer_required",
    "is_zero",
    "render_document",
    "read_json_source",
    "serialize_document",
    "save_as_json",
    "save_as_markdown",
    "save_as_yaml",
    "JsonTableDocError",
    "ParseError",
    "StructureError",
    "ConfigError",
    "SerializationError",
    "MissingDependencyError",
    "InputError",
    "OutputError",
    "DataType",
    "Requirement",
    "FieldRow",
    "StructureTable",
    "TableDocument",
    "TableRenderer",
    "TableDocEngine",
    "RenderOptions",
    "OutputOptions",
    "MAIN_TITLE",
]


def generate_markdown(
    json_text: str | bytes,
    *,
    title: str = MAIN_TITLE,
    sort_keys: bool = False,
    escape_cells: bool = True,
) -> str:
    """
    Convert a JSON document into Markdown structure tables.

    Args:
        json_text: JSON text whose top-level value is an object.
        title: Title of the top-level table.
        sort_keys: Sort field names at every level; False keeps document order.
        escape_cells: Escape pipes and line breaks inside cells.

    Returns:
        Markdown text, one table per object level.

    Raises:
        ParseError: If the text is not valid JSON or the top level is not an object.
        StructureError: If the document nests deeper than the render limit.

    Examples:
        >>> from jsontabledoc import generate_markdown
        >>> print(generate_markdown('{"a": "x"}'))  # doctest: +NORMALIZE_WHITESPACE
        ### Main Structure
        | Parameter  | Required | Data Type | Description      | Example         |
        |------------|----------|-----------|------------------|-----------------|
        | a        | M        | String      | Field for 'a'              | x           |
    """
    engine = TableDocEngine(
        options=RenderOptions(
            root_title=title, sort_keys=sort_keys, escape_cells=escape_cells
        )
    )
    return engine.serialize(engine.render_text(json_text), fmt="markdown")


def render(
    data: JsonObject,
    title: str = MAIN_TITLE,
    *,
    sort_keys: bool = False,
) -> TableDocument:
    """
    Render an already-parsed JSON object into a TableDocument.

    Args:
        data: Top-level JSON object (dict).
        title: Title of the top-level table.
        sort_keys: Sort field names at every level.

    Returns:
        TableDocument with one table per object level.

    Examples:
        >>> from jsontabledoc import render
        >>> doc = render({"list": [{"x": 1}, {"x": 1, "y": 2}]})
        >>> [t.title for t in doc]
        ['Main Structure', 'list Structure']
    """
    return render_document(data, title, sort_keys=sort_keys)


def export(
    document: TableDocument,
    path: str | Path,
    fmt: OutputFormat | None = None,
    *,
    pretty: bool = False,
    indent: int | None = None,
    escape_cells: bool = True,
) -> None:
    """
    Save a TableDocument to a file (format inferred from extension).

    Args:
        document: TableDocument from `render` or similar.
        path: Destination path; extension is used to infer format.
        fmt: Explicitly set format if desired (markdown/md/json/yaml/yml).
        pretty: Pretty-print JSON.
        indent: JSON indent width (defaults to 2 when pretty=True and indent is None).
        escape_cells: Escape pipes and line breaks inside Markdown cells.

    Raises:
        SerializationError: If the format is unsupported.
    """
    dest = Path(path)
    match normalize_format(fmt or dest.suffix.lstrip(".") or "markdown"):
        case "markdown":
            save_as_markdown(document, dest, escape_cells=escape_cells)
        case "json":
            save_as_json(document, dest, pretty=pretty, indent=indent)
        case _:
            save_as_yaml(document, dest)


def process_json(
    source: JsonSource,
    output_path: Path | None = None,
    out_fmt: OutputFormat = "markdown",
    *,
    title: str = MAIN_TITLE,
    sort_keys: bool = False,
    max_depth: int | None = None,
    escape_cells: bool = True,
    pretty: bool = False,
    indent: int | None = None,
    stream: TextIO | None = None,
) -> TableDocument:
    """
    Convenience wrapper: read -> render -> serialize (file or stdout).

    Args:
        source: JSON file path, "-" for stdin, or a readable stream.
        output_path: None for stdout; otherwise, write to file.
        out_fmt: markdown/md/json/yaml/yml.
        title: Title of the top-level table.
        sort_keys: Sort field names at every level.
        max_depth: Maximum object nesting depth; None keeps the default.
        escape_cells: Escape pipes and line breaks inside cells.
        pretty: Pretty-print JSON.
        indent: JSON indent width.
        stream: IO override when output_path is None.

    Returns:
        The rendered TableDocument.

    Raises:
        InputError: If the source cannot be read.
        ParseError: If the input is not a JSON object.
        StructureError: If nesting exceeds max_depth.
        OutputError: If writing the output fails.
    """
    options = RenderOptions(
        root_title=title,
        sort_keys=sort_keys,
        escape_cells=escape_cells,
        **({"max_depth": max_depth} if max_depth is not None else {}),
    )
    engine = TableDocEngine(
        options=options,
        output=OutputOptions(fmt=out_fmt, pretty=pretty, indent=indent),
    )
    return engine.process(source, output_path=output_path, stream=stream)
