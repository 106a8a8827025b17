from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel, ConfigDict, Field

from .core.classify import NULL_TEXT
from .core.parse import parse_json_object
from .core.render import DEFAULT_MAX_DEPTH, MAIN_TITLE, TableRenderer
from .errors import ConfigError
from .io import (
    JsonSource,
    OutputFormat,
    read_json_source,
    serialize_document,
    write_text,
)
from .models import TableDocument
from .models.types import JsonObject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """
    Render-time options for TableDocEngine.

    Attributes:
        root_title: Title of the top-level table.
        sort_keys: Sort field names at every level; False keeps document order.
        max_depth: Maximum object nesting depth before rendering fails.
        escape_cells: Escape pipes and line breaks inside Markdown cells.
        null_text: Example text used for null values.
    """

    root_title: str = MAIN_TITLE
    sort_keys: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    escape_cells: bool = True
    null_text: str = NULL_TEXT

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be at least 1, got {self.max_depth}.")


class OutputOptions(BaseModel):
    """Output-time options for TableDocEngine."""

    model_config = ConfigDict(extra="forbid")

    fmt: OutputFormat = Field(default="markdown", description="Serialization format.")
    pretty: bool = Field(default=False, description="Pretty-print JSON output.")
    indent: int | None = Field(
        default=None,
        description="Indent width for JSON (defaults to 2 when pretty is True).",
    )


class TableDocEngine:
    """
    Configurable engine for rendering JSON documents into structure tables.

    Instances are immutable; override options per call if needed.

    Main methods:
        parse(text) -> dict
        render(data, title=None) -> TableDocument
        render_text(text) -> TableDocument
        serialize(document, ...) -> str
        export(document, ...)
            - Writes to file/stdout
        process(source, ...)
            - One-shot read->render->export (CLI equivalent)
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        output: OutputOptions | None = None,
    ) -> None:
        self.options = options or RenderOptions()
        self.output = output or OutputOptions()

    @staticmethod
    def from_defaults() -> TableDocEngine:
        """Factory to create an engine with default options."""
        return TableDocEngine()

    def _renderer(self) -> TableRenderer:
        return TableRenderer(
            sort_keys=self.options.sort_keys,
            max_depth=self.options.max_depth,
            null_text=self.options.null_text,
        )

    @staticmethod
    def _ensure_optional_path(path: str | Path | None) -> Path | None:
        """Normalize an optional path-like value to Path when provided."""
        if path is None:
            return None
        return path if isinstance(path, Path) else Path(path)

    def parse(self, text: str | bytes) -> JsonObject:
        """Parse JSON text into its top-level object.

        Raises:
            ParseError: If the text is not valid JSON or not an object.
        """
        return parse_json_object(text)

    def render(self, data: JsonObject, *, title: str | None = None) -> TableDocument:
        """
        Render a parsed JSON object into a TableDocument.

        Args:
            data: Top-level JSON object.
            title: Title of the top-level table; defaults to RenderOptions.root_title.
        """
        chosen_title = self.options.root_title if title is None else title
        document = self._renderer().render(data, chosen_title)
        logger.debug("Rendered %d table(s) under '%s'.", len(document), chosen_title)
        return document

    def render_text(self, text: str | bytes, *, title: str | None = None) -> TableDocument:
        """Parse JSON text and render it."""
        return self.render(self.parse(text), title=title)

    def serialize(
        self,
        document: TableDocument,
        *,
        fmt: OutputFormat | None = None,
        pretty: bool | None = None,
        indent: int | None = None,
    ) -> str:
        """
        Serialize a TableDocument.

        Args:
            document: Rendered document.
            fmt: Serialization format; defaults to OutputOptions.fmt.
            pretty: Whether to pretty-print JSON output.
            indent: Indentation to use when pretty-printing JSON.
        """
        use_fmt = fmt or self.output.fmt
        use_pretty = self.output.pretty if pretty is None else pretty
        use_indent = self.output.indent if indent is None else indent
        return serialize_document(
            document,
            fmt=use_fmt,
            pretty=use_pretty,
            indent=use_indent,
            escape_cells=self.options.escape_cells,
        )

    def export(
        self,
        document: TableDocument,
        output_path: str | Path | None = None,
        *,
        fmt: OutputFormat | None = None,
        pretty: bool | None = None,
        indent: int | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """
        Write a serialized TableDocument to a file or stream.

        Args:
            document: Rendered document.
            output_path: Target file path; writes to the stream (stdout) when None.
            fmt: Serialization format; defaults to OutputOptions.fmt.
            pretty: Whether to pretty-print JSON output.
            indent: Indentation to use when pretty-printing JSON.
            stream: Stream override when output_path is None.
        """
        text = self.serialize(document, fmt=fmt, pretty=pretty, indent=indent)
        write_text(
            text,
            self._ensure_optional_path(output_path),
            stream,
        )

    def process(
        self,
        source: JsonSource,
        output_path: str | Path | None = None,
        *,
        fmt: OutputFormat | None = None,
        title: str | None = None,
        pretty: bool | None = None,
        indent: int | None = None,
        stream: TextIO | None = None,
    ) -> TableDocument:
        """
        One-shot read->render->export wrapper (CLI equivalent).

        Args:
            source: JSON file path, "-" for stdin, or a readable stream.
            output_path: Target file path; writes to stdout when None.
            fmt: Serialization format.
            title: Title of the top-level table.
            pretty: Whether to pretty-print JSON output.
            indent: Indentation to use when pretty-printing JSON.
            stream: Stream override when writing to stdout.

        Returns:
            The rendered document.
        """
        text = read_json_source(source)
        document = self.render_text(text, title=title)
        self.export(
            document,
            output_path=output_path,
            fmt=fmt,
            pretty=pretty,
            indent=indent,
            stream=stream,
        )
        return document
