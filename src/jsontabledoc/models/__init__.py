from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

from pydantic import BaseModel, Field

from .types import DataType, JsonObject, JsonPrimitive, JsonStructure, Requirement


class FieldRow(BaseModel):
    """A single table row describing one field of an object."""

    parameter: str = Field(description="Field name as it appears in the document.")
    required: Requirement = Field(
        description="M when the value is non-empty, O when it is null or a zero value."
    )
    data_type: DataType = Field(description="Display data type of the value.")
    description: str = Field(description="Generated description text.")
    example: str = Field(description="Example text taken from the value.")


class StructureTable(BaseModel):
    """Table describing one object level, with the tables of its nested structures."""

    title: str = Field(description="Heading text; empty for an untitled table.")
    rows: list[FieldRow] = Field(
        default_factory=list, description="One row per field, in iteration order."
    )
    children: list[StructureTable] = Field(
        default_factory=list,
        description="Tables of nested objects and arrays of objects, in field order.",
    )

    def walk(self) -> Generator[StructureTable, None, None]:
        """Yield this table and all nested tables, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()


class TableDocument(BaseModel):
    """Rendered document: the root table and everything nested below it."""

    root: StructureTable = Field(description="Table of the top-level object.")

    @property
    def tables(self) -> list[StructureTable]:
        """All tables in depth-first pre-order."""
        return list(self.root.walk())

    def to_markdown(self, *, escape_cells: bool = True) -> str:
        """
        Render the document as Markdown tables.
        """
        from ..core.markdown import write_markdown

        return write_markdown(self, escape_cells=escape_cells)

    def to_json(self, *, pretty: bool = False, indent: int | None = None) -> str:
        """
        Serialize the table tree into JSON text.
        """
        from ..io import serialize_document

        return serialize_document(self, fmt="json", pretty=pretty, indent=indent)

    def to_yaml(self) -> str:
        """
        Serialize the table tree into YAML text (requires pyyaml).
        """
        from ..io import serialize_document

        return serialize_document(self, fmt="yaml")

    def save(
        self,
        path: str | Path,
        *,
        pretty: bool = False,
        indent: int | None = None,
        escape_cells: bool = True,
    ) -> Path:
        """
        Save the document to a file, inferring format from the extension.

        - .md/.markdown → Markdown
        - .json → JSON
        - .yaml/.yml → YAML
        """
        from ..io import save_as_json, save_as_markdown, save_as_yaml

        dest = Path(path)
        fmt = (dest.suffix.lstrip(".") or "md").lower()
        match fmt:
            case "md" | "markdown":
                save_as_markdown(self, dest, escape_cells=escape_cells)
            case "json":
                save_as_json(self, dest, pretty=pretty, indent=indent)
            case "yaml" | "yml":
                save_as_yaml(self, dest)
            case _:
                raise ValueError(f"Unsupported export format: {fmt}")
        return dest

    def __iter__(self) -> Generator[StructureTable, None, None]:  # type: ignore[override]
        """Iterate over tables in depth-first pre-order."""
        yield from self.root.walk()

    def __len__(self) -> int:
        """Return the number of tables in the document."""
        return len(self.tables)


__all__ = [
    "DataType",
    "FieldRow",
    "JsonObject",
    "JsonPrimitive",
    "JsonStructure",
    "Requirement",
    "StructureTable",
    "TableDocument",
]
