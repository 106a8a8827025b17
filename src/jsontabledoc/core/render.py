from __future__ import annotations

from dataclasses import dataclass
import logging

from ..errors import ConfigError, SkipReason, StructureError
from ..models import FieldRow, StructureTable, TableDocument
from ..models.types import JsonObject, JsonStructure
from .classify import NULL_TEXT, classify, infer_required
from .logging_utils import log_skip

logger = logging.getLogger(__name__)

MAIN_TITLE = "Main Structure"
DEFAULT_MAX_DEPTH = 100


def structure_title(key: str) -> str:
    """Return the title of the nested table for a field."""
    return f"{key} Structure"


def describe_field(key: str) -> str:
    """Return the generated description for a field."""
    return f"Field for '{key}'"


def select_representative(items: list[JsonStructure]) -> JsonObject | None:
    """Pick the object element with the most fields.

    Ties go to the first object encountered. Empty objects are never picked.

    Args:
        items: Array elements.

    Returns:
        The widest object element, or None when the array holds no non-empty object.
    """
    target: JsonObject | None = None
    width = 0
    for item in items:
        if isinstance(item, dict) and len(item) > width:
            target = item
            width = len(item)
    return target


@dataclass(frozen=True)
class TableRenderer:
    """Recursive renderer from a parsed JSON object to a table tree.

    Attributes:
        sort_keys: Sort field names at every level instead of keeping document order.
        max_depth: Maximum object nesting depth; deeper input raises StructureError.
        null_text: Example text for null values.
    """

    sort_keys: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    null_text: str = NULL_TEXT

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be at least 1, got {self.max_depth}.")

    def render(self, data: JsonObject, title: str = MAIN_TITLE) -> TableDocument:
        """Render an object and every nested structure below it.

        Args:
            data: Top-level JSON object.
            title: Title of the top-level table.

        Returns:
            TableDocument holding the root table.

        Raises:
            StructureError: If nesting exceeds max_depth or the interpreter stack.
        """
        try:
            root = self.render_object_table(data, title)
        except RecursionError as e:
            raise StructureError(
                f"Document is nested too deeply to render (max_depth={self.max_depth})."
            ) from e
        return TableDocument(root=root)

    def render_object_table(
        self, data: JsonObject, title: str, *, depth: int = 1, path: str = "$"
    ) -> StructureTable:
        """Render one table for an object, then the tables of its nested fields.

        Every field gets a summary row first; nested objects and arrays are
        rendered afterwards so the rows of this table stay contiguous.
        """
        if depth > self.max_depth:
            raise StructureError(
                f"Maximum nesting depth {self.max_depth} exceeded at '{path}'."
            )
        keys = self._ordered_keys(data)

        rows: list[FieldRow] = []
        for key in keys:
            value = data[key]
            data_type, example = classify(value, null_text=self.null_text)
            rows.append(
                FieldRow(
                    parameter=key,
                    required=infer_required(value),
                    data_type=data_type,
                    description=describe_field(key),
                    example=example,
                )
            )

        children: list[StructureTable] = []
        for key in keys:
            value = data[key]
            child_path = f"{path}.{key}"
            if isinstance(value, dict):
                children.append(
                    self.render_object_table(
                        value, structure_title(key), depth=depth + 1, path=child_path
                    )
                )
            elif isinstance(value, list):
                child = self.render_array_table(
                    value, structure_title(key), depth=depth + 1, path=child_path
                )
                if child is not None:
                    children.append(child)

        return StructureTable(title=title, rows=rows, children=children)

    def render_array_table(
        self,
        items: list[JsonStructure],
        title: str,
        *,
        depth: int = 1,
        path: str = "$",
    ) -> StructureTable | None:
        """Render the table of an array of objects from its widest element.

        Returns None for arrays without a non-empty object element.
        """
        target = select_representative(items)
        if target is None:
            reason = SkipReason.EMPTY_ARRAY if not items else SkipReason.SCALAR_ARRAY
            log_skip(logger, reason, f"No table for '{path}': array has no object fields.")
            return None
        return self.render_object_table(target, title, depth=depth, path=f"{path}[]")

    def _ordered_keys(self, data: JsonObject) -> list[str]:
        if self.sort_keys:
            return sorted(data)
        return list(data)


def render_document(
    data: JsonObject,
    title: str = MAIN_TITLE,
    *,
    sort_keys: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
    null_text: str = NULL_TEXT,
) -> TableDocument:
    """Render a parsed JSON object into a TableDocument with default settings."""
    renderer = TableRenderer(sort_keys=sort_keys, max_depth=max_depth, null_text=null_text)
    return renderer.render(data, title)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAIN_TITLE",
    "TableRenderer",
    "describe_field",
    "render_document",
    "select_representative",
    "structure_title",
]
