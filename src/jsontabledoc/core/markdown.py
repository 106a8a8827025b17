from __future__ import annotations

from ..models import FieldRow, StructureTable, TableDocument

HEADER_ROW = "| Parameter  | Required | Data Type | Description      | Example         |"
SEPARATOR_ROW = "|------------|----------|-----------|------------------|-----------------|"


def escape_cell(text: str) -> str:
    """Escape text so it stays inside a single Markdown table cell."""
    return (
        text.replace("\\", "\\\\")
        .replace("|", "\\|")
        .replace("\r\n", "<br>")
        .replace("\n", "<br>")
        .replace("\r", "<br>")
    )


def format_row(row: FieldRow, *, escape_cells: bool = True) -> str:
    """Format one table row."""
    cells = [
        row.parameter,
        row.required.value,
        row.data_type.value,
        row.description,
        row.example,
    ]
    if escape_cells:
        cells = [escape_cell(cell) for cell in cells]
    parameter, required, data_type, description, example = cells
    return (
        f"| {parameter}        | {required}        | {data_type}      "
        f"| {description}              | {example}           |"
    )


def _write_table(
    table: StructureTable, lines: list[str], *, escape_cells: bool
) -> None:
    if table.title:
        lines.append(f"### {table.title}\n")
    lines.append(HEADER_ROW + "\n")
    lines.append(SEPARATOR_ROW + "\n")
    for row in table.rows:
        lines.append(format_row(row, escape_cells=escape_cells) + "\n")
    for child in table.children:
        _write_table(child, lines, escape_cells=escape_cells)
    lines.append("\n")


def write_markdown(document: TableDocument, *, escape_cells: bool = True) -> str:
    """Render a TableDocument as Markdown text.

    Each table is its title line, the fixed header and one row per field,
    followed by the tables of its nested structures and a terminating blank
    line.

    Args:
        document: Rendered table tree.
        escape_cells: Escape pipes and line breaks inside cells.

    Returns:
        Markdown text.
    """
    lines: list[str] = []
    _write_table(document.root, lines, escape_cells=escape_cells)
    return "".join(lines)


__all__ = ["HEADER_ROW", "SEPARATOR_ROW", "escape_cell", "format_row", "write_markdown"]
