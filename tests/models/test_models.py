from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from jsontabledoc.core.render import render_document
from jsontabledoc.models import FieldRow, StructureTable, TableDocument


def _doc() -> TableDocument:
    return render_document({"a": {"b": 1}, "c": [{"d": "x"}]})


def test_field_row_validates_enums() -> None:
    row = FieldRow(
        parameter="p",
        required="O",  # type: ignore[arg-type]
        data_type="Array String",  # type: ignore[arg-type]
        description="Field for 'p'",
        example="Refer to list",
    )
    assert row.required.value == "O"
    assert row.data_type.value == "Array String"
    with pytest.raises(ValidationError):
        FieldRow(
            parameter="p",
            required="X",  # type: ignore[arg-type]
            data_type="String",  # type: ignore[arg-type]
            description="",
            example="",
        )


def test_document_iterates_pre_order() -> None:
    doc = _doc()
    assert [t.title for t in doc] == ["Main Structure", "a Structure", "c Structure"]
    assert doc.tables == list(doc)
    assert len(doc) == 3


def test_walk_on_leaf_table() -> None:
    table = StructureTable(title="t")
    assert list(table.walk()) == [table]


def test_model_dump_json_mode_uses_enum_values() -> None:
    payload = _doc().model_dump(mode="json")
    first = payload["root"]["rows"][0]
    assert first == {
        "parameter": "a",
        "required": "M",
        "data_type": "Object",
        "description": "Field for 'a'",
        "example": "Refer to sub-structure",
    }
    assert payload["root"]["children"][1]["title"] == "c Structure"


def test_to_json_round_trips_into_model() -> None:
    doc = _doc()
    restored = TableDocument.model_validate(json.loads(doc.to_json()))
    assert restored == doc


def test_save_infers_format_from_suffix(tmp_path: Path) -> None:
    doc = _doc()
    md_path = doc.save(tmp_path / "out.md")
    json_path = doc.save(tmp_path / "out.json", pretty=True)
    assert md_path.read_text(encoding="utf-8").startswith("### Main Structure\n")
    assert json.loads(json_path.read_text(encoding="utf-8"))["root"]["title"] == (
        "Main Structure"
    )
    with pytest.raises(ValueError, match="Unsupported export format"):
        doc.save(tmp_path / "out.csv")


def test_save_markdown_without_escaping(tmp_path: Path) -> None:
    doc = render_document({"name": "a|b"})
    escaped = doc.save(tmp_path / "escaped.md")
    raw = doc.save(tmp_path / "raw.md", escape_cells=False)
    assert "a\\|b" in escaped.read_text(encoding="utf-8")
    assert raw.read_text(encoding="utf-8") == doc.to_markdown(escape_cells=False)
