from __future__ import annotations

import io
import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from jsontabledoc.engine import OutputOptions, RenderOptions, TableDocEngine
from jsontabledoc.errors import ConfigError, ParseError, StructureError


def test_from_defaults_renders_main_structure(nested_json: str) -> None:
    engine = TableDocEngine.from_defaults()
    doc = engine.render_text(nested_json)
    assert [t.title for t in doc] == [
        "Main Structure",
        "owner Structure",
        "parts Structure",
    ]
    parts = doc.root.children[1]
    assert [row.parameter for row in parts.rows] == ["sku", "qty"]


def test_render_title_override() -> None:
    engine = TableDocEngine(options=RenderOptions(root_title="Payload"))
    assert engine.render({"a": 1}).root.title == "Payload"
    assert engine.render({"a": 1}, title="Other").root.title == "Other"


def test_render_options_reject_invalid_depth() -> None:
    with pytest.raises(ConfigError):
        RenderOptions(max_depth=0)


def test_output_options_forbid_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        OutputOptions(fmt="markdown", colour=True)  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        OutputOptions(fmt="csv")  # type: ignore[arg-type]


def test_serialize_uses_output_defaults(nested_json: str) -> None:
    engine = TableDocEngine(output=OutputOptions(fmt="json", pretty=True))
    doc = engine.render_text(nested_json)
    text = engine.serialize(doc)
    assert text.startswith("{\n  ")
    assert engine.serialize(doc, fmt="md").startswith("### Main Structure\n")


def test_serialize_respects_escape_option() -> None:
    doc_text = '{"a": "x|y"}'
    escaped = TableDocEngine()
    raw = TableDocEngine(options=RenderOptions(escape_cells=False))
    assert "x\\|y" in escaped.serialize(escaped.render_text(doc_text))
    assert "| x|y " in raw.serialize(raw.render_text(doc_text))


def test_export_to_stream_and_file(tmp_path: Path) -> None:
    engine = TableDocEngine()
    doc = engine.render_text('{"a": "x"}')
    buffer = io.StringIO()
    engine.export(doc, stream=buffer)
    assert buffer.getvalue() == doc.to_markdown()

    out = tmp_path / "out.json"
    engine.export(doc, str(out), fmt="json")
    assert json.loads(out.read_text(encoding="utf-8"))["root"]["rows"][0]["example"] == "x"


def test_process_reads_renders_and_writes(nested_json_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.md"
    doc = TableDocEngine().process(nested_json_file, out)
    assert out.read_text(encoding="utf-8") == doc.to_markdown()
    assert "### parts Structure\n" in out.read_text(encoding="utf-8")


def test_process_propagates_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"a":', encoding="utf-8")
    out = tmp_path / "out.md"
    with pytest.raises(ParseError):
        TableDocEngine().process(path, out)
    assert not out.exists()


def test_process_propagates_structure_error(tmp_path: Path) -> None:
    engine = TableDocEngine(options=RenderOptions(max_depth=1))
    buffer = io.StringIO()
    with pytest.raises(StructureError):
        engine.process(io.StringIO('{"a": {"b": 1}}'), stream=buffer)
    assert buffer.getvalue() == ""
