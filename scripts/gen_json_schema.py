from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel

from jsontabledoc.models import FieldRow, StructureTable, TableDocument

_SCHEMA_VERSION = "https://json-schema.org/draft/2020-12/schema"

TARGETS: dict[str, type[BaseModel]] = {
    "document": TableDocument,
    "table": StructureTable,
    "field_row": FieldRow,
}


def _model_schema(model: type[BaseModel]) -> dict[str, object]:
    """Build a JSON Schema for a Pydantic model with deterministic ordering."""
    schema = model.model_json_schema()
    schema.setdefault("$schema", _SCHEMA_VERSION)
    return schema


def write_schemas(output_dir: Path) -> dict[str, Path]:
    """Write one schema file per model describing the json/yaml output payload."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written: dict[str, Path] = {}
    for name, model in TARGETS.items():
        path = output_dir / f"{name}.json"
        text = json.dumps(_model_schema(model), ensure_ascii=False, indent=2, sort_keys=True)
        path.write_text(text, encoding="utf-8")
        written[name] = path
    return written


def main() -> int:
    """Generate JSON Schemas for the serialized table document."""
    project_root = Path(__file__).resolve().parent.parent
    write_schemas(project_root / "schemas")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
