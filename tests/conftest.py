from __future__ import annotations

from pathlib import Path

import pytest

from jsontabledoc.sample import SAMPLE_JSON

NESTED_JSON = """
{
    "id": 7,
    "name": "widget",
    "active": false,
    "owner": {"login": "ann", "tags": ["a", "b"]},
    "parts": [{"sku": "p1"}, {"sku": "p2", "qty": 3}],
    "notes": []
}
"""


@pytest.fixture
def nested_json() -> str:
    """JSON text with nested objects, arrays of objects and arrays of scalars."""
    return NESTED_JSON


@pytest.fixture
def sample_json() -> str:
    """The built-in quiz sample document."""
    return SAMPLE_JSON


@pytest.fixture
def nested_json_file(tmp_path: Path, nested_json: str) -> Path:
    """Write the nested JSON fixture to disk and return its path."""
    path = tmp_path / "input.json"
    path.write_text(nested_json, encoding="utf-8")
    return path
