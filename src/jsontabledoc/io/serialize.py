from __future__ import annotations

import importlib
import json
from types import ModuleType

from ..errors import MissingDependencyError, SerializationError
from ..models import TableDocument

_FORMAT_ALIASES = {"md": "markdown", "yml": "yaml"}
SUPPORTED_FORMATS = ("markdown", "json", "yaml")


def normalize_format(fmt: str) -> str:
    """Map a format name or alias (md, yml) to its canonical name.

    Raises:
        SerializationError: If the format is not supported.
    """
    name = fmt.lower()
    name = _FORMAT_ALIASES.get(name, name)
    if name not in SUPPORTED_FORMATS:
        raise SerializationError(
            f"Unsupported export format '{fmt}'. Allowed: markdown, md, json, yaml, yml."
        )
    return name


def serialize_document(
    document: TableDocument,
    fmt: str = "markdown",
    *,
    pretty: bool = False,
    indent: int | None = None,
    escape_cells: bool = True,
) -> str:
    """
    Convert a TableDocument to text in the requested format without writing to disk.

    Markdown is the table text; json/yaml carry the table tree itself.
    """
    name = normalize_format(fmt)
    try:
        match name:
            case "markdown":
                return document.to_markdown(escape_cells=escape_cells)
            case "json":
                indent_val = 2 if pretty and indent is None else indent
                return json.dumps(
                    document.model_dump(mode="json"), ensure_ascii=False, indent=indent_val
                )
            case _:
                yaml = _require_yaml()
                return str(
                    yaml.safe_dump(
                        document.model_dump(mode="json"),
                        allow_unicode=True,
                        sort_keys=False,
                        indent=2,
                    )
                )
    except RecursionError as e:
        raise SerializationError(
            f"Table tree is nested too deeply to serialize as {name}."
        ) from e


def _require_yaml() -> ModuleType:
    """Ensure pyyaml is installed; otherwise raise with guidance."""
    try:
        module = importlib.import_module("yaml")
    except ImportError as e:
        raise MissingDependencyError(
            "YAML output requires pyyaml. Install it via `pip install pyyaml` or add the 'yaml' extra."
        ) from e
    return module
