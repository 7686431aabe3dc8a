"""JSON fragment reading and writing."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from themebuilder.themes.constants import JSON_INDENT
from themebuilder.themes.models import ThemeValidationError


def load_json(path: Path) -> Any:
    """Parse a JSON file, wrapping decode failures."""
    content = _read_text(path)
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ThemeValidationError(f"Invalid JSON in {path}: {exc}") from exc


def load_object(path: Path) -> dict[str, Any]:
    data = load_json(path)
    if not isinstance(data, dict):
        raise ThemeValidationError(f"Expected JSON object in {path}")
    return data


def load_array(path: Path) -> list[Any]:
    data = load_json(path)
    if not isinstance(data, list):
        raise ThemeValidationError(f"Expected JSON array in {path}")
    return data


def load_optional_object(path: Path) -> dict[str, Any]:
    """Return the object at *path*, or an empty dict when the file is absent."""
    if not path.exists():
        return {}
    return load_object(path)


def load_optional_array(path: Path) -> list[Any]:
    if not path.exists():
        return []
    return load_array(path)


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)


def write_json(path: Path, data: Any) -> None:
    """Overwrite *path* with *data* serialized using a stable indent."""
    path.write_text(dump_json(data), encoding="utf-8")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ThemeValidationError(f"Required file is missing: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ThemeValidationError(f"Unable to read {path}: {exc}") from exc
