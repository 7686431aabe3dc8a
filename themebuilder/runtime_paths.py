"""Runtime path helpers for source and frozen executable modes."""

from __future__ import annotations

from pathlib import Path
import sys


def is_frozen() -> bool:
    """Return True when running from a PyInstaller bundle."""
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Return the root path that contains the `themebuilder` package resources."""
    if is_frozen():
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            candidate = Path(meipass) / "themebuilder"
            if candidate.exists():
                return candidate
            return Path(meipass)
    return Path(__file__).resolve().parent


def builtin_template_root() -> Path:
    """Resolve the built-in theme template across source/frozen layouts."""
    return package_root() / "template"
