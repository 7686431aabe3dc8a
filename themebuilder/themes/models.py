"""Theme builder models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from themebuilder.themes.constants import (
    BASE_THEME_KEYS,
    DESCRIPTOR_FILENAME,
    PARTS_DIRNAME,
    THEMES_DIRNAME,
)


class ThemeValidationError(ValueError):
    """Raised when a fragment or descriptor holds malformed data."""


@dataclass(frozen=True, slots=True)
class ThemeOptions:
    """Inputs for scaffolding a new theme."""

    theme_id: str
    name: str
    kind: str = "dark"

    @property
    def theme_type(self) -> str:
        return "light" if self.kind == "light" else "dark"

    @property
    def ui_theme(self) -> str:
        return "vs" if self.kind == "light" else "vs-dark"

    @property
    def description(self) -> str:
        return f"{self.name} - Custom VSCode Theme"


@dataclass(frozen=True, slots=True)
class ThemePaths:
    """Filesystem layout of a single theme directory."""

    theme_id: str
    root: Path

    @classmethod
    def for_theme(cls, base_dir: Path, theme_id: str) -> ThemePaths:
        return cls(theme_id=theme_id, root=Path(base_dir) / theme_id)

    @property
    def parts_dir(self) -> Path:
        return self.root / PARTS_DIRNAME

    @property
    def themes_dir(self) -> Path:
        return self.root / THEMES_DIRNAME

    @property
    def descriptor(self) -> Path:
        return self.root / DESCRIPTOR_FILENAME

    @property
    def output(self) -> Path:
        return self.themes_dir / f"{self.theme_id}-color-theme.json"

    def vsix(self, version: str) -> Path:
        return self.root / f"{self.theme_id}-{version}.vsix"


@dataclass(slots=True)
class ThemeFragments:
    """Parts loaded from a theme's parts directory."""

    base: dict[str, Any]
    colors: dict[str, Any] = field(default_factory=dict)
    token_colors: list[Any] = field(default_factory=list)
    semantic_token_colors: dict[str, Any] = field(default_factory=dict)

    def assemble(self) -> dict[str, Any]:
        """Build the VSCode color-theme document."""
        theme: dict[str, Any] = {
            key: self.base[key] for key in BASE_THEME_KEYS if key in self.base
        }
        theme["colors"] = dict(self.colors)
        theme["tokenColors"] = list(self.token_colors)
        if self.semantic_token_colors:
            theme["semanticTokenColors"] = dict(self.semantic_token_colors)
        return theme
