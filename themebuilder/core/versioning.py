"""Descriptor version parsing and bumping."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from themebuilder.errors import ErrorCode, ThemeBuilderError
from themebuilder.themes.constants import BUMP_LEVELS, DEFAULT_BUMP_LEVEL
from themebuilder.themes.loader import load_object, write_json
from themebuilder.themes.models import ThemePaths, ThemeValidationError

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, slots=True)
class Version:
    """A MAJOR.MINOR.PATCH version."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, value: object) -> Version:
        if not isinstance(value, str):
            raise ThemeValidationError(f"version must be a string, got {value!r}")
        match = _VERSION_RE.match(value.strip())
        if not match:
            raise ThemeValidationError(f"version must be MAJOR.MINOR.PATCH, got {value!r}")
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    def bump(self, level: str = DEFAULT_BUMP_LEVEL) -> Version:
        """Return the next version; unknown levels bump the patch number."""
        if level == "major":
            return Version(self.major + 1, 0, 0)
        if level == "minor":
            return Version(self.major, self.minor + 1, 0)
        return Version(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def bump_version(theme_id: str, base_dir: Path, level: str = DEFAULT_BUMP_LEVEL) -> str:
    """Increment the version in the theme's package.json and return it."""
    paths = ThemePaths.for_theme(base_dir, theme_id)
    if not paths.descriptor.exists():
        raise ThemeBuilderError(
            ErrorCode.THEME_NOT_FOUND,
            message=f'Theme "{theme_id}" not found.',
            path=paths.descriptor,
        )
    if level not in BUMP_LEVELS:
        logger.warning("unknown bump level %r, bumping patch", level)

    descriptor = load_object(paths.descriptor)
    current = Version.parse(descriptor.get("version"))
    new_version = str(current.bump(level))
    descriptor["version"] = new_version
    write_json(paths.descriptor, descriptor)

    logger.info("bumped %s from %s to %s", theme_id, current, new_version)
    return new_version
