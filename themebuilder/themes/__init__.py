"""Theme fragment model exports."""

from themebuilder.themes.models import (
    ThemeFragments,
    ThemeOptions,
    ThemePaths,
    ThemeValidationError,
)

__all__ = [
    "ThemeFragments",
    "ThemeOptions",
    "ThemePaths",
    "ThemeValidationError",
]
