"""Merge parts/*.json fragments into a single color-theme document."""

from __future__ import annotations

import logging
from pathlib import Path

from themebuilder.errors import ErrorCode, ThemeBuilderError
from themebuilder.themes.constants import (
    BASE_FRAGMENT,
    COLOR_FRAGMENTS,
    SEMANTIC_FRAGMENT,
    TOKENS_FRAGMENT,
)
from themebuilder.themes.loader import (
    load_object,
    load_optional_array,
    load_optional_object,
    write_json,
)
from themebuilder.themes.models import ThemeFragments, ThemePaths

logger = logging.getLogger(__name__)


def load_fragments(parts_dir: Path) -> ThemeFragments:
    """Load all fragments from *parts_dir*; only base.json is required."""
    base = load_object(parts_dir / BASE_FRAGMENT)

    colors: dict[str, object] = {}
    for name in COLOR_FRAGMENTS:
        path = parts_dir / name
        if not path.exists():
            logger.debug("color fragment %s not present, skipping", name)
            continue
        colors.update(load_object(path))

    return ThemeFragments(
        base=base,
        colors=colors,
        token_colors=load_optional_array(parts_dir / TOKENS_FRAGMENT),
        semantic_token_colors=load_optional_object(parts_dir / SEMANTIC_FRAGMENT),
    )


def merge_theme(theme_id: str, base_dir: Path) -> Path:
    """Regenerate ``themes/<theme_id>-color-theme.json`` and return its path."""
    paths = ThemePaths.for_theme(base_dir, theme_id)
    if not paths.parts_dir.is_dir():
        raise ThemeBuilderError(
            ErrorCode.PARTS_MISSING,
            message=f'Theme "{theme_id}" not found or parts directory missing.',
            path=paths.parts_dir,
        )

    fragments = load_fragments(paths.parts_dir)
    theme = fragments.assemble()

    paths.themes_dir.mkdir(parents=True, exist_ok=True)
    write_json(paths.output, theme)
    logger.info(
        "merged %d colors, %d token rules into %s",
        len(fragments.colors),
        len(fragments.token_colors),
        paths.output,
    )
    return paths.output
