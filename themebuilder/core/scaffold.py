"""Create a new theme directory from the template."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from themebuilder.core.template import copy_template, replace_placeholders
from themebuilder.errors import ErrorCode, ThemeBuilderError
from themebuilder.themes.constants import (
    BASE_FRAGMENT,
    PLACEHOLDER_THEME_DESCRIPTION,
    PLACEHOLDER_THEME_ID,
    PLACEHOLDER_THEME_NAME,
    PLACEHOLDER_UI_THEME,
)
from themebuilder.themes.loader import load_object, write_json
from themebuilder.themes.models import ThemeOptions, ThemePaths

logger = logging.getLogger(__name__)


def _json_escape(value: str) -> str:
    """Escape *value* for use inside a JSON string literal."""
    return json.dumps(value, ensure_ascii=False)[1:-1]


def init_theme(options: ThemeOptions, base_dir: Path, template_dir: Path) -> ThemePaths:
    """Copy the template to ``<base_dir>/<theme_id>`` and fill in its placeholders."""
    paths = ThemePaths.for_theme(base_dir, options.theme_id)
    if paths.root.exists():
        raise ThemeBuilderError(ErrorCode.THEME_EXISTS, path=paths.root)

    copy_template(template_dir, paths.root)

    replace_placeholders(
        paths.descriptor,
        {
            PLACEHOLDER_THEME_ID: _json_escape(options.theme_id),
            PLACEHOLDER_THEME_NAME: _json_escape(options.name),
            PLACEHOLDER_THEME_DESCRIPTION: _json_escape(options.description),
            PLACEHOLDER_UI_THEME: options.ui_theme,
        },
    )

    base_path = paths.parts_dir / BASE_FRAGMENT
    replace_placeholders(base_path, {PLACEHOLDER_THEME_NAME: _json_escape(options.name)})

    # type is set on the parsed object, not through a placeholder
    base = load_object(base_path)
    base["type"] = options.theme_type
    write_json(base_path, base)

    logger.info("initialized theme %s (%s) at %s", options.theme_id, options.theme_type, paths.root)
    return paths
