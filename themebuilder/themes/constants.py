"""Theme fragment constants."""

from __future__ import annotations

PARTS_DIRNAME = "parts"
THEMES_DIRNAME = "themes"
DESCRIPTOR_FILENAME = "package.json"

BASE_FRAGMENT = "base.json"
# Copied from base.json into the assembled theme when present.
BASE_THEME_KEYS: tuple[str, ...] = ("name", "type", "semanticHighlighting")
TOKENS_FRAGMENT = "tokens.json"
SEMANTIC_FRAGMENT = "semantic.json"

# Merge order; later files win on key collision.
COLOR_FRAGMENTS: tuple[str, ...] = (
    "colors-editor.json",
    "colors-ui.json",
    "colors-terminal.json",
)

THEME_TYPES: tuple[str, ...] = ("dark", "light")
DEFAULT_THEME_TYPE = "dark"

BUMP_LEVELS: tuple[str, ...] = ("patch", "minor", "major")
DEFAULT_BUMP_LEVEL = "patch"

PLACEHOLDER_THEME_ID = "{{THEME_ID}}"
PLACEHOLDER_THEME_NAME = "{{THEME_NAME}}"
PLACEHOLDER_THEME_DESCRIPTION = "{{THEME_DESCRIPTION}}"
PLACEHOLDER_UI_THEME = "{{UI_THEME}}"

JSON_INDENT = 2
