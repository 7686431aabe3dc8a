"""Theme builder operations."""

from themebuilder.core.merger import load_fragments, merge_theme
from themebuilder.core.packager import package_theme
from themebuilder.core.scaffold import init_theme
from themebuilder.core.template import copy_template, replace_placeholders
from themebuilder.core.versioning import Version, bump_version

__all__ = [
    "Version",
    "bump_version",
    "copy_template",
    "init_theme",
    "load_fragments",
    "merge_theme",
    "package_theme",
    "replace_placeholders",
]
