"""Template copying and placeholder substitution."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Mapping

from themebuilder.errors import ErrorCode, ThemeBuilderError

logger = logging.getLogger(__name__)


def copy_template(source: Path, target: Path) -> Path:
    """Recursively copy *source* into a new *target* directory.

    The target must not exist. A failure part-way through leaves whatever was
    already copied in place.
    """
    source = Path(source)
    target = Path(target)
    if not source.is_dir():
        raise ThemeBuilderError(ErrorCode.TEMPLATE_MISSING, path=source)
    if target.exists():
        raise ThemeBuilderError(ErrorCode.THEME_EXISTS, path=target)

    logger.debug("copying template %s -> %s", source, target)
    shutil.copytree(source, target)
    return target


def replace_placeholders(path: Path, replacements: Mapping[str, str]) -> None:
    """Replace every literal occurrence of each token in *path*, in place."""
    content = path.read_text(encoding="utf-8")
    for token, value in replacements.items():
        count = content.count(token)
        if count:
            logger.debug("replacing %d x %s in %s", count, token, path.name)
        content = content.replace(token, value)
    path.write_text(content, encoding="utf-8")
