"""Package a theme directory with the external packaging tool."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from themebuilder.config.settings import DEFAULT_PACKAGER
from themebuilder.errors import ErrorCode, ThemeBuilderError
from themebuilder.themes.loader import load_object
from themebuilder.themes.models import ThemePaths

logger = logging.getLogger(__name__)


def package_theme(
    theme_id: str,
    base_dir: Path,
    command: Sequence[str] = DEFAULT_PACKAGER,
) -> Path:
    """Run the packager inside the theme directory and return the expected .vsix path.

    The returned path uses the descriptor version as read before the packager
    runs, unvalidated; its existence is not checked.
    """
    paths = ThemePaths.for_theme(base_dir, theme_id)
    if not paths.descriptor.exists():
        raise ThemeBuilderError(
            ErrorCode.THEME_NOT_FOUND,
            message=f'Theme "{theme_id}" not found.',
            path=paths.descriptor,
        )

    version = load_object(paths.descriptor).get("version")
    cmd = list(command)
    logger.info("running %s in %s", " ".join(cmd), paths.root)
    try:
        subprocess.run(cmd, cwd=paths.root, check=True)
    except FileNotFoundError as exc:
        raise ThemeBuilderError(
            ErrorCode.PACKAGER_NOT_FOUND,
            details={"command": cmd[0] if cmd else ""},
        ) from exc
    except subprocess.CalledProcessError as exc:
        raise ThemeBuilderError(
            ErrorCode.PACKAGER_FAILED,
            message=f"Failed to package theme: {exc}",
            details={"returncode": exc.returncode},
        ) from exc

    return paths.vsix(str(version))
