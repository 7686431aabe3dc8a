"""Builder settings loaded from an optional YAML file."""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any, Mapping

import yaml

from themebuilder.errors import ErrorCode, ThemeBuilderError
from themebuilder.runtime_paths import builtin_template_root

CONFIG_ENV_VAR = "THEMEBUILDER_CONFIG"
CONFIG_FILENAME = "themebuilder.yaml"
DEFAULT_PACKAGER = ("vsce", "package")
DEFAULT_LOG_LEVEL = "WARNING"

_KNOWN_KEYS = {"base_dir", "template_dir", "packager", "log_file", "log_level"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class BuilderSettings:
    """Wraps the parsed themebuilder.yaml mapping."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        source: Path | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._data: dict[str, Any] = dict(data or {})
        self._source = source
        self._cwd = Path(cwd) if cwd is not None else Path.cwd()

    @classmethod
    def load(cls, path: Path | None = None, *, cwd: Path | None = None) -> BuilderSettings:
        """Load settings from *path*, $THEMEBUILDER_CONFIG, or ./themebuilder.yaml."""
        cwd = Path(cwd) if cwd is not None else Path.cwd()
        config_path = cls._resolve_path(path, cwd)
        if config_path is None:
            return cls(cwd=cwd)

        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ThemeBuilderError(
                ErrorCode.CONFIG_INVALID, path=config_path, details={"error": str(exc)}
            ) from exc
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise ThemeBuilderError(
                ErrorCode.CONFIG_INVALID,
                message="Configuration root must be a mapping.",
                path=config_path,
            )
        unknown = sorted(str(key) for key in raw if key not in _KNOWN_KEYS)
        if unknown:
            raise ThemeBuilderError(
                ErrorCode.CONFIG_INVALID,
                message=f"Unsupported configuration keys: {', '.join(unknown)}",
                path=config_path,
            )
        return cls(raw, source=config_path, cwd=cwd)

    @staticmethod
    def _resolve_path(path: Path | None, cwd: Path) -> Path | None:
        if path is not None:
            explicit = Path(path)
            if not explicit.exists():
                raise ThemeBuilderError(ErrorCode.FILE_NOT_FOUND, path=explicit)
            return explicit
        env_value = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_value:
            from_env = Path(env_value)
            if not from_env.exists():
                raise ThemeBuilderError(ErrorCode.FILE_NOT_FOUND, path=from_env)
            return from_env
        default = cwd / CONFIG_FILENAME
        return default if default.exists() else None

    @property
    def source(self) -> Path | None:
        return self._source

    # -- directories --

    @property
    def base_dir(self) -> Path:
        return self._path_value("base_dir") or self._cwd

    @property
    def template_dir(self) -> Path:
        return self._path_value("template_dir") or builtin_template_root()

    # -- packaging --

    @property
    def packager(self) -> list[str]:
        raw = self._data.get("packager")
        if isinstance(raw, str) and raw.strip():
            return shlex.split(raw)
        if isinstance(raw, list) and raw and all(isinstance(item, str) for item in raw):
            return list(raw)
        return list(DEFAULT_PACKAGER)

    # -- logging --

    @property
    def log_file(self) -> Path | None:
        return self._path_value("log_file")

    @property
    def log_level(self) -> str:
        raw = self._data.get("log_level", DEFAULT_LOG_LEVEL)
        level = str(raw or "").strip().upper()
        if level in _LOG_LEVELS:
            return level
        return DEFAULT_LOG_LEVEL

    # -- helpers --

    def _path_value(self, key: str) -> Path | None:
        raw = self._data.get(key)
        if not isinstance(raw, str) or not raw.strip():
            return None
        path = Path(raw.strip()).expanduser()
        if not path.is_absolute():
            anchor = self._source.parent if self._source is not None else self._cwd
            path = anchor / path
        return path
