"""Error codes and error handling utilities for the theme builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme builder operations."""

    # Theme directory preconditions
    THEME_EXISTS = auto()
    THEME_NOT_FOUND = auto()
    PARTS_MISSING = auto()
    TEMPLATE_MISSING = auto()

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    DISK_FULL = auto()

    # Packaging
    PACKAGER_FAILED = auto()
    PACKAGER_NOT_FOUND = auto()

    # Configuration
    CONFIG_INVALID = auto()

    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.THEME_EXISTS: "Theme directory already exists.",
    ErrorCode.THEME_NOT_FOUND: "Theme not found.",
    ErrorCode.PARTS_MISSING: "Theme not found or parts directory missing.",
    ErrorCode.TEMPLATE_MISSING: "Theme template directory not found.",

    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",

    ErrorCode.PACKAGER_FAILED: "Failed to package theme.",
    ErrorCode.PACKAGER_NOT_FOUND: "Packaging tool not found. Install it with `npm install -g @vscode/vsce`.",

    ErrorCode.CONFIG_INVALID: "Configuration file is invalid.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}

SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.THEME_EXISTS: "Choose another theme id or remove the existing directory.",
    ErrorCode.THEME_NOT_FOUND: "Run `init` first or check the theme id.",
    ErrorCode.PARTS_MISSING: "Run `init` first or restore the parts/ directory.",
    ErrorCode.TEMPLATE_MISSING: "Check `template_dir` in themebuilder.yaml.",
    ErrorCode.PACKAGER_NOT_FOUND: "Or set `packager` in themebuilder.yaml.",
}


@dataclass
class ThemeBuilderError(Exception):
    """Base exception for the theme builder with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion:
            self.suggestion = SUGGESTIONS.get(self.code, "")

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nPath: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeBuilderError:
    """Classify a generic exception into a ThemeBuilderError with appropriate code."""
    exc_str = str(exc).lower()
    if path is None:
        raw_path = getattr(exc, "filename", None)
        path = Path(raw_path) if raw_path else None

    if isinstance(exc, FileNotFoundError):
        return ThemeBuilderError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError):
        return ThemeBuilderError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if "no space left" in exc_str or "disk full" in exc_str:
        return ThemeBuilderError(ErrorCode.DISK_FULL, path=path, details={"original": exc_str})

    return ThemeBuilderError(
        ErrorCode.OPERATION_FAILED,
        message=f"{type(exc).__name__}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeBuilderError | Exception) -> str:
    """Format an error for the terminal with actionable suggestions."""
    if isinstance(error, ThemeBuilderError):
        parts = [error.message]
        if error.path:
            parts.append(f"\nPath: {error.path}")
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n{error.suggestion}")
        return "".join(parts)

    return format_error_for_user(classify_exception(error))
