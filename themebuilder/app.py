"""Command-line bootstrap."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import NoReturn, Sequence

from themebuilder.config.settings import BuilderSettings
from themebuilder.core.merger import merge_theme
from themebuilder.core.packager import package_theme
from themebuilder.core.scaffold import init_theme
from themebuilder.core.versioning import bump_version
from themebuilder.errors import ThemeBuilderError, classify_exception, format_error_for_user
from themebuilder.themes.constants import DEFAULT_BUMP_LEVEL, DEFAULT_THEME_TYPE, THEME_TYPES
from themebuilder.themes.models import ThemeOptions, ThemeValidationError

LOGGER_NAME = "themebuilder"
COMMANDS = ("init", "merge", "package", "bump")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_DATA = 2

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

HELP_EPILOG = """\
Workflow:
  1. themebuilder init my-theme "My Theme" --type dark
  2. Edit my-theme/parts/*.json files
  3. themebuilder merge my-theme
  4. themebuilder package my-theme
  5. code --install-extension my-theme/my-theme-0.0.1.vsix
"""


class UsageError(Exception):
    """Raised by the argument parser instead of exiting."""

    def __init__(self, message: str, usage: str) -> None:
        super().__init__(message)
        self.usage = usage


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message, self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    common.add_argument("--config", type=Path, help="Path to themebuilder.yaml")

    parser = _Parser(
        prog="themebuilder",
        description="VSCode Theme Builder",
        epilog=HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands = parser.add_subparsers(dest="command", parser_class=_Parser)

    init = commands.add_parser(
        "init", parents=[common], help="Copy template and initialize a new theme"
    )
    init.add_argument("theme_id", help="Directory name and file-name prefix")
    init.add_argument("theme_name", help="Human-readable theme name")
    init.add_argument(
        "--type",
        dest="kind",
        choices=THEME_TYPES,
        default=DEFAULT_THEME_TYPE,
        help="Appearance kind (default: %(default)s)",
    )

    merge = commands.add_parser(
        "merge", parents=[common], help="Merge parts/*.json into the final theme file"
    )
    merge.add_argument("theme_id")

    package = commands.add_parser("package", parents=[common], help="Package as .vsix file")
    package.add_argument("theme_id")

    bump = commands.add_parser(
        "bump", parents=[common], help="Increment version (default: patch)"
    )
    bump.add_argument("theme_id")
    bump.add_argument(
        "level",
        nargs="?",
        default=DEFAULT_BUMP_LEVEL,
        help="patch, minor or major (default: %(default)s)",
    )
    return parser


def configure_logger(settings: BuilderSettings, verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(_LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.INFO if verbose else settings.log_level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    log_file = settings.log_file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def _run_command(args: argparse.Namespace, settings: BuilderSettings) -> None:
    base_dir = settings.base_dir

    if args.command == "init":
        options = ThemeOptions(theme_id=args.theme_id, name=args.theme_name, kind=args.kind)
        paths = init_theme(options, base_dir, settings.template_dir)
        print(f"Initialized theme: {options.name}")
        print(f"Directory: {paths.root}")
        print(f"Type: {options.theme_type}")
        print(f"\nEdit the files in {paths.parts_dir}/ to customize your theme.")
    elif args.command == "merge":
        output = merge_theme(args.theme_id, base_dir)
        print(f"Merged theme: {output}")
    elif args.command == "package":
        vsix = package_theme(args.theme_id, base_dir, settings.packager)
        print(f"\nPackaged: {vsix}")
    elif args.command == "bump":
        new_version = bump_version(args.theme_id, base_dir, args.level)
        print(f"Version updated: {new_version}")


def run_app(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run one command and return the process exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not argv or argv[0] not in COMMANDS:
        parser.print_help()
        return EXIT_OK

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        sys.stderr.write(exc.usage)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        settings = BuilderSettings.load(args.config)
    except ThemeBuilderError as exc:
        print(format_error_for_user(exc), file=sys.stderr)
        return EXIT_FAILURE
    except OSError as exc:
        print(format_error_for_user(classify_exception(exc)), file=sys.stderr)
        return EXIT_FAILURE

    logger = configure_logger(settings, verbose=args.verbose)
    if settings.source is not None:
        logger.debug("loaded settings from %s", settings.source)

    try:
        _run_command(args, settings)
    except ThemeBuilderError as exc:
        logger.debug("command %s failed: %s", args.command, exc.to_dict())
        print(format_error_for_user(exc), file=sys.stderr)
        return EXIT_FAILURE
    except ThemeValidationError as exc:
        print(f"Invalid theme data: {exc}", file=sys.stderr)
        return EXIT_INVALID_DATA
    except OSError as exc:
        error = classify_exception(exc)
        logger.debug("command %s failed: %s", args.command, error.to_dict())
        print(format_error_for_user(error), file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK
