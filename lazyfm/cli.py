"""Command-line front door for lazyfm.

Resolves and validates the mandatory configuration, sets up logging, then
hands the start directory to the interactive browser loop.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .errors import ConfigError
from .logs import configure_logging
from .render.theme import theme_for
from .runtime import run_browser
from .runtime.config import load_settings, resolve_config_path, write_starter_config

logger = logging.getLogger(__name__)

BANNER_RULE = "=" * 48


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyfm",
        description="Browse, view, edit, and delete files page by page in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--config", type=Path, default=None, help="Path to the JSON settings file.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a starter settings file if none exists, then exit.",
    )
    return parser


def _print_banner(color: bool) -> None:
    theme = theme_for(color)
    sys.stdout.write(f"{theme.heading}{BANNER_RULE}{theme.reset}\n")
    sys.stdout.write(f"{theme.label}    🔍 lazyfm file viewer & manager{theme.reset}\n")
    sys.stdout.write(f"{theme.heading}{BANNER_RULE}{theme.reset}\n")


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse arguments and run the browser; always exits via ``SystemExit``.

    Exit status is 0 on quit and 1 when configuration is missing or invalid.
    """
    args = _build_parser().parse_args(argv)
    config_path = resolve_config_path(args.config)

    if args.init_config:
        try:
            created = write_starter_config(config_path)
        except ConfigError as exc:
            sys.stderr.write(f"lazyfm: {exc}\n")
            raise SystemExit(1)
        if created:
            sys.stdout.write(f"Wrote starter configuration to {config_path}\n")
        else:
            sys.stdout.write(f"Configuration already exists at {config_path}\n")
        raise SystemExit(0)

    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        sys.stderr.write(f"lazyfm: {exc}\n")
        sys.stderr.write("lazyfm: run 'lazyfm --init-config' to create one.\n")
        raise SystemExit(1)

    if args.no_color:
        settings = dataclasses.replace(settings, color=False)
    configure_logging(settings.log_level, settings.log_file)
    logger.info("loaded configuration from %s", settings.source)

    if default_path is None:
        default_path = Path.cwd()
    start = Path(args.path) if args.path else default_path
    if not start.is_dir():
        raise SystemExit(f"Not a directory: {start}")

    _print_banner(settings.color)
    raise SystemExit(run_browser(start, settings))


if __name__ == "__main__":
    main()
