"""CLI entry point for inspecting the terminal configuration."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .config import candidate_paths, home_dir, load_config, load_from
from .errors import ConfigError
from .logging_utils import log_event
from .models.base import TermBaseModel
from .models.config import Config, default_font
from .platform_defaults import FONT_DEFAULTS, PLATFORM


def _render(model: TermBaseModel, fmt: str) -> str:
    if fmt == "json":
        return model.to_json()
    return model.to_yaml().rstrip("\n")


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value is not None else None


def _add_home_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--home",
        type=str,
        default=None,
        help="Home directory to search (default: $HOME)",
    )


def _add_format_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Output format (default: yaml)",
    )


def cmd_show(args: argparse.Namespace) -> int:
    """Load the configuration and print it."""
    log_path = _optional_path(args.log_path)
    source = next((s for s in (args.config, args.home) if s is not None), "$HOME")
    log_event(log_path, "CONFIG_LOAD_START", {"source": source})

    try:
        if args.config is not None:
            config = load_from(Path(args.config))
        else:
            config = load_config(_optional_path(args.home))
    except ConfigError as err:
        log_event(log_path, "CONFIG_LOAD_FAILED", {"kind": err.kind.value, "message": str(err)})
        print(f"ERROR: {err}")
        return 1

    log_event(log_path, "CONFIG_LOADED", {"source": source, "config": config.to_dict()})
    print(_render(config, args.format))
    return 0


def cmd_paths(args: argparse.Namespace) -> int:
    """Print candidate config paths in probe order."""
    try:
        home = _optional_path(args.home)
        if home is None:
            home = home_dir()
    except ConfigError as err:
        print(f"ERROR: {err}")
        return 1

    for path in candidate_paths(home):
        marker = "x" if path.is_file() else " "
        print(f"[{marker}] {path}")
    return 0


def cmd_defaults(args: argparse.Namespace) -> int:
    """Print the built-in configuration for a platform."""
    config = Config(font=default_font(args.platform))
    print(_render(config, args.format))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="termcfg - terminal rendering configuration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Show command
    show_parser = subparsers.add_parser("show", help="Load and print the configuration")
    source = show_parser.add_mutually_exclusive_group()
    source.add_argument("--home", type=str, default=None, help="Home directory to search (default: $HOME)")
    source.add_argument("--config", type=str, default=None, help="Load this file only, skipping discovery")
    _add_format_arg(show_parser)
    show_parser.add_argument(
        "--log-path", type=str, default=None, help="Append JSONL load events to this file"
    )
    show_parser.set_defaults(func=cmd_show)

    # Paths command
    paths_parser = subparsers.add_parser("paths", help="List candidate config file paths")
    _add_home_arg(paths_parser)
    paths_parser.set_defaults(func=cmd_paths)

    # Defaults command
    defaults_parser = subparsers.add_parser("defaults", help="Print the default configuration")
    defaults_parser.add_argument(
        "--platform",
        choices=sorted(FONT_DEFAULTS),
        default=PLATFORM,
        help=f"Platform default bundle (default: {PLATFORM})",
    )
    _add_format_arg(defaults_parser)
    defaults_parser.set_defaults(func=cmd_defaults)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
