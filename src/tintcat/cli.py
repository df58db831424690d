"""Command-line interface: ``tintcat [options] FILE...``."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from tintcat import __version__
from tintcat.app import App
from tintcat.config import load_config
from tintcat.diagnostics import LogLevel
from tintcat.errors import TintcatError
from tintcat.languages import LanguageMap
from tintcat.utils import ansi


def _log_level(value: str) -> LogLevel:
    try:
        return LogLevel.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tintcat",
        description="Print source files to the terminal with syntax colors.",
    )
    parser.add_argument("files", nargs="+", type=Path, metavar="FILE", help="Files to print.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        metavar="LEVEL",
        help="Diagnostics shown after each file: 0/all, 1/warn, 2/error (default), 3/never.",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="JSON render configuration (palette, log_level, color)."
    )
    parser.add_argument(
        "--grammar-dir",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory holding language_map.json and grammar files (default: bundled grammars).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable escape sequences.")
    parser.add_argument("--version", action="version", version=f"tintcat {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    args = build_parser().parse_args(argv)
    no_color = args.no_color or bool(os.environ.get("NO_COLOR"))

    try:
        config = load_config(args.config)
        overrides = {}
        if args.log_level is not None:
            overrides["log_level"] = args.log_level
        if no_color:
            overrides["color"] = False
        if overrides:
            config = config.with_overrides(**overrides)
        app = App(__version__, config, LanguageMap.load(args.grammar_dir))
    except TintcatError as e:
        print(ansi.style(str(e), ansi.RED, enabled=not no_color), file=sys.stderr)
        return 1

    status = 0
    for path in args.files:
        try:
            diagnostics = app.run(path)
        except TintcatError as e:
            print(ansi.style(str(e), ansi.RED, enabled=config.color), file=sys.stderr)
            status = 1
            continue
        report = diagnostics.format(color=config.color)
        if report:
            sys.stdout.write(report)
    return status


if __name__ == "__main__":
    sys.exit(main())
