"""Command-line front door for dirhop.

Parses CLI options, configures logging, and resolves the start directory.
Then dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .log import configure_logging
from .runtime import run_browser
from .runtime.config import load_log_level, save_theme_name
from .shell import shell_init_script, supported_shells
from .ui_theme import available_theme_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirhop",
        description="Browse directories in the terminal and hand the last one back to your shell.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        metavar="NAME",
        choices=available_theme_names(),
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--set-theme",
        metavar="NAME",
        choices=available_theme_names(),
        default=None,
        help="Save NAME as the default theme and exit.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument(
        "--output-file",
        metavar="FILE",
        type=Path,
        default=None,
        help="Write the final directory to FILE instead of stdout.",
    )
    parser.add_argument(
        "--init",
        metavar="SHELL",
        choices=supported_shells(),
        default=None,
        help=f"Print a shell function that cds into the final directory ({', '.join(supported_shells())}).",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the log file (default: WARNING).")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits with the browser's status when it is non-zero.
    """
    args = build_parser().parse_args(argv)

    if args.init is not None:
        sys.stdout.write(shell_init_script(args.init))
        return

    if args.set_theme is not None:
        save_theme_name(args.set_theme)
        return

    configure_logging(args.log_level if args.log_level is not None else load_log_level())

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    status = run_browser(
        path,
        theme_name=args.theme,
        no_color=args.no_color,
        output_file=args.output_file,
    )
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
