#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/cli.py
"""Command-line interface for the safedown converter.

Reads markup from a file or standard input and writes the sanitized HTML
fragment to a file or standard output.

Examples
--------
Convert a file:
    $ safedown comment.txt

Read standard input, write a file:
    $ cat comment.txt | safedown - --out comment.html

Allow links with safe schemes:
    $ safedown comment.txt --links safe

Highlight the HTML in a terminal (requires the ``rich`` extra):
    $ safedown comment.txt --rich
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from safedown import __version__
from safedown.constants import (
    DEFAULT_LINK_POLICY,
    DEFAULT_MAX_NESTING_DEPTH,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from safedown.converter import Safedown
from safedown.exceptions import FileError, ParsingError, ValidationError
from safedown.filters import accept_all, safe_links
from safedown.links import LinkFilter
from safedown.logging_utils import configure_logging

logger = logging.getLogger(__name__)

LINK_POLICIES: dict[str, Optional[LinkFilter]] = {
    "mangle": None,
    "safe": safe_links,
    "all": accept_all,
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``safedown`` command."""
    parser = argparse.ArgumentParser(
        prog="safedown",
        description="Convert restricted markdown to HTML that is safe to display.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file, or '-' for standard input (default)")
    parser.add_argument("-o", "--out", help="Output file (default: standard output)")
    parser.add_argument(
        "--links",
        choices=sorted(LINK_POLICIES),
        default=DEFAULT_LINK_POLICY,
        help="How to render links: mangle them (default), allow safe schemes only, or allow all",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_NESTING_DEPTH,
        help=f"Maximum nesting of quotes, lists and emphasis (default: {DEFAULT_MAX_NESTING_DEPTH})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        help="Show the HTML with syntax highlighting (automatically disabled when output is piped)",
    )
    parser.add_argument(
        "--force-rich",
        action="store_true",
        help="Use rich output even when standard output is not a terminal",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every link decision at DEBUG level, with timestamps and logger names",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def read_input(path: str) -> str:
    """Read markup from a path, or from standard input for '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        raise FileError(f"Cannot read input file: {path}", file_path=path, original_error=e) from e


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when ``--rich`` is set, no output file is given and
    either ``--force-rich`` is set or standard output is a terminal.
    """
    if not args.rich or args.out:
        return False
    if args.force_rich:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def render_rich_output(html: str) -> bool:
    """Print HTML with Rich syntax highlighting.

    Returns
    -------
    bool
        False if Rich is not installed and nothing was printed

    """
    try:
        from rich.console import Console
        from rich.syntax import Syntax
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install safedown[rich]", file=sys.stderr)
        return False

    Console().print(Syntax(html, "html", word_wrap=True))
    return True


def write_output(html: str, path: Optional[str], rich: bool = False) -> None:
    """Write HTML to a path, or to standard output when no path is given."""
    if not path:
        if rich and render_rich_output(html):
            return
        sys.stdout.write(html)
        sys.stdout.write("\n")
        return
    try:
        Path(path).write_text(html, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Failed to write output file: {path}", file_path=path, original_error=e) from e


def main(args: list[str] | None = None) -> int:
    """Execute the ``safedown`` command.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        converter = Safedown(
            filter_links=LINK_POLICIES[parsed_args.links],
            max_nesting_depth=parsed_args.max_depth,
        )
        source = read_input(parsed_args.input)
        html = converter.convert(source)
        write_output(html, parsed_args.out, rich=should_use_rich_output(parsed_args))
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        if exit_code == EXIT_ERROR:
            logger.exception("Unexpected error")
        print(f"Error: {e}", file=sys.stderr)
        return exit_code

    logger.info("Converted %s", parsed_args.input)
    return EXIT_SUCCESS
