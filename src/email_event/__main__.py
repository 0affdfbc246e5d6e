"""Entry point for ``python -m email_event``.

Reads an email from a file, stdin, or one of the bundled examples and
prints the extracted event.  Uses stdlib :mod:`argparse` for argument
parsing.

Exit codes:
    0 -- An event was extracted (or examples were listed).
    1 -- An error occurred (file not found, file not UTF-8, empty input,
         config error, unknown example).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from email_event.config import ConfigError, load_settings
from email_event.demo_output import format_example_list, print_event
from email_event.examples import EXAMPLE_EMAILS, get_example
from email_event.exceptions import ExtractionError
from email_event.extractor import EventExtractor
from email_event.log import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="email-event",
        description="Extract a calendar event from email text.",
    )
    parser.add_argument(
        "email_file",
        nargs="?",
        default="-",
        help="Path to a text file holding the email, or '-' for stdin (default).",
    )
    parser.add_argument(
        "--example",
        type=str,
        default=None,
        metavar="NAME",
        help="Use a bundled example email instead of a file.",
    )
    parser.add_argument(
        "--list-examples",
        action="store_true",
        default=False,
        help="List the bundled example emails and exit.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the event as indented JSON only.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def _read_text(args: argparse.Namespace) -> str:
    """Return the email text selected by *args*.

    Raises:
        KeyError: Unknown ``--example`` name.
        FileNotFoundError: The email file does not exist.
        IsADirectoryError: The email path is a directory.
        ValueError: The email file is not UTF-8 text.
    """
    if args.example is not None:
        return get_example(args.example).content

    if args.email_file == "-":
        return sys.stdin.read()

    path = Path(args.email_file)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise IsADirectoryError(f"Not a file: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Not UTF-8 text: {path} (byte {exc.start}: {exc.reason})") from exc


def main(argv: list[str] | None = None) -> int:
    """Run the email-event CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    configure_logging(settings, verbose=args.verbose)

    if args.list_examples:
        print(format_example_list(EXAMPLE_EMAILS))
        return 0

    try:
        text = _read_text(args)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    extractor = EventExtractor(default_time=settings.default_event_time)
    try:
        event = extractor.extract(text)
    except ExtractionError as exc:
        logger.debug("Extraction rejected input: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(event.to_json(indent=settings.json_indent))
    else:
        print_event(event)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
