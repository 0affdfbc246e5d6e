"""Console logging for the email-event command line.

Library modules only ask for ``logging.getLogger(__name__)``.  The CLI
calls :func:`configure_logging` once with the loaded :class:`Settings` and
its ``--verbose`` flag, which decides what reaches stderr.
"""

from __future__ import annotations

import logging
import sys

from email_event.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


class _ConsoleHandler(logging.StreamHandler):
    """The stderr handler owned by :func:`configure_logging`."""


def resolve_level(level: str, verbose: bool = False) -> int:
    """Map a level name to its number; *verbose* always means DEBUG.

    Raises:
        ValueError: If *level* is not a logging level name and *verbose*
            is false.
    """
    if verbose:
        return logging.DEBUG
    numeric = logging.getLevelNamesMapping().get(level.upper())
    if numeric is None:
        raise ValueError(f"Invalid log level: {level!r}")
    return numeric


def configure_logging(settings: Settings, verbose: bool = False) -> int:
    """Send email-event records to stderr at the configured level.

    The root logger gets a single console handler with the pipe-separated
    format.  Calling again reuses that handler and only changes the level;
    handlers installed by a host application are never touched.

    Args:
        settings: Loaded settings; ``settings.log_level`` is the level name.
        verbose: Force DEBUG regardless of ``settings.log_level``.

    Returns:
        The numeric level that was applied.
    """
    level = resolve_level(settings.log_level, verbose)

    root = logging.getLogger()
    root.setLevel(level)

    handler = next((h for h in root.handlers if isinstance(h, _ConsoleHandler)), None)
    if handler is None:
        handler = _ConsoleHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)
    handler.setLevel(level)
    return level
