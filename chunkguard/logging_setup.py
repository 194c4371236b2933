"""Logging configuration for the command-line entry point.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI calls ``configure_logging`` once to attach a Rich handler on stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Route ``chunkguard`` log records to a Rich handler on stderr."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("chunkguard")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
