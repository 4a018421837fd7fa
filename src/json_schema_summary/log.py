"""Logging setup for the command-line entry point.

Library modules only create loggers; handlers are installed here, once, by
the CLI.  Records go to stderr so stdout stays clean JSON.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "level_for"]


def level_for(verbose: int, quiet: bool) -> int:
    """Map ``-v`` count and ``-q`` flag to a logging level."""
    if quiet:
        return logging.WARNING
    if verbose > 0:
        return logging.DEBUG
    return logging.INFO


def configure_logging(level: int = logging.INFO) -> None:
    console = Console(stderr=True)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
