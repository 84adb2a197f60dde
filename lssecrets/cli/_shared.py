"""Shared helpers for Typer-based CLI components."""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(debug: bool) -> None:
    """Send log records to standard error, verbosely when debugging."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
