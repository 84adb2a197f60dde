"""Utilities for resolving filesystem locations used by lssecrets."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_path

__all__ = ["config_dir"]


def config_dir() -> Path:
    """Return the directory holding the optional configuration file.

    The path defaults to the platform-specific user configuration directory
    exposed by :mod:`platformdirs`. When the ``LSSECRETS_CONFIG_DIR``
    environment variable is set the value is used instead. The directory is
    not created; lssecrets only ever reads from it.
    """

    override = os.getenv("LSSECRETS_CONFIG_DIR")
    return Path(override).expanduser() if override else user_config_path("lssecrets")
