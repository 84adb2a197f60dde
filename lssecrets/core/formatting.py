"""Pure helpers that turn raw keyring values into display strings."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

__all__ = ["format_attributes", "format_bool", "format_hex", "format_timestamp"]

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(timestamp: int) -> str | None:
    """Render seconds since the epoch in local time, or ``None`` when unset.

    The Secret Service reports ``0`` for timestamps it does not track, so that
    value is treated as absent rather than as the epoch. Values the platform
    cannot convert are rendered as the raw number.
    """

    if timestamp == 0:
        return None
    try:
        return datetime.fromtimestamp(timestamp).strftime(_TIMESTAMP_FORMAT)
    except (OverflowError, ValueError, OSError):
        return str(timestamp)


def format_hex(data: bytes) -> str:
    """Return lowercase hex digits, two per byte, without separators."""

    return data.hex()


def format_attributes(attributes: Mapping[str, str]) -> list[tuple[str, str]]:
    """Return attribute pairs ordered by the UTF-8 bytes of their keys."""

    return sorted(attributes.items(), key=lambda pair: pair[0].encode("utf-8"))


def format_bool(value: bool) -> str:
    return "true" if value else "false"
