"""Tests for the display formatting helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from lssecrets.core.formatting import (
    format_attributes,
    format_bool,
    format_hex,
    format_timestamp,
)


def test_zero_timestamp_is_absent() -> None:
    assert format_timestamp(0) is None


def test_timestamp_uses_local_time() -> None:
    """Non-zero timestamps render as local date and time to the second."""

    expected = datetime.fromtimestamp(1700000000).strftime("%Y-%m-%d %H:%M:%S")

    rendered = format_timestamp(1700000000)

    assert rendered == expected
    assert len(rendered) == len("YYYY-MM-DD HH:MM:SS")


@pytest.mark.parametrize(
    ("data", "expected"),
    [(b"", ""), (b"\x00\xff\x10", "00ff10"), (b"\x0a\xbc", "0abc")],
)
def test_hex_is_lowercase_and_zero_padded(data: bytes, expected: str) -> None:
    rendered = format_hex(data)

    assert rendered == expected
    assert len(rendered) == 2 * len(data)


def test_attributes_sorted_by_key_bytes() -> None:
    """Ordering follows byte values, so uppercase sorts before lowercase."""

    pairs = format_attributes({"user": "a", "Zone": "z", "service": "imap", "é": "x"})

    assert pairs == [("Zone", "z"), ("service", "imap"), ("user", "a"), ("é", "x")]


def test_empty_attributes() -> None:
    assert format_attributes({}) == []


def test_format_bool() -> None:
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


def test_out_of_range_timestamp_renders_raw_value() -> None:
    """Timestamps beyond the platform's time_t are shown, not dropped."""

    assert format_timestamp(2**64 - 1) == str(2**64 - 1)
