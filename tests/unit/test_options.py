"""Tests for the options model."""

from __future__ import annotations

import pytest

from lssecrets.core.options import Options


def test_defaults() -> None:
    options = Options()

    assert options.detail == 2
    assert options.level == 2
    assert options.unlock is False
    assert options.version is False
    assert options.show_secrets is False


@pytest.mark.parametrize(("detail", "level"), [(0, 0), (3, 3), (4, 4), (5, 4), (100, 4)])
def test_level_is_clamped_but_detail_kept(detail: int, level: int) -> None:
    options = Options(detail=detail)

    assert options.detail == detail
    assert options.level == level


def test_secrets_only_at_top_level() -> None:
    assert Options(detail=3).show_secrets is False
    assert Options(detail=4).show_secrets is True
    assert Options(detail=12).show_secrets is True


def test_version_flag_is_mirrored() -> None:
    assert Options(version=True).version is True
