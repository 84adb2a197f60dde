"""Invocation options that drive the keyring traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

__all__ = ["DEFAULT_DETAIL", "MAX_DETAIL", "Options"]

DEFAULT_DETAIL: Final = 2
MAX_DETAIL: Final = 4


@dataclass(slots=True, frozen=True)
class Options:
    """Parsed command-line parameters.

    Detail levels: 0 shows the service only, 1 adds collections, 2 adds items,
    3 adds attributes and item lock state, 4 adds secret values. Values above
    the maximum are kept as given and behave like the maximum. ``version``
    only mirrors the parsed flag; the CLI answers ``--version`` before any
    traversal starts.
    """

    detail: int = DEFAULT_DETAIL
    unlock: bool = False
    version: bool = False

    @property
    def level(self) -> int:
        """Detail level clamped to the supported range."""

        return min(max(self.detail, 0), MAX_DETAIL)

    @property
    def show_secrets(self) -> bool:
        """Whether secret values are read, which requires an open session."""

        return self.level >= MAX_DETAIL
