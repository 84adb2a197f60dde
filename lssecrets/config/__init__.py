"""Configuration model and loader for lssecrets defaults."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lssecrets import paths
from lssecrets.core.options import DEFAULT_DETAIL

__all__ = ["AppConfig", "ConfigStore", "default_config_path"]

_DEFAULT_CONFIG_FILENAME = "config.json"


@dataclass(slots=True)
class AppConfig:
    """Defaults applied when the matching command-line option is absent."""

    detail: int = DEFAULT_DETAIL
    unlock: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Serialize the configuration into a JSON-compatible structure."""

        return {"detail": self.detail, "unlock": self.unlock}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AppConfig:
        """Create a configuration instance from serialized data.

        Entries with an unexpected type fall back to their defaults.
        """

        detail = payload.get("detail", DEFAULT_DETAIL)
        if isinstance(detail, bool) or not isinstance(detail, int) or detail < 0:
            detail = DEFAULT_DETAIL
        unlock = payload.get("unlock", False)
        if not isinstance(unlock, bool):
            unlock = False
        return cls(detail=detail, unlock=unlock)


def default_config_path() -> Path:
    """Return the default location for the application's configuration file."""

    return paths.config_dir() / _DEFAULT_CONFIG_FILENAME


class ConfigStore:
    """Read the application configuration file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else default_config_path()

    @property
    def path(self) -> Path:
        """Expose the backing configuration file path."""

        return self._path

    def load(self) -> AppConfig:
        """Load configuration from disk, returning defaults when absent."""

        if not self._path.exists():
            return AppConfig()
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError:
            return AppConfig()
        if not raw.strip():
            return AppConfig()
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            return AppConfig()
        if not isinstance(payload, dict):
            return AppConfig()
        return AppConfig.from_payload(payload)
