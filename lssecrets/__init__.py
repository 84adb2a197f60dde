"""List the contents of the keyring through the freedesktop Secret Service."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "1.1"
