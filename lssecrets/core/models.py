"""Plain data carried out of the Secret Service client."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SecretValue"]


@dataclass(slots=True, frozen=True)
class SecretValue:
    """A secret copied out of the service together with its content type."""

    content_type: str
    data: bytes

    @property
    def text(self) -> str | None:
        """The value decoded as UTF-8, or ``None`` for opaque bytes.

        Embedded NUL bytes make the value opaque, as libsecret's text check does.
        """

        if b"\x00" in self.data:
            return None
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError:
            return None
