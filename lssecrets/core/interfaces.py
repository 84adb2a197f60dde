"""Protocol definitions for the Secret Service client consumed by the traversal."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from lssecrets.core.models import SecretValue


class Lockable(Protocol):
    """Any service object that can be passed to an unlock request."""

    @property
    def object_path(self) -> str: ...

    @property
    def locked(self) -> bool: ...


class Item(Lockable, Protocol):
    """A single secret entry inside a collection."""

    @property
    def label(self) -> str: ...

    @property
    def created(self) -> int: ...

    @property
    def modified(self) -> int: ...

    @property
    def attributes(self) -> Mapping[str, str]: ...

    def load_secret(self) -> SecretValue | None:
        """Fetch the secret value; requires a session and an unlocked item."""


class Collection(Lockable, Protocol):
    """A keyring holding items."""

    @property
    def label(self) -> str: ...

    @property
    def created(self) -> int: ...

    @property
    def modified(self) -> int: ...

    def items(self) -> list[Item]:
        """Return the items in service order."""


class Service(Protocol):
    """A connected Secret Service."""

    @property
    def object_path(self) -> str: ...

    def read_alias(self, name: str) -> str | None:
        """Resolve an alias to a collection object path, if it is set."""

    def collections(self) -> list[Collection]:
        """Return the collections in service order."""

    def unlock(self, objects: Sequence[Lockable]) -> None:
        """Ask the service to unlock the given objects, prompting if needed."""

    def close(self) -> None:
        """Release the service connection."""


class ServiceProvider(Protocol):
    """Factory for service connections."""

    def get_service(self, *, open_session: bool) -> Service:
        """Connect to the service, negotiating a session when requested."""
