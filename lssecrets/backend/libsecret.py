"""Secret Service client backed by libsecret through PyGObject.

The ``gi`` bindings are imported lazily by :func:`open_client` so that the
rest of the package (and ``--version``) works on hosts without libsecret.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Final, TypeVar

from lssecrets.core.errors import ServiceUnavailableError, translate_error
from lssecrets.core.interfaces import Lockable
from lssecrets.core.models import SecretValue

__all__ = [
    "APPLICATION_ID",
    "Bindings",
    "LibsecretCollection",
    "LibsecretItem",
    "LibsecretProvider",
    "LibsecretService",
    "load_bindings",
    "open_client",
]

logger = logging.getLogger(__name__)

APPLICATION_ID: Final = "com.github.dkosmari.lssecrets"

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Bindings:
    """The introspected modules the adapters need."""

    GLib: Any
    Gio: Any
    Secret: Any
    secret_domain: str

    def call(self, func: Callable[..., T], *args: Any) -> T:
        """Invoke a libsecret function, converting ``GLib.Error`` failures."""

        try:
            return func(*args)
        except self.GLib.Error as exc:
            raise translate_error(
                exc.domain,
                exc.code,
                exc.message,
                secret_domain=self.secret_domain,
            ) from exc

    def drain_events(self) -> None:
        """Dispatch pending events so cached D-Bus properties catch up."""

        context = self.GLib.MainContext.default()
        while context.iteration(False):
            pass


def load_bindings() -> Bindings:
    """Import the libsecret, GIO and GLib bindings."""

    try:
        import gi

        gi.require_version("Secret", "1")
        gi.require_version("Gio", "2.0")
        from gi.repository import Gio, GLib, Secret
    except (ImportError, ValueError) as exc:
        raise ServiceUnavailableError(str(exc)) from exc

    domain = GLib.quark_to_string(Secret.error_get_quark())
    return Bindings(GLib=GLib, Gio=Gio, Secret=Secret, secret_domain=domain)


class _Proxy:
    """Shared accessors of libsecret collections and items."""

    proxy: Any

    def __init__(self, proxy: Any, bindings: Bindings) -> None:
        self.proxy = proxy
        self._bindings = bindings

    @property
    def object_path(self) -> str:
        return self.proxy.get_object_path()

    @property
    def label(self) -> str:
        return self.proxy.get_label() or ""

    @property
    def created(self) -> int:
        return self.proxy.get_created()

    @property
    def modified(self) -> int:
        return self.proxy.get_modified()

    @property
    def locked(self) -> bool:
        return bool(self.proxy.get_locked())


class LibsecretItem(_Proxy):
    """Adapter over ``Secret.Item``."""

    @property
    def attributes(self) -> Mapping[str, str]:
        return dict(self.proxy.get_attributes() or {})

    def load_secret(self) -> SecretValue | None:
        self._bindings.call(self.proxy.load_secret_sync, None)
        value = self.proxy.get_secret()
        if value is None:
            return None
        # Copy out so the Secret.Value reference is dropped right away.
        return SecretValue(content_type=value.get_content_type(), data=bytes(value.get()))


class LibsecretCollection(_Proxy):
    """Adapter over ``Secret.Collection``."""

    def items(self) -> list[LibsecretItem]:
        proxies = self.proxy.get_items()
        if proxies is None:
            self._bindings.call(self.proxy.load_items_sync, None)
            proxies = self.proxy.get_items() or []
        return [LibsecretItem(proxy, self._bindings) for proxy in proxies]


class LibsecretService:
    """Adapter over ``Secret.Service``."""

    def __init__(self, proxy: Any, bindings: Bindings) -> None:
        self.proxy = proxy
        self._bindings = bindings

    @property
    def object_path(self) -> str:
        return self.proxy.get_object_path()

    def read_alias(self, name: str) -> str | None:
        return self._bindings.call(self.proxy.read_alias_dbus_path_sync, name, None)

    def collections(self) -> list[LibsecretCollection]:
        proxies = self.proxy.get_collections()
        if proxies is None:
            self._bindings.call(self.proxy.load_collections_sync, None)
            proxies = self.proxy.get_collections() or []
        return [LibsecretCollection(proxy, self._bindings) for proxy in proxies]

    def unlock(self, objects: Sequence[Lockable]) -> None:
        proxies: list[Any] = []
        for obj in objects:
            if not isinstance(obj, _Proxy):
                msg = f"cannot unlock {obj!r}: not a libsecret collection or item"
                raise TypeError(msg)
            proxies.append(obj.proxy)
        count, _ = self._bindings.call(self.proxy.unlock_sync, proxies, None)
        logger.debug("service reported %d object(s) unlocked", count)
        self._bindings.drain_events()

    def close(self) -> None:
        self.proxy = None
        self._bindings.Secret.Service.disconnect()


class LibsecretProvider:
    """Connect to the session's Secret Service."""

    def __init__(self, bindings: Bindings) -> None:
        self._bindings = bindings

    def get_service(self, *, open_session: bool) -> LibsecretService:
        flags = self._bindings.Secret.ServiceFlags.LOAD_COLLECTIONS
        if open_session:
            flags |= self._bindings.Secret.ServiceFlags.OPEN_SESSION
        proxy = self._bindings.call(self._bindings.Secret.Service.get_sync, flags, None)
        logger.debug("connected to secret service at %s", proxy.get_object_path())
        return LibsecretService(proxy, self._bindings)


@contextmanager
def open_client(application_id: str = APPLICATION_ID) -> Iterator[LibsecretProvider]:
    """Initialize the client library for the duration of a run.

    The application is registered as non-unique so that concurrent
    invocations in the same session run independently.
    """

    bindings = load_bindings()
    application = bindings.Gio.Application(
        application_id=application_id,
        flags=bindings.Gio.ApplicationFlags.NON_UNIQUE,
    )
    bindings.call(application.register, None)
    yield LibsecretProvider(bindings)
