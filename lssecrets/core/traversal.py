"""Walk the Secret Service object tree and print the keyring report."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import closing
from typing import Final

import typer

from lssecrets.core.errors import SecretServiceError
from lssecrets.core.formatting import (
    format_attributes,
    format_bool,
    format_hex,
    format_timestamp,
)
from lssecrets.core.interfaces import Collection, Item, Lockable, Service, ServiceProvider
from lssecrets.core.options import Options

__all__ = ["KNOWN_ALIASES", "KeyringReport", "run"]

logger = logging.getLogger(__name__)

KNOWN_ALIASES: Final = ("default", "login", "session")

_COLLECTION_INDENT: Final = "    "

Echo = Callable[[str], None]


def run(options: Options, provider: ServiceProvider, *, echo: Echo = typer.echo) -> int:
    """Print the keyring report and return the process exit code."""

    logger.debug("requesting secret service (session=%s)", options.show_secrets)
    try:
        service = provider.get_service(open_session=options.show_secrets)
    except SecretServiceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        return 1

    with closing(service):
        KeyringReport(service, options, echo=echo).render()
    return 0


def _unlock(service: Service, obj: Lockable) -> SecretServiceError | None:
    """Try to unlock a single collection or item, returning the failure."""

    logger.debug("unlocking %s", obj.object_path)
    try:
        service.unlock([obj])
    except SecretServiceError as exc:
        logger.debug("unlock of %s failed: %s", obj.object_path, exc)
        return exc
    return None


class KeyringReport:
    """Render a service, its collections and their items as indented text."""

    def __init__(self, service: Service, options: Options, *, echo: Echo = typer.echo) -> None:
        self._service = service
        self._options = options
        self._echo = echo
        self._reverse_aliases: dict[str, list[str]] = {}

    def render(self) -> None:
        self._render_service()
        if self._options.level < 1:
            return
        try:
            collections = self._service.collections()
        except SecretServiceError as exc:
            self._line(_COLLECTION_INDENT, f"Error: {exc}")
            return
        for collection in collections:
            self._render_collection(collection, _COLLECTION_INDENT)

    def _line(self, indent: str, text: str) -> None:
        self._echo(f"{indent}{text}")

    def _timestamps(self, indent: str, created: int, modified: int) -> None:
        for name, value in (("Created", created), ("Modified", modified)):
            rendered = format_timestamp(value)
            if rendered is not None:
                self._line(indent, f"  {name}: {rendered}")

    def _resolve_aliases(self) -> dict[str, str]:
        aliases: dict[str, str] = {}
        for name in KNOWN_ALIASES:
            try:
                path = self._service.read_alias(name)
            except SecretServiceError as exc:
                logger.debug("could not resolve alias %r: %s", name, exc)
                continue
            if path is None:
                continue
            aliases[name] = path
            self._reverse_aliases.setdefault(path, []).append(name)
        return aliases

    def _render_service(self) -> None:
        self._echo("Service")
        self._line("", f"  Path: {self._service.object_path}")

        aliases = self._resolve_aliases()
        if aliases:
            self._line("", "  Aliases:")
            for name in sorted(aliases):
                self._line("", f"    {name}: {aliases[name]}")
        self._echo("")

    def _render_collection(self, collection: Collection, indent: str) -> None:
        try:
            self._render_collection_header(collection, indent)
        except SecretServiceError as exc:
            self._line(indent, f"  Error: {exc}")
            self._echo("")
            return
        self._echo("")

        if self._options.level < 2:
            return

        try:
            items = collection.items()
        except SecretServiceError as exc:
            self._line(indent, f"  Error: {exc}")
            self._echo("")
            return

        for item in items:
            try:
                self._render_item(item, indent + _COLLECTION_INDENT)
            except SecretServiceError as exc:
                self._line(indent + _COLLECTION_INDENT, f"  Error: {exc}")
            self._echo("")

    def _render_collection_header(self, collection: Collection, indent: str) -> None:
        path = collection.object_path
        self._line(indent, f'Collection: "{collection.label}"')
        self._line(indent, f"  Path: {path}")
        for alias in self._reverse_aliases.get(path, []):
            self._line(indent, f"  Alias: {alias}")
        self._timestamps(indent, collection.created, collection.modified)

        if self._options.unlock and collection.locked:
            error = _unlock(self._service, collection)
            if error is not None:
                self._line(indent, f"  Error: {error}")
        self._line(indent, f"  Locked: {format_bool(collection.locked)}")

    def _render_item(self, item: Item, indent: str) -> None:
        self._line(indent, f'Item: "{item.label}"')
        self._line(indent, f"  Path: {item.object_path}")
        self._timestamps(indent, item.created, item.modified)

        if self._options.level < 3:
            return

        attributes = format_attributes(item.attributes)
        if attributes:
            self._line(indent, "  Attributes:")
            for key, value in attributes:
                self._line(indent, f'      "{key}" = "{value}"')

        error = None
        if self._options.unlock and item.locked:
            error = _unlock(self._service, item)
        self._line(indent, f"  Locked: {format_bool(item.locked)}")
        if error is not None:
            self._line(indent, f"  Error: {error}")
            return

        if not self._options.show_secrets:
            return
        self._render_secret(item, indent)

    def _render_secret(self, item: Item, indent: str) -> None:
        logger.debug("loading secret of %s", item.object_path)
        try:
            secret = item.load_secret()
        except SecretServiceError as exc:
            self._line(indent, f"  Error: {exc}")
            return

        if secret is None:
            self._line(indent, "  Error: secret is null")
            return

        self._line(indent, "  Secret:")
        self._line(indent, f"    Type: {secret.content_type}")
        text = secret.text
        if text is not None:
            self._line(indent, f'    Value: "{text}"')
        else:
            self._line(indent, f"    Value: {{ {format_hex(secret.data)} }} (hex)")
