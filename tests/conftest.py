"""Shared pytest configuration and in-memory Secret Service fakes."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest

from lssecrets.core.errors import SecretServiceError
from lssecrets.core.models import SecretValue


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Tag every test that is not marked as system as a unit test."""

    for item in items:
        if "system" not in item.keywords:
            item.add_marker(pytest.mark.unit)


@dataclass
class FakeItem:
    label: str
    object_path: str
    created: int = 0
    modified: int = 0
    attributes: dict[str, str] = field(default_factory=dict)
    locked: bool = False
    secret: SecretValue | None = None
    secret_error: SecretServiceError | None = None
    unlock_error: SecretServiceError | None = None
    loads: int = 0

    def load_secret(self) -> SecretValue | None:
        self.loads += 1
        if self.secret_error is not None:
            raise self.secret_error
        if self.locked:
            raise SecretServiceError("item is locked")
        return self.secret


@dataclass
class FakeCollection:
    label: str
    object_path: str
    created: int = 0
    modified: int = 0
    locked: bool = False
    contents: list[FakeItem] = field(default_factory=list)
    items_error: SecretServiceError | None = None
    unlock_error: SecretServiceError | None = None

    def items(self) -> list[FakeItem]:
        if self.items_error is not None:
            raise self.items_error
        return list(self.contents)


@dataclass
class FakeService:
    object_path: str = "/org/freedesktop/secrets"
    aliases: dict[str, str] = field(default_factory=dict)
    contents: list[FakeCollection] = field(default_factory=list)
    unlock_calls: list[list[str]] = field(default_factory=list)
    closed: bool = False

    def read_alias(self, name: str) -> str | None:
        return self.aliases.get(name)

    def collections(self) -> list[FakeCollection]:
        return list(self.contents)

    def unlock(self, objects: Sequence[Any]) -> None:
        self.unlock_calls.append([obj.object_path for obj in objects])
        for obj in objects:
            if obj.unlock_error is not None:
                raise obj.unlock_error
            obj.locked = False

    def close(self) -> None:
        self.closed = True


class FakeProvider:
    """Record service requests and hand out a prepared service."""

    def __init__(
        self,
        service: FakeService | None = None,
        error: SecretServiceError | None = None,
    ) -> None:
        self.service = service if service is not None else FakeService()
        self.error = error
        self.sessions: list[bool] = []

    def get_service(self, *, open_session: bool) -> FakeService:
        self.sessions.append(open_session)
        if self.error is not None:
            raise self.error
        return self.service


@pytest.fixture()
def make_item() -> Callable[..., FakeItem]:
    """Build fake items."""

    return FakeItem


@pytest.fixture()
def make_collection() -> Callable[..., FakeCollection]:
    """Build fake collections."""

    return FakeCollection


@pytest.fixture()
def make_service() -> Callable[..., FakeService]:
    """Build fake services."""

    return FakeService


@pytest.fixture()
def make_provider() -> Callable[..., FakeProvider]:
    """Build fake service providers."""

    return FakeProvider
