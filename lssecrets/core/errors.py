"""Exception types raised while talking to the Secret Service."""

from __future__ import annotations

from typing import Final

__all__ = [
    "AlreadyExistsError",
    "LockedError",
    "NotFoundError",
    "ProtocolError",
    "SecretServiceError",
    "ServiceUnavailableError",
    "translate_error",
]

SECRET_ERROR_DOMAIN: Final = "secret-error"


class SecretServiceError(Exception):
    """Base exception type for Secret Service failures.

    ``str()`` renders the class prefix followed by the underlying detail, which
    is the form the report prints after ``Error:``.
    """

    prefix: str = ""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        if not self.prefix:
            return self.detail
        if not self.detail:
            return self.prefix
        return f"{self.prefix} {self.detail}"


class ServiceUnavailableError(SecretServiceError):
    """Raised when the Secret Service cannot be reached or opened."""

    prefix = "Couldn't get secret service."


class ProtocolError(SecretServiceError):
    """Raised when the service answers with malformed data."""

    prefix = "Received invalid data from secret service."


class LockedError(SecretServiceError):
    """Raised when an item or collection must be unlocked first."""

    prefix = "Secret item or collection is locked."


class NotFoundError(SecretServiceError):
    """Raised when an object disappeared between enumeration and access."""

    prefix = "Secret item or collection not found."


class AlreadyExistsError(SecretServiceError):
    """Raised when an item or collection already exists."""

    prefix = "Secret item or collection already exists."


# Codes of libsecret's SecretError enumeration.
_ERRORS_BY_CODE: Final[dict[int, type[SecretServiceError]]] = {
    1: ProtocolError,
    2: LockedError,
    3: NotFoundError,
    4: AlreadyExistsError,
}


def translate_error(
    domain: str | None,
    code: int,
    message: str,
    *,
    secret_domain: str = SECRET_ERROR_DOMAIN,
) -> SecretServiceError:
    """Map a GLib error triple onto the matching exception instance.

    Errors from any domain other than libsecret's own (D-Bus, GIO, ...) mean
    the service itself is unreachable or misbehaving.
    """

    if domain != secret_domain:
        return ServiceUnavailableError(message)
    error_type = _ERRORS_BY_CODE.get(code, SecretServiceError)
    return error_type(message)
