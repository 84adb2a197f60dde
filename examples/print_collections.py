#!/usr/bin/env python3
"""Example script that prints each keyring collection and its lock state."""

from __future__ import annotations

from lssecrets.backend.libsecret import open_client
from lssecrets.core.errors import SecretServiceError


def main() -> int:
    try:
        with open_client() as provider:
            service = provider.get_service(open_session=False)
            try:
                collections = service.collections()
                for collection in collections:
                    state = "locked" if collection.locked else "unlocked"
                    print(f"{collection.label} ({collection.object_path}): {state}")
            finally:
                service.close()
    except SecretServiceError as exc:
        print(f"Failed to read the keyring: {exc}")
        return 1

    if not collections:
        print("No collections found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
