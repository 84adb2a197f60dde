"""Command-line interface for the lssecrets application."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import click
import typer

from lssecrets import __version__
from lssecrets.backend.libsecret import open_client
from lssecrets.cli._shared import configure_logging
from lssecrets.config import ConfigStore
from lssecrets.core.errors import SecretServiceError
from lssecrets.core.options import MAX_DETAIL, Options
from lssecrets.core.traversal import run

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="List the contents of the keyring through the Secret Service.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _build_options(
    detail: int | None,
    unlock: bool,
    secrets: bool,
    config_path: Path | None,
    version: bool = False,
) -> Options:
    """Merge command-line values with the configured defaults."""

    store = ConfigStore(path=config_path)
    config = store.load()
    logger.debug("configuration from %s: %s", store.path, config.to_payload())

    level = detail if detail is not None else config.detail
    if secrets:
        level = max(level, MAX_DETAIL)
    return Options(detail=level, unlock=unlock or config.unlock, version=version)


@app.command()
def lssecrets(
    detail: int | None = typer.Option(
        None,
        "--detail",
        "-d",
        min=0,
        metavar="N",
        help=(
            "Detail level: 0 service, 1 collections, 2 items, 3 attributes, "
            "4 secret values. Defaults to 2."
        ),
    ),
    unlock: bool = typer.Option(
        False,
        "--unlock",
        "-u",
        help="Try to unlock locked collections and items.",
    ),
    secrets: bool = typer.Option(
        False,
        "--secrets",
        "-s",
        help="Show secret values (same as --detail 4).",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Read defaults from this JSON file.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log diagnostic messages to standard error.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the application's version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Print the Secret Service collections, items and, optionally, secrets."""

    configure_logging(debug)
    options = _build_options(detail, unlock, secrets, config_path, version)

    try:
        with open_client() as provider:
            exit_code = run(options, provider)
    except SecretServiceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    raise typer.Exit(exit_code)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the lssecrets CLI."""

    args = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        result = app(args=args, prog_name="lssecrets", standalone_mode=False)
    except typer.Exit as exc:  # exit path already handled by Typer
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    except Exception as exc:  # pragma: no cover - unexpected errors bubble to the shell
        typer.echo(str(exc), err=True)
        return 1
    # Typer returns the exit code instead of raising when not standalone.
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover - manual execution only
    raise SystemExit(main())
