"""Fixtures supporting CLI system tests."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

RunCli = Callable[
    [Sequence[str] | None, Mapping[str, str] | None],
    subprocess.CompletedProcess[str],
]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the repository root."""

    return Path(__file__).resolve().parents[2]


@pytest.fixture
def system_environment(tmp_path, project_root: Path) -> dict[str, str]:
    """Provide an isolated environment for invoking the CLI as a subprocess."""

    env = os.environ.copy()
    env["LSSECRETS_CONFIG_DIR"] = str(tmp_path / "config")

    existing_path = env.get("PYTHONPATH")
    components = [str(project_root)]
    if existing_path:
        components.append(existing_path)
    env["PYTHONPATH"] = os.pathsep.join(components)
    return env


@pytest.fixture
def run_cli(system_environment: dict[str, str], project_root: Path) -> RunCli:
    """Return a helper that executes the CLI via ``python -m lssecrets``."""

    def _run(
        args: Sequence[str] | None,
        extra_env: Mapping[str, str] | None = None,
    ) -> subprocess.CompletedProcess[str]:
        command = [sys.executable, "-m", "lssecrets"]
        if args:
            command.extend(args)

        env = system_environment.copy()
        if extra_env:
            env.update(extra_env)

        return subprocess.run(
            command,
            cwd=project_root,
            env=env,
            text=True,
            capture_output=True,
            check=False,
        )

    return _run
