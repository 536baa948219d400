"""
Shared pytest fixtures for floki tests.

This module provides:
- reset_container: clean DI container and bootstrap state per test
- project_dir: an empty working directory the test is chdir'ed into
- fake_runner / FakeFileSystem: in-memory stand-ins for the injectable ports
- run_floki_cmd: helper to run the floki CLI via subprocess
"""

import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

from floki.core.bootstrap import reset
from floki.core.interfaces.filesystem import IFileSystem
from floki.core.interfaces.runner import IToolRunner
from floki.core.models.command import ExitOutcome, Subcommand


def run_floki_cmd(*args: str, cwd: Path, env: dict | None = None) -> subprocess.CompletedProcess:
    """Run a floki command using the current Python interpreter."""
    return subprocess.run(
        [sys.executable, "-m", "floki", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        env=env,
    )


class FakeRunner(IToolRunner):
    """Records invocations and returns configured exit codes per directory."""

    def __init__(self, returncodes: dict[str, int] | None = None, errors: dict[str, Exception] | None = None):
        self.calls: list[tuple[Subcommand, str, tuple[str, ...]]] = []
        self._returncodes = returncodes or {}
        self._errors = errors or {}

    def run(self, subcommand: Subcommand, working_dir: str, flags: Sequence[str] = ()) -> ExitOutcome:
        self.calls.append((subcommand, working_dir, tuple(flags)))
        if working_dir in self._errors:
            raise self._errors[working_dir]
        return ExitOutcome(
            args=("cargo", subcommand.value, *flags),
            cwd=working_dir,
            returncode=self._returncodes.get(working_dir, 0),
        )

    @property
    def directories(self) -> list[str]:
        return [call[1] for call in self.calls]


class FakeFileSystem(IFileSystem):
    """Directory queries answered from a fixed set of names."""

    def __init__(self, directories: set[str] | None = None):
        self.directories = set(directories or ())
        self.queries: list[str] = []

    def directory_exists(self, name: str) -> bool:
        self.queries.append(name)
        return name in self.directories


@pytest.fixture(autouse=True)
def reset_container():
    """Give every test a fresh DI container."""
    reset()
    yield
    reset()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create an empty repository root and make it the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for FakeRunner with per-directory exit codes or spawn errors."""
    return FakeRunner


@pytest.fixture
def make_filesystem():
    """Factory for FakeFileSystem with a fixed set of existing directories."""
    return FakeFileSystem


@pytest.fixture
def floki_cmd():
    """Helper running the floki CLI in a subprocess."""
    return run_floki_cmd
