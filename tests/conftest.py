"""
Shared pytest fixtures for hashbench tests.

This module provides:
- isolated_environment: autouse; fresh container, no HASHBENCH_* env vars,
  cwd inside tmp_path so no config file is picked up by accident
- hashbench_cli: Helper to run the hashbench CLI via subprocess
- sample_file / empty_file: Input files
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from hashbench.core.bootstrap import reset


def _run_hashbench_cmd(
    *args: str, cwd: Path, check: bool = True, env: dict[str, str] | None = None
) -> subprocess.CompletedProcess:
    """Run a hashbench command using the current Python interpreter."""
    result = subprocess.run(
        [sys.executable, "-m", "hashbench", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        env=env,
    )
    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode,
            [sys.executable, "-m", "hashbench", *args],
            result.stdout,
            result.stderr,
        )
    return result


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Give every test a clean container, environment and working directory."""
    for key in list(os.environ):
        if key.startswith("HASHBENCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset()
    yield
    reset()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A 64 KiB input file with deterministic content."""
    path = tmp_path / "sample.bin"
    path.write_bytes(bytes(range(256)) * 256)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """A 0-byte input file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def hashbench_cli(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """
    Provide a helper function to run hashbench CLI commands.

    Commands run in tmp_path with TMPDIR pointed at a private directory,
    so generated inputs can be checked for cleanup.

    Returns:
        A callable that runs hashbench commands and returns CompletedProcess
    """
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    env = {k: v for k, v in os.environ.items() if not k.startswith("HASHBENCH_")}
    env["TMPDIR"] = str(scratch)

    def run_hashbench(*args: str, check: bool = True) -> subprocess.CompletedProcess:
        """
        Run a hashbench command.

        Args:
            *args: Arguments to pass to hashbench (e.g., "run", "--format", "json")
            check: Whether to raise on non-zero exit code
        """
        return _run_hashbench_cmd(*args, cwd=tmp_path, check=check, env=env)

    run_hashbench.scratch = scratch  # type: ignore[attr-defined]
    return run_hashbench
