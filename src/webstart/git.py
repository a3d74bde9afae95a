"""Thin wrapper around the ``git`` executable."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

__all__ = ["GitResult", "GitRunner", "run_git", "clone", "config_value"]

CONFIG_TIMEOUT = 15.0


@dataclass(frozen=True)
class GitResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitRunner(Protocol):
    """Callable running one git command; ``timeout`` is in seconds, ``None`` waits forever."""

    def __call__(self, args: Sequence[str], *, timeout: float | None = None) -> GitResult: ...


def run_git(args: Sequence[str], *, timeout: float | None = None) -> GitResult:
    """Run ``git`` with ``args`` and normalize every failure into a :class:`GitResult`."""
    try:
        completed = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError:
        return GitResult(returncode=127, stdout="", stderr="git executable not found on PATH")
    except subprocess.TimeoutExpired:
        return GitResult(
            returncode=124, stdout="", stderr=f"git command timed out: git {' '.join(args)}"
        )
    return GitResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def clone(url: str, target_dir: Path, *, runner: GitRunner = run_git) -> GitResult:
    """Shallow clone of ``url`` into ``target_dir``."""
    return runner(["clone", "--depth", "1", url, str(target_dir)], timeout=None)


def config_value(key: str, *, runner: GitRunner = run_git) -> GitResult:
    return runner(["config", key], timeout=CONFIG_TIMEOUT)
