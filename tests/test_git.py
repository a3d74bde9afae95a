"""Tests for the git subprocess wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from webstart.git import CONFIG_TIMEOUT, GitResult, clone, config_value, run_git


class TestRunGit:
    @patch("webstart.git.subprocess.run")
    def test_success(self, mock_run: MagicMock) -> None:
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="out", stderr=""
        )

        result = run_git(["status"])

        assert result == GitResult(returncode=0, stdout="out", stderr="")
        assert result.ok
        assert mock_run.call_args.args[0] == ["git", "status"]
        assert mock_run.call_args.kwargs["check"] is False

    @patch("webstart.git.subprocess.run", side_effect=FileNotFoundError("git"))
    def test_missing_executable(self, mock_run: MagicMock) -> None:
        result = run_git(["status"])
        assert result.returncode == 127
        assert not result.ok

    @patch(
        "webstart.git.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="git status", timeout=1),
    )
    def test_timeout(self, mock_run: MagicMock) -> None:
        result = run_git(["status"], timeout=1)
        assert result.returncode == 124
        assert "timed out" in result.stderr


class TestClone:
    def test_shallow_clone_arguments(self, tmp_path: Path) -> None:
        calls: list[list[str]] = []
        timeouts: list[float | None] = []

        def runner(args, *, timeout=None):
            calls.append(list(args))
            timeouts.append(timeout)
            return GitResult(0, "", "")

        clone("https://example.com/t.git", tmp_path / "proj", runner=runner)

        assert calls == [
            ["clone", "--depth", "1", "https://example.com/t.git", str(tmp_path / "proj")]
        ]
        assert timeouts == [None]


class TestConfigValue:
    def test_injected_runner_gets_timeout(self) -> None:
        seen: list[tuple[list[str], float | None]] = []

        def runner(args, *, timeout=None):
            seen.append((list(args), timeout))
            return GitResult(0, "Ada\n", "")

        result = config_value("user.name", runner=runner)

        assert result.stdout == "Ada\n"
        assert seen == [(["config", "user.name"], CONFIG_TIMEOUT)]
