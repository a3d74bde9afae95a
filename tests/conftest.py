"""Shared fixtures for the webstart test suite."""

from __future__ import annotations

import json
import shutil
import subprocess
from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest

from webstart.core.types import Author, ProjectSetup, Template
from webstart.git import GitResult

SETUP_DATE = date(2024, 1, 5)

TEMPLATE_FILES: dict[str, str] = {
    "README.md": (
        "# webstart-project-name\n\nCreated webstart-project-setupdate from webstart-template-url\n"
    ),
    "package.json": (
        '{"name": "@webstart/webstart-project-id", "author": "webstart-project-author"}\n'
    ),
    "src/index.js": "// keep webstart-project-id here\n",
    "LICENSE": "MIT\n",
}

MANIFEST: dict[str, list[dict[str, object]]] = {
    "project": [
        {
            "file": "README.md",
            "keywords": [
                "webstart-project-name",
                "webstart-project-setupdate",
                "webstart-template-url",
            ],
        },
        {
            "file": "package.json",
            "keywords": ["@webstart", "webstart-project-id", "webstart-project-author"],
        },
    ]
}


@pytest.fixture
def template() -> Template:
    return Template(
        name="react-starter",
        description="React single page app",
        repository_url="https://github.com/jburmeis/react-starter",
        clone_url="https://github.com/jburmeis/react-starter.git",
    )


@pytest.fixture
def author() -> Author:
    return Author(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def setup(template: Template, author: Author) -> ProjectSetup:
    return ProjectSetup.create(template, "  My Cool App  ", author)


def write_template(
    root: Path, files: dict[str, str] = TEMPLATE_FILES, manifest: object = MANIFEST
) -> None:
    """Lay out a template checkout under ``root``."""
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    if manifest is not None:
        (root / "__template.json").write_text(json.dumps(manifest), encoding="utf-8")


class FakeGit:
    """Stands in for ``run_git``: records calls and lays out a template on clone."""

    def __init__(self, *, fail: bool = False, manifest: object = MANIFEST) -> None:
        self.fail = fail
        self.manifest = manifest
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    def __call__(self, args: list[str], *, timeout: float | None = None) -> GitResult:
        self.calls.append(list(args))
        self.timeouts.append(timeout)
        if self.fail:
            return GitResult(returncode=128, stdout="", stderr="fatal: repository not found")
        target = Path(args[-1])
        target.mkdir(parents=True)
        (target / ".git").mkdir()
        (target / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        write_template(target, manifest=self.manifest)
        return GitResult(returncode=0, stdout="", stderr="")


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def failing_git() -> FakeGit:
    return FakeGit(fail=True)


@pytest.fixture
def template_writer() -> Callable[..., None]:
    return write_template


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    """A real local git repository holding the sample template."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "template-repo"
    repo.mkdir()
    write_template(repo)

    def git(*args: str) -> None:
        subprocess.run(
            ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
            cwd=repo,
            check=True,
            capture_output=True,
        )

    git("init", "-q")
    git("add", "-A")
    git("-c", "commit.gpgsign=false", "commit", "-q", "-m", "template")
    return repo
