"""Turning a remote template into a concrete project directory."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TypeVar

from webstart.core.errors import DirectoryConflictError, FetchError
from webstart.core.types import ManifestEntry, Outcome, ProjectSetup
from webstart.git import GitRunner, clone, run_git
from webstart.keywords import substitute
from webstart.manifest import MANIFEST_NAME, load_manifest, resolve_entry

__all__ = ["CLEANUP_PATHS", "MaterializeReport", "TemplateMaterializer"]

logger = logging.getLogger(__name__)

CLEANUP_PATHS: tuple[str, ...] = (MANIFEST_NAME, "LICENSE", ".git")

PhaseCallback = Callable[[str], None]

T = TypeVar("T")


@dataclass
class MaterializeReport:
    """Per-item outcomes of the substitution and cleanup phases."""

    target_dir: Path
    substitutions: list[Outcome] = field(default_factory=list)
    cleanup: list[Outcome] = field(default_factory=list)

    @property
    def failures(self) -> list[Outcome]:
        return [o for o in (*self.substitutions, *self.cleanup) if not o.ok]


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


class TemplateMaterializer:
    """
    Clone a template, substitute its keywords and strip template-only files.

    Each phase only starts once the previous one succeeded: a failed clone skips
    the manifest, a bad manifest skips substitution. Inside the substitution and
    cleanup phases items run concurrently and every outcome is collected, so one
    failing file never prevents the others from being processed.

    Args:
        git: Callable running a git command, defaults to :func:`webstart.git.run_git`.
        today: Date used for ``webstart-project-setupdate``; read once per run when omitted.
        max_workers: Size of the thread pool used for per-file work.
    """

    def __init__(
        self,
        git: GitRunner = run_git,
        *,
        today: Callable[[], date] = date.today,
        max_workers: int | None = None,
    ) -> None:
        self._git = git
        self._today = today
        self._max_workers = max_workers

    def materialize(
        self,
        target_dir: Path,
        clone_url: str,
        setup: ProjectSetup,
        *,
        on_phase: PhaseCallback | None = None,
    ) -> MaterializeReport:
        notify = on_phase or (lambda _: None)

        if target_dir.exists():
            raise DirectoryConflictError(target_dir)

        notify("download")
        self.fetch(clone_url, target_dir)

        notify("filter")
        entries = load_manifest(target_dir)
        report = MaterializeReport(target_dir=target_dir)
        report.substitutions = self.substitute(target_dir, entries, setup)

        notify("cleanup")
        report.cleanup = self.cleanup(target_dir)

        for failure in report.failures:
            logger.warning("Could not process %s: %s", failure.target, failure.error)
        return report

    def fetch(self, clone_url: str, target_dir: Path) -> None:
        logger.debug("Cloning %s into %s", clone_url, target_dir)
        result = clone(clone_url, target_dir, runner=self._git)
        if result.ok:
            return
        if target_dir.exists():
            shutil.rmtree(target_dir, ignore_errors=True)
        raise FetchError(clone_url, result.stderr)

    def substitute(
        self, target_dir: Path, entries: Sequence[ManifestEntry], setup: ProjectSetup
    ) -> list[Outcome]:
        today = self._today()

        def filter_file(entry: ManifestEntry) -> None:
            path = resolve_entry(target_dir, entry)
            text = path.read_bytes().decode("utf-8")
            path.write_bytes(substitute(text, entry.keywords, setup, today).encode("utf-8"))

        return self._settle_all(filter_file, entries, key=lambda entry: entry.file)

    def cleanup(self, target_dir: Path) -> list[Outcome]:
        return self._settle_all(lambda name: _remove(target_dir / name), CLEANUP_PATHS, key=str)

    def _settle_all(
        self, task: Callable[[T], None], items: Sequence[T], *, key: Callable[[T], str]
    ) -> list[Outcome]:
        """Run ``task`` for every item and collect one outcome per item, in order."""
        if not items:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = [(key(item), pool.submit(task, item)) for item in items]
            return [Outcome(target=name, error=future.exception()) for name, future in futures]
