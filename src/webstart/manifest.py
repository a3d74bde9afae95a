"""Reading the ``__template.json`` manifest of a cloned template."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from webstart.core.errors import ManifestError
from webstart.core.types import ManifestEntry

__all__ = ["MANIFEST_NAME", "load_manifest", "parse_manifest", "resolve_entry"]

MANIFEST_NAME = "__template.json"


def _parse_entry(raw: Any, index: int) -> ManifestEntry:
    if not isinstance(raw, dict):
        raise TypeError(f"entry {index} is not an object")
    file = raw.get("file")
    keywords = raw.get("keywords", [])
    if not isinstance(file, str) or not file:
        raise TypeError(f"entry {index} has no 'file' string")
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise TypeError(f"entry {index} has a non-string 'keywords' list")
    return ManifestEntry(file=file, keywords=tuple(keywords))


def resolve_entry(root: Path, entry: ManifestEntry) -> Path:
    """Absolute path of ``entry`` inside ``root``; entries escaping ``root`` are rejected."""
    root = root.resolve()
    try:
        path = (root / entry.file).resolve()
    except (OSError, ValueError) as e:
        raise ManifestError(root / MANIFEST_NAME, f"invalid path {entry.file!r}: {e}") from e
    if not path.is_relative_to(root) or path == root:
        raise ManifestError(root / MANIFEST_NAME, f"'{entry.file}' points outside the project")
    return path


def parse_manifest(payload: Any, path: Path) -> list[ManifestEntry]:
    if not isinstance(payload, dict) or not isinstance(payload.get("project"), list):
        raise ManifestError(path, "expected an object with a 'project' array")
    try:
        return [_parse_entry(raw, i) for i, raw in enumerate(payload["project"])]
    except TypeError as e:
        raise ManifestError(path, str(e)) from e


def load_manifest(root: Path) -> list[ManifestEntry]:
    """
    Read the manifest at the root of a cloned template.

    Every entry is checked against ``root`` so that no substitution can touch a
    file outside the project directory.

    Raises:
        ManifestError: If the manifest is missing, is not valid JSON, has the wrong
            shape, or lists a path outside ``root``.
    """
    path = root / MANIFEST_NAME
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(path, "file not found") from None
    except (OSError, ValueError) as e:
        raise ManifestError(path, str(e)) from e

    entries = parse_manifest(payload, path)
    for entry in entries:
        resolve_entry(root, entry)
    return entries
