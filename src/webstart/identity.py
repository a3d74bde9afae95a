"""Project identifier derivation."""

from __future__ import annotations

from webstart.core.errors import ValidationError

__all__ = ["derive_project_id", "is_filesystem_safe"]

_FORBIDDEN = ("/", "\\", "\0")


def derive_project_id(raw_name: str) -> str:
    """
    Derive the canonical project id from a free-text project name.

    The name is trimmed, split on runs of whitespace, lowercased token by token
    and joined with ``-``. Existing hyphens are kept as they are.

    Raises:
        ValidationError: If the trimmed name is empty.
    """
    tokens = raw_name.split()
    if not tokens:
        raise ValidationError("Invalid input - Expected non-empty project name")
    return "-".join(token.lower() for token in tokens)


def is_filesystem_safe(project_id: str) -> bool:
    """Return whether ``project_id`` can be used as a single directory name."""
    if project_id in ("", ".", ".."):
        return False
    return not any(char in project_id for char in _FORBIDDEN)
