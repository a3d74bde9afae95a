"""Author discovery from the local git configuration."""

from __future__ import annotations

import logging

from webstart.core.types import Author
from webstart.git import GitRunner, config_value, run_git

__all__ = ["resolve_author"]

logger = logging.getLogger(__name__)


def resolve_author(*, runner: GitRunner = run_git) -> Author:
    """
    Read ``user.name`` and ``user.email`` from git.

    Any failure yields ``Author.unknown()``; author lookup never aborts project creation.
    """
    values: list[str] = []
    for key in ("user.name", "user.email"):
        result = config_value(key, runner=runner)
        if not result.ok:
            logger.debug("git config %s failed (%d): %s", key, result.returncode, result.stderr)
            return Author.unknown()
        values.append(result.stdout.rstrip("\n"))
    return Author(name=values[0], email=values[1])
