"""Runtime settings for the template catalog and project creation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_OWNER = "jburmeis"
DEFAULT_TOPIC = "project-template"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


def _github_token() -> str | None:
    token = (os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or "").strip()
    return token or None


@dataclass(frozen=True, kw_only=True)
class Settings:
    """
    Configuration for a single webstart run.

    Attributes:
        owner: GitHub user or organization owning the templates.
        topic: Repository topic the templates are tagged with.
        api_url: Base URL of the GitHub REST API.
        github_token: Optional token sent as a bearer credential.
        timeout: HTTP timeout in seconds for the catalog request.
        base_dir: Directory in which the project directory is created.
    """

    owner: str = DEFAULT_OWNER
    topic: str = DEFAULT_TOPIC
    api_url: str = DEFAULT_API_URL
    github_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    base_dir: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        if not self.owner.strip():
            raise ValueError("owner must not be empty.")
        if not self.topic.strip():
            raise ValueError("topic must not be empty.")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}.")

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Read ``WEBSTART_*`` variables, then apply non-``None`` overrides."""
        values: dict[str, Any] = {"github_token": _github_token()}
        if owner := os.getenv("WEBSTART_OWNER"):
            values["owner"] = owner
        if topic := os.getenv("WEBSTART_TOPIC"):
            values["topic"] = topic
        if api_url := os.getenv("WEBSTART_API_URL"):
            values["api_url"] = api_url
        if timeout := os.getenv("WEBSTART_TIMEOUT"):
            try:
                values["timeout"] = float(timeout)
            except ValueError:
                raise ValueError(f"WEBSTART_TIMEOUT must be a number, got {timeout!r}.") from None
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    @property
    def query(self) -> str:
        return f"user:{self.owner} {self.topic} in:topics"

    @property
    def search_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/search/repositories"

