"""Error taxonomy for template materialization."""

from __future__ import annotations

from pathlib import Path


class WebstartError(Exception):
    """Base class for every failure the CLI reports with exit code 9."""


class NetworkError(WebstartError):
    """The template catalog could not be fetched or parsed."""


class ValidationError(WebstartError):
    """Operator input was rejected."""


class DirectoryConflictError(WebstartError):
    """The target project directory already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Target directory '{path}' already exists")
        self.path = path


class FetchError(WebstartError):
    """Cloning the template repository failed."""

    def __init__(self, url: str, stderr: str = "") -> None:
        message = f"Error in connection with the template repository ({url})"
        detail = stderr.strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.url = url
        self.stderr = stderr


class ManifestError(WebstartError):
    """The template manifest is missing, malformed or unsafe."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid template manifest '{path}': {reason}")
        self.path = path
