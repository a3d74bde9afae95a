"""Data model shared by the catalog, the materializer and the wizard."""

from __future__ import annotations

from dataclasses import dataclass

from webstart.core.errors import ValidationError
from webstart.identity import derive_project_id, is_filesystem_safe


@dataclass(frozen=True)
class Template:
    """
    A remote repository usable as a starting point for a new project.

    Attributes:
        name: Repository name, shown in the selection list.
        description: Repository description, empty when the remote has none.
        repository_url: Web URL of the repository.
        clone_url: Transport URL handed to ``git clone``.
    """

    name: str
    description: str
    repository_url: str
    clone_url: str


@dataclass(frozen=True)
class Author:
    """Display name and email of the acting user."""

    name: str
    email: str

    @classmethod
    def unknown(cls) -> Author:
        return cls(name="Unknown", email="")

    @property
    def signature(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True, kw_only=True)
class ProjectSetup:
    """
    Everything the materializer needs to turn a template into a project.

    Attributes:
        template: The selected template.
        project_id: Canonical identifier, always derived from ``project_name``.
        project_name: Trimmed free-text name entered by the operator.
        author_name: Author display name.
        author_email: Author email, possibly empty.
    """

    template: Template
    project_id: str
    project_name: str
    author_name: str
    author_email: str

    def __post_init__(self) -> None:
        if not is_filesystem_safe(self.project_id):
            raise ValidationError(f"Project id {self.project_id!r} is not a valid directory name.")

    @classmethod
    def create(cls, template: Template, raw_name: str, author: Author) -> ProjectSetup:
        """Build a setup from the raw project name typed by the operator."""
        name = raw_name.strip()
        return cls(
            template=template,
            project_id=derive_project_id(name),
            project_name=name,
            author_name=author.name,
            author_email=author.email,
        )

    @property
    def author(self) -> Author:
        return Author(name=self.author_name, email=self.author_email)


@dataclass(frozen=True)
class ManifestEntry:
    """A file of the cloned template and the keywords to substitute in it."""

    file: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class Outcome:
    """Result of one task in a settle-all fan-out."""

    target: str
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
