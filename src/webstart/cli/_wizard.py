"""Linear project creation flow: catalog, prompts, confirmation, materialization."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from rich.console import Console

from webstart.author import resolve_author
from webstart.catalog import fetch_templates
from webstart.cli._prompts import Prompter
from webstart.cli._renderer import print_error, print_phase, print_templates, summary
from webstart.core.config import Settings
from webstart.core.errors import NetworkError, ValidationError, WebstartError
from webstart.core.types import Author, ProjectSetup, Template
from webstart.identity import derive_project_id
from webstart.materializer import TemplateMaterializer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 9


def select_template(templates: Sequence[Template], answer: str) -> Template:
    """Return the template at the zero-based index typed by the operator."""
    try:
        index = int(answer.strip())
    except ValueError:
        index = -1
    if not 0 <= index < len(templates):
        raise ValidationError("Invalid input - Expected valid template index")
    return templates[index]


class Wizard:
    """
    Drive a single project creation from the template catalog to the finished directory.

    Every collaborator is injected so the flow can run without a terminal, a network
    or git. :meth:`run` returns the process exit code instead of exiting.
    """

    def __init__(
        self,
        prompter: Prompter,
        *,
        settings: Settings,
        console: Console | None = None,
        fetch: Callable[[Settings], list[Template]] | None = None,
        resolve: Callable[[], Author] | None = None,
        materializer: TemplateMaterializer | None = None,
    ) -> None:
        self.prompter = prompter
        self.settings = settings
        self.console = console or Console()
        self.fetch = fetch or fetch_templates
        self.resolve = resolve or resolve_author
        self.materializer = materializer or TemplateMaterializer()

    def run(self) -> int:
        self.console.print("Fetching available project templates...")
        try:
            templates = self.fetch(self.settings)
        except NetworkError as e:
            print_error(self.console, str(e))
            return EXIT_FAILURE
        if not templates:
            self.console.print("No project templates available")
            return EXIT_OK

        try:
            setup = self.collect(templates)
        except ValidationError as e:
            print_error(self.console, str(e))
            return EXIT_FAILURE
        except (EOFError, KeyboardInterrupt):
            # input closed before the project was confirmed
            self.console.print()
            self.console.print("Aborted, no project created")
            return EXIT_OK

        return self.create(setup)

    def collect(self, templates: Sequence[Template]) -> ProjectSetup:
        """Ask for the template and project name, then confirm the resulting setup."""
        print_templates(self.console, templates)
        template = select_template(
            templates,
            self.prompter.choose("Select project template", [t.name for t in templates]),
        )
        raw_name = self.prompter.ask("Enter project name: ")
        # reject an empty name before touching git
        derive_project_id(raw_name)
        author = self.resolve()
        setup = ProjectSetup.create(template, raw_name, author)

        self.prompter.confirm(summary(setup, self.settings.base_dir / setup.project_id))
        return setup

    def create(self, setup: ProjectSetup) -> int:
        target_dir = self.settings.base_dir / setup.project_id
        try:
            report = self.materializer.materialize(
                target_dir,
                setup.template.clone_url,
                setup,
                on_phase=lambda phase: print_phase(self.console, phase),
            )
        except WebstartError as e:
            logger.debug("Project creation failed", exc_info=True)
            print_error(self.console, str(e))
            return EXIT_FAILURE
        except Exception as e:
            logger.debug("Unexpected error while creating %s", target_dir, exc_info=True)
            print_error(self.console, str(e) or type(e).__name__)
            return EXIT_FAILURE

        if report.failures:
            logger.info("%d file operation(s) failed in %s", len(report.failures), target_dir)
        self.console.print()
        self.console.print(
            "[bold cyan]●[/]  Your project has been created. "
            "Please consult the README file how to proceed from here."
        )
        return EXIT_OK
