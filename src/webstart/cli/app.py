"""Typer CLI application for webstart."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from typer import Exit, Option, Typer

import webstart
from webstart.catalog import fetch_templates
from webstart.cli._prompts import ConsolePrompter
from webstart.cli._renderer import print_error, print_templates
from webstart.cli._wizard import EXIT_FAILURE, EXIT_OK, Wizard
from webstart.core.config import Settings
from webstart.core.errors import NetworkError

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("webstart")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"webstart v{webstart.__version__}")
        raise Exit()


def _list_templates_callback(value: bool) -> None:
    if not value:
        return
    try:
        templates = fetch_templates(Settings.from_env())
    except NetworkError as e:
        print_error(_console, str(e))
        raise Exit(code=EXIT_FAILURE) from None
    if not templates:
        _console.print("No project templates available")
    else:
        print_templates(_console, templates)
    raise Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the installed version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """webstart — create a new project from a remote template repository."""


@app.command()
def create(
    directory: Annotated[
        Path | None,
        Option("--directory", "-d", help="Directory to create the project in.", show_default=False),
    ] = None,
    owner: Annotated[
        str | None, Option("--owner", help="GitHub user owning the templates.", show_default=False)
    ] = None,
    topic: Annotated[
        str | None,
        Option("--topic", help="Topic the templates are tagged with.", show_default=False),
    ] = None,
    menu: Annotated[
        bool, Option("--menu/--no-menu", help="Pick the template from an arrow-key menu.")
    ] = True,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logging.")] = False,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new project from a template."""
    _configure_logging(verbose)
    try:
        settings = Settings.from_env(owner=owner, topic=topic, base_dir=directory)
    except ValueError as e:
        print_error(_console, str(e))
        raise Exit(code=EXIT_FAILURE) from None

    _console.print()
    _console.print(f"[bold cyan]●[/]  webstart v{webstart.__version__}")
    _console.print("[dim]│[/]")

    wizard = Wizard(ConsolePrompter(_console, menu=menu), settings=settings, console=_console)
    code = wizard.run()
    if code != EXIT_OK:
        raise Exit(code=code)
