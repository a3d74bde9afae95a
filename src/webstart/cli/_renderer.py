"""Rich rendering of the catalog, the confirmation summary and progress output."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from webstart.core.types import ProjectSetup, Template

PHASE_MESSAGES: dict[str, str] = {
    "download": "Downloading template...",
    "filter": "Filtering...",
    "cleanup": "Cleanup...",
}


def print_templates(console: Console, templates: Sequence[Template]) -> None:
    console.print()
    console.print("[bold cyan]◆[/]  Available project templates")
    console.print("[dim]│[/]")
    for i, t in enumerate(templates):
        console.print(f"[dim]│[/]  [bold bright_blue]\\[{i}] {escape(t.name)}[/]")
        if t.description:
            console.print(f"[dim]│[/]      [dim]{escape(t.description)}[/]")
        console.print("[dim]│[/]")
    console.print()


def summary(setup: ProjectSetup, location: Path) -> str:
    """Confirmation text listing every value the project will be created with."""
    rows = [
        ("Project ID", setup.project_id),
        ("Project Name", setup.project_name),
        ("Project Type", setup.template.name),
        ("User Name", setup.author_name),
        ("User Email", setup.author_email),
        ("Location", str(location)),
    ]
    lines = ["[bold cyan]◆[/]  Confirm new project", "[dim]│[/]"]
    for label, value in rows:
        lines.append(f"[dim]│[/]  {label + ':':<14}[bright_blue]{escape(value)}[/]")
    lines.append("[dim]│[/]")
    return "\n".join(lines)


def print_phase(console: Console, phase: str) -> None:
    console.print(f"[bold green]◇[/]  {PHASE_MESSAGES.get(phase, phase)}")


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error:[/] {escape(message)}")
