"""Interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import Protocol

from rich.console import Console
from simple_term_menu import TerminalMenu


def _interactive() -> bool:
    return sys.stdout.isatty()


class Prompter(Protocol):
    """Console capability the wizard asks its questions through."""

    def ask(self, question: str) -> str: ...

    def choose(self, question: str, labels: list[str]) -> str:
        """Return the raw answer for a zero-based index into ``labels``."""
        ...

    def confirm(self, text: str) -> None: ...


class ConsolePrompter:
    """Prompter reading from the terminal.

    With ``menu`` enabled and an interactive stdout, :meth:`choose` shows an
    arrow-key menu instead of asking for the index.
    """

    def __init__(self, console: Console | None = None, *, menu: bool = True) -> None:
        self.console = console or Console()
        self.menu = menu

    def ask(self, question: str) -> str:
        return self.console.input(f"[bold cyan]◆[/]  {question}")

    def choose(self, question: str, labels: list[str]) -> str:
        if not (self.menu and _interactive()):
            return self.ask(f"{question} (type index number): ")

        self.console.print(f"[bold cyan]◆[/]  {question}")
        menu = TerminalMenu(
            [f"{i}  {label}" for i, label in enumerate(labels)],
            menu_cursor="│  ● ",
            menu_cursor_style=("fg_cyan", "bold"),
            menu_highlight_style=("fg_cyan",),
        )
        raw_index = menu.show()
        if raw_index is None:
            return ""
        index = int(raw_index)
        self.console.print(f"[dim]│[/]  [bold green]●[/] {labels[index]}")
        return str(index)

    def confirm(self, text: str) -> None:
        self.console.print(text)
        self.console.input("[dim]│[/]  Continue and create project (Enter)? ")
