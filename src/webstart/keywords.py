"""Placeholder tokens recognized in template files and how they resolve."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import date
from types import MappingProxyType

from webstart.core.types import ProjectSetup

__all__ = ["KEYWORDS", "Resolver", "format_setup_date", "substitute"]

Resolver = Callable[[ProjectSetup, date], str]


def format_setup_date(day: date) -> str:
    """US calendar date without zero padding, tagged with its locale, e.g. ``1/5/2024 (en-US)``."""
    return f"{day.month}/{day.day}/{day.year} (en-US)"


KEYWORDS: Mapping[str, Resolver] = MappingProxyType(
    {
        "webstart-project-id": lambda setup, _: setup.project_id,
        "webstart-project-name": lambda setup, _: setup.project_name,
        "webstart-project-author": lambda setup, _: setup.author.signature,
        "webstart-project-setupdate": lambda _, day: format_setup_date(day),
        "webstart-template-url": lambda setup, _: setup.template.repository_url,
        "@webstart": lambda setup, _: f"@{setup.project_id}",
    }
)


def substitute(text: str, keywords: Iterable[str], setup: ProjectSetup, today: date) -> str:
    """Replace every occurrence of each known keyword, in order. Unknown keywords are skipped."""
    for keyword in keywords:
        resolve = KEYWORDS.get(keyword)
        if resolve is None:
            continue
        text = text.replace(keyword, resolve(setup, today))
    return text
