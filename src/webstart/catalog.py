"""Template catalog backed by the GitHub repository search API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from webstart.core.config import Settings
from webstart.core.errors import NetworkError
from webstart.core.types import Template

__all__ = ["fetch_templates", "parse_templates"]

logger = logging.getLogger(__name__)


def _headers(settings: Settings) -> dict[str, str]:
    headers = {"Accept": "application/vnd.github+json"}
    if settings.github_token:
        headers["Authorization"] = f"Bearer {settings.github_token}"
    return headers


def parse_templates(payload: Any) -> list[Template]:
    """Map a search response body to templates, keeping the remote order."""
    if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
        raise NetworkError("Unexpected template listing: missing 'items' array")

    templates: list[Template] = []
    for item in payload["items"]:
        try:
            templates.append(
                Template(
                    name=item["name"],
                    description=item.get("description") or "",
                    repository_url=item["html_url"],
                    clone_url=item["clone_url"],
                )
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise NetworkError(f"Unexpected template listing entry: {item!r}") from e
    return templates


def fetch_templates(
    settings: Settings | None = None,
    *,
    client: httpx.Client | None = None,
) -> list[Template]:
    """
    Fetch the available templates.

    Args:
        settings: Search scope and transport options. Defaults to ``Settings.from_env()``.
        client: Optional client to send the request with. When omitted a client is
            created for this call and closed afterwards.

    Returns:
        The templates in the order returned by the API, possibly empty.

    Raises:
        NetworkError: On transport failure, a non-success status or an unparsable body.
    """
    settings = settings or Settings.from_env()
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=settings.timeout, follow_redirects=True)

    logger.debug("Searching templates with query %r", settings.query)
    try:
        response = client.get(
            settings.search_url,
            params={"q": settings.query},
            headers=_headers(settings),
        )
    except httpx.HTTPError as e:
        raise NetworkError(f"Error fetching project templates: {e}") from e
    finally:
        if owns_client:
            client.close()

    if response.status_code != 200:
        raise NetworkError(
            f"GitHub API returned {response.status_code} for {settings.search_url}"
        )
    try:
        payload = response.json()
    except ValueError as e:
        raise NetworkError(f"Failed to parse template listing: {e}") from e

    templates = parse_templates(payload)
    logger.debug("Found %d template(s)", len(templates))
    return templates
