"""Utilities for rendering a case in the CLI."""

from __future__ import annotations

from codeless.scraper.models import Case


def render_case(case: Case) -> str:
    """Render *case* as its title, a blank line, then the koan text.

    A case without koan text renders with an empty body.
    """
    return f"{case.title}\n\n{case.text or ''}"
