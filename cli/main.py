"""codeless-koan CLI: print a random case from The Codeless Code.

Usage:
    python cli/main.py [--url URL]
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from codeless.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from cli.rendering import render_case
from codeless.config import settings
from codeless.scraper import FetchError, extract_case_from_page, fetch_case_page

app = typer.Typer(
    name="codeless-koan",
    help="Print a random case from The Codeless Code.",
    add_completion=False,
)


@app.command()
def koan(
    url: Optional[str] = typer.Option(
        None, help="Case URL to fetch (defaults to the CASE_URL setting)."
    ),
) -> None:
    """Fetch one case and print its title and koan text to stdout."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        raw = fetch_case_page(url)
    except FetchError as exc:
        typer.echo(str(exc))
        raise typer.Exit(1)

    case = extract_case_from_page(raw)
    if case is None:
        return

    typer.echo(render_case(case))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
