"""Case extraction: turns a case page into a :class:`Case`."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import CData, PageElement, PreformattedString, Tag

from codeless.scraper.models import Case, RawPage

logger = logging.getLogger(__name__)

KOAN_CLASS = "koan"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _node_text(node: PageElement) -> str:
    """Return the descendant text of *node* with outer whitespace trimmed.

    Comments, doctypes and processing instructions carry no text content.
    """
    if isinstance(node, Tag):
        return node.get_text().strip()
    if isinstance(node, PreformattedString) and not isinstance(node, CData):
        return ""
    return str(node).strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* permissively; malformed or partial markup never raises."""
    return BeautifulSoup(html, "html.parser")


def extract_title(document: BeautifulSoup) -> Optional[str]:
    """Return the trimmed first child of the last ``<title>``, or ``None``.

    Documents with duplicate titles resolve to the last one.  Inner
    whitespace (including newlines) is kept verbatim.
    """
    titles = document.find_all("title")
    if not titles:
        return None

    children = titles[-1].contents
    if not children:
        return None
    return _node_text(children[0])


def extract_koan_text(document: BeautifulSoup) -> Optional[str]:
    """Concatenate the trimmed text of every ``.koan`` element in document order.

    Each element is trimmed before joining, with no separator between them.
    Returns ``None`` when the concatenation is empty.
    """
    text = "".join(_node_text(node) for node in document.find_all(class_=KOAN_CLASS))
    return text or None


def extract_case(document: BeautifulSoup) -> Optional[Case]:
    """Build a :class:`Case` from *document*, or ``None`` if it has no title."""
    title = extract_title(document)
    if title is None:
        return None
    return Case(title=title, text=extract_koan_text(document))


def extract_case_from_page(raw: RawPage) -> Optional[Case]:
    """Parse *raw* and extract its case."""
    case = extract_case(parse_document(raw.html))
    if case is None:
        logger.info("No title found in %s", raw.url)
    elif case.text is None:
        logger.info("Case %r at %s has no koan text", case.title, raw.url)
    return case
