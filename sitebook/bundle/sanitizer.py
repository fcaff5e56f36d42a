"""Strip Docusaurus page chrome so only the article content reaches the bundle."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

CHROME_SELECTORS = (
    "header",
    "nav",
    "aside",
    "footer",
    ".theme-doc-toc-desktop",
    ".theme-doc-footer",
    "a[href='#__docusaurus_skipToContent_fallback']",
    ".theme-edit-this-page",
    ".pagination-nav",
)
ARTICLE_SELECTOR = ".theme-doc-markdown.markdown"
ABSOLUTE_ASSET_PATTERN = re.compile(r'((?:src|href)=")/assets/')


def sanitize_page(html: str) -> str:
    """Return the main content of a rendered page as an HTML fragment.

    Absolute ``/assets/`` references become relative, navigation chrome is
    removed, and the Docusaurus markdown container is retagged as
    ``<article>``. The first of ``article``, ``main`` or ``body`` is returned.
    """
    relative = ABSOLUTE_ASSET_PATTERN.sub(r"\1assets/", html)
    soup = BeautifulSoup(relative, "html.parser")
    for selector in CHROME_SELECTORS:
        for element in soup.select(selector):
            element.decompose()
    for container in soup.select(ARTICLE_SELECTOR):
        container.name = "article"
    content = _main_content(soup)
    if content is None:
        return str(soup).strip()
    return content.decode_contents().strip()


def _main_content(soup: BeautifulSoup) -> Tag | None:
    for name in ("article", "main", "body"):
        found = soup.find(name)
        if isinstance(found, Tag):
            return found
    return None


__all__ = ["sanitize_page"]
