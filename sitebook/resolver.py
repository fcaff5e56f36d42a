"""Locate rendered documentation pages on disk and derive their titles.

The resolver maps a logical page identifier (a sidebar slug such as
``guides/intro`` or a sitemap URL path such as ``/docs/guides/intro``) to the
HTML file Docusaurus generated for it. Lookup tries ``<root>/<slug>.html``
first and falls back to the directory index ``<root>/<slug>/index.html``. When
neither exists the resolver returns ``None`` so callers can skip the page and
keep going; a missing page never aborts a build.

Example
-------
>>> from pathlib import Path
>>> from sitebook.resolver import PageResolver
>>> resolver = PageResolver(Path("build/docs"))  # doctest: +SKIP
>>> page = resolver.resolve("intro")  # doctest: +SKIP
>>> page.title  # doctest: +SKIP
'Introduction'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
from pathlib import Path

from bs4 import BeautifulSoup, UnicodeDammit

from ._constants import INDEX_STEM, PAGE_EXTENSION, TITLE_DELIMITER, TITLE_META_NAME
from .errors import DocsRootNotFound

logger = logging.getLogger(__name__)

DOCS_ROOT_SEARCH_DEPTH = 2


@dc.dataclass(frozen=True, slots=True)
class PageRef:
    """A resolved documentation page.

    Attributes
    ----------
    slug : str
        Normalized logical identifier used for the lookup.
    path : Path or None
        Location of the rendered HTML file.
    title : str
        Human-readable title taken from page metadata or the slug.
    """

    slug: str
    path: Path | None
    title: str


class PageResolver:
    """Resolve slugs to rendered HTML files below a root directory."""

    def __init__(self, root: Path, *, extension: str = PAGE_EXTENSION) -> None:
        self.root = root
        self.extension = extension.lstrip(".")

    def resolve(self, slug: str) -> PageRef | None:
        """Return the page for ``slug`` or ``None`` when no file exists.

        Parameters
        ----------
        slug : str
            Logical page identifier. Leading slashes and a trailing file
            extension are ignored.

        Returns
        -------
        PageRef or None
            The resolved page with its extracted title, or ``None`` when both
            the direct file and the directory index are absent.
        """
        normalized = self.normalize_slug(slug)
        path = self.locate(normalized)
        if path is None:
            logger.warning("skipping missing page '%s' (looked in %s)", slug, self.root)
            return None
        title = extract_title(path, fallback=normalized)
        return PageRef(slug=normalized, path=path, title=title)

    def locate(self, slug: str) -> Path | None:
        """Return the first existing candidate file for a normalized slug."""
        if not slug:
            candidates = [self.root / f"{INDEX_STEM}.{self.extension}"]
        else:
            candidates = [
                self.root / f"{slug}.{self.extension}",
                self.root / slug / f"{INDEX_STEM}.{self.extension}",
            ]
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return None

    def normalize_slug(self, slug: str) -> str:
        """Strip surrounding slashes, whitespace, and the page extension."""
        normalized = slug.strip().strip("/")
        suffix = f".{self.extension}"
        if normalized.endswith(suffix):
            normalized = normalized[: -len(suffix)]
        return normalized


def read_page_markup(path: Path) -> str:
    """Return the decoded HTML of ``path``, trying UTF-8 before detection.

    Pages in legacy encodings are decoded by charset detection.
    """
    dammit = UnicodeDammit(path.read_bytes(), ["utf-8"])
    return dammit.unicode_markup or ""


def extract_title(path: Path, *, fallback: str) -> str:
    """Return the display title for a rendered page.

    The ``<meta name="title">`` content wins; otherwise the ``<title>`` text up
    to the first ``|`` is used; otherwise ``fallback``.
    """
    soup = BeautifulSoup(read_page_markup(path), "html.parser")
    meta = soup.find("meta", attrs={"name": TITLE_META_NAME})
    if meta is not None:
        content = str(meta.get("content") or "").strip()
        if content:
            return content
    if soup.title and soup.title.string:
        head = soup.title.string.split(TITLE_DELIMITER, 1)[0].strip()
        if head:
            return head
    return fallback


def locate_docs_root(input_dir: Path) -> Path:
    """Return the Docusaurus ``docs`` directory inside a build output tree.

    Parameters
    ----------
    input_dir : Path
        Root of the generated static site.

    Returns
    -------
    Path
        ``input_dir`` itself when it is named ``docs``, otherwise the first
        directory at most two levels below it named ``docs`` (versioned
        builds use ``version-<n>/docs``). Directories are walked in sorted
        order.

    Raises
    ------
    DocsRootNotFound
        If no docs directory exists within the search depth.
    """
    if input_dir.name == "docs" and input_dir.is_dir():
        return input_dir
    for dirpath, dirnames, _filenames in os.walk(input_dir):
        dirnames.sort()
        current = Path(dirpath)
        depth = len(current.relative_to(input_dir).parts)
        if depth >= DOCS_ROOT_SEARCH_DEPTH:
            dirnames.clear()
        for name in dirnames:
            if name == "docs":
                return current / name
    msg = f"Docs directory not found below '{input_dir}'."
    raise DocsRootNotFound(msg)


__all__ = [
    "PageRef",
    "PageResolver",
    "extract_title",
    "locate_docs_root",
    "read_page_markup",
]
