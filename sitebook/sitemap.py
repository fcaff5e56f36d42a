"""Convert a Docusaurus ``sitemap.xml`` into a depth-tagged page list.

Only ``<loc>`` values containing the docs marker (``/docs/``) are kept. The
part after the marker is the page's relative path; its segment count becomes
``depth`` and, without the ``.html`` suffix, its ``title``. Entries are sorted
by depth and then by URL, which is the order
:class:`~sitebook.outline.assembler.FlatOutlineBuilder` expects.

Example
-------
>>> from sitebook.sitemap import parse_sitemap
>>> xml = (
...     "<urlset><url><loc>https://x.dev/docs/a/b</loc></url>"
...     "<url><loc>https://x.dev/docs/a</loc></url></urlset>"
... )
>>> [(entry.title, entry.depth) for entry in parse_sitemap(xml)]
[('a', 1), ('a/b', 2)]
"""

from __future__ import annotations

import typing as typ

import msgspec
from bs4 import BeautifulSoup

from ._constants import DOCS_PATH_MARKER, PAGE_EXTENSION
from .errors import InputParseError
from .hierarchy.models import FlatPageEntry

if typ.TYPE_CHECKING:
    from pathlib import Path


def parse_sitemap(
    xml_text: str, *, marker: str = DOCS_PATH_MARKER
) -> list[FlatPageEntry]:
    """Return sorted :class:`FlatPageEntry` objects for docs URLs in ``xml_text``.

    Raises
    ------
    InputParseError
        If the document has no ``<urlset>`` element.
    """
    soup = BeautifulSoup(xml_text, "html.parser")
    urlset = soup.find("urlset")
    if urlset is None:
        msg = "Sitemap has no <urlset> element."
        raise InputParseError(msg)
    entries: list[FlatPageEntry] = []
    for url in urlset.find_all("url"):
        loc = url.find("loc")
        if loc is None:
            continue
        location = loc.get_text(strip=True)
        if marker not in location:
            continue
        lastmod = url.find("lastmod")
        entries.append(
            _entry_for(
                location,
                marker,
                lastmod.get_text(strip=True) if lastmod is not None else None,
            )
        )
    entries.sort(key=lambda entry: (entry.depth, entry.url))
    return entries


def _entry_for(location: str, marker: str, last_modified: str | None) -> FlatPageEntry:
    relative = location.split(marker, 1)[1]
    segments = relative.rstrip("/").split("/")
    return FlatPageEntry(
        url=location,
        title=relative.replace(f".{PAGE_EXTENSION}", ""),
        depth=len(segments),
        last_modified=last_modified or None,
    )


def load_sitemap(path: Path, *, marker: str = DOCS_PATH_MARKER) -> list[FlatPageEntry]:
    """Read ``path`` and parse it with :func:`parse_sitemap`."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read sitemap '{path}': {exc}"
        raise InputParseError(msg) from exc
    return parse_sitemap(text, marker=marker)


def write_flat_entries(entries: list[FlatPageEntry], path: Path) -> Path:
    """Write ``entries`` as a pretty-printed JSON page list and return ``path``."""
    payload = [
        {
            "url": entry.url,
            "title": entry.title,
            "depth": entry.depth,
            "lastModified": entry.last_modified,
        }
        for entry in entries
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(msgspec.json.format(msgspec.json.encode(payload), indent=2))
    return path


__all__ = ["load_sitemap", "parse_sitemap", "write_flat_entries"]
