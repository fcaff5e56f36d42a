"""Decode Docusaurus sidebar definitions and normalize them into a page tree.

A sidebar file is a JSON object whose root key (``docsSidebar`` by default)
holds a list of items. Each item is one of three shapes:

* a bare string, naming a document by slug;
* ``{"type": "doc", "id": ...}``, naming a document explicitly;
* ``{"type": "category", "label": ..., "items": [...], "link": {"id": ...}}``.

Decoding turns these into :class:`SidebarDoc`, :class:`SidebarCategory` and,
for anything else, :class:`SidebarIgnored`. :func:`normalize_sidebar` then
resolves every document through a :class:`~sitebook.resolver.PageResolver`
and returns :class:`Group` / :class:`Leaf` nodes. Pages that cannot be found
are dropped, and categories left without children disappear with them.

Example
-------
>>> from sitebook.hierarchy.sidebar import decode_sidebar_items
>>> decode_sidebar_items(["intro", {"type": "doc", "id": "setup"}])
[SidebarDoc(doc_id='intro', label=None), SidebarDoc(doc_id='setup', label=None)]
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ

import msgspec

from sitebook._constants import DEFAULT_SIDEBAR_KEY
from sitebook.errors import InputParseError

from .models import (
    Group,
    HierarchyNode,
    Leaf,
    SidebarCategory,
    SidebarDoc,
    SidebarIgnored,
    SidebarItem,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from sitebook.resolver import PageResolver

logger = logging.getLogger(__name__)


def load_sidebar(path: Path, *, key: str = DEFAULT_SIDEBAR_KEY) -> list[SidebarItem]:
    """Read a sidebar JSON file and decode the items stored under ``key``.

    Parameters
    ----------
    path : Path
        Sidebar configuration file.
    key : str, optional
        Root key holding the item list. Defaults to ``"docsSidebar"``.

    Returns
    -------
    list[SidebarItem]
        Decoded items in file order.

    Raises
    ------
    InputParseError
        If the file is unreadable, is not valid JSON, is not an object, or
        lacks a list under ``key``.
    """
    try:
        payload = msgspec.json.decode(path.read_bytes())
    except (OSError, msgspec.DecodeError) as exc:
        msg = f"Cannot read sidebar file '{path}': {exc}"
        raise InputParseError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Sidebar file '{path}' must contain a JSON object."
        raise InputParseError(msg)
    items = payload.get(key)
    if not isinstance(items, list):
        msg = f"Sidebar file '{path}' has no list under '{key}'."
        raise InputParseError(msg)
    return decode_sidebar_items(items)


def decode_sidebar_items(raw_items: object) -> list[SidebarItem]:
    """Decode raw JSON sidebar items into tagged sidebar entries."""
    if not isinstance(raw_items, list):
        return []
    return [decode_sidebar_item(raw) for raw in raw_items]


def decode_sidebar_item(raw: object) -> SidebarItem:
    """Decode a single raw sidebar item; unknown shapes become ``SidebarIgnored``."""
    match raw:
        case str():
            return SidebarDoc(doc_id=raw)
        case {"type": "doc", "id": str() as doc_id}:
            label = raw.get("label")
            return SidebarDoc(
                doc_id=doc_id, label=label if isinstance(label, str) else None
            )
        case {"type": "category"}:
            return SidebarCategory(
                label=str(raw.get("label") or ""),
                items=tuple(decode_sidebar_items(raw.get("items"))),
                link_id=_link_id(raw.get("link")),
            )
        case _:
            return SidebarIgnored(raw=raw)


def _link_id(link: object) -> str | None:
    if isinstance(link, cabc.Mapping):
        target = link.get("id")
        if target is not None:
            return str(target)
    return None


def normalize_sidebar(
    items: cabc.Iterable[SidebarItem], resolver: PageResolver
) -> list[HierarchyNode]:
    """Resolve sidebar items into hierarchy nodes, preserving authoring order.

    Parameters
    ----------
    items : Iterable[SidebarItem]
        Decoded sidebar entries.
    resolver : PageResolver
        Resolver used to bind each document to its rendered page.

    Returns
    -------
    list[HierarchyNode]
        Groups and leaves for every entry that resolved. Categories whose
        children all failed to resolve are omitted.
    """
    nodes: list[HierarchyNode] = []
    for item in items:
        node = _normalize_item(item, resolver)
        if node is not None:
            nodes.append(node)
    return nodes


def _normalize_item(item: SidebarItem, resolver: PageResolver) -> HierarchyNode | None:
    match item:
        case SidebarDoc(doc_id=doc_id, label=label):
            page = resolver.resolve(doc_id)
            if page is None:
                return None
            return Leaf(label=label or page.title, page=page)
        case SidebarCategory(label=label, items=children, link_id=link_id):
            resolved = normalize_sidebar(children, resolver)
            if not resolved:
                logger.info("dropping empty category '%s'", label)
                return None
            page = resolver.resolve(link_id) if link_id else None
            return Group(
                label=label or link_id or "", children=tuple(resolved), page=page
            )
        case SidebarIgnored(raw=raw):
            logger.debug("ignoring unrecognized sidebar entry: %r", raw)
            return None
    return None


__all__ = [
    "decode_sidebar_item",
    "decode_sidebar_items",
    "load_sidebar",
    "normalize_sidebar",
]
