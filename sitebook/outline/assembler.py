"""Assemble ordered pages and a nested outline from a documentation hierarchy.

Two entry points exist, one per input shape:

* :class:`OutlineAssembler` walks a normalized sidebar tree depth-first,
  appending a page for every leaf (and for categories that carry a link page)
  and mirroring the tree in the outline.
* :class:`FlatOutlineBuilder` consumes a depth-tagged page list. With the
  default :attr:`ParentStrategy.LEVEL` each entry is attached under the node
  most recently created at ``depth - 1``, falling back to the root when that
  level has no node. :attr:`ParentStrategy.PATH` attaches under the deepest
  earlier node whose URL path is a prefix of the entry's path instead, which
  stays correct when the list is not sorted by depth then path.

Both produce an :class:`~sitebook.outline.models.AssembledDocument`. Page order
is the order in which pages were appended and is never changed afterwards.

Example
-------
>>> from pathlib import Path
>>> from sitebook.hierarchy import FlatPageEntry
>>> from sitebook.outline.assembler import FlatOutlineBuilder
>>> from sitebook.resolver import PageResolver
>>> builder = FlatOutlineBuilder(PageResolver(Path("build")))  # doctest: +SKIP
>>> document = builder.build([FlatPageEntry("/docs/a", "A", 1)])  # doctest: +SKIP
>>> [node.title for node in document.outline.children]  # doctest: +SKIP
['A']
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import logging
import typing as typ
from urllib.parse import urlsplit

from sitebook.hierarchy.models import FlatPageEntry, Group, HierarchyNode, Leaf

from .models import AssembledDocument, OutlineNode

if typ.TYPE_CHECKING:
    from sitebook.resolver import PageRef, PageResolver

logger = logging.getLogger(__name__)


class ParentStrategy(enum.StrEnum):
    """How flat entries find their parent outline node."""

    LEVEL = "level"
    PATH = "path"


class OutlineAssembler:
    """Turn a normalized hierarchy tree into pages and a mirrored outline."""

    def __init__(self, *, include_outline: bool = True) -> None:
        self.include_outline = include_outline

    def assemble(self, nodes: cabc.Iterable[HierarchyNode]) -> AssembledDocument:
        """Walk ``nodes`` in pre-order and return the assembled document.

        Parameters
        ----------
        nodes : Iterable[HierarchyNode]
            Top-level groups and leaves from the hierarchy normalizer.

        Returns
        -------
        AssembledDocument
            Pages in walk order and an outline whose root children correspond
            to ``nodes``. When ``include_outline`` is false the outline root
            stays empty but every page is still appended.
        """
        document = AssembledDocument()
        for node in nodes:
            self._visit(node, document, document.outline)
        return document

    def _visit(
        self, node: HierarchyNode, document: AssembledDocument, parent: OutlineNode
    ) -> None:
        match node:
            case Leaf(label=label, page=page):
                index = document.append_page(page)
                self._attach(parent, OutlineNode(title=label, target=index))
            case Group(label=label, children=children, page=page):
                target = document.append_page(page) if page is not None else None
                group_node = self._attach(
                    parent, OutlineNode(title=label, target=target)
                )
                for child in children:
                    self._visit(child, document, group_node)

    def _attach(self, parent: OutlineNode, node: OutlineNode) -> OutlineNode:
        if self.include_outline:
            parent.add_child(node)
        return node


class FlatOutlineBuilder:
    """Build pages and an outline from a depth-tagged page list.

    The builder keeps its parent bookkeeping in locals of :meth:`build`, so one
    instance can be reused for several lists.
    """

    def __init__(
        self,
        resolver: PageResolver,
        *,
        strategy: ParentStrategy = ParentStrategy.LEVEL,
        include_outline: bool = True,
    ) -> None:
        self.resolver = resolver
        self.strategy = ParentStrategy(strategy)
        self.include_outline = include_outline

    def build(self, entries: cabc.Iterable[FlatPageEntry]) -> AssembledDocument:
        """Resolve each entry in order and attach it to the outline.

        Entries whose page cannot be resolved are skipped entirely: they add
        no page, no outline node, and leave the parent bookkeeping untouched.
        """
        document = AssembledDocument()
        root = document.outline
        last_at_level: dict[int, OutlineNode] = {0: root}
        by_path: dict[tuple[str, ...], OutlineNode] = {}
        for entry in entries:
            page = self.resolver.resolve(urlsplit(entry.url).path)
            if page is None:
                continue
            index = document.append_page(page)
            if not self.include_outline:
                continue
            node = OutlineNode(title=self._title(entry, page), target=index)
            if self.strategy is ParentStrategy.PATH:
                segments = _path_segments(page.slug)
                parent = _deepest_ancestor(segments, by_path) or root
                by_path[segments] = node
            else:
                parent = last_at_level.get(max(0, entry.depth - 1)) or root
                last_at_level[entry.depth] = node
            parent.add_child(node)
        return document

    @staticmethod
    def _title(entry: FlatPageEntry, page: PageRef) -> str:
        return entry.title.strip() or page.title


def _path_segments(slug: str) -> tuple[str, ...]:
    return tuple(segment for segment in slug.split("/") if segment)


def _deepest_ancestor(
    segments: tuple[str, ...], by_path: dict[tuple[str, ...], OutlineNode]
) -> OutlineNode | None:
    for end in range(len(segments) - 1, 0, -1):
        node = by_path.get(segments[:end])
        if node is not None:
            return node
    return None


__all__ = ["FlatOutlineBuilder", "OutlineAssembler", "ParentStrategy"]
