"""Outline and assembled-document dataclasses."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    from sitebook.resolver import PageRef


class Emphasis(enum.StrEnum):
    """Presentation hint attached to an outline node."""

    NORMAL = "normal"
    STRONG = "strong"
    EMPHASIZED = "emphasized"


@dc.dataclass(slots=True)
class OutlineNode:
    """A bookmark in the document outline.

    Attributes
    ----------
    title : str
        Text shown in the outline.
    target : int or None
        Index of the page this node jumps to; ``None`` for pure groups.
    children : list[OutlineNode]
        Nested nodes in insertion order.
    emphasis : Emphasis
        Presentation hint set by the styling pass.
    """

    title: str
    target: int | None = None
    children: list[OutlineNode] = dc.field(default_factory=list)
    emphasis: Emphasis = Emphasis.NORMAL

    def add_child(self, child: OutlineNode) -> OutlineNode:
        """Append ``child`` as the last child and return it."""
        self.children.append(child)
        return child


@dc.dataclass(frozen=True, slots=True)
class AssembledPage:
    """A page placed at a fixed position in the assembled document."""

    index: int
    page: PageRef


@dc.dataclass(slots=True)
class AssembledDocument:
    """Ordered pages plus the root of their outline.

    Pages are only ever appended, so the index stored on an outline node stays
    valid for the lifetime of the document.
    """

    pages: list[AssembledPage] = dc.field(default_factory=list)
    outline: OutlineNode = dc.field(default_factory=lambda: OutlineNode(title=""))

    def append_page(self, page: PageRef) -> int:
        """Append ``page`` and return its index."""
        index = len(self.pages)
        self.pages.append(AssembledPage(index=index, page=page))
        return index

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return len(self.pages)


__all__ = ["AssembledDocument", "AssembledPage", "Emphasis", "OutlineNode"]
