"""Dataclasses describing documentation hierarchies before outline assembly."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from sitebook.resolver import PageRef


@dc.dataclass(frozen=True, slots=True)
class SidebarDoc:
    """A sidebar entry pointing at one document by id."""

    doc_id: str
    label: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SidebarCategory:
    """A labelled sidebar category with nested items and an optional link id."""

    label: str
    items: tuple[SidebarItem, ...] = ()
    link_id: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SidebarIgnored:
    """A sidebar entry whose shape is not understood; it is skipped."""

    raw: object


SidebarItem: typ.TypeAlias = SidebarDoc | SidebarCategory | SidebarIgnored


@dc.dataclass(frozen=True, slots=True)
class Leaf:
    """A hierarchy node bound to exactly one resolved page."""

    label: str
    page: PageRef


@dc.dataclass(frozen=True, slots=True)
class Group:
    """A hierarchy node with ordered children.

    Attributes
    ----------
    label : str
        Display label of the category.
    children : tuple[HierarchyNode, ...]
        Child nodes in authoring order; never empty.
    page : PageRef or None
        Page resolved from the category link, when the category has one.
    """

    label: str
    children: tuple[HierarchyNode, ...]
    page: PageRef | None = None


HierarchyNode: typ.TypeAlias = Group | Leaf


@dc.dataclass(frozen=True, slots=True)
class FlatPageEntry:
    """One page from a depth-tagged page list.

    Attributes
    ----------
    url : str
        Absolute URL or URL path of the page.
    title : str
        Display title; may be empty.
    depth : int
        Number of path segments below the docs root (at least 1).
    last_modified : str or None
        Opaque modification stamp passed through unchanged.
    """

    url: str
    title: str
    depth: int
    last_modified: str | None = None


__all__ = [
    "FlatPageEntry",
    "Group",
    "HierarchyNode",
    "Leaf",
    "SidebarCategory",
    "SidebarDoc",
    "SidebarIgnored",
    "SidebarItem",
]
