"""Hierarchy models and the readers that build them from sidebar or page lists."""

from .flat import decode_flat_entries, load_flat_entries
from .models import (
    FlatPageEntry,
    Group,
    HierarchyNode,
    Leaf,
    SidebarCategory,
    SidebarDoc,
    SidebarIgnored,
    SidebarItem,
)
from .sidebar import decode_sidebar_items, load_sidebar, normalize_sidebar

__all__ = [
    "FlatPageEntry",
    "Group",
    "HierarchyNode",
    "Leaf",
    "SidebarCategory",
    "SidebarDoc",
    "SidebarIgnored",
    "SidebarItem",
    "decode_flat_entries",
    "decode_sidebar_items",
    "load_flat_entries",
    "load_sidebar",
    "normalize_sidebar",
]
