"""Depth-based emphasis for outline nodes."""

from __future__ import annotations

import dataclasses as dc

from .models import Emphasis, OutlineNode

STRONG_MAX_DEPTH = 1


def emphasis_for_depth(depth: int, max_depth: int) -> Emphasis:
    """Return the emphasis for a node at ``depth`` (0 = top-level entries)."""
    if depth > max_depth:
        return Emphasis.NORMAL
    if depth <= STRONG_MAX_DEPTH:
        return Emphasis.STRONG
    return Emphasis.EMPHASIZED


def style_outline(root: OutlineNode, max_depth: int) -> OutlineNode:
    """Return a copy of ``root`` with emphasis applied to every descendant.

    Top-level entries sit at depth 0. Depths 0 and 1 become strong, deeper
    entries up to ``max_depth`` become emphasized, and anything below
    ``max_depth`` keeps :attr:`Emphasis.NORMAL` while remaining in the tree.
    The root itself and the input tree are left unchanged.
    """
    return dc.replace(
        root, children=[_styled(child, 0, max_depth) for child in root.children]
    )


def _styled(node: OutlineNode, depth: int, max_depth: int) -> OutlineNode:
    return dc.replace(
        node,
        emphasis=emphasis_for_depth(depth, max_depth),
        children=[_styled(child, depth + 1, max_depth) for child in node.children],
    )


__all__ = ["emphasis_for_depth", "style_outline"]
