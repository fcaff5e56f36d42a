"""Unit tests for sidebar decoding, normalization, and tree assembly."""

from __future__ import annotations

import json
import typing as typ

import pytest

from sitebook.errors import InputParseError
from sitebook.hierarchy import (
    Group,
    Leaf,
    SidebarCategory,
    SidebarDoc,
    SidebarIgnored,
    decode_sidebar_items,
    load_sidebar,
    normalize_sidebar,
)
from sitebook.outline import OutlineAssembler, count_outline_nodes, flatten_outline
from sitebook.resolver import PageResolver

if typ.TYPE_CHECKING:
    from pathlib import Path

PageWriter = typ.Callable[..., "Path"]


def test_decodes_three_shapes_and_ignores_others() -> None:
    """Strings, docs, and categories decode; anything else is ignored."""
    raw = [
        "intro",
        {"type": "doc", "id": "setup", "label": "Set up"},
        {
            "type": "category",
            "label": "Guides",
            "link": {"type": "doc", "id": "guides/index"},
            "items": ["guides/one"],
        },
        {"type": "link", "href": "https://example.com"},
        {"type": "doc"},
        42,
    ]
    decoded = decode_sidebar_items(raw)
    assert decoded[:3] == [
        SidebarDoc(doc_id="intro"),
        SidebarDoc(doc_id="setup", label="Set up"),
        SidebarCategory(
            label="Guides",
            items=(SidebarDoc(doc_id="guides/one"),),
            link_id="guides/index",
        ),
    ]
    assert all(isinstance(item, SidebarIgnored) for item in decoded[3:]), (
        f"expected unknown shapes to be ignored, got {decoded[3:]!r}"
    )


def test_category_with_resolvable_children(
    docs_root: Path, write_page: PageWriter
) -> None:
    """A category of two resolvable slugs yields one group with two leaves."""
    write_page(docs_root, "intro", title="Intro | Docs")
    write_page(docs_root, "setup", title="Setup | Docs")
    items = decode_sidebar_items(
        [{"type": "category", "label": "Guides", "items": ["intro", "setup"]}]
    )
    tree = normalize_sidebar(items, PageResolver(docs_root))

    assert len(tree) == 1
    group = tree[0]
    assert isinstance(group, Group)
    assert group.label == "Guides"
    assert group.page is None
    assert [type(child) for child in group.children] == [Leaf, Leaf]
    assert [child.label for child in group.children] == ["Intro", "Setup"]


def test_category_without_resolvable_children_is_dropped(
    docs_root: Path, write_page: PageWriter
) -> None:
    """Empty categories vanish, including their link page."""
    write_page(docs_root, "overview")
    items = decode_sidebar_items(
        [
            {
                "type": "category",
                "label": "Ghost",
                "link": {"id": "overview"},
                "items": ["missing-a", {"type": "category", "items": ["missing-b"]}],
            },
            "overview",
        ]
    )
    tree = normalize_sidebar(items, PageResolver(docs_root))
    assert [type(node) for node in tree] == [Leaf], (
        f"expected only the standalone leaf to survive, got {tree!r}"
    )


def test_category_link_becomes_page_with_original_label(
    docs_root: Path, write_page: PageWriter
) -> None:
    """The link id resolves the group page while the label stays for display."""
    link_page = write_page(docs_root, "api/index-page", title="API Reference | Docs")
    write_page(docs_root, "api/client")
    items = decode_sidebar_items(
        [
            {
                "type": "category",
                "label": "API",
                "link": {"type": "doc", "id": "api/index-page"},
                "items": ["api/client"],
            }
        ]
    )
    (group,) = normalize_sidebar(items, PageResolver(docs_root))
    assert isinstance(group, Group)
    assert group.label == "API"
    assert group.page is not None
    assert group.page.path == link_page


def test_doc_label_overrides_page_title(
    docs_root: Path, write_page: PageWriter
) -> None:
    """An explicit doc label is shown instead of the page title."""
    write_page(docs_root, "faq", title="Frequently Asked | Docs")
    items = decode_sidebar_items([{"type": "doc", "id": "faq", "label": "FAQ"}])
    (leaf,) = normalize_sidebar(items, PageResolver(docs_root))
    assert isinstance(leaf, Leaf)
    assert leaf.label == "FAQ"


def test_assembler_orders_pages_and_targets(
    docs_root: Path, write_page: PageWriter
) -> None:
    """Pages follow the pre-order walk and outline targets point at them."""
    for slug in ("intro", "guides/landing", "guides/one", "guides/two", "outro"):
        write_page(docs_root, slug)
    items = decode_sidebar_items(
        [
            "intro",
            {
                "type": "category",
                "label": "Guides",
                "link": {"id": "guides/landing"},
                "items": [
                    "guides/one",
                    {"type": "category", "label": "Deeper", "items": ["guides/two"]},
                ],
            },
            "outro",
        ]
    )
    document = OutlineAssembler().assemble(
        normalize_sidebar(items, PageResolver(docs_root))
    )

    slugs = [assembled.page.slug for assembled in document.pages]
    assert slugs == ["intro", "guides/landing", "guides/one", "guides/two", "outro"]
    nodes = flatten_outline(document.outline)
    assert [node.title for node in nodes] == [
        "intro",
        "Guides",
        "guides/one",
        "Deeper",
        "guides/two",
        "outro",
    ]
    assert [node.target for node in nodes] == [0, 1, 2, None, 3, 4]
    assert count_outline_nodes(document.outline) == len(nodes)


def test_assembler_without_outline_keeps_pages(
    docs_root: Path, write_page: PageWriter
) -> None:
    """Disabling the outline still appends every page."""
    write_page(docs_root, "a")
    write_page(docs_root, "b")
    tree = normalize_sidebar(decode_sidebar_items(["a", "b"]), PageResolver(docs_root))
    document = OutlineAssembler(include_outline=False).assemble(tree)
    assert document.page_count == 2
    assert document.outline.children == []


def test_load_sidebar_reads_root_key(tmp_path: Path) -> None:
    """Items are read from the configured root key."""
    path = tmp_path / "sidebars.json"
    path.write_text(json.dumps({"docsSidebar": ["intro"]}), encoding="utf-8")
    assert load_sidebar(path) == [SidebarDoc(doc_id="intro")]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        json.dumps({"otherSidebar": []}),
        json.dumps({"docsSidebar": {}}),
    ],
)
def test_load_sidebar_rejects_malformed_input(tmp_path: Path, content: str) -> None:
    """Malformed sidebar files raise InputParseError."""
    path = tmp_path / "sidebars.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InputParseError):
        load_sidebar(path)
