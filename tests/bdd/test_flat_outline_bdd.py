"""Behaviour tests for rebuilding an outline from a depth-tagged page list.

The scenarios live in ``features/flat_outline.feature`` and drive
:class:`sitebook.builder.DocumentBuilder` in page-list mode.

Usage:
    pytest tests/bdd/test_flat_outline_bdd.py -v
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from sitebook.builder import DocumentBuilder
from sitebook.config import BuildConfig

if typ.TYPE_CHECKING:
    from sitebook.outline import AssembledDocument

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "flat_outline.feature"
)
scenarios(FEATURE_FILE)

BASE_URL = "https://example.dev/docs"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write_page_list(tmp_path: Path, entries: list[dict[str, object]]) -> Path:
    path = tmp_path / "sitemap-structure.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


@given("a docs build with pages a, a/b and c")
def given_pages(
    tmp_path: Path,
    write_page: typ.Callable[..., Path],
    scenario_state: dict[str, object],
) -> None:
    for slug in ("a", "a/b", "c"):
        write_page(tmp_path / "build" / "docs", slug, title=f"{slug} | Site")
    scenario_state["input_dir"] = tmp_path / "build"


@given("a page list tagging them with depths 1, 2 and 1")
def given_depth_list(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    scenario_state["page_list"] = _write_page_list(
        tmp_path,
        [
            {"url": f"{BASE_URL}/a", "title": "a", "depth": 1},
            {"url": f"{BASE_URL}/a/b", "title": "a/b", "depth": 2},
            {"url": f"{BASE_URL}/c", "title": "c", "depth": 1},
        ],
    )


@given("a page list that also names a missing page")
def given_list_with_missing(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    scenario_state["page_list"] = _write_page_list(
        tmp_path,
        [
            {"url": f"{BASE_URL}/a", "title": "a", "depth": 1},
            {"url": f"{BASE_URL}/gone", "title": "gone", "depth": 1},
            {"url": f"{BASE_URL}/c", "title": "c", "depth": 1},
            {"url": f"{BASE_URL}/a/b", "title": "a/b", "depth": 2},
        ],
    )


@when("the document is assembled from the page list")
def when_assembled(scenario_state: dict[str, object]) -> None:
    config = BuildConfig(
        input_dir=typ.cast("Path", scenario_state["input_dir"]),
        sitemap=typ.cast("Path", scenario_state["page_list"]),
    )
    scenario_state["document"] = DocumentBuilder(config).assemble()


@then("page c sits beside page a at the top of the outline")
def then_c_is_root_sibling(scenario_state: dict[str, object]) -> None:
    document = typ.cast("AssembledDocument", scenario_state["document"])
    top = document.outline.children
    assert [node.title for node in top] == ["a", "c"]
    assert [child.title for child in top[0].children] == ["a/b"]
    assert top[1].children == []


@then("the document holds three pages")
def then_three_pages(scenario_state: dict[str, object]) -> None:
    document = typ.cast("AssembledDocument", scenario_state["document"])
    slugs = [page.page.slug for page in document.pages]
    assert slugs == ["docs/a", "docs/c", "docs/a/b"]
