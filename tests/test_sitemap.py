"""Tests for sitemap conversion into depth-tagged page lists."""

from __future__ import annotations

import json
import typing as typ

import pytest

from sitebook.errors import InputParseError
from sitebook.hierarchy import FlatPageEntry, load_flat_entries
from sitebook.sitemap import load_sitemap, parse_sitemap, write_flat_entries

if typ.TYPE_CHECKING:
    from pathlib import Path

SITEMAP = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://example.dev/docs/guides/advanced/tuning</loc></url>
  <url><loc>https://example.dev/blog/hello</loc></url>
  <url>
    <loc>https://example.dev/docs/intro.html</loc>
    <lastmod>2024-05-01</lastmod>
  </url>
  <url><loc>https://example.dev/docs/guides/</loc></url>
  <url><loc>https://example.dev/docs/guides/basics</loc></url>
  <url><loc>https://example.dev/docs/api</loc></url>
  <url><changefreq>weekly</changefreq></url>
</urlset>
"""


def test_keeps_only_docs_urls_sorted_by_depth_then_url() -> None:
    """Non-docs URLs are dropped and the rest are ordered for outline building."""
    entries = parse_sitemap(SITEMAP)
    assert [(entry.title, entry.depth) for entry in entries] == [
        ("api", 1),
        ("guides/", 1),
        ("intro", 1),
        ("guides/basics", 2),
        ("guides/advanced/tuning", 3),
    ]


def test_lastmod_is_carried_over() -> None:
    """``<lastmod>`` is attached when present and ``None`` otherwise."""
    by_title = {entry.title: entry for entry in parse_sitemap(SITEMAP)}
    assert by_title["intro"].last_modified == "2024-05-01"
    assert by_title["api"].last_modified is None


def test_custom_marker() -> None:
    """A different path marker selects a different subtree."""
    entries = parse_sitemap(SITEMAP, marker="/blog/")
    assert entries == [
        FlatPageEntry(url="https://example.dev/blog/hello", title="hello", depth=1)
    ]


def test_missing_urlset_is_rejected() -> None:
    """Documents without ``<urlset>`` are not sitemaps."""
    with pytest.raises(InputParseError):
        parse_sitemap("<html><body>nope</body></html>")


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    """Unreadable sitemap paths raise InputParseError."""
    with pytest.raises(InputParseError):
        load_sitemap(tmp_path / "absent.xml")


def test_written_list_reloads_as_flat_entries(tmp_path: Path) -> None:
    """The JSON written for a sitemap is accepted by the flat loader."""
    sitemap = tmp_path / "sitemap.xml"
    sitemap.write_text(SITEMAP, encoding="utf-8")
    entries = load_sitemap(sitemap)
    output = write_flat_entries(entries, tmp_path / "out" / "structure.json")

    raw = json.loads(output.read_text(encoding="utf-8"))
    assert set(raw[0]) == {"url", "title", "depth", "lastModified"}
    assert load_flat_entries(output) == entries
