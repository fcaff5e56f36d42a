"""Shared fixtures for building throwaway documentation sites.

The ``write_page`` fixture returns a helper that writes a minimal Docusaurus
style HTML page below a root directory, either as ``<slug>.html`` or as the
directory index ``<slug>/index.html``.
"""

from __future__ import annotations

import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path


class PageWriter(typ.Protocol):
    def __call__(
        self,
        root: Path,
        slug: str,
        *,
        title: str | None = ...,
        meta_title: str | None = ...,
        body: str = ...,
        index: bool = ...,
    ) -> Path: ...


def _render_page(title: str | None, meta_title: str | None, body: str) -> str:
    head = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if meta_title is not None:
        head.append(f'<meta name="title" content="{meta_title}">')
    return (
        "<!DOCTYPE html><html><head>"
        + "".join(head)
        + "</head><body>"
        + "<nav class='navbar'>Site nav</nav>"
        + "<main><article><div class='theme-doc-markdown markdown'>"
        + body
        + "</div></article></main>"
        + "<footer>Footer</footer></body></html>"
    )


@pytest.fixture
def write_page() -> PageWriter:
    """Return a helper that writes an HTML page and returns its path."""

    def _write(
        root: Path,
        slug: str,
        *,
        title: str | None = None,
        meta_title: str | None = None,
        body: str = "",
        index: bool = False,
    ) -> Path:
        path = root / slug / "index.html" if index else root / f"{slug}.html"
        path.parent.mkdir(parents=True, exist_ok=True)
        page_title = title if title is not None else f"{slug} | Example Docs"
        path.write_text(
            _render_page(page_title, meta_title, body or f"<p>{slug} body</p>"),
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Return an empty ``docs`` directory inside a temporary site build."""
    root = tmp_path / "build" / "docs"
    root.mkdir(parents=True)
    return root
