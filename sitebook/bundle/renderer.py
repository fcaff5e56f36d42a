"""Render an assembled document into a single print-ready HTML bundle.

The bundle carries the document metadata as ``<meta>`` tags, an optional print
stylesheet, a nested outline ``<nav>`` whose entries link to ``#page-<n>``
anchors, and one ``<section class="sitebook-page">`` per page in document
order. It is the hand-off format for external PDF writers, which paginate on
the section boundaries and turn the outline into bookmarks without reordering
anything.

Example
-------
>>> from pathlib import Path
>>> from sitebook.bundle import BundleRenderer
>>> renderer = BundleRenderer()
>>> renderer.write(document, metadata, Path("dist/docs.html"))  # doctest: +SKIP
PosixPath('dist/docs.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from sitebook._constants import PAGE_ANCHOR_TEMPLATE
from sitebook.resolver import read_page_markup

from .sanitizer import sanitize_page

if typ.TYPE_CHECKING:
    from sitebook.config import DocumentMetadata
    from sitebook.outline.models import AssembledDocument, AssembledPage, OutlineNode


class BundleRenderer:
    """Render documents with the ``bundle.jinja`` template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``sitebook/templates`` directory when ``None``.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("bundle.jinja")

    def render(
        self,
        document: AssembledDocument,
        metadata: DocumentMetadata,
        *,
        css: str | None = None,
    ) -> str:
        """Return the bundle HTML for ``document``."""
        context = {
            "metadata": metadata,
            "css": css,
            "outline": outline_entries(document.outline.children),
            "pages": [self._page_context(page) for page in document.pages],
            "generated_at": dt.datetime.now(dt.UTC),
        }
        return self.template.render(**context)

    def write(
        self,
        document: AssembledDocument,
        metadata: DocumentMetadata,
        output: Path,
        *,
        css_path: Path | None = None,
    ) -> Path:
        """Render ``document`` to ``output`` and return the written path."""
        css = css_path.read_text(encoding="utf-8") if css_path else None
        html = self.render(document, metadata, css=css)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        return output

    @staticmethod
    def _page_context(assembled: AssembledPage) -> dict[str, typ.Any]:
        page = assembled.page
        body = ""
        if page.path is not None:
            body = sanitize_page(read_page_markup(page.path))
        return {
            "anchor": page_anchor(assembled.index),
            "slug": page.slug,
            "title": page.title,
            "html": body,
        }


def page_anchor(index: int) -> str:
    """Return the fragment identifier of the page at ``index``."""
    return PAGE_ANCHOR_TEMPLATE.format(index=index)


def outline_entries(nodes: list[OutlineNode]) -> list[dict[str, typ.Any]]:
    """Return template-friendly dictionaries for ``nodes`` and their children."""
    return [
        {
            "title": node.title,
            "href": None if node.target is None else f"#{page_anchor(node.target)}",
            "emphasis": node.emphasis.value,
            "children": outline_entries(node.children),
        }
        for node in nodes
    ]


__all__ = ["BundleRenderer", "outline_entries", "page_anchor"]
