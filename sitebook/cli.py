"""Cyclopts CLI entrypoint for turning a documentation site into one document.

The ``sitebook`` console script exposes three commands. ``build`` reads a
sidebar or a depth-tagged page list, assembles the pages and outline, writes
the HTML bundle plus its JSON manifest, and validates the result. ``sitemap``
converts a Docusaurus ``sitemap.xml`` into the page list ``build`` consumes.
``validate`` re-checks an existing manifest against minimum page and outline
counts. Any failure is logged and ends the process with exit status 1.

Examples
--------
Convert the sitemap and build from it:

>>> from sitebook.cli import app
>>> app(["sitemap", "--input", "build/sitemap.xml"])  # doctest: +SKIP
>>> app(
...     ["build", "--input", "build", "--sitemap", "sitemap-structure.json",
...      "--output", "dist/docs.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_SITEMAP_OUTPUT
from ._logging import configure_logging
from .builder import DocumentBuilder
from .bundle import read_manifest
from .config import ConfigError, apply_overrides, load_build_config
from .errors import SitebookError
from .outline import ParentStrategy, validate_document
from .outline.validator import DEFAULT_MIN_OUTLINE_ITEMS, DEFAULT_MIN_PAGES
from .sitemap import load_sitemap, write_flat_entries

logger = logging.getLogger(__name__)

app = App(name="sitebook", config=cyclopts.config.Env("SITEBOOK_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(message: str) -> typ.NoReturn:
    logger.error(message)
    raise SystemExit(1)


@app.command(help="Assemble a documentation site into one document with an outline.")
def build(
    *,
    input_dir: typ.Annotated[
        Path | None, Parameter(name=["--input", "-i"], help="Docs build directory")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(name=["--output", "-o"], help="Output HTML bundle")
    ] = None,
    sidebar: typ.Annotated[
        Path | None, Parameter(name=["--sidebar", "-s"], help="Sidebar JSON file")
    ] = None,
    sitemap: typ.Annotated[
        Path | None, Parameter(help="Sitemap-based page list JSON file")
    ] = None,
    css: typ.Annotated[
        Path | None, Parameter(name=["--css", "-c"], help="Print CSS file")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to sitebook.yaml")
    ] = None,
    toc: typ.Annotated[
        bool | None, Parameter(help="Build the outline / table of contents")
    ] = None,
    strategy: typ.Annotated[
        ParentStrategy | None,
        Parameter(help="Parent lookup for sitemap page lists"),
    ] = None,
    title: typ.Annotated[str | None, Parameter(help="Document title")] = None,
    description: typ.Annotated[
        str | None, Parameter(help="Document description")
    ] = None,
    toc_levels: typ.Annotated[
        int | None, Parameter(help="Max outline levels to style")
    ] = None,
    min_pages: typ.Annotated[
        int | None, Parameter(help="Minimum number of pages")
    ] = None,
    min_toc_items: typ.Annotated[
        int | None, Parameter(help="Minimum outline entries")
    ] = None,
) -> None:
    """Build the HTML bundle and manifest for a documentation site.

    Parameters
    ----------
    input_dir : Path or None, optional
        Root of the generated static site; overrides ``defaults.input_dir``.
    output : Path or None, optional
        Bundle path; the manifest is written beside it with a ``.json`` suffix.
    sidebar, sitemap : Path or None, optional
        Hierarchy source; exactly one must be configured.
    css : Path or None, optional
        Print stylesheet embedded in the bundle.
    config : Path or None, optional
        Configuration file; ``config/sitebook.yaml`` is used when present.
    toc : bool or None, optional
        ``--no-toc`` skips the outline while still assembling every page.
    strategy : ParentStrategy or None, optional
        ``level`` (default) or ``path`` parent lookup for page lists.
    title, description : str or None, optional
        Document metadata overrides.
    toc_levels : int or None, optional
        Deepest outline level that receives emphasis.
    min_pages, min_toc_items : int or None, optional
        Validation thresholds.

    Returns
    -------
    None
        Writes the bundle and manifest and prints their paths.
    """
    try:
        settings = apply_overrides(
            load_build_config(config),
            input_dir=input_dir,
            output=output,
            sidebar=sidebar,
            sitemap=sitemap,
            css=css,
            include_outline=toc,
            strategy=strategy,
            title=title,
            description=description,
            toc_levels=toc_levels,
            min_pages=min_pages,
            min_outline_items=min_toc_items,
        )
        result = DocumentBuilder(settings).run()
    except (
        ConfigError,
        SitebookError,
        FileNotFoundError,
        TypeError,
        YAMLError,
    ) as exc:
        _fail(f"Document generation failed: {exc}")
    for path in result.written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Parse a Docusaurus sitemap.xml into a depth-tagged page list.")
def sitemap(
    *,
    input_path: typ.Annotated[
        Path, Parameter(name=["--input", "-i"], help="Sitemap.xml path")
    ],
    output: typ.Annotated[
        Path, Parameter(name=["--output", "-o"], help="Output JSON path")
    ] = Path(DEFAULT_SITEMAP_OUTPUT),
) -> None:
    """Write the page list derived from ``input_path`` to ``output``."""
    try:
        entries = load_sitemap(input_path)
    except SitebookError as exc:
        _fail(f"Sitemap parsing failed: {exc}")
    written = write_flat_entries(entries, output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Validate the page and outline counts recorded in a manifest.")
def validate(
    *,
    input_path: typ.Annotated[
        Path, Parameter(name=["--input", "-i"], help="Manifest JSON file")
    ],
    min_pages: typ.Annotated[
        int, Parameter(name=["--min-pages", "-p"], help="Minimum number of pages")
    ] = DEFAULT_MIN_PAGES,
    min_toc_items: typ.Annotated[
        int, Parameter(name=["--min-toc-items", "-t"], help="Minimum TOC items")
    ] = DEFAULT_MIN_OUTLINE_ITEMS,
) -> None:
    """Check a manifest written by ``build`` against the given thresholds."""
    try:
        document, _metadata = read_manifest(input_path)
        report = validate_document(
            document, min_pages=min_pages, min_outline_items=min_toc_items
        )
    except SitebookError as exc:
        _fail(f"Validation failed: {exc}")
    print(
        f"validation passed: {report.page_count} pages, "
        f"{report.outline_count} TOC items"
    )


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
