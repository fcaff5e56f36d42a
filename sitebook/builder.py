"""High-level orchestration for turning a documentation site into one document.

:class:`DocumentBuilder` consumes a :class:`~sitebook.config.BuildConfig` and
runs the whole pipeline in order: read the sidebar or page list, resolve every
page, assemble pages and outline, apply outline emphasis, write the HTML
bundle and JSON manifest, and finally validate page and outline counts. The
pipeline is strictly sequential because page indices are handed out in the
order pages are appended.

Example
-------
>>> from pathlib import Path
>>> from sitebook.builder import DocumentBuilder
>>> from sitebook.config import BuildConfig
>>> config = BuildConfig(input_dir=Path("build"), sitemap=Path("pages.json"))
>>> result = DocumentBuilder(config).run()  # doctest: +SKIP
>>> result.report.page_count  # doctest: +SKIP
12
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .bundle import BundleRenderer, write_manifest
from .hierarchy import load_flat_entries, load_sidebar, normalize_sidebar
from .outline import (
    AssembledDocument,
    FlatOutlineBuilder,
    OutlineAssembler,
    ValidationReport,
    style_outline,
    validate_document,
)
from .resolver import PageResolver, locate_docs_root

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import BuildConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildResult:
    """Outcome of a successful build."""

    document: AssembledDocument
    written: list[Path]
    report: ValidationReport


class DocumentBuilder:
    """Assemble, render, and validate a single document for a site."""

    def __init__(
        self, config: BuildConfig, *, renderer: BundleRenderer | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : BuildConfig
            Build definition; checked for completeness immediately.
        renderer : BundleRenderer, optional
            Renderer for the HTML bundle; a default one is created when
            ``None``.

        Raises
        ------
        ConfigError
            If the configuration lacks an input directory or does not name
            exactly one hierarchy source.
        """
        config.check()
        self.config = config
        self.renderer = renderer or BundleRenderer()

    def assemble(self) -> AssembledDocument:
        """Build the styled document from the configured hierarchy source."""
        config = self.config
        input_dir = typ.cast("Path", config.input_dir)
        if config.sidebar is not None:
            logger.info("parsing sidebar config %s", config.sidebar)
            items = load_sidebar(config.sidebar, key=config.sidebar_key)
            resolver = PageResolver(locate_docs_root(input_dir))
            tree = normalize_sidebar(items, resolver)
            document = OutlineAssembler(
                include_outline=config.include_outline
            ).assemble(tree)
        else:
            logger.info("using sitemap-based document structure")
            entries = load_flat_entries(typ.cast("Path", config.sitemap))
            document = FlatOutlineBuilder(
                PageResolver(input_dir),
                strategy=config.strategy,
                include_outline=config.include_outline,
            ).build(entries)
        document.outline = style_outline(document.outline, config.toc_levels)
        return document

    def run(self) -> BuildResult:
        """Assemble, write, and validate the document.

        Returns
        -------
        BuildResult
            The document, the written bundle and manifest paths, and the
            validation report.

        Raises
        ------
        InputParseError
            If the sidebar or page list is malformed.
        StructureValidationError
            If the document has too few pages or outline entries. The bundle
            and manifest are written before validation so they can be
            inspected.
        """
        document = self.assemble()
        config = self.config
        bundle_path = self.renderer.write(
            document, config.metadata, config.output, css_path=config.css
        )
        manifest_path = write_manifest(document, config.metadata, config.manifest_path)
        report = validate_document(
            document,
            min_pages=config.thresholds.min_pages,
            min_outline_items=config.thresholds.min_outline_items,
        )
        logger.info(
            "document validation passed: %d pages, %d TOC items",
            report.page_count,
            report.outline_count,
        )
        return BuildResult(
            document=document, written=[bundle_path, manifest_path], report=report
        )


__all__ = ["BuildResult", "DocumentBuilder"]
