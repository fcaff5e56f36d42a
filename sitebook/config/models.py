"""Typed dataclasses describing sitebook build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from sitebook._constants import DEFAULT_SIDEBAR_KEY
from sitebook.outline.assembler import ParentStrategy
from sitebook.outline.validator import DEFAULT_MIN_OUTLINE_ITEMS, DEFAULT_MIN_PAGES


class ConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class DocumentMetadata:
    """Descriptive fields written into the rendered bundle and manifest."""

    title: str = "Internal Documentation"
    description: str = "Generated from Docusaurus"
    subject: str = "Docusaurus Documentation"
    keywords: str = "documentation,internal,docusaurus"
    creator: str = "Docusaurus PDF Generator"


@dc.dataclass(slots=True)
class ValidationThresholds:
    """Minimum counts a finished document must reach."""

    min_pages: int = DEFAULT_MIN_PAGES
    min_outline_items: int = DEFAULT_MIN_OUTLINE_ITEMS


@dc.dataclass(slots=True)
class BuildConfig:
    """A fully resolved build definition.

    Attributes
    ----------
    input_dir : Path or None
        Root of the generated static site.
    output : Path
        Path of the rendered HTML bundle.
    sidebar : Path or None
        Sidebar JSON file (nested mode).
    sitemap : Path or None
        Depth-tagged page list JSON file (flat mode).
    sidebar_key : str
        Root key of the sidebar file.
    css : Path or None
        Print stylesheet injected into the bundle.
    include_outline : bool
        Whether to build the outline at all.
    strategy : ParentStrategy
        Parent lookup used for flat page lists.
    toc_levels : int
        Deepest outline level that receives emphasis.
    metadata : DocumentMetadata
        Descriptive document fields.
    thresholds : ValidationThresholds
        Minimum page and outline counts.
    """

    input_dir: Path | None = None
    output: Path = Path("dist/documentation.html")
    sidebar: Path | None = None
    sitemap: Path | None = None
    sidebar_key: str = DEFAULT_SIDEBAR_KEY
    css: Path | None = None
    include_outline: bool = True
    strategy: ParentStrategy = ParentStrategy.LEVEL
    toc_levels: int = 3
    metadata: DocumentMetadata = dc.field(default_factory=DocumentMetadata)
    thresholds: ValidationThresholds = dc.field(default_factory=ValidationThresholds)

    @property
    def manifest_path(self) -> Path:
        """Return the JSON manifest path written next to the bundle."""
        return self.output.with_suffix(".json")

    def check(self) -> None:
        """Raise :class:`ConfigError` unless the config is ready to build."""
        if self.input_dir is None:
            msg = "An input directory is required."
            raise ConfigError(msg)
        if (self.sidebar is None) == (self.sitemap is None):
            msg = "Exactly one of 'sidebar' or 'sitemap' must be provided."
            raise ConfigError(msg)
        if self.toc_levels < 0:
            msg = f"'toc_levels' must not be negative, got {self.toc_levels}."
            raise ConfigError(msg)


__all__ = ["BuildConfig", "ConfigError", "DocumentMetadata", "ValidationThresholds"]
