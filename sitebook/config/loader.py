"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from sitebook._constants import DEFAULT_SIDEBAR_KEY

from .helpers import (
    _build_metadata,
    _build_thresholds,
    _non_negative_int,
    _optional_path,
    _optional_str,
    _parse_strategy,
    _section,
)
from .models import BuildConfig

DEFAULT_CONFIG = Path("config/sitebook.yaml")


def load_build_config(path: Path | None = None) -> BuildConfig:
    """Load the YAML configuration describing a documentation build.

    Parameters
    ----------
    path : Path, optional
        Configuration file. When ``None``, ``config/sitebook.yaml`` is used if
        it exists and built-in defaults apply otherwise.

    Returns
    -------
    BuildConfig
        Configuration with every absent value filled from the defaults. The
        result is not checked for completeness; call
        :meth:`BuildConfig.check` after applying command-line overrides.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested file does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If a section or value has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitebook.config import load_build_config
    >>> config = load_build_config(Path("config/sitebook.yaml"))  # doctest: +SKIP
    >>> config.toc_levels  # doctest: +SKIP
    3
    """
    if path is None:
        if not DEFAULT_CONFIG.exists():
            return BuildConfig()
        path = DEFAULT_CONFIG
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = _section(raw, "defaults")
    outline = _section(raw, "outline")
    base = BuildConfig()

    return BuildConfig(
        input_dir=_optional_path(defaults.get("input_dir")),
        output=_optional_path(defaults.get("output")) or base.output,
        sidebar=_optional_path(defaults.get("sidebar")),
        sitemap=_optional_path(defaults.get("sitemap")),
        sidebar_key=_optional_str(defaults.get("sidebar_key")) or DEFAULT_SIDEBAR_KEY,
        css=_optional_path(defaults.get("css")),
        include_outline=bool(outline.get("enabled", base.include_outline)),
        strategy=_parse_strategy(outline.get("strategy")),
        toc_levels=_non_negative_int(
            outline.get("toc_levels", base.toc_levels), name="toc_levels"
        ),
        metadata=_build_metadata(_section(raw, "metadata")),
        thresholds=_build_thresholds(_section(raw, "validation")),
    )


def apply_overrides(config: BuildConfig, **overrides: object) -> BuildConfig:
    """Return a copy of ``config`` with every non-``None`` override applied.

    Keys naming :class:`DocumentMetadata` or :class:`ValidationThresholds`
    fields update those nested dataclasses.
    """
    metadata_fields = {field.name for field in dc.fields(config.metadata)}
    threshold_fields = {field.name for field in dc.fields(config.thresholds)}
    top_level: dict[str, object] = {}
    metadata: dict[str, object] = {}
    thresholds: dict[str, object] = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key in metadata_fields:
            metadata[key] = value
        elif key in threshold_fields:
            thresholds[key] = value
        else:
            top_level[key] = value
    return dc.replace(
        config,
        metadata=dc.replace(config.metadata, **metadata),
        thresholds=dc.replace(config.thresholds, **thresholds),
        **top_level,
    )


__all__ = ["DEFAULT_CONFIG", "apply_overrides", "load_build_config"]
