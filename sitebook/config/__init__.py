"""Load and validate build configuration for sitebook runs.

This subpackage parses an optional ``sitebook.yaml`` file, merges it over the
built-in defaults, and produces typed dataclasses (:class:`BuildConfig`,
:class:`DocumentMetadata`, :class:`ValidationThresholds`) that the builder
consumes. Command-line values are layered on top with
:func:`apply_overrides`.

Examples
--------
>>> from pathlib import Path
>>> from sitebook.config import apply_overrides, load_build_config
>>> config = load_build_config(Path("config/sitebook.yaml"))  # doctest: +SKIP
>>> config = apply_overrides(config, toc_levels=2)  # doctest: +SKIP
>>> config.toc_levels  # doctest: +SKIP
2
"""

from .loader import DEFAULT_CONFIG, apply_overrides, load_build_config
from .models import BuildConfig, ConfigError, DocumentMetadata, ValidationThresholds

__all__ = [
    "DEFAULT_CONFIG",
    "BuildConfig",
    "ConfigError",
    "DocumentMetadata",
    "ValidationThresholds",
    "apply_overrides",
    "load_build_config",
]
