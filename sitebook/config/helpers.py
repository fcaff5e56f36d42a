"""Utility helpers shared by the sitebook configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from sitebook.outline.assembler import ParentStrategy

from .models import ConfigError, DocumentMetadata, ValidationThresholds


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for non-empty values, otherwise None."""
    text = _optional_str(value)
    return Path(text) if text else None


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, treating absent values as empty."""
    value = raw.get(key) or {}
    if not isinstance(value, cabc.Mapping):
        msg = f"Section '{key}' must be a mapping."
        raise ConfigError(msg)
    return value


def _non_negative_int(value: object, *, name: str) -> int:
    """Coerce ``value`` to a non-negative integer or raise ConfigError."""
    if isinstance(value, bool):
        msg = f"'{name}' must be an integer, got {value!r}."
        raise ConfigError(msg)
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        msg = f"'{name}' must be an integer, got {value!r}."
        raise ConfigError(msg) from exc
    if number < 0:
        msg = f"'{name}' must not be negative, got {number}."
        raise ConfigError(msg)
    return number


def _parse_strategy(value: object | None) -> ParentStrategy:
    """Return the ParentStrategy named by ``value`` (default: level)."""
    text = _optional_str(value)
    if text is None:
        return ParentStrategy.LEVEL
    try:
        return ParentStrategy(text.lower())
    except ValueError as exc:
        known = ", ".join(strategy.value for strategy in ParentStrategy)
        msg = f"Unknown outline strategy '{text}'. Known strategies: {known}"
        raise ConfigError(msg) from exc


def _build_metadata(payload: typ.Mapping[str, typ.Any]) -> DocumentMetadata:
    """Build DocumentMetadata from ``payload`` over the dataclass defaults."""
    base = DocumentMetadata()
    return DocumentMetadata(
        title=_optional_str(payload.get("title")) or base.title,
        description=_optional_str(payload.get("description")) or base.description,
        subject=_optional_str(payload.get("subject")) or base.subject,
        keywords=_optional_str(payload.get("keywords")) or base.keywords,
        creator=_optional_str(payload.get("creator")) or base.creator,
    )


def _build_thresholds(payload: typ.Mapping[str, typ.Any]) -> ValidationThresholds:
    """Build ValidationThresholds from ``payload`` over the dataclass defaults."""
    base = ValidationThresholds()
    return ValidationThresholds(
        min_pages=_non_negative_int(
            payload.get("min_pages", base.min_pages), name="min_pages"
        ),
        min_outline_items=_non_negative_int(
            payload.get("min_toc_items", base.min_outline_items),
            name="min_toc_items",
        ),
    )


__all__ = [
    "_build_metadata",
    "_build_thresholds",
    "_non_negative_int",
    "_optional_path",
    "_optional_str",
    "_parse_strategy",
    "_section",
]
