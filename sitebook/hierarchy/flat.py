"""Decode depth-tagged page lists produced from a sitemap.

Each entry carries ``url``, ``title``, ``depth`` and an opaque ``lastmod``
(``lastModified`` is accepted too). The list order is the traversal order and
is never changed here; outline assembly relies on the upstream depth-then-path
sort performed by :func:`sitebook.sitemap.parse_sitemap`.
"""

from __future__ import annotations

import typing as typ

import msgspec

from sitebook.errors import InputParseError

from .models import FlatPageEntry

if typ.TYPE_CHECKING:
    from pathlib import Path

LAST_MODIFIED_KEYS = ("lastModified", "lastmod")


def load_flat_entries(path: Path) -> list[FlatPageEntry]:
    """Read a JSON page list from ``path``.

    Raises
    ------
    InputParseError
        If the file cannot be read or decoded, or any entry is invalid.
    """
    try:
        payload = msgspec.json.decode(path.read_bytes())
    except (OSError, msgspec.DecodeError) as exc:
        msg = f"Cannot read page list '{path}': {exc}"
        raise InputParseError(msg) from exc
    return decode_flat_entries(payload)


def decode_flat_entries(payload: object) -> list[FlatPageEntry]:
    """Validate raw JSON data and return :class:`FlatPageEntry` objects in order."""
    if not isinstance(payload, list):
        msg = "Page list must be a JSON array."
        raise InputParseError(msg)
    return [_decode_entry(index, raw) for index, raw in enumerate(payload)]


def _decode_entry(index: int, raw: object) -> FlatPageEntry:
    if not isinstance(raw, dict):
        msg = f"Page list entry {index} must be an object."
        raise InputParseError(msg)
    url = raw.get("url")
    if not isinstance(url, str) or not url.strip():
        msg = f"Page list entry {index} is missing 'url'."
        raise InputParseError(msg)
    depth = raw.get("depth")
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        msg = f"Page list entry {index} ('{url}') needs an integer depth >= 1."
        raise InputParseError(msg)
    title = raw.get("title")
    last_modified = next(
        (raw[key] for key in LAST_MODIFIED_KEYS if raw.get(key) is not None), None
    )
    return FlatPageEntry(
        url=url,
        title=title if isinstance(title, str) else "",
        depth=depth,
        last_modified=None if last_modified is None else str(last_modified),
    )


__all__ = ["decode_flat_entries", "load_flat_entries"]
