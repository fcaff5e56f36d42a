"""Sanitizing, rendering, and describing assembled documents on disk."""

from .manifest import manifest_payload, read_manifest, write_manifest
from .renderer import BundleRenderer, outline_entries, page_anchor
from .sanitizer import sanitize_page

__all__ = [
    "BundleRenderer",
    "manifest_payload",
    "outline_entries",
    "page_anchor",
    "read_manifest",
    "sanitize_page",
    "write_manifest",
]
