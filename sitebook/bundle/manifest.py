"""JSON manifest describing an assembled document.

The manifest records the metadata, the ordered pages (slug, title, source
file) and the styled outline with page indices as targets. External page
writers read it to build the final document, and ``sitebook validate`` reads
it to re-check the structure without rebuilding.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec

from sitebook.config import DocumentMetadata
from sitebook.errors import InputParseError
from sitebook.outline.models import AssembledDocument, Emphasis, OutlineNode
from sitebook.resolver import PageRef

MANIFEST_VERSION = 1


def manifest_payload(
    document: AssembledDocument, metadata: DocumentMetadata
) -> dict[str, typ.Any]:
    """Return the manifest content for ``document`` as plain data."""
    return {
        "version": MANIFEST_VERSION,
        "metadata": {
            "title": metadata.title,
            "description": metadata.description,
            "subject": metadata.subject,
            "keywords": metadata.keywords,
            "creator": metadata.creator,
        },
        "pages": [
            {
                "index": assembled.index,
                "slug": assembled.page.slug,
                "title": assembled.page.title,
                "path": None
                if assembled.page.path is None
                else assembled.page.path.as_posix(),
            }
            for assembled in document.pages
        ],
        "outline": [_node_payload(node) for node in document.outline.children],
    }


def _node_payload(node: OutlineNode) -> dict[str, typ.Any]:
    return {
        "title": node.title,
        "target": node.target,
        "emphasis": node.emphasis.value,
        "children": [_node_payload(child) for child in node.children],
    }


def write_manifest(
    document: AssembledDocument, metadata: DocumentMetadata, path: Path
) -> Path:
    """Write the manifest JSON for ``document`` to ``path`` and return it."""
    encoded = msgspec.json.encode(manifest_payload(document, metadata))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(msgspec.json.format(encoded, indent=2))
    return path


def read_manifest(path: Path) -> tuple[AssembledDocument, DocumentMetadata]:
    """Load a manifest written by :func:`write_manifest`.

    Raises
    ------
    InputParseError
        If the file cannot be read or does not have the manifest shape.
    """
    try:
        payload = msgspec.json.decode(path.read_bytes())
    except (OSError, msgspec.DecodeError) as exc:
        msg = f"Cannot read manifest '{path}': {exc}"
        raise InputParseError(msg) from exc
    try:
        return _decode_document(payload), _decode_metadata(payload)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        msg = f"Manifest '{path}' is malformed: {exc}"
        raise InputParseError(msg) from exc


def _decode_metadata(payload: dict[str, typ.Any]) -> DocumentMetadata:
    raw = payload.get("metadata") or {}
    base = DocumentMetadata()
    return DocumentMetadata(
        title=str(raw.get("title", base.title)),
        description=str(raw.get("description", base.description)),
        subject=str(raw.get("subject", base.subject)),
        keywords=str(raw.get("keywords", base.keywords)),
        creator=str(raw.get("creator", base.creator)),
    )


def _decode_document(payload: dict[str, typ.Any]) -> AssembledDocument:
    document = AssembledDocument()
    for raw_page in payload["pages"]:
        raw_path = raw_page.get("path")
        document.append_page(
            PageRef(
                slug=str(raw_page["slug"]),
                path=Path(raw_path) if raw_path else None,
                title=str(raw_page["title"]),
            )
        )
    for raw_node in payload["outline"]:
        document.outline.add_child(_decode_node(raw_node, document.page_count))
    return document


def _decode_node(raw: dict[str, typ.Any], page_count: int) -> OutlineNode:
    target = raw.get("target")
    if target is not None and not 0 <= int(target) < page_count:
        msg = f"outline target {target} is outside the {page_count} pages"
        raise ValueError(msg)
    return OutlineNode(
        title=str(raw["title"]),
        target=None if target is None else int(target),
        children=[
            _decode_node(child, page_count) for child in raw.get("children", [])
        ],
        emphasis=Emphasis(raw.get("emphasis", Emphasis.NORMAL.value)),
    )


__all__ = ["MANIFEST_VERSION", "manifest_payload", "read_manifest", "write_manifest"]
