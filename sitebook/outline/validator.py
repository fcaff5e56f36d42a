"""Post-assembly checks on page and outline counts.

Both checks always run; :func:`validate_document` reports every failure at once
through :class:`StructureValidationError` so callers see the page and outline
shortfalls together.

Example
-------
>>> from sitebook.outline.models import AssembledDocument
>>> from sitebook.outline.validator import collect_failures
>>> failures = collect_failures(0, AssembledDocument().outline, min_pages=1)
>>> [str(failure) for failure in failures]
['Insufficient pages: 0 < 1']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from sitebook.errors import SitebookError

if typ.TYPE_CHECKING:
    from .models import AssembledDocument, OutlineNode

DEFAULT_MIN_PAGES = 5
DEFAULT_MIN_OUTLINE_ITEMS = 0


class DocumentValidationError(SitebookError):
    """A single failed structural check, with observed and required counts."""

    label = "items"

    def __init__(self, observed: int, required: int) -> None:
        self.observed = observed
        self.required = required
        super().__init__(f"Insufficient {self.label}: {observed} < {required}")


class InsufficientPages(DocumentValidationError):
    """The document has fewer pages than required."""

    label = "pages"


class InsufficientOutline(DocumentValidationError):
    """The outline has fewer entries than required."""

    label = "TOC items"


class StructureValidationError(SitebookError):
    """Raised when one or more structural checks fail."""

    def __init__(self, failures: list[DocumentValidationError]) -> None:
        self.failures = failures
        super().__init__("; ".join(str(failure) for failure in failures))


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Counts observed on a document that passed validation."""

    page_count: int
    outline_count: int


def flatten_outline(root: OutlineNode) -> list[OutlineNode]:
    """Return every node below ``root`` in pre-order, excluding ``root``."""
    flattened: list[OutlineNode] = []
    for child in root.children:
        flattened.append(child)
        flattened.extend(flatten_outline(child))
    return flattened


def count_outline_nodes(root: OutlineNode) -> int:
    """Count every node below ``root``, excluding ``root`` itself."""
    return sum(1 + count_outline_nodes(child) for child in root.children)


def collect_failures(
    page_count: int,
    outline: OutlineNode,
    *,
    min_pages: int = DEFAULT_MIN_PAGES,
    min_outline_items: int = DEFAULT_MIN_OUTLINE_ITEMS,
) -> list[DocumentValidationError]:
    """Run both checks and return the failures, in page-then-outline order."""
    failures: list[DocumentValidationError] = []
    if page_count < min_pages:
        failures.append(InsufficientPages(page_count, min_pages))
    outline_count = count_outline_nodes(outline)
    if outline_count < min_outline_items:
        failures.append(InsufficientOutline(outline_count, min_outline_items))
    return failures


def validate_document(
    document: AssembledDocument,
    *,
    min_pages: int = DEFAULT_MIN_PAGES,
    min_outline_items: int = DEFAULT_MIN_OUTLINE_ITEMS,
) -> ValidationReport:
    """Check ``document`` against the minimum page and outline counts.

    Parameters
    ----------
    document : AssembledDocument
        Document to check.
    min_pages : int, optional
        Minimum page count. Defaults to 5.
    min_outline_items : int, optional
        Minimum number of outline entries, excluding the root. Defaults to 0.

    Returns
    -------
    ValidationReport
        Observed counts when both checks pass.

    Raises
    ------
    StructureValidationError
        If either check fails; ``failures`` lists every failed check.
    """
    failures = collect_failures(
        document.page_count,
        document.outline,
        min_pages=min_pages,
        min_outline_items=min_outline_items,
    )
    if failures:
        raise StructureValidationError(failures)
    return ValidationReport(
        page_count=document.page_count,
        outline_count=count_outline_nodes(document.outline),
    )


__all__ = [
    "DEFAULT_MIN_OUTLINE_ITEMS",
    "DEFAULT_MIN_PAGES",
    "DocumentValidationError",
    "InsufficientOutline",
    "InsufficientPages",
    "StructureValidationError",
    "ValidationReport",
    "collect_failures",
    "count_outline_nodes",
    "flatten_outline",
    "validate_document",
]
