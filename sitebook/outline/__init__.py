"""Outline assembly, styling, and structural validation."""

from .assembler import FlatOutlineBuilder, OutlineAssembler, ParentStrategy
from .models import AssembledDocument, AssembledPage, Emphasis, OutlineNode
from .styling import emphasis_for_depth, style_outline
from .validator import (
    DocumentValidationError,
    InsufficientOutline,
    InsufficientPages,
    StructureValidationError,
    ValidationReport,
    collect_failures,
    count_outline_nodes,
    flatten_outline,
    validate_document,
)

__all__ = [
    "AssembledDocument",
    "AssembledPage",
    "DocumentValidationError",
    "Emphasis",
    "FlatOutlineBuilder",
    "InsufficientOutline",
    "InsufficientPages",
    "OutlineAssembler",
    "OutlineNode",
    "ParentStrategy",
    "StructureValidationError",
    "ValidationReport",
    "collect_failures",
    "count_outline_nodes",
    "emphasis_for_depth",
    "flatten_outline",
    "style_outline",
    "validate_document",
]
