"""Typed models shared across the pipeline."""

from .fragment import ColumnHeader, NamedFragment, PageFragment
from .table import AssembledTable, TypedTable, TypedValue

__all__ = [
    "AssembledTable",
    "ColumnHeader",
    "NamedFragment",
    "PageFragment",
    "TypedTable",
    "TypedValue",
]
