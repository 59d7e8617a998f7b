"""Reconciliation stages between extraction and export."""

from .assemble import assemble
from .coerce import coerce
from .header import resolve_header
from .normalize import normalize_fragment, normalize_fragments

__all__ = [
    "assemble",
    "coerce",
    "normalize_fragment",
    "normalize_fragments",
    "resolve_header",
]
