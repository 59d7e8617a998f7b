"""Attach the resolved header to every page fragment."""

from __future__ import annotations

import logging
from typing import Iterable, List

from layoff_tables.errors import ColumnCountMismatchError
from layoff_tables.models.fragment import ColumnHeader, NamedFragment, PageFragment

logger = logging.getLogger(__name__)


def normalize_fragment(fragment: PageFragment, header: ColumnHeader) -> NamedFragment:
    """Pair a fragment with the header, rejecting any row of the wrong width.

    Rows are never padded or truncated.
    """
    expected = len(header)
    for row_index, row in enumerate(fragment.rows):
        if len(row) != expected:
            raise ColumnCountMismatchError(
                page_index=fragment.page_index,
                expected=expected,
                actual=len(row),
                row_index=row_index,
            )
    return NamedFragment(fragment=fragment, header=header)


def normalize_fragments(
    fragments: Iterable[PageFragment], header: ColumnHeader
) -> List[NamedFragment]:
    """Normalize fragments in page order, stopping at the first mismatch."""
    named = [normalize_fragment(fragment, header) for fragment in fragments]
    logger.debug("Normalized %s fragments against %s columns", len(named), len(header))
    return named
