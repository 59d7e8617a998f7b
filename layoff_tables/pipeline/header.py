"""Resolve column names from the first row of the first fragment."""

from __future__ import annotations

import logging
from typing import Sequence

from layoff_tables.errors import EmptyFragmentError, EmptyInputError
from layoff_tables.models.fragment import ColumnHeader, PageFragment

logger = logging.getLogger(__name__)


def resolve_header(fragments: Sequence[PageFragment]) -> ColumnHeader:
    """Return the first row of the first fragment, cell for cell."""
    if not fragments:
        raise EmptyInputError()
    first = fragments[0]
    if not first.rows:
        raise EmptyFragmentError(first.page_index)
    header = ColumnHeader(names=first.rows[0])
    logger.debug("Resolved %s header columns: %s", len(header), list(header.names))
    return header
