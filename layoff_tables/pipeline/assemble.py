"""Concatenate named fragments into one string table."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from layoff_tables.config import settings
from layoff_tables.errors import EmptyAssemblyError
from layoff_tables.models.fragment import NamedFragment, Row
from layoff_tables.models.table import AssembledTable
from layoff_tables.utils.naming import clean_column_names

logger = logging.getLogger(__name__)


def assemble(
    named_fragments: Sequence[NamedFragment],
    drop_repeated_headers: Optional[bool] = None,
) -> AssembledTable:
    """Stack fragment rows in page order and drop the header row.

    Only row 0 of the concatenated table is removed, wherever the fragment
    boundaries fall. With ``drop_repeated_headers`` later rows equal to the
    raw header are removed as well.
    """
    if not named_fragments:
        raise EmptyAssemblyError()
    if drop_repeated_headers is None:
        drop_repeated_headers = settings.drop_repeated_headers

    header = named_fragments[0].header
    rows: List[Row] = []
    for named in named_fragments:
        if named.header != header:
            raise ValueError(
                f"Fragment {named.page_index} was normalized against a different header."
            )
        rows.extend(named.rows)

    body = rows[1:]
    if drop_repeated_headers:
        kept = [row for row in body if row != header.names]
        if len(kept) != len(body):
            logger.info("Dropped %s repeated header rows", len(body) - len(kept))
        body = kept

    table = AssembledTable(columns=tuple(clean_column_names(header.names)), rows=tuple(body))
    logger.info(
        "Assembled %s rows x %s columns from %s fragments",
        table.row_count,
        len(table.columns),
        len(named_fragments),
    )
    return table
