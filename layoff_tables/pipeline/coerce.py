"""Convert designated string columns into dates and numbers."""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Tuple, Union

from layoff_tables.config import settings
from layoff_tables.errors import UnknownColumnError
from layoff_tables.models.table import AssembledTable, TypedTable, TypedValue

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)$")
THOUSANDS_PATTERN = re.compile(r"(?<=\d),(?=\d{3}(\D|$))")


def parse_date(value: str, date_format: str) -> Optional[date]:
    """Parse ``value`` with ``date_format``; ``None`` if it does not match."""
    try:
        return datetime.strptime(value.strip(), date_format).date()
    except ValueError:
        return None


def parse_number(value: str) -> Optional[Union[int, float]]:
    """Parse a decimal such as ``"120"``, ``"1,250"`` or ``"12.5"``.

    Integral values come back as ``int``. Anything else, including empty
    strings and ``"N/A"``, is ``None``.
    """
    text = THOUSANDS_PATTERN.sub("", value.strip())
    if not NUMBER_PATTERN.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number.is_integer() and "." not in text:
        return int(text)
    return number


def _check_columns(table: AssembledTable, columns: Iterable[str]) -> None:
    for column in columns:
        if column not in table.columns:
            raise UnknownColumnError(column, table.columns)


def coerce(
    table: AssembledTable,
    date_columns: Optional[Iterable[str]] = None,
    numeric_columns: Optional[Iterable[str]] = None,
    date_format: Optional[str] = None,
) -> TypedTable:
    """Return a typed copy of ``table``.

    Unparsable values become ``None``; only a designated column missing from
    the table raises.
    """
    if date_columns is None:
        date_columns = settings.date_columns
    if numeric_columns is None:
        numeric_columns = settings.numeric_columns
    if date_format is None:
        date_format = settings.date_format

    date_set = set(date_columns)
    numeric_set = set(numeric_columns)
    overlap = date_set & numeric_set
    if overlap:
        raise ValueError(f"Columns cannot be both date and numeric: {sorted(overlap)}")
    _check_columns(table, sorted(date_set))
    _check_columns(table, sorted(numeric_set))

    missing: Dict[str, int] = {column: 0 for column in date_set | numeric_set}
    rows: List[Tuple[TypedValue, ...]] = []
    for record in table.records():
        typed: Dict[str, TypedValue] = dict(record)
        for column in date_set:
            typed[column] = parse_date(record[column], date_format)
        for column in numeric_set:
            typed[column] = parse_number(record[column])
        for column in missing:
            if typed[column] is None:
                missing[column] += 1
        rows.append(tuple(typed[column] for column in table.columns))

    for column, count in sorted(missing.items()):
        if count:
            logger.debug("%s of %s values in %s did not parse", count, len(rows), column)
    return TypedTable(columns=table.columns, rows=tuple(rows))
