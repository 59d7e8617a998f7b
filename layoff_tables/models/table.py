"""Whole-document table models: the all-string and the typed stage."""

from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .fragment import Row

TypedValue = Optional[Union[date, int, float, str]]


class AssembledTable(BaseModel):
    """Concatenated fragments with cleaned column names and string cells."""

    model_config = ConfigDict(frozen=True)

    columns: Row
    rows: Tuple[Row, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def records(self) -> Iterator[Dict[str, str]]:
        for row in self.rows:
            yield dict(zip(self.columns, row))


class TypedTable(BaseModel):
    """Rows whose designated columns carry dates or numbers.

    ``None`` marks a value that could not be parsed; it is never confused
    with an empty string in a pass-through column.
    """

    model_config = ConfigDict(frozen=True)

    columns: Row
    rows: Tuple[Tuple[TypedValue, ...], ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def records(self) -> Tuple[Mapping[str, TypedValue], ...]:
        return tuple(MappingProxyType(dict(zip(self.columns, row))) for row in self.rows)

    def column(self, name: str) -> Tuple[TypedValue, ...]:
        position = self.columns.index(name)
        return tuple(row[position] for row in self.rows)
