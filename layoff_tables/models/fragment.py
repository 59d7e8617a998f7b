"""Page-level table fragments as produced by the extractor."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

Row = Tuple[str, ...]


class PageFragment(BaseModel):
    """The string grid of one table region found on a PDF page."""

    model_config = ConfigDict(frozen=True)

    page_index: int
    page_number: Optional[int] = None
    rows: Tuple[Row, ...] = ()

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


class ColumnHeader(BaseModel):
    """Ordered raw column names taken from the first row of the document."""

    model_config = ConfigDict(frozen=True)

    names: Row

    def __len__(self) -> int:
        return len(self.names)


class NamedFragment(BaseModel):
    """A fragment whose rows have been checked against the header."""

    model_config = ConfigDict(frozen=True)

    fragment: PageFragment
    header: ColumnHeader

    @property
    def page_index(self) -> int:
        return self.fragment.page_index

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self.fragment.rows
