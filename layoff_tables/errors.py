"""Errors raised by the extraction and reconciliation stages."""

from __future__ import annotations

from typing import Iterable, Optional


class LayoffTablesError(Exception):
    """Base class for every fatal pipeline error."""

    stage = "pipeline"


class ExtractionError(LayoffTablesError):
    """The PDF could not be read or contained no tables."""

    stage = "extract"

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Could not extract tables from {source}: {reason}")


class EmptyInputError(LayoffTablesError):
    stage = "header"

    def __init__(self) -> None:
        super().__init__("No page fragments to resolve a header from.")


class EmptyFragmentError(LayoffTablesError):
    stage = "header"

    def __init__(self, page_index: int = 0) -> None:
        self.page_index = page_index
        super().__init__(f"Fragment {page_index} has no rows to read a header from.")


class ColumnCountMismatchError(LayoffTablesError):
    """A fragment's width disagrees with the resolved header."""

    stage = "normalize"

    def __init__(
        self,
        page_index: int,
        expected: int,
        actual: int,
        row_index: Optional[int] = None,
    ) -> None:
        self.page_index = page_index
        self.expected = expected
        self.actual = actual
        self.row_index = row_index
        location = f"page index {page_index}"
        if row_index is not None:
            location = f"{location}, row {row_index}"
        super().__init__(
            f"Column count mismatch at {location}: expected {expected}, got {actual}."
        )


class EmptyAssemblyError(LayoffTablesError):
    stage = "assemble"

    def __init__(self) -> None:
        super().__init__("Cannot assemble a table from zero fragments.")


class UnknownColumnError(LayoffTablesError):
    stage = "coerce"

    def __init__(self, column: str, available: Iterable[str]) -> None:
        self.column = column
        self.available = tuple(available)
        super().__init__(
            f"Column {column!r} is not in the table (available: {', '.join(self.available)})."
        )
