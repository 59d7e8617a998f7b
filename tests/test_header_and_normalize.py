from __future__ import annotations

import pytest

from layoff_tables.errors import (
    ColumnCountMismatchError,
    EmptyFragmentError,
    EmptyInputError,
)
from layoff_tables.models.fragment import ColumnHeader, NamedFragment
from layoff_tables.pipeline.header import resolve_header
from layoff_tables.pipeline.normalize import normalize_fragment, normalize_fragments

from .conftest import RAW_HEADER, make_fragment


class TestResolveHeader:
    def test_returns_first_row_of_first_fragment(self, fragments) -> None:
        header = resolve_header(fragments)
        assert header.names == RAW_HEADER
        assert len(header) == 8

    def test_names_are_not_cleaned(self) -> None:
        fragment = make_fragment(0, [[" Notice  Date ", "No. of\tEmployees"], ["a", "b"]])
        assert resolve_header([fragment]).names == (" Notice  Date ", "No. of\tEmployees")

    def test_ignores_later_fragments(self) -> None:
        first = make_fragment(0, [["a", "b"]])
        second = make_fragment(1, [["x", "y", "z"]])
        assert resolve_header([first, second]).names == ("a", "b")

    def test_empty_sequence(self) -> None:
        with pytest.raises(EmptyInputError):
            resolve_header([])

    def test_first_fragment_without_rows(self) -> None:
        with pytest.raises(EmptyFragmentError) as excinfo:
            resolve_header([make_fragment(0, []), make_fragment(1, [["a"]])])
        assert excinfo.value.stage == "header"


class TestNormalizeFragment:
    def test_attaches_header_and_keeps_cells(self) -> None:
        header = ColumnHeader(names=("a", "b"))
        fragment = make_fragment(2, [["1", "2"], ["3", ""]])
        named = normalize_fragment(fragment, header)
        assert isinstance(named, NamedFragment)
        assert named.header is header
        assert named.rows == (("1", "2"), ("3", ""))
        assert named.page_index == 2

    def test_first_fragment_keeps_header_row(self, fragments) -> None:
        header = resolve_header(fragments)
        named = normalize_fragment(fragments[0], header)
        assert named.rows[0] == RAW_HEADER

    def test_width_mismatch_reports_page(self) -> None:
        header = ColumnHeader(names=("a", "b", "c"))
        fragment = make_fragment(1, [["1", "2"], ["3", "4"]])
        with pytest.raises(ColumnCountMismatchError) as excinfo:
            normalize_fragment(fragment, header)
        error = excinfo.value
        assert (error.page_index, error.expected, error.actual) == (1, 3, 2)
        assert "page index 1" in str(error)

    def test_ragged_row_is_rejected(self) -> None:
        header = ColumnHeader(names=("a", "b"))
        fragment = make_fragment(0, [["1", "2"], ["3", "4", "5"], ["6", "7"]])
        with pytest.raises(ColumnCountMismatchError) as excinfo:
            normalize_fragment(fragment, header)
        assert excinfo.value.row_index == 1
        assert excinfo.value.actual == 3

    def test_empty_fragment_passes(self) -> None:
        header = ColumnHeader(names=("a", "b"))
        assert normalize_fragment(make_fragment(3, []), header).rows == ()


class TestNormalizeFragments:
    def test_preserves_order(self, fragments) -> None:
        header = resolve_header(fragments)
        named = normalize_fragments(fragments, header)
        assert [n.page_index for n in named] == [0, 1, 2]

    def test_stops_at_first_mismatch(self, fragments) -> None:
        header = resolve_header(fragments)
        short = make_fragment(1, [row[:7] for row in fragments[1].rows])
        with pytest.raises(ColumnCountMismatchError) as excinfo:
            normalize_fragments([fragments[0], short, fragments[2]], header)
        assert excinfo.value.page_index == 1
        assert excinfo.value.expected == 8
        assert excinfo.value.actual == 7
