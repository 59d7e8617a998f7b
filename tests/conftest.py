from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest

from layoff_tables.models.fragment import PageFragment

RAW_HEADER = (
    "Company",
    "Location",
    "Notice Date",
    "Effective Date",
    "Received Date",
    "No. of Employees",
    "Layoff/Closure",
    "Type",
)


def data_row(n: int) -> Tuple[str, ...]:
    return (
        f"Company {n}",
        "Seattle",
        "07/15/2017",
        "09/15/2017",
        "07/17/2017",
        str(100 + n),
        "Layoff",
        "Permanent",
    )


def make_fragment(page_index: int, rows: Sequence[Sequence[str]]) -> PageFragment:
    return PageFragment(
        page_index=page_index,
        page_number=page_index + 1,
        rows=tuple(tuple(row) for row in rows),
    )


def layoff_fragments(shapes: Sequence[int] = (5, 48, 10)) -> List[PageFragment]:
    """Fragments whose first row on page 1 is the header."""
    fragments = []
    counter = 0
    for page_index, row_count in enumerate(shapes):
        rows = []
        for _ in range(row_count):
            if page_index == 0 and not rows:
                rows.append(RAW_HEADER)
                continue
            rows.append(data_row(counter))
            counter += 1
        fragments.append(make_fragment(page_index, rows))
    return fragments


@pytest.fixture()
def fragments() -> List[PageFragment]:
    return layoff_fragments()
