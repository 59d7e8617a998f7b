"""Helpers for turning raw PDF header cells into machine-friendly column names."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List

NON_ALNUM_PATTERN = re.compile(r"[\W_]+")


def clean_column_name(name: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to ``_`` and trim underscores.

    ``"No. of Employees"`` becomes ``"no_of_employees"``. Applying the
    function to its own output returns it unchanged.
    """
    return NON_ALNUM_PATTERN.sub("_", name.lower()).strip("_")


def clean_column_names(names: Iterable[str]) -> List[str]:
    """Clean a whole header so every column stays addressable.

    Names that clean to nothing become ``column_<position>`` (1-based) and
    repeats get ``_2``, ``_3`` ... suffixes in reading order.
    """
    cleaned = [
        clean_column_name(name) or f"column_{position}"
        for position, name in enumerate(names, start=1)
    ]
    taken = set(cleaned)
    seen: Dict[str, int] = {}
    result: List[str] = []
    for name in cleaned:
        if name not in seen:
            seen[name] = 1
            result.append(name)
            continue
        counter = seen[name]
        candidate = name
        while candidate in taken:
            counter += 1
            candidate = f"{name}_{counter}"
        seen[name] = counter
        taken.add(candidate)
        result.append(candidate)
    return result
