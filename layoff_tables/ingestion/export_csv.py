"""Write typed tables to CSV with pandas."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import pandas as pd

from layoff_tables.config import settings
from layoff_tables.models.table import TypedTable

logger = logging.getLogger(__name__)


def default_destination(source: str, output_dir: Optional[Path] = None) -> Path:
    """``<output_dir>/<source stem>.csv`` for a path or URL."""
    output_dir = output_dir or settings.output_dir_path
    stem = Path(urlparse(source).path).stem or "table"
    return output_dir / f"{stem}.csv"


def to_frame(table: TypedTable) -> pd.DataFrame:
    # object dtype keeps ints as ints next to missing values
    return pd.DataFrame(list(table.rows), columns=list(table.columns), dtype=object)


def write_csv(
    table: TypedTable,
    destination: Union[str, Path],
    encoding: Optional[str] = None,
) -> Path:
    """Write ``table`` as comma-separated values with a header row."""
    output_path = Path(destination)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame = to_frame(table)
    frame.to_csv(output_path, index=False, encoding=encoding or settings.csv_encoding)
    logger.info("Wrote %s rows to %s", len(frame), output_path)
    return output_path
