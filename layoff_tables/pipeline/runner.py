"""Run the whole PDF-to-CSV pipeline and expose it on the command line."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel

from layoff_tables.config import settings
from layoff_tables.errors import LayoffTablesError
from layoff_tables.ingestion.export_csv import default_destination, write_csv
from layoff_tables.ingestion.extract_pages import PageExtractor
from layoff_tables.models.fragment import PageFragment
from layoff_tables.models.table import TypedTable
from layoff_tables.pipeline.assemble import assemble
from layoff_tables.pipeline.coerce import coerce
from layoff_tables.pipeline.header import resolve_header
from layoff_tables.pipeline.normalize import normalize_fragments

logger = logging.getLogger(__name__)


class PipelineResult(BaseModel):
    """Summary of a successful run."""

    source: str
    destination: Path
    row_count: int
    column_count: int


def build_table(
    fragments: Sequence[PageFragment],
    date_columns: Optional[Iterable[str]] = None,
    numeric_columns: Optional[Iterable[str]] = None,
    date_format: Optional[str] = None,
    drop_repeated_headers: Optional[bool] = None,
) -> TypedTable:
    """Header -> normalize -> assemble -> coerce over extracted fragments."""
    header = resolve_header(fragments)
    named = normalize_fragments(fragments, header)
    table = assemble(named, drop_repeated_headers=drop_repeated_headers)
    return coerce(
        table,
        date_columns=date_columns,
        numeric_columns=numeric_columns,
        date_format=date_format,
    )


def run_pipeline(
    source: str,
    destination: Optional[Path] = None,
    extractor: Optional[PageExtractor] = None,
    pages: Optional[Sequence[int]] = None,
    date_format: Optional[str] = None,
    drop_repeated_headers: Optional[bool] = None,
) -> PipelineResult:
    """Extract, reconcile and write ``source``; nothing is written on failure."""
    extractor = extractor or PageExtractor()
    fragments = extractor.extract_pages(source, pages=pages)
    typed = build_table(
        fragments,
        date_format=date_format,
        drop_repeated_headers=drop_repeated_headers,
    )
    output_path = write_csv(typed, destination or default_destination(source))
    return PipelineResult(
        source=source,
        destination=output_path,
        row_count=typed.row_count,
        column_count=len(typed.columns),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layoff-tables",
        description="Extract a layoff table from a PDF and write it as CSV.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=settings.source,
        help="PDF path or http(s) URL (default: SOURCE setting)",
    )
    parser.add_argument("-o", "--output", type=Path, help="CSV destination")
    parser.add_argument("--pages", type=int, nargs="+", help="1-based pages to read")
    parser.add_argument("--date-format", help="strptime format of the date columns")
    parser.add_argument(
        "--strategy",
        choices=["lines", "lines_strict", "text"],
        help="PyMuPDF table detection strategy",
    )
    parser.add_argument(
        "--drop-repeated-headers",
        action="store_true",
        default=None,
        help="also drop rows repeating the header on later pages",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    if not args.source:
        logger.error("No source given. Pass a PDF path or URL, or set SOURCE.")
        return 2

    try:
        result = run_pipeline(
            args.source,
            destination=args.output,
            extractor=PageExtractor(strategy=args.strategy),
            pages=args.pages,
            date_format=args.date_format,
            drop_repeated_headers=args.drop_repeated_headers,
        )
    except LayoffTablesError as exc:
        logger.error("%s stage failed: %s", exc.stage, exc)
        return 1
    logger.info(
        "Wrote %s rows x %s columns to %s",
        result.row_count,
        result.column_count,
        result.destination,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
