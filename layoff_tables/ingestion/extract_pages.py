"""Pull raw table grids out of a PDF, one fragment per detected table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence
from urllib.parse import urlparse

import fitz
import httpx

from layoff_tables.config import settings
from layoff_tables.errors import ExtractionError
from layoff_tables.models.fragment import PageFragment, Row

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return urlparse(source).scheme in {"http", "https"}


def clean_cell(cell: Optional[str]) -> str:
    """Turn an extracted cell into a single-line string; empty cells are ``""``."""
    if cell is None:
        return ""
    return " ".join(part.strip() for part in cell.splitlines() if part.strip())


def clean_grid(grid: Iterable[Sequence[Optional[str]]]) -> List[Row]:
    return [tuple(clean_cell(cell) for cell in row) for row in grid]


class PageExtractor:
    """Finds tables on each page with PyMuPDF."""

    def __init__(
        self,
        strategy: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.strategy = strategy or settings.table_strategy
        self.timeout = timeout if timeout is not None else settings.download_timeout
        self.user_agent = user_agent or settings.user_agent
        self.client = client

    def _download(self, url: str) -> bytes:
        headers = {"User-Agent": self.user_agent}
        if self.client is not None:
            response = self.client.get(
                url, headers=headers, timeout=self.timeout, follow_redirects=True
            )
        else:
            with httpx.Client(follow_redirects=True) as client:
                response = client.get(url, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        logger.debug("Downloaded %s bytes from %s", len(response.content), url)
        return response.content

    def _open_document(self, source: str) -> fitz.Document:
        if is_url(source):
            return fitz.open(stream=self._download(source), filetype="pdf")
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(f"{source} is not a file")
        return fitz.open(str(path))

    def _page_fragments(
        self, doc: fitz.Document, pages: Optional[Sequence[int]]
    ) -> List[PageFragment]:
        page_numbers = list(pages) if pages else list(range(1, doc.page_count + 1))
        fragments: List[PageFragment] = []
        for page_number in page_numbers:
            if not 1 <= page_number <= doc.page_count:
                raise ValueError(
                    f"page {page_number} is out of range (document has {doc.page_count})"
                )
            finder = doc[page_number - 1].find_tables(strategy=self.strategy)
            for table in finder.tables:
                rows = clean_grid(table.extract())
                if not rows:
                    continue
                fragments.append(
                    PageFragment(
                        page_index=len(fragments),
                        page_number=page_number,
                        rows=tuple(rows),
                    )
                )
                logger.debug(
                    "Page %s: table of %s rows x %s columns",
                    page_number,
                    len(rows),
                    fragments[-1].column_count,
                )
        return fragments

    def extract_pages(
        self, source: str, pages: Optional[Sequence[int]] = None
    ) -> List[PageFragment]:
        """Return one fragment per table found, in page order."""
        if pages is None:
            pages = settings.pages
        try:
            doc = self._open_document(source)
        except (httpx.HTTPError, OSError, RuntimeError, ValueError) as exc:
            raise ExtractionError(source, str(exc)) from exc
        try:
            fragments = self._page_fragments(doc, pages)
        except (RuntimeError, ValueError) as exc:
            raise ExtractionError(source, str(exc)) from exc
        finally:
            doc.close()

        if not fragments:
            raise ExtractionError(source, "no tables found")
        logger.info("Extracted %s table fragments from %s", len(fragments), source)
        return fragments


def extract_pages(source: str, pages: Optional[Sequence[int]] = None) -> List[PageFragment]:
    return PageExtractor().extract_pages(source, pages=pages)
