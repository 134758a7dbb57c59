"""
Cause list aggregate for wclist.
"""

import datetime
from typing import BinaryIO, Iterable, List, Optional, Union

from wclist.config import Config
from wclist.log import get_logger
from wclist.matcher import MatchResult, search_assigned_matters
from wclist.model import ClientMatter, Record
from wclist.parser import RowFailure, parse_page_text
from wclist.pdfio import PageText, read_page_texts

logger = get_logger(__name__)


class CauseList:
    """
    A published cause list and the records read from it.

    A cause list is populated by a single call to ``read_cause_list`` (or
    ``read_pages``) and is read-only afterwards.
    """

    def __init__(self, jurisdiction: str, warden: str,
                 release_date: Optional[datetime.datetime] = None,
                 cfg: Optional[Config] = None):
        self.jurisdiction = jurisdiction
        self.warden = warden
        self.release_date = release_date or datetime.datetime.now()
        self.items: List[Record] = []
        self.diagnostics: List[str] = []
        self.cfg = cfg or Config()

    def __len__(self) -> int:
        return len(self.items)

    def read_cause_list(self, source: Union[str, bytes, BinaryIO]) -> None:
        """
        Read records from a cause list PDF.

        Raises DocumentError if the document cannot be opened. Pages whose
        text cannot be extracted are skipped and noted in ``diagnostics``.

        Args:
            source: Path, raw bytes or binary stream of the PDF
        """
        self._read(read_page_texts(source, self.cfg))

    def read_pages(self, page_texts: Iterable[Optional[str]]) -> None:
        """
        Read records from already extracted page texts.

        ``page_texts`` holds every page including the cover; a None entry
        marks a page whose extraction failed.

        Args:
            page_texts: Text of each page in document order
        """
        first_page = 2 if self.cfg.input.skip_cover_page else 1
        pages = []
        for page_number, text in enumerate(page_texts, 1):
            if page_number < first_page:
                continue
            if text is None:
                pages.append(PageText(page_number, None, "no text extracted"))
            else:
                pages.append(PageText(page_number, text))
        self._read(pages)

    def _read(self, pages: Iterable[PageText]) -> None:
        for page in pages:
            if page.text is None:
                message = f"Skipped page {page.page_number}: {page.error}"
                logger.warning(message)
                self.diagnostics.append(message)
                continue

            logger.info(f"Processing page {page.page_number}")
            failures: List[RowFailure] = []
            records = parse_page_text(page.text, self.cfg, failures)
            for record in records:
                record["source_page"] = page.page_number
            self.items.extend(records)
            for failure in failures:
                message = (f"Skipped row for matter {failure.matter_number} "
                           f"on page {page.page_number}: {failure.reason}")
                logger.warning(message)
                self.diagnostics.append(message)
            logger.info(f"Extracted {len(records)} items from page {page.page_number}")

        logger.info(f"Total items extracted: {len(self.items)}")

    def search_assigned_matters(self, matters: Iterable[ClientMatter]) -> List[MatchResult]:
        """
        Find the records matching the given client matters.

        Args:
            matters: Client matters to look for

        Returns:
            Match results, one per (matter, record, reason)
        """
        return search_assigned_matters(self.items, matters)

    def to_dict(self):
        return {
            "jurisdiction": self.jurisdiction,
            "warden": self.warden,
            "release_date": self.release_date.isoformat(),
            "items": self.items,
            "diagnostics": self.diagnostics,
        }
