"""
PDF I/O utilities for wclist.
"""

import io
from typing import BinaryIO, List, NamedTuple, Optional, Sequence, Union

import pdfplumber

from wclist.config import DEFAULT_FOOTER_PREFIXES, Config
from wclist.log import get_logger
from wclist.model import DocumentError

logger = get_logger(__name__)


class PageText(NamedTuple):
    """
    Plain text of one page, or the reason it could not be extracted.
    """

    page_number: int  # 1-based
    text: Optional[str]
    error: Optional[str] = None


def normalize_page_text(text: Optional[str], footer_prefixes: Sequence[str] = DEFAULT_FOOTER_PREFIXES) -> List[str]:
    """
    Split a page's raw text into trimmed, non-empty lines.

    Lines starting with a footer prefix are dropped.
    
    Args:
        text: Raw page text
        footer_prefixes: Prefixes of publisher stamps to discard
        
    Returns:
        List of cleaned lines
    """
    if not text:
        return []

    lines = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if any(line.startswith(prefix) for prefix in footer_prefixes):
            continue
        lines.append(line)
    return lines


def extract_text_from_page(page) -> str:
    """
    Extract text from a PDF page.
    
    Args:
        page: PDF page object
        
    Returns:
        Extracted text as a string
    """
    return page.extract_text() or ""


def read_page_texts(source: Union[str, bytes, BinaryIO], cfg: Optional[Config] = None) -> List[PageText]:
    """
    Extract the plain text of each page of a cause list.

    Pages that fail to extract are returned with ``text=None`` and an
    error message so the caller can skip them.
    
    Args:
        source: Path, raw bytes or binary stream of the PDF
        cfg: Application configuration
        
    Returns:
        One PageText per page read, in page order
    """
    cfg = cfg or Config()
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    first_page = 2 if cfg.input.skip_cover_page else 1
    pages = []

    try:
        pdf = pdfplumber.open(source)
    except Exception as e:
        logger.error(f"Error opening cause list: {e}")
        raise DocumentError(f"Error opening cause list: {e}") from e

    with pdf:
        try:
            num_pages = len(pdf.pages)
        except Exception as e:
            logger.error(f"Error reading page tree: {e}")
            raise DocumentError(f"Error reading page tree: {e}") from e

        logger.info(f"PDF has {num_pages} pages")

        for page_number in range(first_page, num_pages + 1):
            logger.debug(f"Extracting text from page {page_number}")
            try:
                text = extract_text_from_page(pdf.pages[page_number - 1])
            except Exception as e:
                logger.warning(f"Error getting text from page {page_number}: {e}")
                pages.append(PageText(page_number, None, str(e)))
                continue
            pages.append(PageText(page_number, text))

    return pages
