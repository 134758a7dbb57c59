"""
Web retrieval module for fetching published cause lists.
"""

import os
import time
from typing import Dict, Optional

import requests

from wclist.config import WebRetrievalConfig
from wclist.log import get_logger
from wclist.model import FetchError

logger = get_logger(__name__)

PDF_MAGIC = b"%PDF"


def _get(url: str, headers: Optional[Dict[str, str]], timeout: float) -> bytes:
    response = requests.get(url, headers=headers or {}, timeout=timeout)
    response.raise_for_status()
    return response.content


def _check_pdf(url: str, content: bytes) -> bytes:
    if not content.startswith(PDF_MAGIC):
        raise FetchError(f"Response from {url} is not a PDF")
    return content


def fetch_pdf(url: str, headers: Optional[Dict[str, str]] = None, timeout: float = 30.0) -> bytes:
    """
    Fetch a PDF from a URL.

    Args:
        url: URL to fetch
        headers: Optional request headers
        timeout: Request timeout in seconds

    Returns:
        Raw PDF bytes
    """
    try:
        content = _get(url, headers, timeout)
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Failed to fetch PDF: {e}") from e
    return _check_pdf(url, content)


def fetch_cause_list(url: str, headers: Optional[Dict[str, str]] = None, timeout: float = 30.0,
                     max_retries: int = 3, backoff_factor: float = 1.0) -> bytes:
    """
    Fetch a cause list PDF with retry logic and exponential backoff.

    Only request errors are retried; a response that is not a PDF fails
    straight away.

    Args:
        url: URL to fetch
        headers: Optional request headers
        timeout: Request timeout in seconds
        max_retries: Maximum number of retry attempts
        backoff_factor: Factor for exponential backoff

    Returns:
        Raw PDF bytes
    """
    last_exception = None

    for attempt in range(max_retries + 1):
        try:
            content = _get(url, headers, timeout)
        except requests.exceptions.RequestException as e:
            last_exception = e
            logger.warning(f"Error fetching {url} (attempt {attempt + 1}/{max_retries + 1}): {e}")
        else:
            return _check_pdf(url, content)

        # Don't sleep after the last attempt
        if attempt < max_retries:
            sleep_time = backoff_factor * (2 ** attempt)
            logger.info(f"Retrying in {sleep_time:.1f} seconds...")
            time.sleep(sleep_time)

    # All retries failed
    raise FetchError(f"Failed to fetch PDF after {max_retries + 1} attempts: {last_exception}") from last_exception


def download_cause_list(cfg: WebRetrievalConfig, output_path: str) -> str:
    """
    Download the configured cause list to a file.

    Args:
        cfg: Web retrieval configuration
        output_path: Path to save the PDF

    Returns:
        Path of the saved PDF
    """
    content = fetch_cause_list(cfg.url, timeout=cfg.timeout, max_retries=cfg.max_retries,
                               backoff_factor=cfg.backoff_factor)

    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(content)

    logger.info(f"Saved {len(content)} bytes to {output_path}")
    return output_path
