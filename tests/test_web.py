"""
Tests for the web retrieval module.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from wclist.config import WebRetrievalConfig
from wclist.model import FetchError
from wclist.web import download_cause_list, fetch_cause_list, fetch_pdf

URL = "https://example.org/causelist.pdf"


def make_response(content=b"%PDF-1.4 test", status_error=None):
    response = MagicMock()
    response.content = content
    if status_error:
        response.raise_for_status.side_effect = status_error
    return response


@patch("wclist.web.requests.get")
def test_fetch_pdf(mock_get):
    """Test fetching a PDF."""
    mock_get.return_value = make_response()

    assert fetch_pdf(URL, timeout=5) == b"%PDF-1.4 test"
    mock_get.assert_called_once_with(URL, headers={}, timeout=5)


@patch("wclist.web.requests.get")
def test_fetch_pdf_not_a_pdf(mock_get):
    """Test rejecting a response that is not a PDF."""
    mock_get.return_value = make_response(b"<html>maintenance</html>")

    with pytest.raises(FetchError):
        fetch_pdf(URL)


@patch("wclist.web.requests.get")
def test_fetch_pdf_http_error(mock_get):
    """Test an HTTP error status."""
    mock_get.return_value = make_response(status_error=requests.exceptions.HTTPError("404"))

    with pytest.raises(FetchError):
        fetch_pdf(URL)


@patch("wclist.web.time.sleep")
@patch("wclist.web.requests.get")
def test_fetch_cause_list_retries(mock_get, mock_sleep):
    """Test retrying after connection errors."""
    mock_get.side_effect = [
        requests.exceptions.ConnectionError("reset"),
        requests.exceptions.Timeout("slow"),
        make_response(),
    ]

    assert fetch_cause_list(URL, max_retries=3, backoff_factor=0.5) == b"%PDF-1.4 test"
    assert mock_get.call_count == 3
    assert [c[0][0] for c in mock_sleep.call_args_list] == [0.5, 1.0]


@patch("wclist.web.time.sleep")
@patch("wclist.web.requests.get")
def test_fetch_cause_list_gives_up(mock_get, mock_sleep):
    """Test failing after all retries."""
    mock_get.side_effect = requests.exceptions.ConnectionError("down")

    with pytest.raises(FetchError):
        fetch_cause_list(URL, max_retries=2)

    assert mock_get.call_count == 3
    assert mock_sleep.call_count == 2


@patch("wclist.web.requests.get")
def test_download_cause_list(mock_get, tmp_path):
    """Test saving a downloaded cause list."""
    mock_get.return_value = make_response()
    out = tmp_path / "lists" / "today.pdf"

    path = download_cause_list(WebRetrievalConfig(url=URL), str(out))

    assert path == str(out)
    assert out.read_bytes() == b"%PDF-1.4 test"


@patch("wclist.web.time.sleep")
@patch("wclist.web.requests.get")
def test_fetch_cause_list_does_not_retry_non_pdf(mock_get, mock_sleep):
    """Test that a response that is not a PDF fails without retrying."""
    mock_get.return_value = make_response(b"<html>maintenance</html>")

    with pytest.raises(FetchError, match="not a PDF"):
        fetch_cause_list(URL, max_retries=3)

    assert mock_get.call_count == 1
    mock_sleep.assert_not_called()
