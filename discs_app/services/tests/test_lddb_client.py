from unittest.mock import MagicMock, patch

import pytest
import requests

from discs_app.services.lddb_client import (
    LDDBClient,
    LDDBClientError,
    build_reference_search_url,
    build_upc_search_url,
)


def _mock_response(text: str = "", status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    return response


class TestSearchUrls:
    def test_upc_search_url(self):
        assert build_upc_search_url("https://www.lddb.com", "013131123456") == (
            "https://www.lddb.com/search.php?UPC=013131123456"
        )

    def test_reference_is_quoted(self):
        assert build_reference_search_url("https://www.lddb.com", "ML 104655") == (
            "https://www.lddb.com/search.php?REF=ML%20104655"
        )

    def test_client_strips_trailing_slash_from_base_url(self, settings):
        settings.LDDB_BASE_URL = "https://mirror.example.com/"
        client = LDDBClient()
        assert client.base_url == "https://mirror.example.com"
        assert client.upc_search_url("42") == "https://mirror.example.com/search.php?UPC=42"


class TestLDDBClientFetch:
    @patch("discs_app.services.lddb_client.requests.get")
    def test_returns_parsed_page(self, mock_get, settings):
        settings.LDDB_USER_AGENT = "test-agent"
        mock_get.return_value = _mock_response("<html><body><p>Title: Tron</p></body></html>")

        page = LDDBClient().fetch("https://www.lddb.com/search.php?UPC=1")

        assert "Title: Tron" in page.text
        assert page.url == "https://www.lddb.com/search.php?UPC=1"
        _, kwargs = mock_get.call_args
        assert kwargs["headers"]["User-Agent"] == "test-agent"
        assert kwargs["timeout"] == 5

    @patch("discs_app.services.lddb_client.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(LDDBClientError, match="timed out"):
            LDDBClient().fetch("https://www.lddb.com/search.php?UPC=1")

    @patch("discs_app.services.lddb_client.requests.get")
    def test_http_error_status(self, mock_get):
        response = _mock_response(status_code=503)
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
        mock_get.return_value = response

        with pytest.raises(LDDBClientError, match="HTTP 503"):
            LDDBClient().fetch("https://www.lddb.com/search.php?UPC=1")

    @patch("discs_app.services.lddb_client.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("connection refused")

        with pytest.raises(LDDBClientError, match="connection refused"):
            LDDBClient().fetch("https://www.lddb.com/search.php?UPC=1")
