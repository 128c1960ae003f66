"""
lddb.com HTTP client

Fetches search and detail pages from the LaserDisc Database.
"""

import logging
from urllib.parse import quote

import requests
from django.conf import settings

from discs_app.services.page_content import PageContent

logger = logging.getLogger(__name__)


class LDDBClientError(Exception):
    """Exception raised when an lddb.com page cannot be fetched."""

    pass


def build_upc_search_url(base_url: str, upc: str) -> str:
    return f"{base_url}/search.php?UPC={quote(upc)}"


def build_reference_search_url(base_url: str, reference: str) -> str:
    return f"{base_url}/search.php?REF={quote(reference)}"


class LDDBClient:
    """
    Client for fetching lddb.com pages.

    Reads LDDB_BASE_URL, LDDB_USER_AGENT and LDDB_REQUEST_TIMEOUT_SECONDS from
    Django settings once, at construction.
    """

    def __init__(self):
        self.base_url = settings.LDDB_BASE_URL.rstrip("/")
        self.user_agent = settings.LDDB_USER_AGENT
        self.timeout = settings.LDDB_REQUEST_TIMEOUT_SECONDS

    def _get_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }

    def upc_search_url(self, upc: str) -> str:
        return build_upc_search_url(self.base_url, upc)

    def reference_search_url(self, reference: str) -> str:
        return build_reference_search_url(self.base_url, reference)

    def fetch(self, url: str) -> PageContent:
        """
        GET a page and parse it.

        Raises:
            LDDBClientError: If the request times out, fails, or returns an error status
        """
        logger.debug(f"Fetching lddb.com page: {url}")

        try:
            response = requests.get(url, headers=self._get_headers(), timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            logger.error("lddb.com request timed out: %s", url)
            raise LDDBClientError(f"Request to {url} timed out")
        except requests.exceptions.HTTPError as e:
            logger.error("lddb.com HTTP error: %s - %s", e.response.status_code, url)
            raise LDDBClientError(f"lddb.com returned HTTP {e.response.status_code}")
        except requests.exceptions.RequestException as e:
            logger.error("lddb.com request failed: %s", str(e))
            raise LDDBClientError(f"Request to {url} failed: {str(e)}")

        return PageContent(response.text, url=url)
