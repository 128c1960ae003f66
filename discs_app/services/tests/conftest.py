"""
Pytest fixtures for lddb.com service tests.
"""

import os
from unittest.mock import MagicMock

import pytest

from discs_app.services.lddb_client import LDDBClient
from discs_app.services.page_content import PageContent


def load_html_snapshot(filename: str) -> str:
    """Load HTML snapshot file from the html_snapshot directory."""
    html_snapshot_path = os.path.join(
        os.path.dirname(__file__),
        "html_snapshot",
        filename,
    )
    with open(html_snapshot_path, encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def search_table_page():
    return PageContent(load_html_snapshot("lddb_search_table.html"))


@pytest.fixture
def search_listing_page():
    return PageContent(load_html_snapshot("lddb_search_listing.html"))


@pytest.fixture
def detail_page():
    return PageContent(load_html_snapshot("lddb_detail.html"))


@pytest.fixture
def no_results_page():
    return PageContent(load_html_snapshot("lddb_no_results.html"))


@pytest.fixture
def lddb_client():
    """Real LDDBClient with fetch mocked out, so URLs are built as in production."""
    client = LDDBClient()
    client.fetch = MagicMock()
    return client
