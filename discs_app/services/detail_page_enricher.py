"""
Detail page enrichment.

A search page usually only gives title, year and format. When it links to a
specific disc, the detail page is fetched and used to fill in director,
genre, runtime and the cover image.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin, urlsplit

from discs_app.services.extraction_strategies import normalize_spaces
from discs_app.services.lddb_client import LDDBClient, LDDBClientError
from discs_app.services.lookup_result import LookupResult
from discs_app.services.page_content import PageContent

logger = logging.getLogger(__name__)

# Label and value must share a line
DIRECTOR_PATTERN = re.compile(r"director[: \t]+([^\n]+)", re.IGNORECASE)
GENRE_PATTERN = re.compile(r"genre[: \t]+([^\n]+)", re.IGNORECASE)
RUNTIME_PATTERNS = [
    re.compile(r"runtime[:\s]+([0-9]+)\s*min", re.IGNORECASE),
    re.compile(r"duration[:\s]+([0-9]+)\s*min", re.IGNORECASE),
    re.compile(r"running time[:\s]+([0-9]+)\s*min", re.IGNORECASE),
]

MAX_DIRECTOR_LENGTH = 100
MAX_GENRE_LENGTH = 50


def _extract_labelled_text(pattern: re.Pattern, text: str, max_length: int) -> str:
    match = pattern.search(text)
    if not match:
        return ""
    value = match.group(1).strip().rstrip(",.").strip()
    if 0 < len(value) < max_length:
        return value
    return ""


def _extract_runtime(text: str) -> int:
    for pattern in RUNTIME_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return 0


def _extract_cover_image_url(page: PageContent, origin: str) -> str:
    """
    URL of the first image that looks like a cover scan.

    Root-relative and protocol-relative sources are resolved against origin;
    relative paths and other schemes are not trusted.
    """
    for img in page.find_all("img"):
        src = page.attr(img, "src")
        alt = page.attr(img, "alt").lower()

        if "cover" not in src.lower() and "cover" not in alt and "laserdisc" not in alt:
            continue

        if src.startswith("/"):
            return urljoin(origin, src)
        if src.startswith("http://") or src.startswith("https://"):
            return src
        return ""

    return ""


def site_origin(base_url: str) -> str:
    """Scheme and host of base_url, e.g. 'https://www.lddb.com/mirror' -> 'https://www.lddb.com'."""
    parts = urlsplit(base_url)
    return f"{parts.scheme}://{parts.netloc}"


def enrich_from_page(page: PageContent, result: LookupResult, origin: str) -> None:
    """
    Layer detail page fields onto result.

    Only empty fields are filled, except runtime: a labelled runtime on the
    detail page replaces whatever the search page gave.
    """
    text = normalize_spaces(page.text)

    director = _extract_labelled_text(DIRECTOR_PATTERN, text, MAX_DIRECTOR_LENGTH)
    if director and not result.director:
        result.director = director

    genre = _extract_labelled_text(GENRE_PATTERN, text, MAX_GENRE_LENGTH)
    if genre and not result.genre:
        result.genre = genre

    runtime = _extract_runtime(text)
    if runtime:
        if result.runtime and result.runtime != runtime:
            logger.debug(f"Detail page runtime {runtime} replaces {result.runtime} for '{result.title}'")
        result.runtime = runtime

    cover_image_url = _extract_cover_image_url(page, origin)
    if cover_image_url and not result.cover_image_url:
        result.cover_image_url = cover_image_url


class DetailPageEnricher:
    def __init__(self, client: LDDBClient):
        self.client = client

    def enrich(self, detail_url: str, result: LookupResult) -> str | None:
        """
        Fetch detail_url and enrich result in place.

        Returns an error message when the page could not be fetched. The
        result is left exactly as it was in that case.
        """
        try:
            page = self.client.fetch(detail_url)
        except LDDBClientError as e:
            return f"Failed to fetch detail page: {e}"

        enrich_from_page(page, result, site_origin(self.client.base_url))
        logger.info(f"Enriched '{result.title}' from detail page {page.url or detail_url}")
        return None
