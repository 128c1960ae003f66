"""
Turns a fetched lddb.com search page into a LookupResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.conf import settings

from discs_app.services.extraction_strategies import (
    EXTRACTION_STRATEGIES,
    Strategy,
    find_detail_url,
)
from discs_app.services.lookup_result import LookupResult
from discs_app.services.page_content import PageContent

logger = logging.getLogger(__name__)

NO_RESULTS_MARKERS = ("no results", "not found", "0 results")


@dataclass
class AssembledResult:
    """A LookupResult plus the detail page link found on the same page, if any."""
    result: LookupResult
    detail_url: str | None


def assemble(
    page: PageContent,
    identifier: str,
    base_url: str | None = None,
    strategies: tuple[Strategy, ...] = EXTRACTION_STRATEGIES,
) -> AssembledResult:
    """
    Run the extraction strategies over page, in order, until one finds a title.

    An explicit "no results" page is reported as not found without running any
    strategy. The detail link scan runs whatever the strategies found.
    """
    result = LookupResult(upc=identifier)

    page_text = page.text.lower()
    if any(marker in page_text for marker in NO_RESULTS_MARKERS):
        logger.info(f"lddb.com reported no results for '{identifier}' ({page.url or 'saved page'})")
        return AssembledResult(result=result, detail_url=None)

    for strategy in strategies:
        if result.found:
            break
        logger.debug(f"Trying {strategy.__name__} for '{identifier}'")
        strategy(page, result)

    if result.found:
        logger.debug(f"Found '{result.title}' for '{identifier}'")

    detail_url = find_detail_url(page.text, base_url or settings.LDDB_BASE_URL)
    if detail_url:
        logger.debug(f"Detail link for '{identifier}': {detail_url}")

    return AssembledResult(result=result, detail_url=detail_url)
