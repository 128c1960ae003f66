"""
LookupService: looks up LaserDisc metadata on lddb.com by UPC or catalog reference.
"""

from __future__ import annotations

import logging

from discs_app.models import APICallCounter, OperationalIssue
from discs_app.services.code_normalizer import normalize_code
from discs_app.services.detail_page_enricher import DetailPageEnricher
from discs_app.services.lddb_client import LDDBClient, LDDBClientError
from discs_app.services.lookup_result import LookupResult
from discs_app.services.result_assembler import assemble

logger = logging.getLogger(__name__)

SERVICE_NAME = "lddb"


class LookupService:
    def __init__(self, client: LDDBClient | None = None, enricher: DetailPageEnricher | None = None):
        self.client = client or LDDBClient()
        self.enricher = enricher or DetailPageEnricher(self.client)

    def lookup_by_upc(self, upc: str) -> LookupResult:
        """
        Look up a disc by the UPC printed on its jacket.

        Dashes, spaces and other non-digits are ignored. A code without any
        digits is rejected without contacting lddb.com.
        """
        clean_upc, ok = normalize_code(upc)
        if not ok:
            logger.info(f"Rejected invalid UPC: '{upc}'")
            return LookupResult(upc=upc, error="Invalid UPC format")

        return self._lookup(upc, self.client.upc_search_url(clean_upc), task="lookup_by_upc")

    def lookup_by_reference(self, reference: str) -> LookupResult:
        """
        Look up a disc by its catalog reference (e.g. 'ML104655').
        """
        if not reference or not reference.strip():
            logger.info(f"Rejected invalid reference: '{reference}'")
            return LookupResult(upc=reference, error="Invalid reference format")

        search_url = self.client.reference_search_url(reference.strip())
        return self._lookup(reference, search_url, task="lookup_by_reference")

    def _lookup(self, identifier: str, search_url: str, task: str) -> LookupResult:
        logger.info(f"Looking up '{identifier}' on lddb.com")

        try:
            APICallCounter.increment(SERVICE_NAME)
            page = self.client.fetch(search_url)
        except LDDBClientError as e:
            logger.error(f"Failed to fetch lddb.com search page for '{identifier}': {e}")
            OperationalIssue.record(
                name="LDDB Search Page Fetch Failed",
                task=task,
                error=e,
                context={"identifier": identifier, "url": search_url},
                severity=OperationalIssue.Severity.ERROR,
            )
            return LookupResult(upc=identifier, error=f"Failed to fetch data: {e}")

        assembled = assemble(page, identifier, base_url=self.client.base_url)
        result = assembled.result

        if result.found and assembled.detail_url:
            if not result.lddb_url:
                result.lddb_url = assembled.detail_url
            self._enrich(assembled.detail_url, result, task)

        if result.found:
            logger.info(f"Found '{result.title}' ({result.year}) for '{identifier}'")
        else:
            logger.info(f"No lddb.com match for '{identifier}'")

        return result

    def _enrich(self, detail_url: str, result: LookupResult, task: str) -> None:
        APICallCounter.increment(SERVICE_NAME)
        error = self.enricher.enrich(detail_url, result)
        if not error:
            return

        logger.warning(f"Could not enrich '{result.title}' from {detail_url}: {error}")
        OperationalIssue.record(
            name="LDDB Detail Page Fetch Failed",
            task=task,
            error=error,
            context={"identifier": result.upc, "url": detail_url, "title": result.title},
            severity=OperationalIssue.Severity.WARNING,
        )
