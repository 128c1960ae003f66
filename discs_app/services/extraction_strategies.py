"""
Extraction strategies for lddb.com search pages.

lddb.com has changed its markup several times, so no single selector can be
trusted. Each strategy below scans the page a different way and writes what
it finds into the shared LookupResult. The assembler runs them in the order
of EXTRACTION_STRATEGIES and stops as soon as one of them recovers a title.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from discs_app.services.field_parsers import parse_year, route_label
from discs_app.services.lddb_client import build_reference_search_url
from discs_app.services.lookup_result import LookupResult
from discs_app.services.page_content import PageContent

logger = logging.getLogger(__name__)

SITE_NAME = "lddb"

CATALOG_CODE = r"[A-Z0-9][A-Z0-9-]*[0-9][A-Z0-9-]*"

# e.g. "ML104655  Star Wars (1977) CLV"
CATALOG_LINE_PATTERN = re.compile(
    r"\b(" + CATALOG_CODE + r")[ \t]+([^\n]+?)[ \t]*\(([0-9]{4})\)[ \t]*([A-Z][A-Z/]*)\b"
)

# e.g. "ML104655 Star Wars (1977)"
DETAIL_LINK_PATTERN = re.compile(
    r"\b(" + CATALOG_CODE + r")[ \t]+([^\n]+?)[ \t]*\(([0-9]{4})\)"
)

TITLE_PATTERNS = [
    re.compile(r"Title:\s*(.+?)(?:\n|$)"),
    re.compile(r"TITLE:\s*(.+?)(?:\n|$)"),
]
YEAR_PATTERN = re.compile(r"(?:Year|Date):\s*([0-9]{4})")

Strategy = Callable[[PageContent, LookupResult], None]


def normalize_spaces(text: str) -> str:
    return text.replace("\xa0", " ")


def extract_from_text(text: str, result: LookupResult) -> None:
    """
    Route every 'Label: value' line of free text.

    Lines without a colon, or with more than one, are skipped.
    """
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue

        parts = line.split(":")
        if len(parts) != 2:
            continue

        route_label(parts[0].strip(), parts[1].strip(), result)


def extract_from_tables(page: PageContent, result: LookupResult) -> None:
    """
    Read label/value rows from every table mentioning a title or a laserdisc.

    All matching tables are visited, so a later table overrides an earlier one.
    """
    for table in page.find_all("table"):
        table_text = page.element_text(table).lower()
        if "title" not in table_text and "laserdisc" not in table_text:
            continue

        for row in table.find_all("tr"):
            cells = page.cell_texts(row, "td")
            if len(cells) < 2:
                continue
            route_label(cells[0], cells[1], result)

    if result.title:
        result.found = True


def extract_from_definition_lists(page: PageContent, result: LookupResult) -> None:
    """Pair each <dt> with the <dd> at the same position."""
    for dl in page.find_all("dl"):
        terms = page.cell_texts(dl, "dt")
        definitions = page.cell_texts(dl, "dd")

        for term, definition in zip(terms, definitions):
            route_label(term, definition, result)

    if result.title:
        result.found = True


def extract_from_containers(page: PageContent, result: LookupResult) -> None:
    """Parse the text of divs whose class or id mentions a disc or a title."""
    for div in page.find_all("div"):
        markers = f"{page.attr(div, 'class')} {page.attr(div, 'id')}".lower()
        if "disc" not in markers and "title" not in markers:
            continue

        extract_from_text(page.element_text(div), result)

        if result.title:
            result.found = True
            return


def extract_from_text_patterns(page: PageContent, result: LookupResult) -> None:
    """
    Last resort: regexes over the full page text.

    The catalog listing line ('<code> <title> (<year>) <format>') is tried
    first and wins outright. Otherwise 'Title:' and 'Year:'/'Date:' prefixes
    are matched independently; titles naming the site or a search page are
    the page chrome, not the disc, and are skipped.
    """
    text = normalize_spaces(page.text)

    match = CATALOG_LINE_PATTERN.search(text)
    if match:
        result.title = match.group(2).strip()
        result.year = int(match.group(3))
        result.format = match.group(4)
        result.found = True
        return

    for pattern in TITLE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue

        title = match.group(1).strip()
        title_lower = title.lower()
        if SITE_NAME in title_lower or "search" in title_lower:
            logger.debug(f"Rejected page chrome title: '{title}'")
            continue

        result.title = title
        break

    match = YEAR_PATTERN.search(text)
    if match:
        year, ok = parse_year(match.group(1))
        if ok:
            result.year = year

    if result.title:
        result.found = True


def find_detail_reference(text: str) -> str | None:
    """
    Find the catalog code of the first '<code> <title> (<year>)' listing.

    Returns None when the page lists nothing that looks like a disc.
    """
    match = DETAIL_LINK_PATTERN.search(normalize_spaces(text))
    if not match:
        return None
    return match.group(1)


def find_detail_url(text: str, base_url: str) -> str | None:
    """Reference search URL for the first listed disc on a search page, if any."""
    reference = find_detail_reference(text)
    if not reference:
        return None
    return build_reference_search_url(base_url.rstrip("/"), reference)


EXTRACTION_STRATEGIES: tuple[Strategy, ...] = (
    extract_from_tables,
    extract_from_definition_lists,
    extract_from_containers,
    extract_from_text_patterns,
)
