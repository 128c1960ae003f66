"""
Field parsers shared by every lddb.com extraction strategy.

Label routing lives here so that tables, definition lists, free text and the
detail page all agree on which label fills which LookupResult field.
"""

from __future__ import annotations

import logging
import re

from discs_app.services.lookup_result import LookupResult

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r"([0-9]{4})")

RUNTIME_MINUTES_PATTERN = re.compile(r"([0-9]+)\s*min")
RUNTIME_CLOCK_PATTERN = re.compile(r"([0-9]+):([0-9]+)")
RUNTIME_HOURS_MINUTES_PATTERN = re.compile(r"([0-9]+)h\s*([0-9]+)m")


def parse_year(text: str) -> tuple[int, bool]:
    """
    Find the first four digits in a row, e.g. 'Released in 1995' -> (1995, True).

    Longer digit runs give their first four digits: '19770525' -> 1977.

    No range check is made; '0000' is returned as 0 with ok=True.
    """
    match = YEAR_PATTERN.search(text)
    if not match:
        return 0, False
    return int(match.group(1)), True


def parse_runtime_minutes(text: str) -> tuple[int, bool]:
    """
    Parse runtimes like '120 min', '2:30' or '1h 30m' to minutes.
    """
    text = text.lower()

    match = RUNTIME_MINUTES_PATTERN.search(text)
    if match:
        return int(match.group(1)), True

    match = RUNTIME_CLOCK_PATTERN.search(text)
    if match:
        return int(match.group(1)) * 60 + int(match.group(2)), True

    match = RUNTIME_HOURS_MINUTES_PATTERN.search(text)
    if match:
        return int(match.group(1)) * 60 + int(match.group(2)), True

    return 0, False


def _parse_sides(value: str) -> int | None:
    tokens = value.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None


def route_label(label: str, value: str, result: LookupResult) -> str | None:
    """
    Assign value to the LookupResult field matching label.

    Labels are matched by substring, first match wins:
    title, year/date, director/directed, genre/category, format, sides,
    runtime/duration. Returns the name of the assigned field, or None when
    the label is unknown or the value could not be parsed.
    """
    label = label.lower()

    if "title" in label:
        result.title = value
        return "title"

    if "year" in label or "date" in label:
        year, ok = parse_year(value)
        if not ok:
            return None
        result.year = year
        return "year"

    if "director" in label or "directed" in label:
        result.director = value
        return "director"

    if "genre" in label or "category" in label:
        result.genre = value
        return "genre"

    if "format" in label:
        result.format = value
        return "format"

    if "sides" in label:
        sides = _parse_sides(value)
        if sides is None:
            logger.debug(f"Could not parse sides from '{value}'")
            return None
        result.sides = sides
        return "sides"

    if "runtime" in label or "duration" in label:
        runtime, ok = parse_runtime_minutes(value)
        if not ok:
            return None
        result.runtime = runtime
        return "runtime"

    return None
