"""
UPC normalization for lddb.com searches.
"""

import re

NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def normalize_code(raw: str) -> tuple[str, bool]:
    """
    Strip everything that is not an ASCII digit from a product code.

    Returns the cleaned code and whether it is usable (non-empty).
    e.g. "0 12345-67890 5" -> ("012345678905", True), "   " -> ("", False)
    """
    clean = NON_DIGIT_PATTERN.sub("", raw or "")
    return clean, bool(clean)
