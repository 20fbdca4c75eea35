"""
ISBN extraction from recognized cover text.

Patterns are tried in priority order: labeled "ISBN-10/13:" forms,
unlabeled "ISBN:" forms, a bare 978/979 number with separators, then
a bare ten-character number. The first match whose separator-free
form is 10 characters (digits, optional trailing X) or 13 digits wins.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

ISBN_PATTERNS = (
    re.compile(r"ISBN[- ]?1[03][- ]?:?[- ]?([0-9X-]{10,17})", re.IGNORECASE),
    re.compile(r"ISBN[- ]?:?[- ]?([0-9X-]{10,17})", re.IGNORECASE),
    re.compile(r"\b(97[89][- ]?[0-9]{1,5}[- ]?[0-9]+[- ]?[0-9]+[- ]?[0-9X])\b", re.IGNORECASE),
    re.compile(r"\b([0-9]{9}[0-9X])\b", re.IGNORECASE),
)

# Separator-free ISBN-10 (check character may be X) or ISBN-13
ISBN_SHAPE = re.compile(r"^(?:[0-9]{9}[0-9X]|[0-9]{13})$")


def _strip_separators(value: str) -> str:
    return value.replace("-", "").replace(" ", "").upper()


def extract_isbn(text: str) -> str | None:
    """Find an ISBN-10 or ISBN-13 in arbitrary text.

    Args:
        text: Recognized text, possibly multi-line.

    Returns:
        Digits (and a trailing X) of the first ISBN found, or None.

    Example:
        >>> extract_isbn("ISBN-13: 978-0-545-01022-1")
        '9780545010221'
    """
    if not text:
        return None

    for pattern in ISBN_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        isbn = _strip_separators(match.group(1))
        if ISBN_SHAPE.match(isbn):
            logger.debug("ISBN %s matched by %r", isbn, pattern.pattern)
            return isbn
        logger.debug("Rejected ISBN candidate %r", isbn)

    return None


def normalize_isbn(code: str) -> str:
    """Keep only the digits of a scanned barcode payload."""
    return "".join(ch for ch in code if ch.isdigit())


def looks_like_isbn(text: str) -> bool:
    """True when a typed query is made only of digits."""
    return bool(text) and all(ch.isdigit() for ch in text)
