"""Pagination - page/limit parsing and metadata for windowed contact listings.

Invariants:
    - page and limit are always >= 1 after resolution
    - page <= MAX_PAGE (larger falls back to 1); limit clamped to MAX_LIMIT
    - skip = (page - 1) * limit
    - totalPages = ceil(totalContacts / limit); 0 when there are no contacts
    - A page beyond the last one is not an error: it yields an empty window

Design Decisions:
    - Query params accepted as raw strings: garbage input ("abc", "0", "-3")
      falls back to defaults instead of failing the request
    - Leading-integer parsing ("2abc" -> 2), like parseInt in browser clients
"""

import math
import re
from dataclasses import dataclass

DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 10
MAX_PAGE: int = 1_000_000
MAX_LIMIT: int = 100

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")
_MAX_DIGITS = 18


@dataclass(frozen=True)
class PageWindow:
    """Resolved pagination window."""
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def parse_positive_int(
    raw: str | None, default: int, maximum: int | None = None, clamp: bool = False,
) -> int:
    """Parse the leading integer of raw; fall back to default unless it is >= 1.

    Values above maximum fall back to default, or to maximum when clamp is set.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if sign == "-" or not digits:
        return default
    value = int(digits) if len(digits) <= _MAX_DIGITS else None
    if maximum is not None and (value is None or value > maximum):
        return maximum if clamp else default
    return default if value is None else value


def resolve_page_window(page_raw: str | None, limit_raw: str | None) -> PageWindow:
    return PageWindow(
        page=parse_positive_int(page_raw, DEFAULT_PAGE, MAX_PAGE),
        limit=parse_positive_int(limit_raw, DEFAULT_LIMIT, MAX_LIMIT, clamp=True),
    )


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def build_page_metadata(total: int, window: PageWindow) -> dict:
    """Metadata block returned alongside a page of contacts."""
    return {
        "totalContacts": total,
        "currentPage": window.page,
        "limit": window.limit,
        "totalPages": total_pages(total, window.limit),
    }
