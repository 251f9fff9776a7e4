# src/bob_tasks/tasks/dates.py

from __future__ import annotations

import re
from datetime import date

from ..core.errors import BobError, ErrorKind

STORAGE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")

# Fixed English abbreviations: display output must not depend on the process locale.
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

INVALID_DATE_MESSAGE = "Invalid date format! Please use yyyy-MM-dd (e.g., 2019-12-01)"


def looks_like_date(text: str) -> bool:
    """True if `text` has the YYYY-MM-DD shape (values are not checked)."""
    return STORAGE_PATTERN.match(text.strip()) is not None


def parse_date(text: str) -> date:
    """Parse a strict YYYY-MM-DD string; anything else raises INVALID_DATE_FORMAT."""
    m = STORAGE_PATTERN.match(text.strip())
    if not m:
        raise BobError(ErrorKind.INVALID_DATE_FORMAT, INVALID_DATE_MESSAGE)
    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise BobError(ErrorKind.INVALID_DATE_FORMAT, INVALID_DATE_MESSAGE) from None


def format_storage(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def format_display(d: date) -> str:
    """Human form, e.g. 'Mar 15 2024'. One-way: never parsed back."""
    return f"{_MONTH_ABBR[d.month - 1]} {d.day:02d} {d.year:04d}"
