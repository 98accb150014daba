# src/noble_lineage/dates/reign_dates.py

from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# "1523", "1523-06", "1523-06-06", "1523-06-06T00:00:00Z"
_ISO_RE = re.compile(
    r"^\s*(?P<year>\d{1,4})(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?(?:[T ].*)?\s*$"
)
_LEADING_YEAR_RE = re.compile(r"^\s*(\d{1,4})")


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def parse_reign_date(value: Any, *, end: bool = False) -> Optional[date]:
    """
    Parse a reign/biographical date into a ``date``.

    Missing parts are filled towards the outside of the period so that an
    interval built from ``parse_reign_date(start)`` and
    ``parse_reign_date(stop, end=True)`` covers the whole stated period:

        "1523"        -> 1523-01-01  (end: 1523-12-31)
        "1523-06"     -> 1523-06-01  (end: 1523-06-30)
        "1523-06-06"  -> 1523-06-06

    Returns None for anything that does not look like a date.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, int):
        year, month, day = value, None, None
    else:
        m = _ISO_RE.match(str(value))
        if not m:
            return None
        year = int(m.group("year"))
        month = int(m.group("month")) if m.group("month") else None
        day = int(m.group("day")) if m.group("day") else None

    if year < 1:
        return None

    try:
        if month is None:
            return date(year, 12, 31) if end else date(year, 1, 1)
        if day is None:
            last = calendar.monthrange(year, month)[1]
            return date(year, month, last if end else 1)
        return date(year, month, day)
    except ValueError:
        return None


def year_of(value: Any) -> Optional[int]:
    """
    Year component of a date-like value (the only part the legacy name
    matcher compares).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (date, datetime)):
        return value.year
    if isinstance(value, int):
        return value
    m = _LEADING_YEAR_RE.match(str(value))
    return int(m.group(1)) if m else None
