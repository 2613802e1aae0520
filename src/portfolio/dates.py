from __future__ import annotations

from datetime import date, datetime
from typing import Optional


FRENCH_MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)

# Partial dates, tried after full ISO dates/datetimes. Missing parts default to 1.
_PARTIAL_FORMATS = ("%Y-%m", "%Y/%m/%d", "%Y")


def parse_display_date(raw: str) -> Optional[date]:
    """Parse an ISO-ish date string; return None when it is not a calendar date.

    Datetimes keep the date as written (no timezone conversion).
    """
    s = raw.strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _PARTIAL_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def format_long_date(d: date) -> str:
    """`d MMMM yyyy` in French, e.g. "5 mars 2024"."""
    return f"{d.day} {FRENCH_MONTHS[d.month - 1]} {d.year}"


def format_display_date(raw: str) -> str:
    """Return `raw` as a French long-form date, or `raw` unchanged if it does not parse."""
    if not isinstance(raw, str):
        return raw
    parsed = parse_display_date(raw)
    if parsed is None:
        return raw
    formatted = format_long_date(parsed)
    return formatted or raw


__all__ = [
    "FRENCH_MONTHS",
    "format_display_date",
    "format_long_date",
    "parse_display_date",
]
