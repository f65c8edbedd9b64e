"""Normalization: category synonyms, dates, integers."""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional

from .models import Category

# Exact synonym -> canonical category. Keys are lower-cased and trimmed.
CATEGORY_ALIASES: dict[str, Category] = {
    "abs": Category.ABS,
    "abdominals": Category.ABS,
    "core": Category.ABS,
    "stomach": Category.ABS,
    "legs": Category.LEGS,
    "leg": Category.LEGS,
    "lower body": Category.LEGS,
    "quads": Category.LEGS,
    "hamstrings": Category.LEGS,
    "calves": Category.LEGS,
    "arms": Category.ARMS,
    "arm": Category.ARMS,
    "biceps": Category.ARMS,
    "triceps": Category.ARMS,
    "forearms": Category.ARMS,
    "back": Category.BACK,
    "lats": Category.BACK,
    "latissimus": Category.BACK,
    "rhomboids": Category.BACK,
    "traps": Category.BACK,
    "shoulders": Category.SHOULDERS,
    "shoulder": Category.SHOULDERS,
    "delts": Category.SHOULDERS,
    "deltoids": Category.SHOULDERS,
    "chest": Category.CHEST,
    "pecs": Category.CHEST,
    "pectorals": Category.CHEST,
    "cardio": Category.CARDIO,
    "cardiovascular": Category.CARDIO,
    "aerobic": Category.CARDIO,
    "conditioning": Category.CARDIO,
    "full-body": Category.FULL_BODY,
    "full body": Category.FULL_BODY,
    "fullbody": Category.FULL_BODY,
    "compound": Category.FULL_BODY,
    "total body": Category.FULL_BODY,
}


def is_known_category(token: str | None) -> bool:
    return (token or "").strip().lower() in CATEGORY_ALIASES


def normalize_category(token: str | None) -> Category:
    """Map a free-text category to a canonical Category. Unknown or blank -> full-body."""
    return CATEGORY_ALIASES.get((token or "").strip().lower(), Category.FULL_BODY)


# Day-first is tried after month-first, so it only applies when the day is > 12
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m/%d/%y",
    "%d/%m/%Y",
    "%m-%d-%Y",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%a %b %d %Y",
    "%Y-%m-%d",
    "%d-%m-%Y",
)
_DATETIME_FORMATS = (
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
)


def parse_date(value: str | None) -> Optional[dt.date]:
    """Return the calendar day of `value` (time-of-day discarded), or None if unparseable."""
    s = " ".join((value or "").split())
    if not s:
        return None
    try:
        return dt.date.fromisoformat(s)
    except ValueError:
        pass
    iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
    try:
        return dt.datetime.fromisoformat(iso).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS + _DATETIME_FORMATS:
        try:
            return dt.datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_WHOLE_DECIMAL_PATTERN = re.compile(r"^([+-]?\d+)\.0*$")


def parse_int(value: str | None) -> Optional[int]:
    """Parse an integer field. Accepts "12" and spreadsheet-style "12.0"; rejects "12.5", "abc"."""
    s = (value or "").strip()
    if _INT_PATTERN.match(s):
        return int(s)
    m = _WHOLE_DECIMAL_PATTERN.match(s)
    if m:
        return int(m.group(1))
    return None
