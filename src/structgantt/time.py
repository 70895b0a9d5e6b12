# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional, cast

import pendulum
from pendulum.parsing.exceptions import ParserError

_DATE_PART = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date."""
    return cast(pendulum.DateTime, pendulum.parse(date_str)).date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_part(compare_value: Optional[str]) -> Optional[str]:
    """Strip the time of day from a compare value.

    Returns None for empty values and for anything that is not a
    'YYYY-MM-DD' date once the time is cut off.
    """
    if not compare_value:
        return None
    day = compare_value.strip().split(" ")[0].split("T")[0]
    if not _DATE_PART.match(day):
        return None
    return day


def days_between(start: str, end: str) -> int:
    return abs(date_from_str(start).diff(date_from_str(end)).in_days())


def _parse(raw: Any) -> Optional[pendulum.DateTime]:
    """Parse a raw date or datetime cell, dates become midnight datetimes."""
    if raw is None or raw == "":
        return None
    try:
        parsed = pendulum.parse(str(raw), exact=True)
    except (ParserError, ValueError):
        return None
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day)
    return None


def normalize_date(raw: Any) -> Optional[str]:
    """Normalize a raw date cell to its sortable 'YYYY-MM-DD' compare form."""
    parsed = _parse(raw)
    if parsed is None:
        return None
    return parsed.format("YYYY-MM-DD")


def normalize_datetime(raw: Any) -> Optional[str]:
    """Normalize a raw datetime cell to 'YYYY-MM-DD HH:mm:ss'."""
    parsed = _parse(raw)
    if parsed is None:
        return None
    return parsed.format("YYYY-MM-DD HH:mm:ss")
