# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional, Sequence

import pendulum

from structgantt import time
from structgantt.exceptions import InsufficientRangeException
from structgantt.model.granularity_type import BucketUnit, GranularityType
from structgantt.model.role_assignment import RoleAssignment
from structgantt.model.timeline import Bucket, HeaderSpan, Timeline
from structgantt.model.value import Row

LOGGER = logging.getLogger(__name__)

BUCKET_UNITS: dict[GranularityType, BucketUnit] = {
    "day": "day",
    "day_week": "day",
    "day_month": "day",
    "week": "week",
    "month": "month",
}


def build_timeline(
    roles: RoleAssignment,
    rows: Sequence[Row],
    skip_weekends_requested: bool = False,
) -> Timeline:
    """
    Compute the date range, granularity, buckets and header spans for a result.

    Args:
        roles: Column role assignment of the result
        rows: All rows of the result
        skip_weekends_requested: Whether Saturdays and Sundays should be hidden

    Returns:
        The timeline shared by all rows of the chart

    Raises:
        InsufficientRangeException: when the dates span one day or less
    """
    min_date, max_date = scan_range(roles, rows)
    if min_date is None or max_date is None:
        raise InsufficientRangeException()

    span_days = time.days_between(min_date, max_date)
    if span_days <= 1:
        raise InsufficientRangeException(span_days)

    granularity = select_granularity(span_days)
    skip_weekends = skip_weekends_requested and BUCKET_UNITS[granularity] == "day"
    if skip_weekends_requested and not skip_weekends:
        LOGGER.debug("Weekend skipping disabled for %s granularity", granularity)

    LOGGER.debug(
        "Timeline %s..%s spans %d days, using %s granularity",
        min_date,
        max_date,
        span_days,
        granularity,
    )

    buckets = list_buckets(min_date, max_date, granularity, skip_weekends)
    return Timeline(
        min_date=min_date,
        max_date=max_date,
        span_days=span_days,
        granularity=granularity,
        skip_weekends=skip_weekends,
        buckets=buckets,
        headers=make_headers(buckets),
    )


def scan_range(
    roles: RoleAssignment, rows: Iterable[Row]
) -> tuple[Optional[str], Optional[str]]:
    """Find the earliest and latest start/end date over all rows.

    Empty and malformed cells are skipped.
    """
    min_date: Optional[str] = None
    max_date: Optional[str] = None

    for row in rows:
        for ref in (roles.start, roles.end):
            day = time.date_part(row[ref]["compare"])
            if day is None:
                continue
            if min_date is None or day < min_date:
                min_date = day
            if max_date is None or day > max_date:
                max_date = day

    return min_date, max_date


def select_granularity(span_days: int) -> GranularityType:
    if span_days < 14:
        return "day"
    if span_days < 52:
        return "day_week"
    if span_days < 360:
        return "day_month"
    if span_days < 600:
        return "week"
    return "month"


def list_buckets(
    start: str,
    end: str,
    granularity: GranularityType,
    skip_weekends: bool = False,
) -> tuple[Bucket, ...]:
    """
    List the interval units between two dates, both ends included.

    Week and month units are aligned to the start of their week or month,
    so the first unit contains start and the last contains end.

    Args:
        start: First date as YYYY-MM-DD
        end: Last date as YYYY-MM-DD
        granularity: Granularity deciding the unit and its labels
        skip_weekends: Drop Saturday and Sunday units (day units only)

    Returns:
        The ordered buckets
    """
    if start > end:
        start, end = end, start

    unit = BUCKET_UNITS[granularity]
    current = time.date_from_str(start)
    last = time.date_from_str(end)
    if unit == "week":
        current = current.start_of("week")
    elif unit == "month":
        current = current.start_of("month")

    buckets: list[Bucket] = []
    while current <= last:
        if not (skip_weekends and unit == "day" and current.isoweekday() >= 6):
            buckets.append(make_bucket(current, granularity))
        current = _next(current, unit)

    return tuple(buckets)


def make_bucket(date: pendulum.Date, granularity: GranularityType) -> Bucket:
    return Bucket(
        date=date,
        key=compare_key(date, granularity),
        header=_header_label(date, granularity),
        short=_short_label(date, granularity),
        long=_long_label(date, granularity),
    )


def make_headers(buckets: Iterable[Bucket]) -> tuple[HeaderSpan, ...]:
    """Group consecutive buckets sharing a header label."""
    headers: list[HeaderSpan] = []
    for bucket in buckets:
        if headers and headers[-1].name == bucket.header:
            headers[-1] = HeaderSpan(bucket.header, headers[-1].count + 1)
        else:
            headers.append(HeaderSpan(bucket.header, 1))
    return tuple(headers)


def compare_key(date: pendulum.Date, granularity: GranularityType) -> str:
    """Sortable identifier of the unit containing the given date."""
    unit = BUCKET_UNITS[granularity]
    if unit == "week":
        iso_year, iso_week, _ = date.isocalendar()
        return f"{iso_year:04d}-{iso_week:02d}"
    if unit == "month":
        return date.format("YYYY-MM")
    return date.format("YYYY-MM-DD")


def _next(date: pendulum.Date, unit: BucketUnit) -> pendulum.Date:
    if unit == "week":
        return date.add(weeks=1)
    if unit == "month":
        return date.add(months=1)
    return date.add(days=1)


def _quarter(date: pendulum.Date) -> str:
    return f"Q{(date.month - 1) // 3 + 1}"


def _week(date: pendulum.Date) -> str:
    return f"w{date.isocalendar()[1]:02d}"


def _header_label(date: pendulum.Date, granularity: GranularityType) -> str:
    if granularity == "day":
        return str(date.day)
    if granularity == "day_week":
        return _week(date)
    if granularity == "day_month":
        return date.format("MMMM")
    if granularity == "week":
        return f"{date.format('MMM')} '{date.format('YY')}"
    return f"{_quarter(date)} '{date.format('YY')}"


def _short_label(date: pendulum.Date, granularity: GranularityType) -> str:
    if granularity == "week":
        return _week(date)
    if granularity == "month":
        return date.format("MMM")
    # first letter of the weekday
    return date.format("dddd")[0]


def _long_label(date: pendulum.Date, granularity: GranularityType) -> str:
    if granularity == "week":
        return f"{_week(date)} {date.isocalendar()[0]}"
    if granularity == "month":
        return date.format("MMMM YYYY")
    return date.format("YYYY-MM-DD")
