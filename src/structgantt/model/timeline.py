# SPDX-License-Identifier: MIT

from typing import NamedTuple

import pendulum

from structgantt.model.granularity_type import GranularityType


class Bucket(NamedTuple):
    date: pendulum.Date
    key: str
    header: str
    short: str
    long: str


class HeaderSpan(NamedTuple):
    name: str
    count: int


class Timeline(NamedTuple):
    min_date: str
    max_date: str
    span_days: int
    granularity: GranularityType
    skip_weekends: bool
    buckets: tuple[Bucket, ...]
    headers: tuple[HeaderSpan, ...]
