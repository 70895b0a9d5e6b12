# SPDX-License-Identifier: MIT

import datetime

import pytest

from structgantt.time import date_part, normalize_date, normalize_datetime


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-01-05", "2024-01-05"),
        ("2024-01-05 13:45:00", "2024-01-05"),
        (datetime.date(2024, 1, 5), "2024-01-05"),
        (None, None),
        ("", None),
        ("soon", None),
    ],
)
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-01-05 13:45:00", "2024-01-05 13:45:00"),
        ("2024-01-05", "2024-01-05 00:00:00"),
        (datetime.datetime(2024, 1, 5, 8, 30), "2024-01-05 08:30:00"),
        (None, None),
        ("soon", None),
    ],
)
def test_normalize_datetime(raw, expected):
    assert normalize_datetime(raw) == expected


@pytest.mark.parametrize(
    "compare, expected",
    [
        ("2024-01-05 13:45:00", "2024-01-05"),
        ("2024-01-05T13:45:00", "2024-01-05"),
        ("2024-01-05", "2024-01-05"),
        ("", None),
        (None, None),
        ("05.01.2024", None),
    ],
)
def test_date_part(compare, expected):
    assert date_part(compare) == expected
