# SPDX-License-Identifier: MIT

import pytest

from structgantt.exceptions import (
    InsufficientRangeException,
    MissingDateColumnsException,
    MissingLabelColumnException,
)
from structgantt.service.gantt import build_gantt

from conftest import TASK_COLUMNS

ROWS = [["a", "2024-01-01", "2024-01-10"], ["b", "2024-01-05", "2024-01-08"]]


def test_builds_chart(make_result):
    columns, rows = make_result(TASK_COLUMNS, ROWS)

    chart = build_gantt(columns, rows)

    assert chart is not None
    assert chart.timeline is not None
    assert len(chart.timeline.buckets) == 10
    assert [len(layout.task) for layout in chart.rows] == [10, 4]
    assert [layout.label["display"] for layout in chart.rows] == ["a", "b"]


def test_skipweekends_config(make_result):
    columns, rows = make_result(TASK_COLUMNS, ROWS)

    chart = build_gantt(columns, rows, {"skipweekends": True})

    assert chart is not None
    assert chart.timeline is not None
    assert chart.timeline.skip_weekends is True
    assert len(chart.timeline.buckets) == 8


@pytest.mark.parametrize("mode", ["text", "metadata", "odt"])
def test_other_modes_are_skipped(make_result, mode):
    columns, rows = make_result([{"label": "only", "type": "other"}], [["x"]])

    assert build_gantt(columns, rows, mode=mode) is None


def test_empty_result_has_no_timeline(make_result):
    columns, rows = make_result(TASK_COLUMNS, [])

    chart = build_gantt(columns, rows)

    assert chart is not None
    assert chart.timeline is None
    assert chart.rows == ()


def test_empty_result_still_checks_columns(make_result):
    columns, rows = make_result([{"label": "only", "type": "other"}], [])

    with pytest.raises(MissingDateColumnsException):
        build_gantt(columns, rows)


def test_failures_propagate(make_result):
    columns, rows = make_result(
        [{"label": "s", "type": "date"}, {"label": "e", "type": "date"}],
        [["2024-01-01", "2024-01-10"]],
    )
    with pytest.raises(MissingLabelColumnException):
        build_gantt(columns, rows)

    columns, rows = make_result(TASK_COLUMNS, [["a", "2024-01-01", "2024-01-01"]])
    with pytest.raises(InsufficientRangeException):
        build_gantt(columns, rows)
