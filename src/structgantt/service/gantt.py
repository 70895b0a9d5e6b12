# SPDX-License-Identifier: MIT

import logging
from typing import Any, Mapping, Optional, Sequence

from structgantt.model.column import Column
from structgantt.model.gantt import GanttChart
from structgantt.model.value import Row
from structgantt.service.classifier import classify_columns
from structgantt.service.layout import layout_row
from structgantt.service.timeline import build_timeline

LOGGER = logging.getLogger(__name__)

SUPPORTED_MODE = "xhtml"


def build_gantt(
    columns: Sequence[Column],
    rows: Sequence[Row],
    config: Optional[Mapping[str, Any]] = None,
    mode: str = SUPPORTED_MODE,
) -> Optional[GanttChart]:
    """
    Build the complete chart layout for a query result.

    Nothing is computed for output modes other than xhtml; None is returned
    instead so the host can silently skip the block.

    Args:
        columns: Columns of the result in query order
        rows: Rows of the result in query order
        config: Resolved block configuration, only skipweekends is read
        mode: The host's output mode

    Returns:
        The chart, or None for unsupported output modes

    Raises:
        StructGanttException: when no chart can be built from the result
    """
    if mode != SUPPORTED_MODE:
        LOGGER.debug("Skipping gantt chart for output mode %s", mode)
        return None

    skip_weekends = bool((config or {}).get("skipweekends", False))
    roles = classify_columns(columns)

    if not rows:
        return GanttChart(
            columns=tuple(columns), roles=roles, timeline=None, rows=()
        )

    timeline = build_timeline(roles, rows, skip_weekends)
    layouts = tuple(layout_row(row, roles, timeline, columns) for row in rows)
    LOGGER.info(
        "Built gantt chart with %d rows over %d buckets",
        len(layouts),
        len(timeline.buckets),
    )
    return GanttChart(
        columns=tuple(columns), roles=roles, timeline=timeline, rows=layouts
    )
