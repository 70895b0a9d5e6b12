# SPDX-License-Identifier: MIT

import html
from typing import Optional

import pendulum

from structgantt import time
from structgantt.model.gantt import GanttChart
from structgantt.model.row_layout import RowLayout
from structgantt.model.timeline import Bucket, Timeline
from structgantt.model.value import Value
from structgantt.service.timeline import compare_key

SCOPE_CLASSES = ["structaggregation", "structgantt", "table"]
NOTHING_FOUND = "Nothing was found."


def render_gantt(
    chart: Optional[GanttChart],
    show_not_found: bool = False,
    today: Optional[pendulum.Date] = None,
) -> str:
    """
    Render a chart as an HTML table.

    Args:
        chart: The chart to render, None renders nothing
        show_not_found: Render a notice when the result had no rows
        today: Date to highlight, defaults to the current local date

    Returns:
        The markup
    """
    if chart is None:
        return ""

    timeline = chart.timeline
    if timeline is None or not chart.rows:
        if show_not_found:
            return f"<p>{html.escape(NOTHING_FOUND)}</p>"
        return ""

    if today is None:
        today = time.today_local()
    today_key = compare_key(today, timeline.granularity)

    doc: list[str] = []
    doc.append(f'<div class="{" ".join(SCOPE_CLASSES)}">')
    doc.append("<table>")
    doc.append("<thead>")
    doc.append(_header_row(timeline))
    doc.append(_bucket_row(timeline, today_key))
    doc.append("</thead>")
    doc.append("<tbody>")
    for layout in chart.rows:
        doc.append(_task_row(layout))
    doc.append("</tbody>")
    doc.append("<tfoot>")
    doc.append(_bucket_row(timeline, today_key))
    doc.append("</tfoot>")
    doc.append("</table>")
    doc.append("</div>")
    return "".join(doc)


def _header_row(timeline: Timeline) -> str:
    cells = ["<tr>", "<th></th>"]
    for span in timeline.headers:
        cells.append(f'<th colspan="{span.count}">{html.escape(span.name)}</th>')
    cells.append("</tr>")
    return "".join(cells)


def _bucket_row(timeline: Timeline, today_key: str) -> str:
    cells = ['<tr class="days">', "<th></th>"]
    for bucket in timeline.buckets:
        css_class = "today" if bucket.key == today_key else ""
        cells.append(
            f'<td title="{html.escape(bucket.long)}" class="{css_class}">'
            f"{html.escape(bucket.short)}</td>"
        )
    cells.append("</tr>")
    return "".join(cells)


def _empty_cells(buckets: tuple[Bucket, ...]) -> str:
    return "".join(f'<td title="{html.escape(b.long)}"></td>' for b in buckets)


def _value(value: Value) -> str:
    return html.escape(value["display"])


def _task_row(layout: RowLayout) -> str:
    cells = ["<tr>", f"<th>{_value(layout.label)}</th>"]
    cells.append(_empty_cells(layout.pre))

    if layout.task:
        style = ""
        if layout.color is not None:
            style = f' style="background-color:{html.escape(layout.color)}"'
        cells.append(f'<td colspan="{len(layout.task)}" class="task"{style}>')
        cells.append(_value(layout.title))
        cells.append('<dl class="flyout">')
        for value in layout.cells:
            cells.append(f"<dd>{_value(value)}</dd>")
        cells.append("</dl>")
        cells.append("</td>")

    cells.append(_empty_cells(layout.post))
    cells.append("</tr>")
    return "".join(cells)
