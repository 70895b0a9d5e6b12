# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

from structgantt import time
from structgantt.model.column import Column
from structgantt.model.role_assignment import RoleAssignment
from structgantt.model.row_layout import RowLayout
from structgantt.model.timeline import Bucket, Timeline
from structgantt.model.value import Row
from structgantt.service.timeline import compare_key


def layout_row(
    row: Row,
    roles: RoleAssignment,
    timeline: Timeline,
    columns: Sequence[Column],
) -> RowLayout:
    """
    Split the timeline buckets of one row into before, during and after the task.

    A row without a start or end date is unscheduled: all buckets end up in
    the pre segment and there is no task.

    Args:
        row: The row to lay out
        roles: Column role assignment of the result
        timeline: Timeline shared by all rows
        columns: Columns of the result, used for the color default

    Returns:
        The row layout
    """
    start = time.date_part(row[roles.start]["compare"])
    end = time.date_part(row[roles.end]["compare"])

    pre: tuple[Bucket, ...]
    task: tuple[Bucket, ...]
    post: tuple[Bucket, ...]
    if start is not None and end is not None:
        pre, task, post = partition_buckets(timeline, start, end)
        scheduled = True
    else:
        pre, task, post = timeline.buckets, (), ()
        scheduled = False

    return RowLayout(
        pre=pre,
        task=task,
        post=post,
        scheduled=scheduled,
        color=resolve_color(row, roles, columns),
        label=row[roles.label],
        title=row[roles.title],
        cells=tuple(row),
    )


def partition_buckets(
    timeline: Timeline, start: str, end: str
) -> tuple[tuple[Bucket, ...], tuple[Bucket, ...], tuple[Bucket, ...]]:
    """Assign every bucket to exactly one of the pre, task and post segments."""
    if start > end:
        start, end = end, start

    first = compare_key(time.date_from_str(start), timeline.granularity)
    last = compare_key(time.date_from_str(end), timeline.granularity)

    pre: list[Bucket] = []
    task: list[Bucket] = []
    post: list[Bucket] = []
    for bucket in timeline.buckets:
        if bucket.key < first:
            pre.append(bucket)
        elif bucket.key > last:
            post.append(bucket)
        else:
            task.append(bucket)

    return tuple(pre), tuple(task), tuple(post)


def resolve_color(
    row: Row, roles: RoleAssignment, columns: Sequence[Column]
) -> Optional[str]:
    """Color of the task bar, None when unset or equal to the column default."""
    if roles.color is None:
        return None
    color = row[roles.color]["raw"]
    if color is None or color == "":
        return None
    default = columns[roles.color]["config"].get("default")
    if color == default:
        return None
    return str(color)
