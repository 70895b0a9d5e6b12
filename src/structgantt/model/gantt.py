# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

from structgantt.model.column import Column
from structgantt.model.role_assignment import RoleAssignment
from structgantt.model.row_layout import RowLayout
from structgantt.model.timeline import Timeline


class GanttChart(NamedTuple):
    columns: tuple[Column, ...]
    roles: RoleAssignment
    timeline: Optional[Timeline]
    rows: tuple[RowLayout, ...]
