# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

from structgantt.exceptions import (
    MissingDateColumnsException,
    MissingLabelColumnException,
)
from structgantt.model.column import DATE_COLUMN_TYPES, Column
from structgantt.model.role_assignment import RoleAssignment

LOGGER = logging.getLogger(__name__)


def classify_columns(columns: Sequence[Column]) -> RoleAssignment:
    """
    Figure out which columns will be used for dates, color, label and title.

    The first date column is the start, the second is the end. Further date
    columns are ignored. The first color column provides the bar color. Of
    the remaining columns the first is the label and the second the title.

    Args:
        columns: Columns of the query result in query order

    Returns:
        The role assignment

    Raises:
        MissingDateColumnsException: fewer than two date/datetime columns
        MissingLabelColumnException: no column left over for the label
    """
    start: Optional[int] = None
    end: Optional[int] = None
    color: Optional[int] = None
    label: Optional[int] = None
    title: Optional[int] = None

    for ordinal, column in enumerate(columns):
        column_type = column["type"]
        if column_type in DATE_COLUMN_TYPES:
            if start is None:
                start = ordinal
            elif end is None:
                end = ordinal
        elif column_type == "color":
            if color is None:
                color = ordinal
        else:
            if label is None:
                label = ordinal
            elif title is None:
                title = ordinal

    if start is None or end is None:
        raise MissingDateColumnsException()

    if label is None:
        raise MissingLabelColumnException()

    if title is None:
        title = label

    roles = RoleAssignment(
        start=start, end=end, color=color, label=label, title=title
    )
    LOGGER.debug("Column roles: %s", roles)
    return roles
