# SPDX-License-Identifier: MIT

from typing import Any, Literal, TypedDict

ColumnType = Literal["date", "datetime", "color", "other"]

DATE_COLUMN_TYPES: tuple[ColumnType, ...] = ("date", "datetime")


class Column(TypedDict):
    ordinal: int
    label: str
    type: ColumnType
    config: dict[str, Any]
