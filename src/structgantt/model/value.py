# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypedDict


class Value(TypedDict):
    column: int
    raw: Any
    compare: Optional[str]
    display: str


Row = list[Value]
