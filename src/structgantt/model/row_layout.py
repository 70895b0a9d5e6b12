# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

from structgantt.model.timeline import Bucket
from structgantt.model.value import Value


class RowLayout(NamedTuple):
    pre: tuple[Bucket, ...]
    task: tuple[Bucket, ...]
    post: tuple[Bucket, ...]
    scheduled: bool
    color: Optional[str]
    label: Value
    title: Value
    cells: tuple[Value, ...]
