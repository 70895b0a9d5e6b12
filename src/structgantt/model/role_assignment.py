# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional


class RoleAssignment(NamedTuple):
    start: int
    end: int
    color: Optional[int]
    label: int
    title: int
