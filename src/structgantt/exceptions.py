# SPDX-License-Identifier: MIT


class StructGanttException(Exception):
    """Base error for a chart that cannot be built from the given result."""


class MissingDateColumnsException(StructGanttException):
    def __init__(self) -> None:
        super().__init__("Not enough Date columns selected")


class MissingLabelColumnException(StructGanttException):
    def __init__(self) -> None:
        super().__init__("No label column found")


class InsufficientRangeException(StructGanttException):
    def __init__(self, span_days: int = 0) -> None:
        super().__init__("Not enough variation in dates to create a range")
        self.span_days = span_days
