# SPDX-License-Identifier: MIT

from typing import Literal

# day: day-of-month headers, day_week: ISO week headers, day_month: month
# headers. All three use one bucket per day.
GranularityType = Literal["day", "day_week", "day_month", "week", "month"]

BucketUnit = Literal["day", "week", "month"]
