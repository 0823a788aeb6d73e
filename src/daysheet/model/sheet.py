# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

# quarter-hour slots per hour column
GRANULARITY = 4

FILLED_MARK = "x"
EMPTY_MARK = "-"

SPREAD_CATEGORY = "spread"

NAME_HEADER = "Name"
COLUMN_DELIMITER = "|"

MIN_HOUR = 0
MAX_HOUR = 23


class CategoryRow(TypedDict):
    name: str
    cells: list[str]
    hours: float


class Summary(TypedDict):
    total_hours: float
    target_hours: float
    end_of_day: Optional[pendulum.DateTime]
    breakdown: list[str]
