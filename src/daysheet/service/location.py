# SPDX-License-Identifier: MIT

import logging
import os
import re
from pathlib import Path
from typing import Optional

import pendulum

from daysheet import configuration
from daysheet.errors import SheetArgumentError
from daysheet.time import (
    datetime_from_local_date_str,
    datetime_to_local_date_str,
    day_from_offset,
)

logger = logging.getLogger(__name__)

_DAY_SHORTCUTS = {
    "today": 0,
    "t": 0,
    "yesterday": -1,
    "y": -1,
    "tomorrow": 1,
    "o": 1,
}


def parse_day(target: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Interpret target as a day, or return None when it names a file.

    Accepts nothing (today), a day offset like 1 or -1, an ISO date
    (YYYY-MM-DD) and the shortcuts today, yesterday and tomorrow.

    Raises:
        SheetArgumentError: If target looks like a date but is not a valid one
    """
    if target is None:
        return day_from_offset(0)

    if re.match(r"^[+-]?\d+$", target):
        try:
            return day_from_offset(int(target))
        except (OverflowError, ValueError):
            raise SheetArgumentError(f"Invalid day offset: '{target}'")

    if re.match(r"^\d{4}-\d{2}-\d{2}$", target):
        try:
            return datetime_from_local_date_str(target)
        except ValueError:
            raise SheetArgumentError(f"Invalid date: '{target}'")

    if target in _DAY_SHORTCUTS:
        return day_from_offset(_DAY_SHORTCUTS[target])

    return None


def sheet_path_for_day(day: pendulum.DateTime) -> Path:
    return configuration.DATA_PATH / (
        datetime_to_local_date_str(day) + configuration.SHEET_SUFFIX
    )


def sheet_path_for_name(name: str) -> Path:
    if name.strip() == "":
        raise SheetArgumentError("Sheet name cannot be blank")
    if not name.endswith(configuration.SHEET_SUFFIX):
        name += configuration.SHEET_SUFFIX

    path = Path(name).expanduser()
    if path.is_absolute() or os.sep in name:
        return path
    return configuration.DATA_PATH / path


def resolve_sheet_path(target: Optional[str]) -> Path:
    day = parse_day(target)
    if day is not None:
        path = sheet_path_for_day(day)
    else:
        path = sheet_path_for_name(target or "")
    logger.debug(f"Resolved '{target}' to {path}")
    return path
