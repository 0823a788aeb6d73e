# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

import pendulum

from daysheet.model.sheet import Summary
from daysheet.repository.sheet import SHEET_REPO
from daysheet.service.hours import breakdown, count_hours
from daysheet.time import add_hours, now_local, round_up_to_quarter

logger = logging.getLogger(__name__)


def project_end_of_day(
    total_hours: float, target_hours: float, now: pendulum.DateTime
) -> Optional[pendulum.DateTime]:
    if total_hours >= target_hours:
        return None
    return round_up_to_quarter(add_hours(now, target_hours - total_hours))


def summarize(
    text: str, target_hours: float, now: Optional[pendulum.DateTime] = None
) -> Summary:
    total_hours = count_hours(text)
    end_of_day = project_end_of_day(
        total_hours, target_hours, now if now is not None else now_local()
    )
    logger.debug(f"Counted {total_hours} of {target_hours} hours")
    return {
        "total_hours": total_hours,
        "target_hours": target_hours,
        "end_of_day": end_of_day,
        "breakdown": breakdown(text),
    }


def summarize_sheet(
    path: Path, target_hours: float, now: Optional[pendulum.DateTime] = None
) -> Summary:
    return summarize(SHEET_REPO.read(path), target_hours, now)
