# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

QUARTER_MINUTES = 15


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.DateTime:
    return pendulum.today("local")


def day_from_offset(offset: int) -> pendulum.DateTime:
    return today_local().add(days=offset).start_of("day")


def datetime_from_local_date_str(date_str: str) -> pendulum.DateTime:
    """Parse a local date string in 'YYYY-MM-DD' format to a pendulum.DateTime at midnight local time."""
    return cast(pendulum.DateTime, pendulum.parse(date_str, tz="local"))


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a local date string in 'YYYY-MM-DD' format."""
    return datetime.in_tz("local").format("YYYY-MM-DD")


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def round_up_to_quarter(datetime: pendulum.DateTime) -> pendulum.DateTime:
    """
    Round a datetime up to the next quarter hour.

    Datetimes already on a quarter hour (with zero seconds) are returned as is.
    """
    floored = datetime.set(
        minute=datetime.minute - datetime.minute % QUARTER_MINUTES,
        second=0,
        microsecond=0,
    )
    if floored < datetime:
        return floored.add(minutes=QUARTER_MINUTES)
    return floored


def add_hours(datetime: pendulum.DateTime, hours: float) -> pendulum.DateTime:
    return datetime.add(minutes=round(hours * 60))
