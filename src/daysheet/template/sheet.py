# SPDX-License-Identifier: MIT

from typing import Optional

from daysheet.configuration import DEFAULT_CATEGORIES
from daysheet.errors import SheetRangeError
from daysheet.model.sheet import (
    COLUMN_DELIMITER,
    EMPTY_MARK,
    GRANULARITY,
    MAX_HOUR,
    MIN_HOUR,
    NAME_HEADER,
)


def validate_hours(start: int, end: int) -> None:
    if start < MIN_HOUR or start > MAX_HOUR:
        raise SheetRangeError(
            f"Start hour must be between {MIN_HOUR} and {MAX_HOUR}, got {start}"
        )
    if end < MIN_HOUR or end > MAX_HOUR:
        raise SheetRangeError(
            f"End hour must be between {MIN_HOUR} and {MAX_HOUR}, got {end}"
        )
    if end <= start:
        raise SheetRangeError(
            f"End hour must be after start hour, got start {start} and end {end}"
        )


def validate_categories(categories: list[str]) -> list[str]:
    cleaned = [category.strip() for category in categories]
    if len(cleaned) == 0:
        raise SheetRangeError("At least one category is required")
    for category in cleaned:
        if category == "":
            raise SheetRangeError("Categories cannot be blank")
        if COLUMN_DELIMITER in category:
            raise SheetRangeError(
                f"Category '{category}' cannot contain '{COLUMN_DELIMITER}'"
            )
    return cleaned


def _row(cells: list[str]) -> str:
    return COLUMN_DELIMITER + COLUMN_DELIMITER.join(cells) + COLUMN_DELIMITER


def get_sheet_template(
    start: int, end: int, categories: Optional[list[str]] = None
) -> str:
    """
    Build an empty timesheet table covering the hours start to end inclusive.

    Each hour column is GRANULARITY characters wide, one character per
    quarter hour. Body rows start out unmarked.
    """
    validate_hours(start, end)
    names = validate_categories(
        categories if categories is not None else DEFAULT_CATEGORIES
    )

    name_width = max(len(NAME_HEADER), *(len(name) for name in names))
    hours = range(start, end + 1)

    header = _row(
        [NAME_HEADER.ljust(name_width)]
        + [str(hour).ljust(GRANULARITY) for hour in hours]
    )
    separator = _row(["-" * name_width] + ["-" * GRANULARITY for _ in hours])
    body = [
        _row([name.ljust(name_width)] + [EMPTY_MARK * GRANULARITY for _ in hours])
        for name in names
    ]

    return "\n".join([header, separator, *body]) + "\n"
