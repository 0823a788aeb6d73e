# SPDX-License-Identifier: MIT

import logging
import re

from daysheet.errors import EmptySheetError
from daysheet.model.sheet import (
    COLUMN_DELIMITER,
    FILLED_MARK,
    GRANULARITY,
    SPREAD_CATEGORY,
    CategoryRow,
)

logger = logging.getLogger(__name__)

# a cell of exactly GRANULARITY marks, padding already stripped
_CELL_P = re.compile(r"^[x-]{%d}$" % GRANULARITY)
_NON_MARK_P = re.compile(r"[^%s]" % FILLED_MARK)

# header row and separator row
_HEADER_ROW_COUNT = 2
_EMPHASIS_MARKERS = "*_~"


def split_row(line: str) -> tuple[str, list[str]]:
    """Split a table row into its label and its stripped time columns."""
    parts = line.strip().strip(COLUMN_DELIMITER).split(COLUMN_DELIMITER)
    return parts[0], [part.strip() for part in parts[1:]]


def count_cells(cells: list[str]) -> float:
    """
    Count the marked quarter hours in the well-formed cells.

    Raises:
        EmptySheetError: If none of the cells is well-formed
    """
    matched = [cell for cell in cells if _CELL_P.match(cell)]
    if len(matched) == 0:
        raise EmptySheetError("No time cells found")
    marks = _NON_MARK_P.sub("", "".join(matched))
    return len(marks) / GRANULARITY


def count_hours(text: str) -> float:
    """
    Count the marked quarter hours in every time cell of text.

    The first column of each row holds the label and is never counted.

    Raises:
        EmptySheetError: If text contains no well-formed time cell
    """
    cells: list[str] = []
    for line in text.split("\n"):
        cells.extend(split_row(line)[1])
    return count_cells(cells)


def clean_label(label: str) -> str:
    return label.strip().strip(_EMPHASIS_MARKERS).strip()


def parse_rows(text: str) -> list[CategoryRow]:
    lines = text.split("\n")[_HEADER_ROW_COUNT:]
    if len(lines) > 0 and lines[-1].strip() == "":
        lines = lines[:-1]

    rows: list[CategoryRow] = []
    for line in lines:
        if line.strip() == "":
            continue
        label, cells = split_row(line)
        name = clean_label(label)
        try:
            hours = count_cells(cells)
        except EmptySheetError:
            raise EmptySheetError(f"Row '{name}' has no time cells")
        rows.append({"name": name, "cells": cells, "hours": hours})

    logger.debug(f"Parsed {len(rows)} category rows")
    return rows


def sort_rows(rows: list[CategoryRow]) -> list[CategoryRow]:
    # sorted() is stable, so non-spread rows keep their document order
    return sorted(rows, key=lambda row: row["name"].lower() == SPREAD_CATEGORY)


def format_breakdown(rows: list[CategoryRow]) -> list[str]:
    if len(rows) == 0:
        return []
    width = max(len(row["name"]) for row in rows) + 2
    return [f"- {row['name'].ljust(width, '.')}{row['hours']:.2f}" for row in rows]


def breakdown(text: str) -> list[str]:
    return format_breakdown(sort_rows(parse_rows(text)))
