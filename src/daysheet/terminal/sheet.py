# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.text import Text

from daysheet.errors import DaysheetError
from daysheet.repository.configuration import CONFIGURATION_REPO
from daysheet.repository.sheet import SHEET_REPO
from daysheet.service.location import resolve_sheet_path
from daysheet.service.summary import summarize_sheet
from daysheet.template.sheet import get_sheet_template
from daysheet.terminal.abort import abort
from daysheet.view.summary import summary_report

logger = logging.getLogger(__name__)

TARGET_HELP = (
    "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, "
    "day offset like 1, -1, or a file name"
)


def show(
    target: Annotated[
        Optional[str], typer.Argument(help=TARGET_HELP, show_default="today")
    ] = None,
) -> None:
    """
    show hours worked and the per-category breakdown
    """
    try:
        config = CONFIGURATION_REPO.get_config()
        path = resolve_sheet_path(target)
        summary = summarize_sheet(path, config["target_hours"])
    except DaysheetError as e:
        abort(e)

    summary_report(path, summary)


def new(
    target: Annotated[
        Optional[str], typer.Argument(help=TARGET_HELP, show_default="today")
    ] = None,
    start: Annotated[
        Optional[int],
        typer.Option(
            "--start",
            "-s",
            help="first hour column (0-23), defaults to the configured start",
        ),
    ] = None,
    end: Annotated[
        Optional[int],
        typer.Option(
            "--end",
            "-e",
            help="last hour column (0-23), defaults to the configured end",
        ),
    ] = None,
    categories: Annotated[
        Optional[list[str]],
        typer.Option(
            "--category",
            "-c",
            help="accepts multiple category options, defaults to the configured categories",
        ),
    ] = None,
) -> None:
    """
    create an empty timesheet
    """
    try:
        config = CONFIGURATION_REPO.get_config()
    except DaysheetError as e:
        abort(e)

    sheet_start = start if start is not None else config["default_start"]
    sheet_end = end if end is not None else config["default_end"]
    sheet_categories = categories if categories else config["categories"]

    try:
        path = resolve_sheet_path(target)
        text = get_sheet_template(sheet_start, sheet_end, sheet_categories)
        SHEET_REPO.create(path, text)
    except DaysheetError as e:
        abort(e)

    logger.info(f"Created {path} covering {sheet_start}-{sheet_end}")
    Console().print(Text.assemble(("Created ", "green"), str(path)), soft_wrap=True)


def path(
    target: Annotated[
        Optional[str], typer.Argument(help=TARGET_HELP, show_default="today")
    ] = None,
) -> None:
    """
    print the location of a timesheet
    """
    try:
        sheet_path = resolve_sheet_path(target)
    except DaysheetError as e:
        abort(e)

    typer.echo(str(sheet_path))
