# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from daysheet import configuration
from daysheet.errors import DaysheetError
from daysheet.repository.configuration import CONFIGURATION_REPO
from daysheet.template.sheet import validate_categories, validate_hours
from daysheet.terminal.abort import abort
from daysheet.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    try:
        config = CONFIGURATION_REPO.get_config()
    except DaysheetError as e:
        abort(e)

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("default_start", str(config["default_start"]))
    table.add_row("default_end", str(config["default_end"]))
    table.add_row("target_hours", f"{config['target_hours']:g}")
    table.add_row("categories", ", ".join(config["categories"]))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory holding dated timesheets"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path", help="Go back to the default data directory"
        ),
    ] = False,
    default_start: Annotated[
        Optional[int],
        typer.Option("--default-start", help="First hour of new timesheets"),
    ] = None,
    default_end: Annotated[
        Optional[int],
        typer.Option("--default-end", help="Last hour of new timesheets"),
    ] = None,
    target_hours: Annotated[
        Optional[float],
        typer.Option("--target-hours", help="Hours that make a full day"),
    ] = None,
    categories: Annotated[
        Optional[list[str]],
        typer.Option(
            "--category",
            "-c",
            help="Rows of new timesheets (accepts multiple, replaces the list)",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    try:
        config = CONFIGURATION_REPO.get_config()
        validate_hours(
            default_start if default_start is not None else config["default_start"],
            default_end if default_end is not None else config["default_end"],
        )
        if categories:
            categories = validate_categories(categories)
    except DaysheetError as e:
        abort(e)

    if target_hours is not None and target_hours <= 0:
        abort("Target hours must be greater than 0")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_start=default_start,
        default_end=default_end,
        target_hours=target_hours,
        categories=categories if categories else None,
    )

    console = Console()
    console.print("[green]Configuration updated[/green]")
