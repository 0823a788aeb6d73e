# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daysheet.diagnostics import configure_logging
from daysheet.terminal import configuration, sheet
from daysheet.terminal.custom_typer import DayOffsetCommand, DefaultCommandGroup
from daysheet.terminal.version import version_callback

app = typer.Typer(
    cls=DefaultCommandGroup,
    help="Daysheet - markdown timesheets in the CLI",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command(name="show, s", cls=DayOffsetCommand)(sheet.show)
app.command(name="new, n", cls=DayOffsetCommand)(sheet.new)
app.command(name="path, p", cls=DayOffsetCommand)(sheet.path)
app.add_typer(configuration.app, name="config, c", help="View and change settings")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """
    Daysheet - markdown timesheets in the CLI

    Run without a command to show today's summary, or pass a date, a day
    offset or a file name to show that sheet.
    """
    configure_logging(verbose)


def run() -> None:
    app()
