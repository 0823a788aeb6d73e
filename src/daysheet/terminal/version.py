# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

import typer

from daysheet.configuration import APP_NAME


def get_version() -> str:
    try:
        return distribution_version(APP_NAME)
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {get_version()}")
        raise typer.Exit()
