# SPDX-License-Identifier: MIT

from typing import NoReturn

import typer


def abort(message: object) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)
