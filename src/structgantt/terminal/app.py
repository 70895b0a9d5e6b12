# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from structgantt.terminal import configuration
from structgantt.terminal.custom_typer import OrderedAliasedTyperGroup
from structgantt.terminal.render import render

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="structgantt - Gantt charts from struct query results",
    no_args_is_help=True,
)
app.command(name="render, r")(render)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """
    structgantt - Gantt charts from struct query results

    Global options that apply to all commands.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def run() -> None:
    app()
