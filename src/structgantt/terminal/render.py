# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from structgantt.exceptions import StructGanttException
from structgantt.repository.configuration import CONFIGURATION_REPO
from structgantt.repository.result import ResultRepository
from structgantt.service.gantt import build_gantt
from structgantt.view.html import render_gantt

LOGGER = logging.getLogger(__name__)

error_console = Console(stderr=True)


def render(
    result_file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="YAML file holding the query result",
        ),
    ],
    skip_weekends: Annotated[
        Optional[bool],
        typer.Option(
            "--skip-weekends/--no-skip-weekends",
            help="Hide Saturdays and Sundays on daily timelines",
        ),
    ] = None,
    mode: Annotated[
        Optional[str],
        typer.Option("--mode", "-m", help="Output mode of the host renderer"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", dir_okay=False, help="Write HTML to a file"),
    ] = None,
) -> None:
    """Render a query result as a gantt chart HTML table."""
    config = CONFIGURATION_REPO.get_config()
    repository = ResultRepository(result_file)

    try:
        block_config = dict(repository.config)
        columns = repository.columns
        rows = repository.rows
    except ValueError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    # block settings win over the user default, the command line wins over both
    block_config.setdefault("skipweekends", config["skipweekends"])
    if skip_weekends is not None:
        block_config["skipweekends"] = skip_weekends

    try:
        chart = build_gantt(
            columns, rows, block_config, mode if mode is not None else config["mode"]
        )
    except StructGanttException as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    markup = render_gantt(chart, show_not_found=config["show_not_found"])
    if output is not None:
        output.write_text(markup)
        LOGGER.info("Wrote chart to %s", output)
    else:
        typer.echo(markup)
