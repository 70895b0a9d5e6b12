# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from structgantt import configuration
from structgantt.repository.configuration import CONFIGURATION_REPO
from structgantt.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "skipweekends",
        "✓ Enabled" if config["skipweekends"] else "✗ Disabled",
    )
    table.add_row("mode", config["mode"])
    table.add_row(
        "show_not_found",
        "✓ Enabled" if config["show_not_found"] else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    skipweekends: Annotated[
        Optional[bool],
        typer.Option(
            "--skip-weekends/--no-skip-weekends",
            help="Default for hiding Saturdays and Sundays",
        ),
    ] = None,
    mode: Annotated[
        Optional[str],
        typer.Option("--mode", help="Default output mode"),
    ] = None,
    show_not_found: Annotated[
        Optional[bool],
        typer.Option(
            "--show-not-found/--no-show-not-found",
            help="Render a notice for empty results",
        ),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        skipweekends=skipweekends,
        mode=mode,
        show_not_found=show_not_found,
    )
    CONFIGURATION_REPO.flush()
    view()
