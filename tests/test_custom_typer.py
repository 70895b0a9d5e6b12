# SPDX-License-Identifier: MIT

import click
import typer.main

from structgantt.terminal.app import app
from structgantt.terminal.custom_typer import AliasedTyperGroup, command_aliases


def test_command_aliases():
    assert command_aliases("render, r") == ["render", "r"]
    assert command_aliases("view,v") == ["view", "v"]
    assert command_aliases("set") == ["set"]


def test_resolve_alias():
    group = AliasedTyperGroup(
        commands={
            "view, v": click.Command("view, v"),
            "set, s": click.Command("set, s"),
        }
    )

    assert group.resolve_alias("v") == "view, v"
    assert group.resolve_alias("set") == "set, s"
    assert group.resolve_alias("missing") == "missing"


def test_root_commands_are_ordered():
    command = typer.main.get_command(app)

    assert isinstance(command, click.Group)
    assert command.list_commands(click.Context(command)) == ["render, r", "config, c"]
