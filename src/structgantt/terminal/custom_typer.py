# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r" ?, ?")


def command_aliases(name: str) -> list[str]:
    """Split a registered name like 'render, r' into its aliases."""
    return ALIAS_SEPARATOR.split(name)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as 'name, alias, ...'"""

    def resolve_alias(self, cmd_name: str) -> str:
        for registered in self.commands:
            if cmd_name in command_aliases(registered):
                return registered
        return cmd_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists commands in a fixed order instead of registration order"""

    desired_order = [
        "render, r",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        result = [name for name in self.desired_order if name in self.commands]
        result.extend(name for name in self.commands if name not in result)
        return result
