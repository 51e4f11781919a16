# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names may list aliases, e.g. "calendar, cal"."""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    # Commands listed first in help, anything else follows in insertion order
    command_order: tuple[str, ...] = ("calendar, cal", "config, c")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def resolve_alias(self, cmd_name: str) -> str:
        """Find the registered name that lists cmd_name as one of its aliases."""
        for name in self.commands:
            if cmd_name in self._CMD_SPLIT_P.split(name):
                return name
        return cmd_name

    def list_commands(self, ctx: click.Context) -> list[str]:
        result = [name for name in self.command_order if name in self.commands]
        result += [name for name in self.commands if name not in result]
        return result
