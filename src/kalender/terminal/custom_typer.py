# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

ALIAS_SEPARATOR = re.compile(r" ?, ?")


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Commands registered as "name, alias" answer to any of their parts,
    so `kalender activity add` and `kalender a a` run the same command.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def resolve_alias(self, typed_name: str) -> str:
        for registered_name in self.commands:
            if typed_name in ALIAS_SEPARATOR.split(registered_name):
                return registered_name
        return typed_name


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Top-level group: help lists the commands in workflow order."""

    desired_order = [
        "activity, a",
        "view, v",
        "search, s",
        "holiday, h",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.desired_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
