# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


def _options(command: click.Command, ctx: click.Context) -> list[click.Parameter]:
    # typer may bundle its own click, so options are matched by kind, not class
    return [
        param
        for param in command.get_params(ctx)
        if getattr(param, "param_type_name", "") == "option"
    ]


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        """Override to prevent duplicate commands from being added"""
        if name is None:
            name = cmd.name

        # Check if this command is already registered (as an alias)
        existing_name = self._group_cmd_name(name or "")
        if existing_name in self.commands and existing_name != name:
            return

        super().add_command(cmd, name)


class DefaultCommandGroup(AliasedTyperGroup):
    """
    Aliased group that falls back to a default command.

    Anything after the global flags that is not a command name (a date, a
    day offset such as -1, a filename, or nothing at all) is handed to the
    default command as its arguments.
    """

    default_command = "show"

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in desired order (not insertion order due to Typer internals)"""
        desired_order = ["show, s", "new, n", "path, p", "config, c"]

        result = [name for name in desired_order if name in self.commands]
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)
        return result

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        global_flags = set()
        for param in _options(self, ctx):
            global_flags.update(param.opts)
            global_flags.update(param.secondary_opts)

        position = 0
        while position < len(args) and args[position] in global_flags:
            position += 1

        rest = args[position:]
        if len(rest) == 0 or self.get_command(ctx, rest[0]) is None:
            args = [*args[:position], self.default_command, *rest]

        return super().parse_args(ctx, args)


class DayOffsetCommand(typer.core.TyperCommand):
    """
    Command that accepts negative day offsets such as -1 as its argument.

    A bare negative number that is not the value of an option is moved
    behind '--' so click does not read it as an unknown option.
    """

    _OFFSET_P = re.compile(r"^-\d+$")

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        value_opts = set()
        for param in _options(self, ctx):
            if not getattr(param, "is_flag", False):
                value_opts.update(param.opts)

        kept: list[str] = []
        offsets: list[str] = []
        for index, arg in enumerate(args):
            if arg == "--":
                kept.extend(args[index:])
                break
            is_option_value = index > 0 and args[index - 1] in value_opts
            if self._OFFSET_P.match(arg) and not is_option_value:
                offsets.append(arg)
            else:
                kept.append(arg)

        if len(offsets) > 0:
            if "--" not in kept:
                kept.append("--")
            kept.extend(offsets)
        return super().parse_args(ctx, kept)
