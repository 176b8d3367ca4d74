"""Subcommand modules for idiomctl.

Provides register_commands() which uses deferred imports to keep
``idiomctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register one command per example, plus ``all`` and ``list``."""
    from idiomctl.commands.board import board
    from idiomctl.commands.enumerate_cmd import enumerate_cmd
    from idiomctl.commands.garden import garden
    from idiomctl.commands.major import major
    from idiomctl.commands.middlename import middlename
    from idiomctl.commands.mood import mood
    from idiomctl.commands.run_all import all_cmd, list_cmd
    from idiomctl.commands.splitname import splitname

    cli.add_command(major)
    cli.add_command(enumerate_cmd)
    cli.add_command(mood)
    cli.add_command(splitname)
    cli.add_command(board)
    cli.add_command(middlename)
    cli.add_command(garden)

    cli.add_command(all_cmd)
    cli.add_command(list_cmd)
