"""Command: visit a sequence of numbers through a callback."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    "enumerate",
    cls=IdiomCommand,
    examples="""\
  idiomctl enumerate
  idiomctl enumerate 10 20 30""",
)
@click.argument("numbers", nargs=-1, type=int)
@click.pass_obj
def enumerate_cmd(app: AppContext, numbers: tuple[int, ...]) -> None:
    """Print each of NUMBERS in order (default 1 2 3 4 5)."""
    if numbers:
        app.emit(app.service.enumerate(numbers))
    else:
        app.emit(app.service.enumerate())
