"""Command: report a person's feelings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    cls=IdiomCommand,
    examples="""\
  idiomctl mood
  idiomctl mood Sam tired hungry
  idiomctl mood Sam""",
)
@click.argument("name", required=False)
@click.argument("feelings", nargs=-1)
@click.pass_obj
def mood(app: AppContext, name: str | None, feelings: tuple[str, ...]) -> None:
    """Print one line per feeling for NAME.

    With no arguments, reports Suzie's three feelings. A NAME with no
    FEELINGS prints nothing beyond the status line.
    """
    if name is None:
        app.emit(app.service.mood())
    else:
        app.emit(app.service.mood(name, feelings))
