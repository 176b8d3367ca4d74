"""Command: reply to a student's major."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand
from idiomctl.services.examples import DEFAULT_MAJOR

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    cls=IdiomCommand,
    examples="""\
  idiomctl major
  idiomctl major "Computer Science"
  idiomctl major Art
  idiomctl --json major Math""",
)
@click.argument("major_name", metavar="MAJOR", required=False, default=DEFAULT_MAJOR)
@click.pass_obj
def major(app: AppContext, major_name: str) -> None:
    """Reply to MAJOR (exact, case-sensitive match) with a canned response."""
    app.emit(app.service.major(major_name))
