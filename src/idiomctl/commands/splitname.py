"""Command: split a full name into first, middle, and last."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    cls=IdiomCommand,
    examples="""\
  idiomctl splitname
  idiomctl --json splitname "Grace Brewster Murray Hopper"
  idiomctl splitname Ada King Lovelace""",
)
@click.argument("full_name", nargs=-1)
@click.pass_obj
def splitname(app: AppContext, full_name: tuple[str, ...]) -> None:
    """Split FULL_NAME (default: Picasso's 18-part name).

    Words may be passed quoted or unquoted. A single word fails: there is
    no first/last split for it.
    """
    if full_name:
        app.emit(app.service.split_name(" ".join(full_name)))
    else:
        app.emit(app.service.split_name())
