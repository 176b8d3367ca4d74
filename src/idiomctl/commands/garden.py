"""Command: look up plant counts in a garden inventory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand
from idiomctl.commands._params import parse_entries

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    cls=IdiomCommand,
    examples="""\
  idiomctl garden
  idiomctl garden --lookup daisies --lookup tulips
  idiomctl garden --entry ferns=3 --entry moss=40 --lookup moss""",
)
@click.option(
    "--entry",
    "entries",
    multiple=True,
    callback=parse_entries,
    help="NAME=COUNT inventory entry (repeatable). Default: the six-plant garden.",
)
@click.option(
    "--lookup",
    "lookups",
    multiple=True,
    help="Plant name to look up (repeatable). Default: roses and tulips.",
)
@click.pass_obj
def garden(
    app: AppContext,
    entries: list[tuple[str, int]],
    lookups: tuple[str, ...],
) -> None:
    """Build a plant inventory and look up counts.

    Listing the same plant twice fails with DUPLICATE_KEY.
    """
    svc = app.service
    if entries and lookups:
        app.emit(svc.garden(entries, lookups))
    elif entries:
        app.emit(svc.garden(entries))
    elif lookups:
        app.emit(svc.garden(lookups=lookups))
    else:
        app.emit(svc.garden())
