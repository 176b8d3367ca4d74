"""Command: check whether a name has a middle name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand
from idiomctl.domain.names import PersonName

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    cls=IdiomCommand,
    examples="""\
  idiomctl middlename
  idiomctl middlename --first John --middle Quincy --last Adams
  idiomctl middlename --first Cher --last Sarkisian --middle ''""",
)
@click.option("--first", default=None, help="First name.")
@click.option("--middle", default=None, help="Middle name; an empty string still counts.")
@click.option("--last", default=None, help="Last name.")
@click.pass_obj
def middlename(
    app: AppContext,
    first: str | None,
    middle: str | None,
    last: str | None,
) -> None:
    """Report whether a name has a middle name.

    With no options, checks George Washington and Barack Hussein Obama.
    """
    if first is None and last is None and middle is None:
        app.emit(app.service.middle_name())
        return
    if first is None or last is None:
        raise click.UsageError("--first and --last are both required when naming a person.")
    app.emit(app.service.middle_name([PersonName(first, last, middle)]))
