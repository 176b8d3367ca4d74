"""Command: place pieces on a board and read cells back."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from idiomctl.commands._base import IdiomCommand
from idiomctl.commands._params import parse_coordinates, parse_placements
from idiomctl.services.examples import DEFAULT_BOARD_SIZE

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    cls=IdiomCommand,
    examples="""\
  idiomctl board
  idiomctl board --height 8 --width 8 --place 0,0=R --place 7,4=k --get 0,0 --get 7,4
  idiomctl board --get 2,0""",
)
@click.option("--height", type=int, default=DEFAULT_BOARD_SIZE[0], show_default=True)
@click.option("--width", type=int, default=DEFAULT_BOARD_SIZE[1], show_default=True)
@click.option(
    "--place",
    "placements",
    multiple=True,
    callback=parse_placements,
    help="ROW,COL=PIECE to place (repeatable). Default: 0,0=1 and 1,0=1.",
)
@click.option(
    "--get",
    "lookups",
    multiple=True,
    callback=parse_coordinates,
    help="ROW,COL to read back (repeatable). Default: 0,0 1,0 0,1.",
)
@click.pass_obj
def board(
    app: AppContext,
    height: int,
    width: int,
    placements: list[tuple[int, int, Any]],
    lookups: list[tuple[int, int]],
) -> None:
    """Build a HEIGHT x WIDTH board, place pieces, and read cells by (row, column).

    Coordinates outside the board fail with OUT_OF_BOUNDS.
    """
    kwargs: dict[str, Any] = {"height": height, "width": width}
    if placements:
        kwargs["placements"] = placements
    if lookups:
        kwargs["lookups"] = lookups
    app.emit(app.service.board(**kwargs))
