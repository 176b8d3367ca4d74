"""Click callbacks that parse the compact ``ROW,COL`` / ``NAME=COUNT`` forms."""

from __future__ import annotations

from typing import Any

import click


def _coordinate(text: str) -> tuple[int, int]:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise click.BadParameter(f"{text!r} is not in ROW,COL form")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise click.BadParameter(f"{text!r} has a non-integer coordinate") from None


def _piece(text: str) -> Any:
    """Integer-looking pieces become ints so ``0,0=1`` places the number 1."""
    try:
        return int(text)
    except ValueError:
        return text


def parse_coordinates(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[int, int]]:
    """Parse repeated ``ROW,COL`` values."""
    return [_coordinate(value) for value in values]


def parse_placements(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[int, int, Any]]:
    """Parse repeated ``ROW,COL=PIECE`` values."""
    placements: list[tuple[int, int, Any]] = []
    for value in values:
        where, sep, piece = value.partition("=")
        if not sep or not piece:
            raise click.BadParameter(f"{value!r} is not in ROW,COL=PIECE form")
        row, column = _coordinate(where)
        placements.append((row, column, _piece(piece)))
    return placements


def parse_entries(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, int]]:
    """Parse repeated ``NAME=COUNT`` values. Order is preserved."""
    entries: list[tuple[str, int]] = []
    for value in values:
        name, sep, count = value.partition("=")
        name = name.strip()
        if not sep or not name:
            raise click.BadParameter(f"{value!r} is not in NAME=COUNT form")
        try:
            entries.append((name, int(count)))
        except ValueError:
            raise click.BadParameter(f"{value!r} has a non-integer count") from None
    return entries
