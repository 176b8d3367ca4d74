"""Standalone commands: run every example, or list them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from idiomctl.commands._base import IdiomCommand

if TYPE_CHECKING:
    from idiomctl.commands._context import AppContext


@click.command(
    "all",
    cls=IdiomCommand,
    examples="""\
  idiomctl all
  idiomctl -q all
  idiomctl --json all""",
)
@click.pass_obj
def all_cmd(app: AppContext) -> None:
    """Run every example in order with its default data."""
    app.emit_all(app.service.run_all())


@click.command(
    "list",
    cls=IdiomCommand,
    examples="""\
  idiomctl list
  idiomctl --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the available examples."""
    app.emit(app.service.list_examples())
