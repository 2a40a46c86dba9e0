"""Command: test values against a measurement."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from measurectl.commands._base import MeasureCommand

if TYPE_CHECKING:
    from measurectl.commands._context import AppContext


@click.command(
    cls=MeasureCommand,
    examples="""\
  measurectl match 7 7
  measurectl match "(12, 15)" 13 14
  measurectl --json match "<10" 9 10""",
)
@click.argument("measurement")
@click.argument("values", nargs=-1, required=True, type=int)
@click.pass_obj
def match(app: AppContext, measurement: str, values: tuple[int, ...]) -> None:
    """Test VALUES against MEASUREMENT. Exits 1 if any value misses."""
    from measurectl.services.check import CheckService

    app.emit(CheckService(app.settings).match(measurement, values))
