"""Command: compose measurements."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from measurectl.commands._base import MeasureCommand

if TYPE_CHECKING:
    from measurectl.commands._context import AppContext


@click.command(
    cls=MeasureCommand,
    examples="""\
  measurectl compose 3 4
  measurectl compose "(2, 5)" 10
  measurectl compose "<5" "<5" --candidate 9 --candidate 10
  measurectl -q compose "(1, 4)" 2""",
)
@click.argument("measurements", nargs=-1, required=True)
@click.option(
    "--candidate",
    "candidates",
    multiple=True,
    type=int,
    help="Value to test against the composed measurement (repeatable).",
)
@click.pass_obj
def compose(app: AppContext, measurements: tuple[str, ...], candidates: tuple[int, ...]) -> None:
    """Compose MEASUREMENTS into the measurement of their sum.

    Notation: N or =N (exact), "(L, H)" (exclusive range), "<N" (upper bound).
    """
    from measurectl.services.check import CheckService

    app.emit(CheckService(app.settings).compose(measurements, candidates))
