"""Command: validate observed costs against an expectation file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from measurectl.commands._base import MeasureCommand

if TYPE_CHECKING:
    from measurectl.commands._context import AppContext


@click.command(
    cls=MeasureCommand,
    examples="""\
  measurectl check
  measurectl check costs.toml observed.json
  measurectl --json check circuits/costs.toml run-42.json
  measurectl -v check   # show each measurement.mismatch diagnostic""",
)
@click.argument("expectations", required=False, type=click.Path(dir_okay=False))
@click.argument("observations", required=False, type=click.Path(dir_okay=False))
@click.pass_obj
def check(app: AppContext, expectations: str | None, observations: str | None) -> None:
    """Check observed costs against declared expectations.

    EXPECTATIONS and OBSERVATIONS default to the [paths] section of
    measurectl.toml.
    """
    from measurectl.services.check import CheckService

    app.emit(CheckService(app.settings).check(expectations, observations))
