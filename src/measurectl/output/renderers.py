"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from measurectl.domain.types import CostField
from measurectl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from measurectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        _status_line(console, result)
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "compose":
        return str(result.data.get("result", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="measure.ok")
    op = Text(f"  {result.op}", style="measure.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="measure.key"), Text(str(value)), sep="")


def _candidate_lines(console: Console, entries: list[dict[str, Any]]) -> None:
    for entry in entries:
        if entry["matches"]:
            verdict = Text("match", style="measure.ok")
        else:
            verdict = Text("miss", style="measure.miss")
        console.print(Text(f"    {entry['value']}: "), verdict, sep="")


def _cost_cell(item: dict[str, Any], cost_field: CostField) -> Text:
    expected = item["expected"][cost_field.value]
    observed = item.get("observed")
    if observed is None:
        return Text(expected)
    style = "measure.miss" if cost_field.value in item.get("mismatches", []) else ""
    return Text(f"{expected} / {observed[cost_field.value]}", style=style)


def _check_table(items: list[dict[str, Any]]) -> Table:
    """One row per checked item; cells read ``expected / observed``."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="measure.name", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Status")
    for cost_field in CostField:
        table.add_column(cost_field.value.title())

    for item in items:
        status = item["status"]
        table.add_row(
            Text(item["name"]),
            Text(item["kind"]),
            Text(status, style=style_for_status(status)),
            *(_cost_cell(item, f) for f in CostField),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="measure.error")
    op = Text(f"  {result.op}", style="measure.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    items = result.data.get("items")
    if items:
        console.print(_check_table(items))
    elif result.op == "match" and result.data:
        _field(console, "measurement", result.data.get("measurement"))
        _candidate_lines(console, result.data.get("values", []))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    for key in ("count", "passed", "failed", "missing"):
        _field(console, key, data.get(key, 0))
    if data.get("items"):
        console.print(_check_table(data["items"]))


def _render_compose(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _field(console, "operands", " + ".join(data.get("operands", [])))
    _field(console, "result", data.get("result"))
    _field(console, "kind", data.get("kind"))
    if data.get("candidates"):
        console.print(Text("  candidates:", style="measure.key"))
        _candidate_lines(console, data["candidates"])


def _render_match(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _field(console, "measurement", result.data.get("measurement"))
    _candidate_lines(console, result.data.get("values", []))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "check": _render_check,
    "compose": _render_compose,
    "match": _render_match,
}
