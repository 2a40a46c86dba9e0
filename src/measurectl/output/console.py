"""Rich Console factory and theme for measurectl output.

Consoles render into a StringIO buffer so renderers keep a plain
``str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MEASURE_THEME = Theme(
    {
        "measure.ok": "bold green",
        "measure.error": "bold red",
        "measure.warning": "bold yellow",
        "measure.op": "bold cyan",
        "measure.key": "dim",
        "measure.name": "bold",
        "measure.status.passed": "green",
        "measure.status.failed": "red",
        "measure.status.missing": "yellow",
        "measure.miss": "red",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "passed": "measure.status.passed",
    "failed": "measure.status.failed",
    "missing": "measure.status.missing",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=MEASURE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return _STATUS_STYLES.get(status, "")
