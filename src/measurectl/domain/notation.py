"""Compact text notation for integer measurements.

    3 or =3     Exact(3)
    (2, 5)      Range(2, 5)
    <5          UpperBound(5)

Values are non-negative integers, as costs are. Used by the CLI and by
the human-readable output. ``str()`` of a measurement produces the
same notation.

Examples:
    >>> parse_measurement("(2, 5)")
    Range(lower=2, upper=5)
    >>> format_measurement(parse_measurement("<7"))
    '<7'
"""

from __future__ import annotations

import re

from measurectl.domain.measurement import Exact, Measurement, Range, UpperBound

_EXACT = re.compile(r"^=?\s*(\d+)$")
_RANGE = re.compile(r"^\(\s*(\d+)\s*,\s*(\d+)\s*\)$")
_UPPER = re.compile(r"^<\s*(\d+)$")


class NotationError(ValueError):
    """Raised when text is not valid measurement notation."""


def parse_measurement(text: str) -> Measurement[int]:
    """Parse *text* into a measurement over integers."""
    stripped = text.strip()
    match = _EXACT.match(stripped)
    if match:
        return Exact(int(match.group(1)))
    match = _RANGE.match(stripped)
    if match:
        return Range(int(match.group(1)), int(match.group(2)))
    match = _UPPER.match(stripped)
    if match:
        return UpperBound(int(match.group(1)))
    msg = (
        f"Invalid measurement notation: {text!r} "
        "(expected N, =N, (L, H) or <N with non-negative N)"
    )
    raise NotationError(msg)


def format_measurement(measurement: Measurement[int]) -> str:
    return str(measurement)
