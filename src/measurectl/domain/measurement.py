"""The measurement algebra.

A measurement states which values of a quantity are acceptable:

- ``Exact(v)``: only ``v``.
- ``Range(lower, upper)``: values strictly between ``lower`` and ``upper``.
- ``UpperBound(bound)``: values strictly below ``bound``.

Every condition is exclusive. ``compose`` derives the measurement of a sum
from the measurements of its addends, so the expected cost of a sequence of
operations follows from the declared cost of each step.

INVARIANT: measurements are immutable values. ``matches`` and ``compose``
never mutate their operands.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Protocol, TypeVar, Union

from measurectl.diagnostics import report_mismatch
from measurectl.domain.types import MeasurementKind


class SupportsCost(Protocol):
    """Totally ordered and closed under addition."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __add__(self, other: Any, /) -> Any: ...


V = TypeVar("V", bound=SupportsCost)


class _MeasurementOps(Generic[V]):
    """Method surface shared by the three variants."""

    kind: ClassVar[MeasurementKind]

    def matches(self, candidate: V) -> bool:
        """Return True if *candidate* satisfies this measurement."""
        return matches(self, candidate)  # type: ignore[arg-type]

    def compose(self, other: Measurement[V]) -> Measurement[V]:
        """Return the measurement satisfied by the sum of two satisfying values."""
        return compose(self, other)  # type: ignore[arg-type]

    def __add__(self, other: object) -> Measurement[V]:
        if not isinstance(other, _MeasurementOps):
            return NotImplemented
        return compose(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Exact(_MeasurementOps[V]):
    """The only acceptable value is *value*."""

    kind: ClassVar[MeasurementKind] = MeasurementKind.EXACT

    value: V

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Range(_MeasurementOps[V]):
    """Acceptable values lie strictly between *lower* and *upper*.

    ``lower <= upper`` is the caller's responsibility. An inverted range is
    accepted and simply never matches.
    """

    kind: ClassVar[MeasurementKind] = MeasurementKind.RANGE

    lower: V
    upper: V

    @property
    def is_inverted(self) -> bool:
        return self.upper < self.lower

    def __str__(self) -> str:
        return f"({self.lower}, {self.upper})"


@dataclass(frozen=True)
class UpperBound(_MeasurementOps[V]):
    """Acceptable values are strictly less than *bound*."""

    kind: ClassVar[MeasurementKind] = MeasurementKind.UPPER_BOUND

    bound: V

    def __str__(self) -> str:
        return f"<{self.bound}"


Measurement = Union[Exact[V], Range[V], UpperBound[V]]


def matches(measurement: Measurement[V], candidate: V) -> bool:
    """Check *candidate* against *measurement*.

    A negative outcome is reported to the active mismatch sink
    (see :mod:`measurectl.diagnostics`). The report is advisory only.
    """
    if isinstance(measurement, Exact):
        outcome = bool(candidate == measurement.value)
    elif isinstance(measurement, Range):
        outcome = bool(measurement.lower < candidate and candidate < measurement.upper)
    elif isinstance(measurement, UpperBound):
        outcome = bool(candidate < measurement.bound)
    else:
        raise TypeError(f"Not a measurement: {measurement!r}")

    if not outcome:
        report_mismatch(candidate, measurement)
    return outcome


def compose(first: Measurement[V], second: Measurement[V]) -> Measurement[V]:
    """Compose two measurements.

    If ``a`` satisfies *first* and ``b`` satisfies *second*, then ``a + b``
    satisfies the result. Exact operands translate the other side's bounds
    without changing its shape. An ``UpperBound`` operand has no lower bound,
    so a ``Range`` combined with it keeps only the ``Range``'s own lower bound.
    """
    if isinstance(first, Exact):
        a = first.value
        if isinstance(second, Exact):
            return Exact(a + second.value)
        if isinstance(second, Range):
            return Range(a + second.lower, a + second.upper)
        if isinstance(second, UpperBound):
            return UpperBound(a + second.bound)

    elif isinstance(first, Range):
        if isinstance(second, Exact):
            c = second.value
            return Range(first.lower + c, first.upper + c)
        if isinstance(second, Range):
            return Range(first.lower + second.lower, first.upper + second.upper)
        if isinstance(second, UpperBound):
            return Range(first.lower, first.upper + second.bound)

    elif isinstance(first, UpperBound):
        a = first.bound
        if isinstance(second, Exact):
            return UpperBound(a + second.value)
        if isinstance(second, Range):
            return Range(second.lower, a + second.upper)
        if isinstance(second, UpperBound):
            return UpperBound(a + second.bound)

    raise TypeError(f"Cannot compose {first!r} with {second!r}")


def compose_all(measurements: Iterable[Measurement[V]]) -> Measurement[V]:
    """Left-fold :func:`compose` over *measurements*.

    Raises:
        ValueError: If *measurements* is empty.
    """
    iterator = iter(measurements)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("compose_all() requires at least one measurement") from None
    return functools.reduce(compose, iterator, first)
