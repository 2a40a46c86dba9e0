"""Cost aggregates for circuit operations.

A circuit operation has four cost dimensions: constants, public variables,
private variables, and constraints. :class:`Count` declares one measurement
per dimension; :class:`ObservedCost` holds what an execution actually used.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from dataclasses import dataclass, fields

from measurectl.domain.measurement import Exact, Measurement, UpperBound, compose
from measurectl.domain.types import CostField


@dataclass(frozen=True)
class ObservedCost:
    """Observed counts for one execution."""

    constants: int
    public: int
    private: int
    constraints: int

    @classmethod
    def zero(cls) -> ObservedCost:
        return cls(0, 0, 0, 0)

    def get(self, cost_field: CostField) -> int:
        return getattr(self, cost_field.value)

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __add__(self, other: object) -> ObservedCost:
        if not isinstance(other, ObservedCost):
            return NotImplemented
        return ObservedCost(
            self.constants + other.constants,
            self.public + other.public,
            self.private + other.private,
            self.constraints + other.constraints,
        )


@dataclass(frozen=True)
class Count:
    """Expected cost of an operation, one measurement per dimension."""

    constants: Measurement[int]
    public: Measurement[int]
    private: Measurement[int]
    constraints: Measurement[int]

    @classmethod
    def exact(cls, constants: int, public: int, private: int, constraints: int) -> Count:
        """Every dimension must equal the given value."""
        return cls(Exact(constants), Exact(public), Exact(private), Exact(constraints))

    @classmethod
    def less_than(cls, constants: int, public: int, private: int, constraints: int) -> Count:
        """Every dimension must stay strictly below the given value."""
        return cls(
            UpperBound(constants),
            UpperBound(public),
            UpperBound(private),
            UpperBound(constraints),
        )

    def get(self, cost_field: CostField) -> Measurement[int]:
        return getattr(self, cost_field.value)

    def mismatches(self, observed: ObservedCost) -> list[CostField]:
        """Return the dimensions of *observed* that miss their measurement.

        Every dimension is checked, so each miss produces its own diagnostic.
        """
        return [f for f in CostField if not self.get(f).matches(observed.get(f))]

    def matches(self, observed: ObservedCost) -> bool:
        return not self.mismatches(observed)

    def compose(self, other: Count) -> Count:
        """Dimension-wise composition: the expected cost of running both."""
        return Count(
            compose(self.constants, other.constants),
            compose(self.public, other.public),
            compose(self.private, other.private),
            compose(self.constraints, other.constraints),
        )

    def __add__(self, other: object) -> Count:
        if not isinstance(other, Count):
            return NotImplemented
        return self.compose(other)

    def as_dict(self) -> dict[str, str]:
        """Render each dimension in measurement notation."""
        return {f.value: str(self.get(f)) for f in CostField}


def compose_counts(counts: Iterable[Count]) -> Count:
    """Left-fold :meth:`Count.compose` over *counts*.

    Raises:
        ValueError: If *counts* is empty.
    """
    iterator = iter(counts)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("compose_counts() requires at least one count") from None
    return functools.reduce(Count.compose, iterator, first)
