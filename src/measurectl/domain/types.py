"""Classification enums shared by the domain, services, and output layers."""

from __future__ import annotations

from enum import StrEnum


class MeasurementKind(StrEnum):
    """The three shapes a measurement can take."""

    EXACT = "exact"
    RANGE = "range"
    UPPER_BOUND = "upper_bound"


class CostField(StrEnum):
    """Cost dimensions of a circuit operation, in declaration order."""

    CONSTANTS = "constants"
    PUBLIC = "public"
    PRIVATE = "private"
    CONSTRAINTS = "constraints"


class CheckStatus(StrEnum):
    """Outcome of checking one operation or sequence."""

    PASSED = "passed"
    FAILED = "failed"
    MISSING = "missing"


class ItemKind(StrEnum):
    """What a checked item was declared as."""

    OPERATION = "operation"
    SEQUENCE = "sequence"
