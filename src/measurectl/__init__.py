"""measurectl — declared cost expectations for constraint-system operations."""

from measurectl.domain.count import Count, ObservedCost, compose_counts
from measurectl.domain.measurement import (
    Exact,
    Measurement,
    Range,
    UpperBound,
    compose,
    compose_all,
    matches,
)

__version__ = "0.1.0"

__all__ = [
    "Count",
    "Exact",
    "Measurement",
    "ObservedCost",
    "Range",
    "UpperBound",
    "__version__",
    "compose",
    "compose_all",
    "compose_counts",
    "matches",
]
