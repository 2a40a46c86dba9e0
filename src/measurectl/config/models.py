"""Pydantic models for configuration and cost declaration files.

Sparse TOML contract: defaults are baked here, measurectl.toml only
contains overrides. Expectation and observation files are validated
against the models at the bottom of this module and converted into
domain objects.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    Field,
    NonNegativeInt,
    RootModel,
    field_validator,
    model_validator,
)

from measurectl.domain.count import Count, ObservedCost, compose_counts
from measurectl.domain.measurement import Exact, Measurement, Range, UpperBound
from measurectl.domain.types import CostField

# --- measurectl.toml sections ---


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    strict_ranges: bool = False
    fail_on_missing: bool = False


class PathsConfig(BaseModel):
    """[paths] section. Relative paths resolve against the project root."""

    model_config = {"frozen": True}

    expectations: str = "costs.toml"
    observations: str = "observed.json"


# --- Measurement declarations ---


class ExactSpec(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["exact"]
    value: NonNegativeInt

    def to_measurement(self) -> Measurement[int]:
        return Exact(self.value)


class RangeSpec(BaseModel):
    """Exclusive on both ends. ``lower > upper`` is accepted but never matches."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["range"]
    lower: NonNegativeInt
    upper: NonNegativeInt

    def to_measurement(self) -> Measurement[int]:
        return Range(self.lower, self.upper)


class UpperBoundSpec(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    kind: Literal["upper_bound"]
    bound: NonNegativeInt

    def to_measurement(self) -> Measurement[int]:
        return UpperBound(self.bound)


MeasurementSpec = Annotated[
    ExactSpec | RangeSpec | UpperBoundSpec,
    Field(discriminator="kind"),
]


class CostSpec(BaseModel):
    """Declared cost of one operation.

    A bare integer is shorthand for ``{kind = "exact", value = N}``.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    constants: MeasurementSpec
    public: MeasurementSpec
    private: MeasurementSpec
    constraints: MeasurementSpec

    @field_validator("constants", "public", "private", "constraints", mode="before")
    @classmethod
    def _expand_shorthand(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return {"kind": "exact", "value": value}
        return value

    def to_count(self) -> Count:
        return Count(
            self.constants.to_measurement(),
            self.public.to_measurement(),
            self.private.to_measurement(),
            self.constraints.to_measurement(),
        )

    def inverted_fields(self) -> list[CostField]:
        """Dimensions declared as a range whose lower bound exceeds its upper."""
        inverted: list[CostField] = []
        for cost_field in CostField:
            spec = getattr(self, cost_field.value)
            if isinstance(spec, RangeSpec) and spec.lower > spec.upper:
                inverted.append(cost_field)
        return inverted


class SequenceSpec(BaseModel):
    """An ordered list of operations whose expected cost is composed."""

    model_config = {"frozen": True, "extra": "forbid"}

    steps: list[str] = Field(min_length=1)
    description: str = ""


class ExpectationFile(BaseModel):
    """Top-level schema of an expectation file (``costs.toml``)."""

    model_config = {"frozen": True, "extra": "forbid"}

    operations: dict[str, CostSpec] = Field(default_factory=dict)
    sequences: dict[str, SequenceSpec] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_references(self) -> ExpectationFile:
        for name, sequence in self.sequences.items():
            unknown = [s for s in sequence.steps if s not in self.operations]
            if unknown:
                msg = f"Sequence '{name}' references undeclared operations: {', '.join(unknown)}"
                raise ValueError(msg)
        clashes = sorted(set(self.sequences) & set(self.operations))
        if clashes:
            msg = f"Names declared as both operation and sequence: {', '.join(clashes)}"
            raise ValueError(msg)
        return self

    def sequence_count(self, name: str) -> Count:
        """Compose the declared costs of a sequence's steps."""
        steps = self.sequences[name].steps
        return compose_counts(self.operations[step].to_count() for step in steps)


# --- Observations ---


class ObservedCostSpec(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    constants: NonNegativeInt
    public: NonNegativeInt
    private: NonNegativeInt
    constraints: NonNegativeInt

    def to_observed(self) -> ObservedCost:
        return ObservedCost(self.constants, self.public, self.private, self.constraints)


class ObservationFile(RootModel[dict[str, ObservedCostSpec]]):
    """Observed costs keyed by operation or sequence name."""

    def to_observed(self) -> dict[str, ObservedCost]:
        return {name: spec.to_observed() for name, spec in self.root.items()}
