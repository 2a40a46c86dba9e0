"""CheckService — validate observed costs against declared expectations.

Three operations:
- ``check``: every declared operation against its observation, and every
  sequence against the composition of its steps' declared costs.
- ``compose``: fold measurements given in notation and test candidates.
- ``match``: test values against a single measurement.

Unmet expectations are reported twice: in the returned ServiceResult, and
as advisory ``measurement.mismatch`` diagnostics through the active sink.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from measurectl.domain.measurement import Range, compose_all
from measurectl.domain.notation import NotationError, parse_measurement
from measurectl.domain.types import CheckStatus, ItemKind
from measurectl.infrastructure.files import (
    ExpectationFileError,
    load_expectations,
    load_observations,
)
from measurectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from measurectl.config.models import ExpectationFile
    from measurectl.config.settings import MeasureSettings
    from measurectl.domain.count import Count, ObservedCost

logger = logging.getLogger(__name__)


def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def _check_item(
    name: str,
    kind: ItemKind,
    count: Count,
    observed: ObservedCost | None,
) -> dict[str, Any]:
    item: dict[str, Any] = {
        "name": name,
        "kind": kind.value,
        "expected": count.as_dict(),
    }
    if observed is None:
        item["status"] = CheckStatus.MISSING.value
        item["observed"] = None
        item["mismatches"] = []
        return item

    mismatched = count.mismatches(observed)
    item["status"] = (CheckStatus.FAILED if mismatched else CheckStatus.PASSED).value
    item["observed"] = observed.as_dict()
    item["mismatches"] = [f.value for f in mismatched]
    return item


def _inverted_ranges(expectations: ExpectationFile) -> list[str]:
    return [
        f"operations.{name}.{cost_field.value}: range can never be satisfied"
        for name, spec in expectations.operations.items()
        for cost_field in spec.inverted_fields()
    ]


class CheckService:
    """Validate observed costs. Stateless apart from its settings."""

    def __init__(self, settings: MeasureSettings) -> None:
        self._settings = settings

    def check(
        self,
        expectations_path: str | Path | None = None,
        observations_path: str | Path | None = None,
    ) -> ServiceResult:
        """Check every declared operation and sequence.

        Paths default to the ``[paths]`` section and resolve against the
        project root.
        """
        op = "check"
        settings = self._settings
        exp_path = settings.resolve(expectations_path or settings.paths.expectations)
        obs_path = settings.resolve(observations_path or settings.paths.observations)

        try:
            expectations = load_expectations(exp_path)
        except FileNotFoundError:
            msg = f"Expectation file not found: {exp_path}"
            return _error(op, "NOT_FOUND", msg, path=str(exp_path))
        except ExpectationFileError as exc:
            return _error(op, "INVALID_EXPECTATIONS", exc.message, path=str(exc.path))

        try:
            observations = load_observations(obs_path)
        except FileNotFoundError:
            msg = f"Observation file not found: {obs_path}"
            return _error(op, "NOT_FOUND", msg, path=str(obs_path))
        except ExpectationFileError as exc:
            return _error(op, "INVALID_OBSERVATIONS", exc.message, path=str(exc.path))

        warnings: list[str] = []
        inverted = _inverted_ranges(expectations)
        if inverted and settings.check.strict_ranges:
            return _error(
                op,
                "INVALID_EXPECTATIONS",
                "; ".join(inverted),
                path=str(exp_path),
            )
        warnings.extend(inverted)

        observed = observations.to_observed()
        items = [
            _check_item(name, ItemKind.OPERATION, spec.to_count(), observed.get(name))
            for name, spec in expectations.operations.items()
        ]
        items.extend(
            _check_item(
                name,
                ItemKind.SEQUENCE,
                expectations.sequence_count(name),
                observed.get(name),
            )
            for name in expectations.sequences
        )

        declared = set(expectations.operations) | set(expectations.sequences)
        for name in sorted(set(observed) - declared):
            warnings.append(f"Observation '{name}' has no declared expectation")

        failed = [i["name"] for i in items if i["status"] == CheckStatus.FAILED]
        missing = [i["name"] for i in items if i["status"] == CheckStatus.MISSING]
        if not settings.check.fail_on_missing:
            warnings.extend(f"No observation for '{name}'" for name in missing)

        data: dict[str, Any] = {
            "items": items,
            "count": len(items),
            "passed": len(items) - len(failed) - len(missing),
            "failed": len(failed),
            "missing": len(missing),
        }
        logger.debug(
            "Checked %d items: %d failed, %d missing",
            len(items),
            len(failed),
            len(missing),
        )

        unmet = failed + missing if settings.check.fail_on_missing else failed
        if unmet:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="COST_MISMATCH",
                    message=f"{len(unmet)} of {len(items)} expectations not met",
                    detail={"failed": failed, "missing": missing},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def compose(
        self,
        notations: Sequence[str],
        candidates: Sequence[int] = (),
    ) -> ServiceResult:
        """Compose measurements written in notation and test *candidates*."""
        op = "compose"
        if not notations:
            return _error(op, "EMPTY", "At least one measurement is required")
        try:
            measurements = [parse_measurement(text) for text in notations]
        except NotationError as exc:
            return _error(op, "INVALID_NOTATION", str(exc))

        warnings = [
            f"{m} can never be satisfied"
            for m in measurements
            if isinstance(m, Range) and m.is_inverted
        ]
        result = compose_all(measurements)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "operands": [str(m) for m in measurements],
                "result": str(result),
                "kind": result.kind.value,
                "candidates": [{"value": c, "matches": result.matches(c)} for c in candidates],
            },
            warnings=warnings,
        )

    def match(self, notation: str, values: Sequence[int]) -> ServiceResult:
        """Test *values* against one measurement. Fails if any value misses."""
        op = "match"
        try:
            measurement = parse_measurement(notation)
        except NotationError as exc:
            return _error(op, "INVALID_NOTATION", str(exc))

        results = [{"value": v, "matches": measurement.matches(v)} for v in values]
        misses = [r["value"] for r in results if not r["matches"]]
        data = {"measurement": str(measurement), "kind": measurement.kind.value, "values": results}
        if misses:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code="NO_MATCH",
                    message=f"{len(misses)} of {len(values)} values do not match {measurement}",
                    detail={"misses": misses},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)
