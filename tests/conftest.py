"""Shared pytest fixtures and test helpers for measurectl tests."""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from measurectl.config.settings import MeasureSettings
from measurectl.diagnostics import silence_mismatches

SEED = 0x5EED
ITERATIONS = 1024

SAMPLE_COSTS = """\
[operations.add]
constants = 0
public = 0
private = 1
constraints = { kind = "range", lower = 0, upper = 3 }

[operations.mul]
constants = 0
public = 0
private = { kind = "upper_bound", bound = 4 }
constraints = 1

[sequences.add_then_mul]
steps = ["add", "mul"]
"""

SAMPLE_OBSERVED: dict[str, Any] = {
    "add": {"constants": 0, "public": 0, "private": 1, "constraints": 1},
    "mul": {"constants": 0, "public": 0, "private": 2, "constraints": 1},
    "add_then_mul": {"constants": 0, "public": 0, "private": 3, "constraints": 2},
}


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the CLI or logging tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    measure = logging.getLogger("measurectl")
    measure_level = measure.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    measure.setLevel(measure_level)
    structlog.reset_defaults()


@pytest.fixture
def rng() -> random.Random:
    """Deterministic RNG so randomized checks are reproducible."""
    return random.Random(SEED)


@pytest.fixture
def quiet_mismatches() -> Generator[None]:
    """Drop mismatch diagnostics for tests that fail matches on purpose."""
    with silence_mismatches():
        yield


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory with config env overrides cleared."""
    monkeypatch.delenv("MEASURECTL_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> MeasureSettings:
    return MeasureSettings.from_cli(project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI resolves paths there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def u16(rng: random.Random) -> int:
    return rng.randrange(1 << 16)


def ordered_pair(rng: random.Random) -> tuple[int, int]:
    a, b = u16(rng), u16(rng)
    return (a, b) if a <= b else (b, a)


def write_expectations(root: Path, text: str = SAMPLE_COSTS, name: str = "costs.toml") -> Path:
    path = root / name
    path.write_text(text, encoding="utf-8")
    return path


def write_observations(
    root: Path,
    data: dict[str, Any] | None = None,
    name: str = "observed.json",
) -> Path:
    path = root / name
    path.write_text(json.dumps(SAMPLE_OBSERVED if data is None else data), encoding="utf-8")
    return path
