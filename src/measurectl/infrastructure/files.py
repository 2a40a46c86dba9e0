"""Readers for expectation and observation files.

Expectation files are TOML. Observation files are JSON or TOML, chosen by
suffix. Every parse or schema failure surfaces as ExpectationFileError so
services can turn it into a structured result.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from measurectl.config.models import ExpectationFile, ObservationFile

logger = logging.getLogger(__name__)

_TOML_SUFFIXES = frozenset({".toml"})


class ExpectationFileError(Exception):
    """A declaration file could not be read or failed validation."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(path)
    try:
        raw = path.read_text(encoding="utf-8")
        if path.suffix.lower() in _TOML_SUFFIXES:
            data: Any = tomllib.loads(raw)
        else:
            data = json.loads(raw)
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ExpectationFileError(path, f"Could not parse file: {exc}") from exc
    if not isinstance(data, dict):
        raise ExpectationFileError(path, "Top level must be a table/object")
    return data


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def load_expectations(path: Path) -> ExpectationFile:
    """Read and validate an expectation file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ExpectationFileError: On parse or validation failure.
    """
    data = _read_mapping(path)
    try:
        expectations = ExpectationFile.model_validate(data)
    except ValidationError as exc:
        raise ExpectationFileError(path, _describe(exc)) from exc
    logger.debug(
        "Loaded %d operations and %d sequences from %s",
        len(expectations.operations),
        len(expectations.sequences),
        path,
    )
    return expectations


def load_observations(path: Path) -> ObservationFile:
    """Read and validate an observation file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ExpectationFileError: On parse or validation failure.
    """
    data = _read_mapping(path)
    try:
        observations = ObservationFile.model_validate(data)
    except ValidationError as exc:
        raise ExpectationFileError(path, _describe(exc)) from exc
    logger.debug("Loaded %d observations from %s", len(observations.root), path)
    return observations
