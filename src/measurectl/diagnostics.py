"""Mismatch diagnostics — the advisory channel behind ``Measurement.matches``.

A failed match is not an error. It is reported to the current *mismatch
sink* so a human reading test or CLI output can see which value missed which
expectation. The sink lives in a ContextVar: threads and asyncio tasks each
see their own, and tests can silence or capture it without touching the
boolean contract of ``matches``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog

logger = logging.getLogger(__name__)

MismatchSink = Callable[[Any, Any], None]


_LOGGER_NAME = "measurectl.measurement"


def _mismatch_logger() -> Any:
    # structlog's unconfigured default prints to stdout.
    if structlog.is_configured():
        return structlog.get_logger(_LOGGER_NAME)
    return structlog.wrap_logger(structlog.PrintLogger(sys.stderr), logger=_LOGGER_NAME)


def log_mismatch(candidate: Any, measurement: Any) -> None:
    """Default sink: emit a ``measurement.mismatch`` event via structlog.

    Goes through the configured pipeline when :func:`configure_logging` (or
    any structlog configuration) is active, and straight to stderr otherwise.
    """
    log = _mismatch_logger()
    log.info(
        "measurement.mismatch",
        candidate=candidate,
        measurement=repr(measurement),
    )


def _discard(candidate: Any, measurement: Any) -> None:
    return None


_sink: ContextVar[MismatchSink] = ContextVar("_mismatch_sink", default=log_mismatch)


@dataclass
class MismatchRecorder:
    """Sink that keeps every ``(candidate, measurement)`` pair it receives."""

    records: list[tuple[Any, Any]] = field(default_factory=list)

    def __call__(self, candidate: Any, measurement: Any) -> None:
        self.records.append((candidate, measurement))

    def __len__(self) -> int:
        return len(self.records)

    def clear(self) -> None:
        self.records.clear()


def get_mismatch_sink() -> MismatchSink:
    """Return the sink active in the current context."""
    return _sink.get()


@contextmanager
def mismatch_sink(sink: MismatchSink) -> Generator[MismatchSink]:
    """Route mismatch diagnostics to *sink* for the duration of the block."""
    token = _sink.set(sink)
    try:
        yield sink
    finally:
        _sink.reset(token)


@contextmanager
def silence_mismatches() -> Generator[None]:
    """Drop all mismatch diagnostics inside the block."""
    with mismatch_sink(_discard):
        yield


def report_mismatch(candidate: Any, measurement: Any) -> None:
    """Hand a mismatch to the active sink.

    INVARIANT: never raises. A broken sink must not change the outcome of
    ``matches``.
    """
    sink = _sink.get()
    try:
        sink(candidate, measurement)
    except Exception:
        logger.debug("Mismatch sink %r failed", sink, exc_info=True)
