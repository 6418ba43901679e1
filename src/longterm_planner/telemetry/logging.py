"""Contract for runtime telemetry and structured logging sinks."""

from __future__ import annotations

import logging
from typing import Protocol


class Telemetry(Protocol):
    """Reports planning outcomes. Nothing in the planner depends on what it does."""

    def emit(self, event_name: str, payload: dict) -> None:
        """Publish telemetry event to the configured sink."""


class NullTelemetry:
    def emit(self, event_name: str, payload: dict) -> None:
        return None


class LoggingTelemetry:
    """Forwards telemetry events to a standard logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self._logger = logger or logging.getLogger("longterm_planner.telemetry")
        self._level = level

    def emit(self, event_name: str, payload: dict) -> None:
        self._logger.log(self._level, event_name, extra={"telemetry": payload})


def configure_logging(level: str | int = "INFO") -> None:
    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=resolved, format="%(asctime)s %(levelname)s %(name)s %(message)s")
