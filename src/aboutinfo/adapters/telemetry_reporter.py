"""Failure reporter backed by telemetry events."""

from __future__ import annotations

from contextlib import suppress

from aboutinfo.settings import RuntimeSettings
from aboutinfo.utils.telemetry import record_structured_event

FAILURE_EVENT = "about.failure"


class TelemetryFailureReporter:
    """Records each reported failure as an ``error`` level event."""

    def __init__(self, settings: RuntimeSettings, *, component: str = "about") -> None:
        self._settings = settings
        self._component = component

    def report(self, message: str, cause: BaseException | None = None) -> None:
        payload: dict[str, str] = {"message": message}
        if cause is not None:
            payload["cause"] = f"{type(cause).__name__}: {cause}"
        # an unwritable log must not turn a contained failure into a crash
        with suppress(OSError):
            record_structured_event(
                self._settings,
                FAILURE_EVENT,
                payload=payload,
                level="error",
                status="error",
                component=self._component,
            )


__all__ = ["FAILURE_EVENT", "TelemetryFailureReporter"]
