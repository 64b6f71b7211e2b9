"""Structured telemetry events written as JSON lines."""

from __future__ import annotations

import json
import os
import time
from collections import Counter
from functools import lru_cache
from typing import Any, Iterable, Iterator

from jsonschema import Draft202012Validator

from aboutinfo.resources import load_schema
from aboutinfo.settings import RuntimeSettings

LEVELS = {"info", "warn", "error"}

_DISABLE_VALUES = {"0", "false", "no", "off"}
_SCHEMA_RESOURCE = "telemetry.schema.json"


def telemetry_enabled() -> bool:
    value = os.getenv("ABOUTINFO_TELEMETRY", "1").lower()
    return value not in _DISABLE_VALUES


def record_structured_event(
    settings: RuntimeSettings,
    event: str,
    *,
    payload: dict[str, Any] | None = None,
    level: str = "info",
    status: str | None = None,
    component: str | None = None,
    duration_ms: float | None = None,
) -> None:
    if not telemetry_enabled():
        return
    record: dict[str, Any] = {
        "ts": time.time(),
        "event": event,
        "payload": payload or {},
        "level": level,
    }
    if status:
        record["status"] = status
    if component:
        record["component"] = component
    if duration_ms is not None:
        record["durationMs"] = duration_ms
    _validate_record(record)
    _validator().validate(record)
    log_path = settings.telemetry_file
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(record, ensure_ascii=False) + "\n")


def iter_events(settings: RuntimeSettings) -> Iterator[dict[str, Any]]:
    """Yield logged events oldest first, skipping torn or non-JSON lines."""
    try:
        lines = settings.telemetry_file.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return
    for line in filter(None, map(str.strip, lines)):
        try:
            yield json.loads(line)
        except json.JSONDecodeError:
            continue


def summarize(events: Iterable[dict[str, Any]]) -> dict[str, Any]:
    events = list(events)
    return {
        "total": len(events),
        "by_event": dict(Counter(evt.get("event", "unknown") for evt in events)),
        "by_level": dict(Counter(evt.get("level", "unknown") for evt in events)),
    }


def clear(settings: RuntimeSettings) -> None:
    settings.telemetry_file.unlink(missing_ok=True)


def _validate_record(record: dict[str, Any]) -> None:
    if not isinstance(record.get("event"), str) or not record["event"].strip():
        raise ValueError("Telemetry event must have non-empty string 'event'")
    if not isinstance(record.get("payload"), dict):
        raise ValueError("Telemetry payload must be a dict")
    level = record.get("level", "info")
    if level not in LEVELS:
        raise ValueError(f"Telemetry level '{level}' is not supported")
    if "durationMs" in record and record["durationMs"] is not None:
        if not isinstance(record["durationMs"], (int, float)) or record["durationMs"] < 0:
            raise ValueError("Telemetry durationMs must be a non-negative number")
    record["ts"] = float(record.get("ts", time.time()))


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:  # pragma: no cover - trivial cache
    return Draft202012Validator(load_schema(_SCHEMA_RESOURCE))
