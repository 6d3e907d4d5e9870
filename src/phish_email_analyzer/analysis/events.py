"""Audit trail recorders injected into the email collection."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Iterator, Protocol

from phish_email_analyzer.infra.logging_utils import get_logger

TraceEvent = dict[str, Any]


def _utc_now() -> str:
    return datetime.now(tz=timezone.utc).isoformat()


def make_event(stage: str, status: str, message: str, data: dict[str, Any] | None = None) -> TraceEvent:
    payload: TraceEvent = {
        "stage": stage,
        "status": status,
        "message": message,
        "timestamp": _utc_now(),
    }
    if data:
        payload["data"] = data
    return payload


class EventRecorder(Protocol):
    def record(self, message: str) -> None: ...


class EventLog:
    """In-memory audit trail, oldest event first."""

    def __init__(self, stage: str = "collection") -> None:
        self._stage = stage
        self._events: list[TraceEvent] = []

    def record(self, message: str) -> None:
        self._events.append(make_event(self._stage, "ok", message))

    def events(self) -> list[TraceEvent]:
        return list(self._events)

    def messages(self) -> list[str]:
        return [str(event["message"]) for event in self._events]

    def clear(self) -> None:
        self._events.clear()

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)


class LoggingEventRecorder:
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or get_logger("phish_email_analyzer.audit")
        self._level = level

    def record(self, message: str) -> None:
        self._logger.log(self._level, "%s", message)
