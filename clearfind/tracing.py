"""Structured logging helpers and timing spans for scans."""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional

__all__ = ["TraceSpan", "trace", "log_event", "safe_json"]


def safe_json(value: Any) -> Any:
    """Return ``value`` converted into a JSON-serialisable structure."""

    if isinstance(value, Enum):
        return safe_json(value.value)

    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (list, tuple, set)):
        return [safe_json(item) for item in value]

    if isinstance(value, dict):
        return {str(key): safe_json(val) for key, val in value.items()}

    if hasattr(value, "to_dict") and callable(getattr(value, "to_dict")):
        return value.to_dict()

    return repr(value)


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    exc_info: bool | BaseException | None = None,
    **fields: Any,
) -> None:
    """Emit a structured log line encoded as JSON."""

    payload: Dict[str, Any] = {"event": event}
    payload.update({key: safe_json(value) for key, value in fields.items() if value is not None})

    message = json.dumps(payload, ensure_ascii=False, sort_keys=True)
    logger.log(level, message, exc_info=exc_info)


@dataclass
class TraceSpan:
    """An active timing span."""

    name: str
    logger: logging.Logger
    fields: Dict[str, Any]
    start_time: float

    def note(self, **fields: Any) -> None:
        """Emit an in-span structured debug note."""

        base = {"trace": self.name}
        base.update(self.fields)
        base.update(fields)
        log_event(self.logger, logging.DEBUG, "trace.note", **base)


@contextmanager
def trace(name: str, *, logger: Optional[logging.Logger] = None, **fields: Any) -> Iterator[TraceSpan]:
    """Log start/end events with duration, and errors with their traceback."""

    logger = logger or logging.getLogger("trace")
    start_time = time.perf_counter()
    base_fields = {"trace": name, **fields}
    log_event(logger, logging.INFO, "trace.start", **base_fields)
    span = TraceSpan(name=name, logger=logger, fields=dict(fields), start_time=start_time)
    try:
        yield span
    except Exception as exc:
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        log_event(
            logger,
            logging.ERROR,
            "trace.error",
            exc_info=True,
            duration_ms=duration_ms,
            error=repr(exc),
            **base_fields,
        )
        raise
    duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
    log_event(logger, logging.INFO, "trace.end", duration_ms=duration_ms, **base_fields)
