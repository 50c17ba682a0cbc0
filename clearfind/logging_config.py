"""Logging setup for ClearFind entrypoints."""

from __future__ import annotations

import logging
import sys
from typing import Optional


_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[logging.Handler] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        The logging level to apply across the root logger.
    stream:
        Optional handler. When omitted a handler writing to ``sys.stdout``
        is used.
    """

    root_logger = logging.getLogger()
    handler: logging.Handler = stream if stream is not None else logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Repeated calls (tests, reloads) must not duplicate log lines.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` onto its numeric value."""

    if not name:
        return default
    value = getattr(logging, name.strip().upper(), None)
    return value if isinstance(value, int) else default


__all__ = ["configure_logging", "resolve_level"]
