"""Configuration for page acquisition."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "scanner.json"

DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "ClearFind/0.1 (+student project)"


@dataclass(slots=True)
class ScanConfig:
    """Settings applied when fetching a page for analysis."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def load(cls, path: Path | None = None) -> "ScanConfig":
        """Load configuration from disk and environment overrides."""

        config_path = path or _DEFAULT_CONFIG_PATH
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode scanner config at %s: %s", config_path, exc)

        env_timeout = os.environ.get("CLEARFIND_TIMEOUT")
        if env_timeout is not None:
            data["timeout"] = env_timeout
        env_agent = os.environ.get("CLEARFIND_USER_AGENT")
        if env_agent is not None:
            data["user_agent"] = env_agent

        return cls(
            timeout=_parse_timeout(data.get("timeout")),
            user_agent=str(data.get("user_agent") or DEFAULT_USER_AGENT).strip(),
        )


def _parse_timeout(value: Any) -> float:
    if value is None or value == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        _LOGGER.warning("Ignoring invalid timeout %r, using %s", value, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        _LOGGER.warning("Ignoring non-positive timeout %r, using %s", value, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def load_scan_config(path: Path | None = None) -> ScanConfig:
    """Helper to load the scanner configuration."""

    return ScanConfig.load(path)


__all__ = ["DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT", "ScanConfig", "load_scan_config"]
