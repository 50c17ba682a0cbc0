"""End-to-end scan: validate the URL, fetch the page, analyse it."""

from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from . import http
from .analyzer import analyze_page
from .config import ScanConfig, load_scan_config
from .errors import InvalidURLError, ScanError
from .models import AnalysisResult, ScanRequest
from .tracing import log_event

_LOGGER = logging.getLogger("clearfind.scanner")


def validate_url(url: object) -> str:
    """Return the normalised URL or raise :class:`InvalidURLError`."""

    try:
        return ScanRequest(url=url).url
    except ValidationError as exc:
        raise InvalidURLError("Provide a valid http(s) URL") from exc


def scan_url(url: str, *, config: ScanConfig | None = None) -> AnalysisResult:
    """Fetch ``url`` and analyse the returned page."""

    target = validate_url(url)
    config = config or load_scan_config()
    try:
        page = http.get(
            target,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )
    except requests.RequestException as exc:
        log_event(
            _LOGGER,
            logging.ERROR,
            "scan.failed",
            url=target,
            error=str(exc),
            exception=exc.__class__.__name__,
        )
        raise ScanError(target, str(exc)) from exc

    return analyze_page(target, page.body, page.status_code, page.fetched_at)


__all__ = ["scan_url", "validate_url"]
