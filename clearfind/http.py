"""HTTP acquisition of the page under analysis."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Dict

import requests

from .models import FetchedPage
from .tracing import log_event


def get(url: str, timeout: float = 15.0, headers: Dict[str, str] | None = None) -> FetchedPage:
    """Perform a HTTP GET request and return a :class:`FetchedPage`.

    Non-2xx responses are returned like any other; only transport failures
    raise (as :class:`requests.RequestException`).
    """

    logger = logging.getLogger("http")
    log_event(logger, logging.DEBUG, "http.request", method="GET", url=url, timeout=timeout)
    response = requests.get(url, timeout=timeout, headers=headers)
    fetched_at = datetime.now(timezone.utc)
    elapsed_ms = (
        round(response.elapsed.total_seconds() * 1000, 2)
        if getattr(response, "elapsed", None)
        else None
    )
    log_event(
        logger,
        logging.INFO,
        "http.response",
        method="GET",
        url=str(response.url),
        status_code=response.status_code,
        elapsed_ms=elapsed_ms,
    )
    return FetchedPage(
        url=str(response.url),
        status_code=response.status_code,
        body=_decode_body(response),
        fetched_at=fetched_at,
    )


def _decode_body(response: requests.Response) -> str:
    # Without a declared charset the body is read as UTF-8, not requests' ISO-8859-1 default.
    content_type = response.headers.get("content-type", "")
    if "charset" not in content_type.lower() and response.content:
        return response.content.decode("utf-8", errors="replace")
    return response.text or ""


__all__ = ["get"]
