"""The analysis pipeline: gate, parse, run both catalogs, assemble."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from .aggregate import assemble
from .checks import AEOCatalog, SEOCatalog
from .document import QueryableDocument, SoupDocument
from .gate import degraded_result, is_viable_html
from .models import AnalysisResult, FetchMeta
from .tracing import log_event, trace

_LOGGER = logging.getLogger("clearfind.analyzer")

DocumentParser = Callable[[str], QueryableDocument]


def analyze_page(
    url: str,
    body: str,
    http_status: int,
    fetched_at: datetime,
    *,
    parser: DocumentParser = SoupDocument,
) -> AnalysisResult:
    """Analyse one fetched page and return its :class:`AnalysisResult`.

    A body that is not recognisable HTML yields a result with the single
    ``seo.html`` issue instead of raising.
    """

    meta = FetchMeta(http_status=http_status, fetched_at=fetched_at)
    with trace("analysis", logger=_LOGGER, url=url, http_status=http_status) as span:
        if not is_viable_html(body):
            log_event(
                _LOGGER,
                logging.WARNING,
                "gate.degraded",
                url=url,
                http_status=http_status,
                body_length=len(body or ""),
            )
            return degraded_result(url, meta)

        document = parser(body)
        seo = SEOCatalog().run(document)
        aeo = AEOCatalog().run(document)
        result = assemble(url, seo=seo, aeo=aeo, meta=meta)
        span.note(summary=result.summary)
        return result


__all__ = ["DocumentParser", "analyze_page"]
