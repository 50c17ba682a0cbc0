"""Pre-parse check that short-circuits scans of non-HTML payloads."""

from __future__ import annotations

import re

from .aggregate import assemble
from .models import AnalysisResult, CategoryBlock, FetchMeta, Finding, FindingStatus

_HTML_MARKER = re.compile(r"<!doctype html>|<html", re.IGNORECASE)


def is_viable_html(body: str | None) -> bool:
    """Return ``True`` when ``body`` looks like an HTML document."""

    return bool(body) and _HTML_MARKER.search(body) is not None


def unreadable_html_finding() -> Finding:
    return Finding(
        id="seo.html",
        label="HTML content",
        status=FindingStatus.ISSUE,
        details="This URL did not return readable HTML.",
        why="Some sites require login or block bots.",
        fix="Try a public page. Pages behind auth will not scan.",
    )


def degraded_result(url: str, meta: FetchMeta) -> AnalysisResult:
    """Build the successful result reported for a non-HTML payload."""

    return assemble(
        url,
        seo=CategoryBlock(findings=[unreadable_html_finding()]),
        aeo=CategoryBlock(),
        meta=meta,
    )


__all__ = ["degraded_result", "is_viable_html", "unreadable_html_finding"]
