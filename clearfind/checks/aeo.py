"""Answer engine checks: structured data, FAQ patterns and entity trust."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, List, Optional

from .base import CheckCatalog
from ..document import QueryableDocument
from ..models import Finding, FindingStatus
from ..tracing import log_event

_LOGGER = logging.getLogger("clearfind.checks.aeo")
_FAQ_PATTERN = re.compile(r"faq|questions", re.IGNORECASE)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name}")


def parse_json_ld(text: str) -> Optional[Any]:
    """Parse one JSON-LD block, returning ``None`` when it is not valid JSON."""

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        log_event(
            _LOGGER,
            logging.DEBUG,
            "aeo.jsonld.skipped",
            error=str(exc),
            exception=exc.__class__.__name__,
        )
        return None


def _is_present(block: Any) -> bool:
    # Empty objects and arrays still count as blocks; null, false, 0 and "" do not.
    if isinstance(block, (dict, list)):
        return True
    return bool(block)


def parse_json_ld_blocks(texts: Iterable[str]) -> List[Any]:
    """Parse every block independently and keep the usable ones."""

    return [block for block in (parse_json_ld(text) for text in texts) if _is_present(block)]


def collect_types(blocks: Iterable[Any]) -> List[str]:
    """Return the de-duplicated ``@type`` values in first-seen order."""

    types: dict[str, None] = {}
    for block in blocks:
        if not isinstance(block, dict):
            continue
        value = block.get("@type")
        candidates = value if isinstance(value, list) else [value]
        for candidate in candidates:
            if candidate:
                types.setdefault(str(candidate), None)
    return list(types)


def check_structured_data(document: QueryableDocument) -> Finding:
    scripts = document.select_all('script[type="application/ld+json"]')
    blocks = parse_json_ld_blocks(document.text(script) for script in scripts)
    if not blocks:
        return Finding(
            id="aeo.jsonld.present",
            label="Structured Data (JSON-LD)",
            status=FindingStatus.ISSUE,
            details="No JSON-LD found.",
            why="Helps answer systems understand entities.",
            fix="Add Organization/Article/Product/FAQPage JSON-LD as relevant.",
        )
    types = collect_types(blocks)
    return Finding(
        id="aeo.jsonld.types",
        label="Structured Data types",
        status=FindingStatus.OK,
        details=f"Found {len(blocks)} JSON-LD block(s), types: {', '.join(types) or 'unknown'}",
    )


def check_faq(document: QueryableDocument) -> Optional[Finding]:
    has_heading = any(
        _FAQ_PATTERN.search(document.text(heading)) for heading in document.select_all("h2, h3")
    )
    has_disclosure = document.select_first("details summary") is not None
    if not (has_heading or has_disclosure):
        return None
    return Finding(
        id="aeo.faq",
        label="FAQ/Q&A",
        status=FindingStatus.INFO,
        details="FAQ pattern detected but not marked up.",
        fix="Add FAQPage JSON-LD for common questions.",
    )


def check_entity_trust(document: QueryableDocument) -> Optional[Finding]:
    has_about = document.select_first('a[href*="about"]') is not None
    has_contact = document.select_first('a[href*="contact"]') is not None
    if has_about and has_contact:
        return None
    return Finding(
        id="aeo.entity.trust",
        label="Entity clarity",
        status=FindingStatus.INFO,
        details="Add About and Contact links.",
        why="Provenance helps AI and users trust content.",
        fix="Add About/Contact in header or footer.",
    )


AEO_CHECKS = (
    check_structured_data,
    check_faq,
    check_entity_trust,
)


class AEOCatalog(CheckCatalog):
    """Checks that affect how answer engines extract and trust content."""

    def __init__(self) -> None:
        super().__init__(name="AEO", checks=AEO_CHECKS)


__all__ = [
    "AEOCatalog",
    "AEO_CHECKS",
    "check_entity_trust",
    "check_faq",
    "check_structured_data",
    "collect_types",
    "parse_json_ld",
    "parse_json_ld_blocks",
]
