"""Search engine checks: title, description, headings, canonical, OG, robots."""

from __future__ import annotations

from .base import CheckCatalog
from ..document import QueryableDocument
from ..models import Finding, FindingStatus

MAX_DESCRIPTION_LENGTH = 180
OPEN_GRAPH_PROPERTIES = ("og:title", "og:description", "og:image")


def check_title(document: QueryableDocument) -> Finding:
    title = document.text(document.select_first("title")).strip()
    if not title:
        return Finding(
            id="seo.title",
            label="Title tag",
            status=FindingStatus.ISSUE,
            details="Missing <title>.",
            why="Titles help users and ranking systems understand the page.",
            fix="Add a concise <title> under ~60 characters.",
            example="<title>How to Replace a Bike Chain</title>",
        )
    return Finding(
        id="seo.title",
        label="Title tag",
        status=FindingStatus.OK,
        details=f"Found title ({len(title)} characters).",
        why="Good titles improve clarity.",
        fix="Keep it descriptive and concise.",
    )


def check_meta_description(document: QueryableDocument) -> Finding:
    meta = document.select_first('meta[name="description"]')
    description = (document.attribute(meta, "content") or "").strip()
    if not description:
        return Finding(
            id="seo.meta.description",
            label="Meta description",
            status=FindingStatus.ISSUE,
            details="Missing meta description.",
            why="Improves click-through by summarizing the page.",
            fix="Add 150–160 char summary.",
            example='<meta name="description" content="Short helpful summary..." />',
        )
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return Finding(
            id="seo.meta.description",
            label="Meta description",
            status=FindingStatus.INFO,
            details=f"Meta description is {len(description)} characters.",
            why="Long descriptions may be truncated.",
            fix="Aim for ~150–160 characters.",
        )
    return Finding(
        id="seo.meta.description",
        label="Meta description",
        status=FindingStatus.OK,
        details="Meta description present.",
    )


def check_h1(document: QueryableDocument) -> Finding:
    count = len(document.select_all("h1"))
    if count == 0:
        return Finding(
            id="seo.h1",
            label="H1 structure",
            status=FindingStatus.ISSUE,
            details="No H1 on the page.",
            why="Signals the main topic.",
            fix="Add one H1 and use H2/H3 for sections.",
        )
    if count > 1:
        return Finding(
            id="seo.h1",
            label="H1 structure",
            status=FindingStatus.INFO,
            details="Multiple H1 tags detected.",
            fix="Use only one H1 per page.",
        )
    return Finding(
        id="seo.h1",
        label="H1 structure",
        status=FindingStatus.OK,
        details="Single H1 detected.",
    )


def check_canonical(document: QueryableDocument) -> Finding:
    canonical = document.attribute(document.select_first('link[rel="canonical"]'), "href")
    if not canonical:
        return Finding(
            id="seo.canonical",
            label="Canonical tag",
            status=FindingStatus.INFO,
            details="Canonical not found.",
            why="Helps with duplicate URLs.",
            fix='Add: <link rel="canonical" href="https://example.com/page" />',
        )
    return Finding(
        id="seo.canonical",
        label="Canonical tag",
        status=FindingStatus.OK,
        details=f"Canonical set to {canonical}",
    )


def check_open_graph(document: QueryableDocument) -> Finding:
    values = [
        document.attribute(document.select_first(f'meta[property="{prop}"]'), "content")
        for prop in OPEN_GRAPH_PROPERTIES
    ]
    if not all(values):
        return Finding(
            id="seo.og",
            label="Open Graph Tags",
            status=FindingStatus.INFO,
            details="Missing some OG tags.",
            why="Controls social and preview snippets.",
            fix="Add og:title, og:description, and og:image.",
        )
    return Finding(
        id="seo.og",
        label="Open Graph Tags",
        status=FindingStatus.OK,
        details="OG tags present.",
    )


def check_robots(document: QueryableDocument) -> Finding:
    robots = document.attribute(document.select_first('meta[name="robots"]'), "content") or ""
    if "noindex" in robots.lower():
        return Finding(
            id="seo.robots",
            label="Robots Meta Tag",
            status=FindingStatus.ISSUE,
            details="robots meta set to noindex.",
            why="Prevents indexing.",
            fix="Remove noindex if you want this page indexed.",
        )
    return Finding(
        id="seo.robots",
        label="Robots Meta Tag",
        status=FindingStatus.OK,
        details="robots meta allows indexing or is not present.",
    )


SEO_CHECKS = (
    check_title,
    check_meta_description,
    check_h1,
    check_canonical,
    check_open_graph,
    check_robots,
)


class SEOCatalog(CheckCatalog):
    """Checks that affect ranking and indexing by search crawlers."""

    def __init__(self) -> None:
        super().__init__(name="SEO", checks=SEO_CHECKS)


__all__ = [
    "MAX_DESCRIPTION_LENGTH",
    "SEOCatalog",
    "SEO_CHECKS",
    "check_canonical",
    "check_h1",
    "check_meta_description",
    "check_open_graph",
    "check_robots",
    "check_title",
]
