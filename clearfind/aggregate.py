"""Summary counting and result assembly."""

from __future__ import annotations

from .models import AnalysisResult, CategoryBlock, FetchMeta, Summary


def summarize(seo: CategoryBlock, aeo: CategoryBlock) -> Summary:
    """Count SEO and AEO findings by status."""

    return Summary.from_findings([*seo.findings, *aeo.findings])


def assemble(url: str, seo: CategoryBlock, aeo: CategoryBlock, meta: FetchMeta) -> AnalysisResult:
    return AnalysisResult(url=url, summary=summarize(seo, aeo), seo=seo, aeo=aeo, meta=meta)


__all__ = ["assemble", "summarize"]
