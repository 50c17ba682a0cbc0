"""Fixed SEO and AEO check catalogs."""

from .aeo import AEO_CHECKS, AEOCatalog
from .base import Check, CheckCatalog
from .seo import SEO_CHECKS, SEOCatalog

__all__ = [
    "AEOCatalog",
    "AEO_CHECKS",
    "Check",
    "CheckCatalog",
    "SEOCatalog",
    "SEO_CHECKS",
]
