"""ClearFind: SEO and AEO heuristics for a single web page."""

from .analyzer import analyze_page
from .errors import ClearFindError, InvalidURLError, ScanError
from .logging_config import configure_logging
from .models import AnalysisResult, Finding, FindingStatus, Summary
from .scanner import scan_url

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "ClearFindError",
    "Finding",
    "FindingStatus",
    "InvalidURLError",
    "ScanError",
    "Summary",
    "analyze_page",
    "configure_logging",
    "scan_url",
]
