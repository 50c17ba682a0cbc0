"""Exception hierarchy raised by ClearFind."""

from __future__ import annotations


class ClearFindError(Exception):
    """Base class for all ClearFind errors."""


class InvalidURLError(ClearFindError):
    """Raised when a scan target is not an absolute http(s) URL."""


class ScanError(ClearFindError):
    """Raised when the target page could not be fetched."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Unable to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


__all__ = ["ClearFindError", "InvalidURLError", "ScanError"]
