"""Data models shared by the ClearFind analysis core and its entrypoints."""

from __future__ import annotations

import dataclasses
import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


class ScanRequest(BaseModel):
    """Validated input accepted by the scan entrypoints."""

    url: str = Field(..., description="Absolute http(s) URL of the page to analyse")

    @field_validator("url", mode="before")
    @classmethod
    def _ensure_http_url(cls, value: Any) -> str:
        if value is None:
            raise ValueError("URL must be provided")
        text = str(value).strip()
        if not _SCHEME_PATTERN.match(text) or not urlparse(text).netloc:
            raise ValueError("Provide a valid http(s) URL")
        return text


class FindingStatus(str, Enum):
    """Tri-state severity attached to every finding."""

    OK = "ok"
    ISSUE = "issue"
    INFO = "info"


def _convert(value: Any) -> Any:
    if isinstance(value, Serializable):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    if isinstance(value, dict):
        return {key: _convert(val) for key, val in value.items()}
    return value


@dataclass(slots=True)
class Serializable:
    """Base dataclass providing JSON serialisation helpers."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert the dataclass to a serialisable dictionary."""

        return {f.name: _convert(getattr(self, f.name)) for f in dataclasses.fields(self)}

    def to_json(self, path: Path) -> None:
        """Write the dataclass as JSON to the provided ``path``."""

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


@dataclass(slots=True)
class Finding(Serializable):
    """One observation produced by a single check."""

    id: str
    label: str
    status: FindingStatus
    details: str
    why: Optional[str] = None
    fix: Optional[str] = None
    example: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # Unset remediation fields are omitted rather than emitted as null.
        return {
            f.name: _convert(getattr(self, f.name))
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(slots=True)
class CategoryBlock(Serializable):
    findings: List[Finding] = field(default_factory=list)


@dataclass(slots=True)
class Summary(Serializable):
    issues: int = 0
    oks: int = 0
    infos: int = 0

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "Summary":
        """Count ``findings`` by status."""

        statuses = [finding.status for finding in findings]
        return cls(
            issues=statuses.count(FindingStatus.ISSUE),
            oks=statuses.count(FindingStatus.OK),
            infos=statuses.count(FindingStatus.INFO),
        )


@dataclass(slots=True)
class FetchMeta(Serializable):
    """Acquisition metadata carried through to the result untouched."""

    http_status: int
    fetched_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {"httpStatus": self.http_status, "fetchedAt": _convert(self.fetched_at)}


@dataclass(slots=True)
class AnalysisResult(Serializable):
    url: str
    summary: Summary
    seo: CategoryBlock
    aeo: CategoryBlock
    meta: FetchMeta


@dataclass(slots=True)
class FetchedPage(Serializable):
    url: str
    status_code: int
    body: str
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = [
    "AnalysisResult",
    "CategoryBlock",
    "FetchMeta",
    "FetchedPage",
    "Finding",
    "FindingStatus",
    "ScanRequest",
    "Serializable",
    "Summary",
]
