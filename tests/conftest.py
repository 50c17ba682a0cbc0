"""Shared pytest fixtures for the ClearFind test-suite."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from clearfind.document import SoupDocument


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the root directory containing reusable fixture files."""

    return Path(__file__).parent / "fixtures"


@pytest.fixture
def html_loader(fixtures_dir: Path) -> Callable[[str], str]:
    """Return a callable that loads HTML fixture files by name."""

    def _load(name: str) -> str:
        path = fixtures_dir / "html" / name
        return path.read_text(encoding="utf-8")

    return _load


@pytest.fixture
def make_document() -> Callable[..., SoupDocument]:
    """Return a callable wrapping an HTML snippet in a full document."""

    def _make(body: str = "", head: str = "") -> SoupDocument:
        return SoupDocument(f"<!doctype html><html><head>{head}</head><body>{body}</body></html>")

    return _make


@pytest.fixture
def fetched_at() -> datetime:
    """Return a fixed fetch timestamp."""

    return datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def complete_html(html_loader: Callable[[str], str]) -> str:
    """Return a page that satisfies every SEO check."""

    return html_loader("complete.html")


@pytest.fixture
def scenario_html(html_loader: Callable[[str], str]) -> str:
    """Return a page without title, description, canonical, robots or JSON-LD."""

    return html_loader("scenario.html")
