"""Tests for :mod:`clearfind.gate`."""

from __future__ import annotations

import pytest

from clearfind.gate import degraded_result, is_viable_html
from clearfind.models import FetchMeta, FindingStatus, Summary


@pytest.mark.parametrize(
    "body",
    ["<!DOCTYPE html><p>x</p>", "<!doctype html>", "<HTML lang='en'></HTML>", "  \n<html>"],
)
def test_html_payloads_are_viable(body: str) -> None:
    """Given a doctype or <html> opening tag in any case When gated Then the body is viable."""

    assert is_viable_html(body)


@pytest.mark.parametrize("body", ["", None, "not html", '{"json": true}', "<body>fragment</body>"])
def test_other_payloads_are_not_viable(body) -> None:
    """Given empty, JSON or fragment bodies When gated Then they are rejected."""

    assert not is_viable_html(body)


def test_degraded_result_has_single_issue(fetched_at) -> None:
    """Given an unreadable payload When the degraded result is built Then it carries one seo.html issue."""

    result = degraded_result("https://example.com", FetchMeta(http_status=403, fetched_at=fetched_at))

    assert [finding.id for finding in result.seo.findings] == ["seo.html"]
    assert result.seo.findings[0].status is FindingStatus.ISSUE
    assert result.aeo.findings == []
    assert result.summary == Summary(issues=1, oks=0, infos=0)
    assert result.meta.http_status == 403
