"""Category runner shared by the SEO and AEO catalogs."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from ..document import QueryableDocument
from ..models import CategoryBlock, Finding
from ..tracing import log_event

Check = Callable[[QueryableDocument], Optional[Finding]]


class CheckCatalog:
    """A fixed, ordered set of checks run against one document."""

    def __init__(
        self,
        name: str,
        checks: Sequence[Check],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._name = name
        self._checks: Tuple[Check, ...] = tuple(checks)
        self._logger = logger or logging.getLogger(f"clearfind.checks.{name.lower()}")

    @property
    def name(self) -> str:
        """Return the human readable name of the catalog."""

        return self._name

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def checks(self) -> Tuple[Check, ...]:
        return self._checks

    def run(self, document: QueryableDocument) -> CategoryBlock:
        """Run every check in order and collect the findings they emit."""

        findings = [
            finding
            for finding in (check(document) for check in self._checks)
            if finding is not None
        ]
        log_event(
            self.logger,
            logging.DEBUG,
            "catalog.run",
            catalog=self.name,
            checks=len(self._checks),
            findings=[finding.id for finding in findings],
        )
        return CategoryBlock(findings=findings)


__all__ = ["Check", "CheckCatalog"]
