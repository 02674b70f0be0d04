"""Coordinator that parses a Swift file and runs the registered checks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .checks import CHECKS
from .config import DEFAULT_CONFIG, CheckerConfig
from .context import AnalysisContext
from .errors import UnknownCheckError
from .issues import Issue
from .source_parser import SourceParser, SourceUnit

log = logging.getLogger(__name__)


class SwiftChecker:
    """
    Runs the check catalog over Swift sources.

    Every call parses its input again, so results never depend on earlier
    calls. Issues come back in registry order, and within one check in the
    order its traversal met them.

    Example:
        checker = SwiftChecker()
        for issue in checker.run_all_checks("Sources/App/Model.swift"):
            print(issue)
    """

    def __init__(self, config: Optional[CheckerConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.parser = SourceParser()

    @staticmethod
    def available_checks() -> list[str]:
        return list(CHECKS)

    def check(self, path: str | Path, name: str) -> list[Issue]:
        """Run a single named check on the file at ``path``."""
        self._resolve([name])
        unit = self.parser.parse_file(path)
        return self._run(unit, [name])

    def run_all_checks(self, path: str | Path) -> list[Issue]:
        unit = self.parser.parse_file(path)
        return self._run(unit, CHECKS)

    def analyze_source(
        self,
        text: str,
        checks: Optional[Iterable[str]] = None,
        path: str | Path = "<string>",
    ) -> list[Issue]:
        """Run checks (all of them by default) over in-memory Swift code."""
        names = list(CHECKS) if checks is None else list(checks)
        self._resolve(names)
        unit = self.parser.parse_source(text, path)
        return self._run(unit, names)

    def _resolve(self, names: Iterable[str]):
        for name in names:
            if name not in CHECKS:
                raise UnknownCheckError(name)

    def _run(self, unit: SourceUnit, names: Iterable[str]) -> list[Issue]:
        context = AnalysisContext(unit, self.config)
        issues: list[Issue] = []
        for name in names:
            new_issues = CHECKS[name](context)
            log.debug("%s: %s reported %d issue(s)", unit.path, name, len(new_issues))
            for issue in new_issues:
                log.debug("issue: %s", issue)
            issues.extend(new_issues)
        return issues
