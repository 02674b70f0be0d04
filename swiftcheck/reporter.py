"""Markdown reports over a list of issues."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .issues import Category, Issue, Severity

log = logging.getLogger(__name__)

# Substring -> category, first match wins. Matching is case-sensitive, so
# e.g. "Invalid syntax" lands in Syntax but "Unreachable code" does not
# land in Unreachable Code.
LEGACY_CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("syntax", "parsing"), Category.SYNTAX),
    (("unwrap",), Category.FORCE_UNWRAPS),
    (("unused", "never used"), Category.UNUSED_VARIABLES),
    (("immutable", "let constant"), Category.IMMUTABLE_ASSIGNMENTS),
    (("unreachable",), Category.UNREACHABLE_CODE),
    (("operator", "precedence"), Category.OPERATOR_PRECEDENCE),
    (("style", "format", "whitespace"), Category.CODE_STYLE),
    (("refactor", "similar", "duplicate"), Category.REFACTORING),
    (("macro",), Category.MACRO_USAGE),
    (("memory", "leak"), Category.MEMORY_LEAKS),
    (("catch",), Category.EXCEPTION_HANDLING),
    (("magic number",), Category.MAGIC_NUMBERS),
    (("chaining",), Category.OPTIONAL_CHAINING),
)


def infer_category(description: str) -> str:
    """Guess a category from an issue description using the keyword table."""
    for keywords, category in LEGACY_CATEGORY_KEYWORDS:
        if any(keyword in description for keyword in keywords):
            return category
    return Category.OTHER


class AnalysisReporter:
    """
    Builds summary and detailed Markdown reports.

    With ``legacy_categories`` the category of each issue is inferred from
    its description instead of taken from ``Issue.category``.
    """

    def __init__(
        self,
        issues: Sequence[Issue],
        file_path: str | Path,
        legacy_categories: bool = False,
        generated_at: Optional[datetime] = None,
    ):
        self.issues = list(issues)
        self.file_path = str(file_path)
        self.legacy_categories = legacy_categories
        self.generated_at = generated_at or datetime.now()

    def category_of(self, issue: Issue) -> str:
        if self.legacy_categories or not issue.category:
            return infer_category(issue.description)
        return issue.category

    def generate_summary(self) -> str:
        severities = Counter(issue.severity for issue in self.issues)
        categories = Counter(self.category_of(issue) for issue in self.issues)

        lines = [
            "# Swift Code Analysis Report",
            "",
            f"**File**: {self.file_path}",
            f"**Date**: {self.generated_at:%Y-%m-%d %H:%M}",
            f"**Issues Found**: {len(self.issues)}",
            "",
            "## Summary",
            "",
            f"- **Errors**: {severities[Severity.ERROR]}",
            f"- **Warnings**: {severities[Severity.WARNING]}",
            f"- **Info**: {severities[Severity.INFO]}",
            "",
            "## Issues by Category",
            "",
        ]
        for category in sorted(categories):
            lines.append(f"- **{category}**: {categories[category]}")
        return "\n".join(lines) + "\n"

    def generate_detailed_report(self) -> str:
        report = self.generate_summary() + "\n\n## Detailed Issues\n"

        sections = (
            (Severity.ERROR, "Errors"),
            (Severity.WARNING, "Warnings"),
            (Severity.INFO, "Info"),
        )
        for severity, title in sections:
            selected = sorted(
                (issue for issue in self.issues if issue.severity == severity),
                key=lambda issue: issue.line,
            )
            if not selected:
                continue
            report += f"\n### {title}\n\n"
            for issue in selected:
                report += f"- **Line {issue.line}**: {issue.description}\n"
        return report

    def save_report(self, output_path: str | Path) -> Path:
        output_path = Path(output_path)
        output_path.write_text(self.generate_detailed_report(), encoding="utf-8")
        log.info("report written to %s", output_path)
        return output_path
