"""Line-based style checks over the raw source text (no tree involved)."""

from __future__ import annotations

from ..context import AnalysisContext
from ..issues import Category, Issue


def run_code_style(ctx: AnalysisContext) -> list[Issue]:
    lines = ctx.unit.lines()
    return _check_indentation(ctx, lines) + _check_blank_lines(ctx, lines)


def _check_indentation(ctx: AnalysisContext, lines: list[str]) -> list[Issue]:
    allowed = ctx.config.allowed_indent_deltas
    issues: list[Issue] = []
    last_indent = 0

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        indent = len(line) - len(line.lstrip(" "))
        # Unindented lines reset the baseline without being reported.
        if indent > 0 and indent - last_indent not in allowed:
            issues.append(
                ctx.make_line_issue(
                    line_number,
                    f"Inconsistent indentation - line has {indent} spaces",
                    Category.CODE_STYLE,
                )
            )
        last_indent = indent
    return issues


def _check_blank_lines(ctx: AnalysisContext, lines: list[str]) -> list[Issue]:
    max_blank = ctx.config.max_blank_lines
    every_line = ctx.config.flag_each_excess_blank_line
    issues: list[Issue] = []
    blank_run = 0
    in_comment_block = False

    for line_number, line in enumerate(lines, start=1):
        trimmed = line.strip()
        if trimmed.startswith("/*"):
            in_comment_block = True
        if trimmed.endswith("*/"):
            in_comment_block = False
        if in_comment_block:
            continue

        if trimmed:
            blank_run = 0
            continue

        blank_run += 1
        if blank_run > max_blank and (every_line or blank_run == max_blank + 1):
            issues.append(
                ctx.make_line_issue(
                    line_number,
                    "Excessive empty lines",
                    Category.CODE_STYLE,
                )
            )
    return issues
