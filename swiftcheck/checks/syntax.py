"""Report parser diagnostics (ERROR and MISSING nodes) as error issues."""

from __future__ import annotations

from ..context import AnalysisContext
from ..issues import Category, Issue, Severity

_SNIPPET_LIMIT = 40


def run_syntax_errors(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    root = ctx.tree.root_node
    if not root.has_error:
        return issues

    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_missing:
            issues.append(
                ctx.make_issue(
                    node,
                    f"Invalid syntax: expected '{node.type}'",
                    Category.SYNTAX,
                    Severity.ERROR,
                )
            )
            continue
        if node.type == "ERROR":
            # One diagnostic per error region; nested errors are the same defect.
            issues.append(
                ctx.make_issue(
                    node,
                    f"Invalid syntax near '{_snippet(ctx.text(node))}'",
                    Category.SYNTAX,
                    Severity.ERROR,
                )
            )
            continue
        if node.has_error:
            stack.extend(reversed(node.children))
    return issues


def _snippet(text: str) -> str:
    first_line = text.strip().splitlines()[0] if text.strip() else ""
    if len(first_line) > _SNIPPET_LIMIT:
        first_line = first_line[:_SNIPPET_LIMIT] + "..."
    return first_line
