"""Function size and cyclomatic complexity checks."""

from __future__ import annotations

from dataclasses import dataclass

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import FUNCTION_DECLARATIONS, declaration_name, walk

DECISION_POINTS = frozenset({
    "if_statement",
    "switch_statement",
    "switch_entry",
    "for_statement",
    "while_statement",
    "repeat_while_statement",
    "guard_statement",
    "do_statement",
    "catch_block",
    "conjunction_expression",
    "disjunction_expression",
})


@dataclass
class _Frame:
    name: str
    complexity: int
    node: tree_sitter.Node


def run_cyclomatic_complexity(ctx: AnalysisContext) -> list[Issue]:
    threshold = ctx.config.complexity_threshold
    issues: list[Issue] = []
    frames: list[_Frame] = []

    for node, entering in walk(ctx.tree.root_node):
        if node.type in FUNCTION_DECLARATIONS:
            if entering:
                frames.append(_Frame(declaration_name(node, ctx.source_bytes), 1, node))
                continue
            frame = frames.pop()
            if frame.complexity > threshold:
                issues.append(
                    ctx.make_issue(
                        _name_node(node),
                        f"Function '{frame.name}' has a cyclomatic complexity of "
                        f"{frame.complexity}, which exceeds the threshold of {threshold}",
                        Category.COMPLEXITY,
                    )
                )
            continue

        # Only the innermost function pays for a decision point.
        if entering and frames and node.type in DECISION_POINTS:
            frames[-1].complexity += 1
    return issues


def run_long_functions(ctx: AnalysisContext) -> list[Issue]:
    threshold = ctx.config.long_function_threshold
    resolver = ctx.unit.resolver
    issues: list[Issue] = []

    for node in ctx.iter_nodes():
        if node.type not in FUNCTION_DECLARATIONS:
            continue
        body = node.child_by_field_name("body")
        if body is None:
            continue

        start_line, _ = resolver.location_for(body)
        end_line, _ = resolver.end_location_for(body)
        line_count = end_line - start_line + 1
        if line_count > threshold:
            name = declaration_name(node, ctx.source_bytes)
            issues.append(
                ctx.make_issue(
                    _name_node(node),
                    f"Function '{name}' is {line_count} lines long, which exceeds "
                    f"the recommended maximum of {threshold} lines",
                    Category.COMPLEXITY,
                )
            )
    return issues


def _name_node(node: tree_sitter.Node) -> tree_sitter.Node:
    return node.child_by_field_name("name") or node
