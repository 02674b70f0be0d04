"""Checks related to block structure (unreachable statements, empty catch, guard candidates)."""

from __future__ import annotations

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import block_statements, is_comment, is_return, statement_list


def run_unreachable_code(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if not is_return(node, ctx.source_bytes):
            continue

        # A value on a later line than `return` is a separate statement.
        result = node.child_by_field_name("result")
        if result is not None and result.start_point[0] > node.start_point[0]:
            issues.append(_unreachable(ctx, result))
            continue

        block = node.parent
        if block is None or block.type != "statements":
            continue

        following = False
        for stmt in statement_list(block):
            if following:
                issues.append(_unreachable(ctx, stmt))
                break
            if stmt == node:
                following = True
    return issues


def _unreachable(ctx: AnalysisContext, node: tree_sitter.Node) -> Issue:
    return ctx.make_issue(
        node,
        "Unreachable code detected after return statement",
        Category.UNREACHABLE_CODE,
    )


def run_guard_usage(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type != "if_statement":
            continue
        if not _is_optional_binding(ctx, node):
            continue
        if any(child.type == "else" for child in node.children):
            continue

        body = statement_list(block_statements(node))
        if body and is_return(body[-1], ctx.source_bytes):
            issues.append(
                ctx.make_issue(
                    node,
                    "Consider using guard statement for early return instead of nested if-let",
                    Category.CONTROL_FLOW,
                )
            )
    return issues


def _is_optional_binding(ctx: AnalysisContext, node: tree_sitter.Node) -> bool:
    conditions = node.children_by_field_name("condition")
    if conditions:
        first = conditions[0]
    else:
        named = [c for c in node.named_children if not is_comment(c)]
        if not named:
            return False
        first = named[0]
    if first.type == "value_binding_pattern":
        return True
    words = ctx.text(first).split()
    return bool(words) and words[0] in ("let", "var")


def run_empty_catch_blocks(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type != "catch_block":
            continue
        if not statement_list(block_statements(node)):
            issues.append(
                ctx.make_issue(
                    node,
                    "Empty catch block. Errors should be handled or logged",
                    Category.EXCEPTION_HANDLING,
                )
            )
    return issues
