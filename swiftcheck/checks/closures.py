"""Heuristic retain-cycle check for closures that capture ``self`` strongly."""

from __future__ import annotations

import re
from typing import Optional

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import iter_nodes

_WEAK_SELF = re.compile(r"^(weak|unowned(\s*\(\s*(safe|unsafe)\s*\))?)\s+self$")


def run_retain_cycles(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type != "lambda_literal":
            continue
        if _captures_self_weakly(ctx, node):
            continue
        if _references_self(node):
            issues.append(
                ctx.make_issue(
                    node,
                    "Potential retain cycle: closure uses 'self' strongly. "
                    "Consider using [weak self] or [unowned self]",
                    Category.MEMORY_LEAKS,
                )
            )
    return issues


def _capture_list(closure: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    captures = closure.child_by_field_name("captures")
    if captures is not None:
        return captures
    # Some grammar versions wrap the capture list in the closure's type.
    for child in closure.children:
        if child.type in ("statements", "lambda_literal"):
            continue
        for node in iter_nodes(child):
            if node.type == "capture_list":
                return node
    return None


def _captures_self_weakly(ctx: AnalysisContext, closure: tree_sitter.Node) -> bool:
    captures = _capture_list(closure)
    if captures is None:
        return False
    for item in captures.named_children:
        if item.type != "capture_list_item":
            continue
        if _WEAK_SELF.match(" ".join(ctx.text(item).split())):
            return True
    return False


def _references_self(closure: tree_sitter.Node) -> bool:
    # Nested closures count: they are walked as part of this body.
    stack = list(closure.children)
    while stack:
        node = stack.pop()
        if node.type == "capture_list":
            continue
        if node.type == "self_expression":
            return True
        stack.extend(node.children)
    return False
