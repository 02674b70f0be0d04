"""Checks on variable bindings: unused declarations and writes to constants."""

from __future__ import annotations

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue, Severity
from ..utils import binding_mutability, binding_patterns, is_reference, member_name


def run_unused_variables(ctx: AnalysisContext) -> list[Issue]:
    declarations: list[tuple[str, tree_sitter.Node]] = []
    used: set[str] = set()

    for node in ctx.iter_nodes():
        if node.type == "property_declaration":
            declarations.extend(binding_patterns(node, ctx.source_bytes))
        elif node.type == "navigation_expression":
            name = member_name(node, ctx.source_bytes)
            if name:
                used.add(name)
        elif is_reference(node):
            used.add(ctx.text(node))

    issues: list[Issue] = []
    for name, pattern in declarations:
        if name not in used:
            issues.append(
                ctx.make_issue(
                    pattern,
                    f"Variable '{name}' declared but never used",
                    Category.UNUSED_VARIABLES,
                )
            )
    return issues


def run_immutable_assignments(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    constants: set[str] = set()

    for node in ctx.iter_nodes():
        if node.type == "property_declaration":
            if binding_mutability(node, ctx.source_bytes) == "let":
                constants.update(name for name, _ in binding_patterns(node, ctx.source_bytes))
            continue

        if node.type != "assignment":
            continue

        name = _assignment_target(ctx, node)
        if name is not None and name in constants:
            issues.append(
                ctx.make_issue(
                    node,
                    f"Cannot assign to value: '{name}' is a 'let' constant",
                    Category.IMMUTABLE_ASSIGNMENTS,
                    Severity.ERROR,
                )
            )
    return issues


def _assignment_target(ctx: AnalysisContext, node: tree_sitter.Node) -> str | None:
    """Name assigned by ``name = ...``; None for member or subscript targets."""
    target = node.child_by_field_name("target")
    if target is None and node.named_children:
        target = node.named_children[0]
    if target is None:
        return None
    if target.type == "directly_assignable_expression":
        named = target.named_children
        if len(named) != 1:
            return None
        target = named[0]
    if target.type != "simple_identifier":
        return None
    return ctx.text(target)
