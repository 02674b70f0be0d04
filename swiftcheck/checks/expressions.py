"""Expression-level heuristics: force unwraps, count checks, optional chains, precedence."""

from __future__ import annotations

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import (
    BINARY_EXPRESSIONS,
    STATEMENT_CONTAINERS,
    binary_operands,
    binary_operator,
    member_name,
)

LOGICAL_OPERATORS = frozenset({"&&", "||"})
ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/", "%"})

# A condition or a statement's own expression ends an optional chain.
_CHAIN_BOUNDARIES = STATEMENT_CONTAINERS | {
    "if_statement",
    "guard_statement",
    "while_statement",
    "repeat_while_statement",
    "for_statement",
    "switch_statement",
}


def run_force_unwraps(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type == "postfix_expression":
            if any(child.type == "bang" for child in node.children):
                issues.append(
                    ctx.make_issue(
                        node,
                        "Force unwrap operator used which may cause runtime crashes",
                        Category.FORCE_UNWRAPS,
                    )
                )
        elif node.type == "as_expression":
            if any(ctx.text(child) == "as!" for child in node.children if child.type == "as_operator"):
                issues.append(
                    ctx.make_issue(
                        node,
                        "Force cast operator 'as!' used which may cause runtime crashes",
                        Category.FORCE_UNWRAPS,
                    )
                )
    return issues


def run_empty_collection_checks(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type not in ("equality_expression", "comparison_expression"):
            continue

        operands = binary_operands(node)
        if len(operands) != 2:
            continue
        lhs, rhs = operands
        if lhs.type != "navigation_expression" or member_name(lhs, ctx.source_bytes) != "count":
            continue
        if rhs.type != "integer_literal" or ctx.text(rhs) != "0":
            continue

        op = binary_operator(node, ctx.source_bytes)
        if op == "==":
            suggestion = "isEmpty"
        elif op in ("!=", ">"):
            suggestion = "!isEmpty"
        else:
            continue

        issues.append(
            ctx.make_issue(
                node,
                f"Use '{suggestion}' instead of comparing count to zero to check for empty collections",
                Category.COLLECTIONS,
            )
        )
    return issues


def run_optional_chaining(ctx: AnalysisContext) -> list[Issue]:
    max_depth = ctx.config.max_optional_chain_depth
    dedupe = ctx.config.dedupe_optional_chains
    issues: list[Issue] = []
    reported: set[tuple[int, int]] = set()

    for node in ctx.iter_nodes():
        if node.type != "navigation_expression":
            continue
        if "?." not in ctx.text(node):
            continue

        chain = _maximal_expression(node)
        depth = ctx.text(chain).count("?.")
        if depth <= max_depth:
            continue

        key = (chain.start_byte, chain.end_byte)
        if dedupe and key in reported:
            continue
        reported.add(key)
        issues.append(
            ctx.make_issue(
                node,
                f"Excessive optional chaining depth ({depth}). "
                "Consider unwrapping optionals or using guard/if let",
                Category.OPTIONAL_CHAINING,
            )
        )
    return issues


def _maximal_expression(node: tree_sitter.Node) -> tree_sitter.Node:
    current = node
    while current.parent is not None and current.parent.type not in _CHAIN_BOUNDARIES:
        current = current.parent
    return current


def run_operator_precedence(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type not in BINARY_EXPRESSIONS:
            continue
        if node.parent is not None and node.parent.type in BINARY_EXPRESSIONS:
            continue

        operators: list[str] = []
        element_count = _flatten(ctx, node, operators)
        if element_count <= 3:
            continue

        if _has_same_class_nesting(node):
            issues.append(
                ctx.make_issue(
                    node,
                    "Consider adding explicit parentheses to clarify operator precedence",
                    Category.OPERATOR_PRECEDENCE,
                )
            )

        ops = set(operators)
        if ops & LOGICAL_OPERATORS and ops & ARITHMETIC_OPERATORS:
            issues.append(
                ctx.make_issue(
                    node,
                    "Mixed logical and arithmetic operators - use parentheses to clarify precedence",
                    Category.OPERATOR_PRECEDENCE,
                )
            )
    return issues


def _flatten(ctx: AnalysisContext, node: tree_sitter.Node, operators: list[str]) -> int:
    """Count operands and operators of an unparenthesised operator tree."""
    if node.type not in BINARY_EXPRESSIONS:
        return 1
    operators.append(binary_operator(node, ctx.source_bytes))
    return 1 + sum(_flatten(ctx, operand, operators) for operand in binary_operands(node))


def _has_same_class_nesting(node: tree_sitter.Node) -> bool:
    stack = [node]
    while stack:
        current = stack.pop()
        for operand in binary_operands(current):
            if operand.type not in BINARY_EXPRESSIONS:
                continue
            if operand.type == current.type:
                return True
            stack.append(operand)
    return False
