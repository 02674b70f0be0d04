"""Literal checks: magic numbers and user-facing strings that are not localized."""

from __future__ import annotations

from typing import Optional

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import has_ancestor

INTEGER_LITERALS = {
    "integer_literal": 10,
    "hex_literal": 16,
    "oct_literal": 8,
    "bin_literal": 2,
}
FLOAT_LITERALS = frozenset({"real_literal"})


def run_magic_numbers(ctx: AnalysisContext) -> list[Issue]:
    exempt = ctx.config.magic_number_exemptions
    issues: list[Issue] = []

    for node in ctx.iter_nodes():
        if node.type not in INTEGER_LITERALS and node.type not in FLOAT_LITERALS:
            continue
        if has_ancestor(node, ("property_declaration",)):
            continue

        target, negative = node, False
        parent = node.parent
        if parent is not None and parent.type == "prefix_expression" and _is_negation(ctx, parent):
            target, negative = parent, True

        if node.type in FLOAT_LITERALS:
            shown = ("-" if negative else "") + ctx.text(node)
        else:
            value = _int_value(ctx.text(node), INTEGER_LITERALS[node.type])
            if value is None:
                continue
            value = -value if negative else value
            if value in exempt:
                continue
            shown = str(value)

        issues.append(
            ctx.make_issue(
                target,
                f"Magic number '{shown}' found. Consider extracting this as a named constant",
                Category.MAGIC_NUMBERS,
            )
        )
    return issues


def _is_negation(ctx: AnalysisContext, prefix: tree_sitter.Node) -> bool:
    return bool(prefix.children) and ctx.text(prefix.children[0]) == "-"


def _int_value(text: str, base: int) -> Optional[int]:
    digits = text.replace("_", "")
    if base != 10:
        digits = digits[2:]
    try:
        return int(digits, base)
    except ValueError:
        return None


def run_string_literals(ctx: AnalysisContext) -> list[Issue]:
    min_length = ctx.config.localization_min_length
    issues: list[Issue] = []

    for node in ctx.iter_nodes():
        if node.type != "line_string_literal":
            continue
        if has_ancestor(node, ("property_declaration", "import_declaration", "attribute")):
            continue

        content = _string_content(ctx, node)
        if not content or "%" in content or len(content) < min_length:
            continue
        if not any(ch.isalpha() for ch in content):
            continue

        if " " in content and content[0].isalpha():
            issues.append(
                ctx.make_issue(
                    node,
                    f'Consider localizing this string literal: "{content}"',
                    Category.LOCALIZATION,
                )
            )
    return issues


def _string_content(ctx: AnalysisContext, node: tree_sitter.Node) -> str:
    text = ctx.text(node)
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text
