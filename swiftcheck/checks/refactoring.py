"""Detection of duplicated functions and other refactoring opportunities."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import block_statements, declaration_kind, is_comment, statement_list

log = logging.getLogger(__name__)


@dataclass
class _Function:
    name: str
    node: tree_sitter.Node
    body: tree_sitter.Node
    statements: list[tree_sitter.Node]


def _collect_functions(ctx: AnalysisContext) -> list[_Function]:
    functions: list[_Function] = []
    for node in ctx.iter_nodes():
        if node.type != "function_declaration":
            continue
        body = node.child_by_field_name("body")
        name_node = node.child_by_field_name("name")
        if body is None or name_node is None:
            continue
        functions.append(
            _Function(
                name=ctx.text(name_node),
                node=node,
                body=body,
                statements=statement_list(block_statements(body)),
            )
        )
    return functions


def run_duplicate_functions(ctx: AnalysisContext) -> list[Issue]:
    config = ctx.config
    buckets: dict[int, list[_Function]] = {}
    for func in _collect_functions(ctx):
        # Empty bodies carry no logic worth comparing.
        if func.statements:
            buckets.setdefault(len(func.statements), []).append(func)

    issues: list[Issue] = []
    for size, functions in buckets.items():
        if len(functions) > config.max_duplicate_bucket:
            log.warning(
                "%s: %d functions with %d statements, comparing only the first %d",
                ctx.unit.path, len(functions), size, config.max_duplicate_bucket,
            )
            functions = functions[:config.max_duplicate_bucket]

        for i, first in enumerate(functions):
            for second in functions[i + 1:]:
                if first.name == second.name:
                    continue
                similarity = character_similarity(ctx.text(first.body), ctx.text(second.body))
                if similarity >= config.duplicate_similarity_threshold:
                    issues.append(
                        ctx.make_issue(
                            second.node,
                            f"Function '{second.name}' is very similar to '{first.name}' "
                            f"({int(similarity * 100)}% similar) - consider refactoring",
                            Category.REFACTORING,
                        )
                    )
    return issues


def character_similarity(first: str, second: str) -> float:
    """
    Bag-of-characters overlap: shared character counts divided by the
    longer length. Bodies more than twice as long as the other score 0.
    """
    longest = max(len(first), len(second))
    shortest = min(len(first), len(second))
    if longest == 0:
        return 1.0
    if longest > 2 * shortest:
        return 0.0
    common = Counter(first) & Counter(second)
    return sum(common.values()) / longest


def run_refactoring_opportunities(ctx: AnalysisContext) -> list[Issue]:
    config = ctx.config
    issues: list[Issue] = []

    for func in _collect_functions(ctx):
        if len(func.statements) > config.large_function_statements:
            issues.append(
                ctx.make_issue(
                    func.node,
                    f"Function '{func.name}' is very large ({len(func.statements)} statements) "
                    "- consider breaking it into smaller functions",
                    Category.REFACTORING,
                )
            )
        issues.extend(_repeated_statements(ctx, func))

    for node in ctx.iter_nodes():
        if node.type not in ("class_declaration", "protocol_declaration"):
            continue

        kind = declaration_kind(node, ctx.source_bytes)
        body = node.child_by_field_name("body")
        if kind == "class" and body is not None:
            members = [c for c in body.named_children if not is_comment(c)]
            if len(members) > config.large_type_members:
                name = ctx.text(node.child_by_field_name("name"))
                issues.append(
                    ctx.make_issue(
                        node,
                        f"Class '{name}' has {len(members)} members "
                        "- consider breaking it into smaller components",
                        Category.REFACTORING,
                    )
                )

        inherited = [c for c in node.named_children if c.type == "inheritance_specifier"]
        if len(inherited) > config.max_inherited_types:
            issues.append(
                ctx.make_issue(
                    inherited[0],
                    f"Type inherits from {len(inherited)} types "
                    "- consider using composition over inheritance",
                    Category.REFACTORING,
                )
            )
    return issues


def _repeated_statements(ctx: AnalysisContext, func: _Function) -> list[Issue]:
    min_length = ctx.config.repeated_statement_min_length
    first_seen: dict[str, int] = {}
    reported: set[str] = set()
    issues: list[Issue] = []

    for stmt in func.statements:
        text = ctx.text(stmt).strip()
        if len(text) <= min_length:
            continue
        line, _ = ctx.location(stmt)
        if text not in first_seen:
            first_seen[text] = line
        elif text not in reported:
            reported.add(text)
            issues.append(
                ctx.make_issue(
                    stmt,
                    f"Repeated code block in function '{func.name}' "
                    f"(first seen at line {first_seen[text]})",
                    Category.REFACTORING,
                )
            )
    return issues
