"""
File-wide symbol tables: dead or barely used symbols, short names and
deprecated API references.

The tables are flat. Declarations with the same name in different scopes
collide, and a reference counts for every declaration of that name.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue, Severity
from ..utils import (
    TYPE_DECLARATIONS,
    binding_patterns,
    declaration_kind,
    is_reference,
    member_name,
    modifier_words,
)

_EXPORTED_MODIFIERS = frozenset({"public", "open"})


@dataclass
class _Declaration:
    node: tree_sitter.Node
    exported: bool


def run_symbol_usage(ctx: AnalysisContext) -> list[Issue]:
    config = ctx.config
    declarations: dict[str, _Declaration] = {}
    references: dict[str, list[tree_sitter.Node]] = defaultdict(list)

    for node in ctx.iter_nodes():
        if node.type == "property_declaration":
            exported = bool(modifier_words(node, ctx.source_bytes) & _EXPORTED_MODIFIERS)
            for name, pattern in binding_patterns(node, ctx.source_bytes):
                declarations[name] = _Declaration(pattern, exported)
        elif node.type == "function_declaration" or (
            node.type in TYPE_DECLARATIONS
            and declaration_kind(node, ctx.source_bytes) != "extension"
        ):
            name = ctx.text(node.child_by_field_name("name"))
            if name:
                exported = bool(modifier_words(node, ctx.source_bytes) & _EXPORTED_MODIFIERS)
                declarations[name] = _Declaration(node, exported)
        elif node.type == "navigation_expression":
            name = member_name(node, ctx.source_bytes)
            if name:
                references[name].append(node)
        elif is_reference(node):
            references[ctx.text(node)].append(node)

    issues: list[Issue] = []
    unused: set[str] = set()

    for name, decl in declarations.items():
        if decl.exported:
            continue
        if len(references.get(name, ())) <= config.unused_reference_threshold:
            unused.add(name)
            issues.append(
                ctx.make_issue(
                    decl.node,
                    f"Symbol '{name}' appears to be unused or only referenced in its declaration",
                    Category.SYMBOL_USAGE,
                )
            )

    for name, decl in declarations.items():
        if len(name) <= 1 and name not in config.short_name_whitelist:
            issues.append(
                ctx.make_issue(
                    decl.node,
                    f"Symbol name '{name}' is too short and may not be descriptive enough",
                    Category.NAMING,
                )
            )

    for name, decl in declarations.items():
        if decl.exported or name in unused or name in config.single_reference_exemptions:
            continue
        if len(references.get(name, ())) == 1:
            issues.append(
                ctx.make_issue(
                    decl.node,
                    f"Symbol '{name}' is only referenced once - possible dead code",
                    Category.SYMBOL_USAGE,
                    Severity.INFO,
                )
            )
    return issues


def run_deprecated_api(ctx: AnalysisContext) -> list[Issue]:
    deprecated = ctx.config.deprecated_apis
    issues: list[Issue] = []

    for node in ctx.iter_nodes():
        if node.type == "navigation_expression":
            name = member_name(node, ctx.source_bytes)
        elif is_reference(node):
            name = ctx.text(node)
        else:
            continue

        replacement = deprecated.get(name) if name else None
        if replacement is not None:
            issues.append(
                ctx.make_issue(
                    node,
                    f"'{name}' is deprecated. Use '{replacement}' instead",
                    Category.DEPRECATED_API,
                )
            )
    return issues
