"""Swift naming-convention checks."""

from __future__ import annotations

from ..context import AnalysisContext
from ..issues import Category, Issue
from ..utils import TYPE_DECLARATIONS, binding_patterns, declaration_kind, modifier_words

_PRIVATE_MODIFIERS = frozenset({"private", "fileprivate"})


def run_naming_conventions(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.type in TYPE_DECLARATIONS:
            if declaration_kind(node, ctx.source_bytes) == "extension":
                continue
            name = ctx.text(node.child_by_field_name("name"))
            if name[:1].islower():
                issues.append(
                    ctx.make_issue(
                        node,
                        f"Type name '{name}' should start with an uppercase letter (UpperCamelCase)",
                        Category.NAMING,
                    )
                )

        elif node.type == "function_declaration":
            name_node = node.child_by_field_name("name")
            name = ctx.text(name_node)
            if name[:1].isupper():
                issues.append(
                    ctx.make_issue(
                        name_node,
                        f"Function name '{name}' should start with a lowercase letter (lowerCamelCase)",
                        Category.NAMING,
                    )
                )

        elif node.type == "property_declaration":
            modifiers = modifier_words(node, ctx.source_bytes)
            for name, pattern in binding_patterns(node, ctx.source_bytes):
                if name.startswith("_") and not modifiers & _PRIVATE_MODIFIERS:
                    issues.append(
                        ctx.make_issue(
                            pattern,
                            f"Variable '{name}' starts with underscore but is not marked private",
                            Category.NAMING,
                        )
                    )
                if name.upper() == name and "_" in name:
                    issues.append(
                        ctx.make_issue(
                            pattern,
                            f"Variable '{name}' uses SCREAMING_SNAKE_CASE which is not Swift "
                            "convention. Use lowerCamelCase for variables/constants",
                            Category.NAMING,
                        )
                    )
    return issues
