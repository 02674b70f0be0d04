"""
Validation of declaration attributes (``@name(...)``) and freestanding
macros and compiler directives (``#name``).

Attributes are looked up in a small rule table keyed by name. Anything not
in the table that is used without arguments and is not a known built-in
attribute is reported as a possible custom macro missing its arguments.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

import tree_sitter

from ..context import AnalysisContext
from ..issues import Category, Issue, Severity

_ATTRIBUTE = re.compile(r"@\s*([\w.]+)\s*(?:\((.*)\))?", re.DOTALL)
_HASH_NAME = re.compile(r"#\s*(\w+)(.*)", re.DOTALL)

_ACTOR_TARGETS = frozenset({
    "function_declaration",
    "init_declaration",
    "class_declaration",
    "protocol_declaration",
    "property_declaration",
})

_DIRECTIVE_NODES = frozenset({"directive", "diagnostic"})


def _split_attribute(text: str) -> tuple[str, Optional[str]]:
    """Return the attribute's name and its argument text (None without parentheses)."""
    match = _ATTRIBUTE.match(text)
    if match is None:
        return text.lstrip("@"), None
    return match.group(1), match.group(2)


def _argument_labels(arguments: str) -> set[str]:
    labels = set()
    for item in arguments.split(","):
        label = item.split(":", 1)[0].strip()
        if label:
            labels.add(label)
    return labels


def _decorated_node(attribute: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    parent = attribute.parent
    if parent is not None and parent.type in ("modifiers", "type_modifiers"):
        parent = parent.parent
    return parent


def _has_return_type(func: tree_sitter.Node) -> bool:
    if func.child_by_field_name("return_type") is not None:
        return True
    return any(child.type == "->" for child in func.children)


def _check_available(
    ctx: AnalysisContext, node: tree_sitter.Node, arguments: Optional[str]
) -> list[Issue]:
    if not arguments or not arguments.strip():
        return [
            ctx.make_issue(
                node,
                "@available attribute must include platform or version information",
                Category.MACRO_USAGE,
                Severity.ERROR,
            )
        ]

    labels = _argument_labels(arguments)
    if labels & {"deprecated", "obsoleted"} and "message" not in labels:
        return [
            ctx.make_issue(
                node,
                "@available with deprecated or obsoleted should include a message",
                Category.MACRO_USAGE,
            )
        ]
    return []


def _check_objc(
    ctx: AnalysisContext, node: tree_sitter.Node, arguments: Optional[str]
) -> list[Issue]:
    if arguments and ("_" in arguments or "-" in arguments):
        return [
            ctx.make_issue(
                node,
                "@objc name contains characters not typical in Objective-C naming conventions",
                Category.MACRO_USAGE,
            )
        ]
    return []


def _check_actor(
    ctx: AnalysisContext, node: tree_sitter.Node, arguments: Optional[str]
) -> list[Issue]:
    decorated = _decorated_node(node)
    if decorated is not None and decorated.type not in _ACTOR_TARGETS:
        return [
            ctx.make_issue(
                node,
                "Actor attribute may be used in an unexpected context",
                Category.MACRO_USAGE,
            )
        ]
    return []


def _check_discardable_result(
    ctx: AnalysisContext, node: tree_sitter.Node, arguments: Optional[str]
) -> list[Issue]:
    decorated = _decorated_node(node)
    if decorated is not None and decorated.type == "function_declaration" and not _has_return_type(decorated):
        return [
            ctx.make_issue(
                node,
                "@discardableResult used on function with no return value",
                Category.MACRO_USAGE,
                Severity.ERROR,
            )
        ]
    return []


ATTRIBUTE_RULES: dict[str, Callable[[AnalysisContext, tree_sitter.Node, Optional[str]], list[Issue]]] = {
    "available": _check_available,
    "objc": _check_objc,
    "MainActor": _check_actor,
    "GlobalActor": _check_actor,
    "discardableResult": _check_discardable_result,
}


def _check_attribute(ctx: AnalysisContext, node: tree_sitter.Node) -> list[Issue]:
    name, arguments = _split_attribute(ctx.text(node))
    rule = ATTRIBUTE_RULES.get(name)
    if rule is not None:
        return rule(ctx, node, arguments)

    if (arguments is None or not arguments.strip()) and name not in ctx.config.standard_attributes:
        return [
            ctx.make_issue(
                node,
                f"Custom macro '@{name}' might require arguments",
                Category.MACRO_USAGE,
            )
        ]
    return []


def _check_hash_form(ctx: AnalysisContext, node: tree_sitter.Node) -> list[Issue]:
    # Directives run to the end of their line.
    first_line = ctx.text(node).split("\n", 1)[0]
    match = _HASH_NAME.match(first_line.strip())
    if match is None:
        return []
    name, rest = match.group(1), match.group(2).strip()

    if name in ("warning", "error"):
        message = rest.strip("()").strip().strip('"').strip()
        if not message:
            return [
                ctx.make_issue(
                    node,
                    f"#{name} directive requires a message",
                    Category.MACRO_USAGE,
                    Severity.ERROR,
                )
            ]
        return []

    if name in ("if", "elseif"):
        if not rest:
            return [
                ctx.make_issue(
                    node,
                    "Conditional compilation macro requires a condition",
                    Category.MACRO_USAGE,
                    Severity.ERROR,
                )
            ]
        return []

    if node.type == "macro_invocation":
        if name == "available":
            return [
                ctx.make_issue(
                    node,
                    "#available should be used within an if or guard condition",
                    Category.MACRO_USAGE,
                )
            ]
        has_arguments = any(
            child.type in ("value_arguments", "lambda_literal") for child in node.children
        )
        if not has_arguments and name not in ctx.config.standard_macros:
            return [
                ctx.make_issue(
                    node,
                    f"Custom macro '#{name}' might require arguments",
                    Category.MACRO_USAGE,
                )
            ]
    return []


def run_attribute_usage(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    # Recovered directives can show up both as an ERROR node and as its child.
    seen: set[tuple[int, int]] = set()

    for node in ctx.iter_nodes():
        if node.type == "attribute":
            issues.extend(_check_attribute(ctx, node))
            continue

        if node.type in _DIRECTIVE_NODES or node.type == "macro_invocation":
            candidate = True
        elif node.type == "ERROR":
            candidate = ctx.text(node).lstrip().startswith("#")
        else:
            candidate = False
        if not candidate:
            continue

        location = ctx.location(node)
        if location in seen:
            continue
        found = _check_hash_form(ctx, node)
        if found:
            seen.add(location)
        issues.extend(found)
    return issues
