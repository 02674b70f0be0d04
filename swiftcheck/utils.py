"""Shared utilities for Tree-sitter parsing and node helpers."""

from __future__ import annotations

from typing import Iterator, Optional

import tree_sitter
from tree_sitter_language_pack import get_parser

COMMENT_TYPES = frozenset({"comment", "multiline_comment"})

FUNCTION_DECLARATIONS = frozenset({
    "function_declaration",
    "init_declaration",
    "deinit_declaration",
})

TYPE_DECLARATIONS = frozenset({"class_declaration", "protocol_declaration"})

# Binary operator node kinds; one kind per precedence group.
BINARY_EXPRESSIONS = frozenset({
    "additive_expression",
    "multiplicative_expression",
    "comparison_expression",
    "equality_expression",
    "conjunction_expression",
    "disjunction_expression",
    "nil_coalescing_expression",
    "range_expression",
    "bitwise_operation",
    "infix_expression",
})

# Parents under which a simple_identifier names something instead of
# referring to it.
_NAME_POSITIONS = frozenset({
    "pattern",
    "parameter",
    "lambda_parameter",
    "function_declaration",
    "protocol_function_declaration",
    "value_argument_label",
    "navigation_suffix",
    "enum_entry",
    "typealias_declaration",
    "associatedtype_declaration",
    "statement_label",
    "identifier",
    "type_parameter",
    "macro_declaration",
    "precedence_group_declaration",
})

# Containers whose children are whole statements.
STATEMENT_CONTAINERS = frozenset({
    "statements",
    "source_file",
    "class_body",
    "enum_class_body",
    "protocol_body",
})


def create_swift_parser() -> tree_sitter.Parser:
    """Create a Tree-sitter parser configured for Swift."""
    return get_parser("swift")


def node_text(node: tree_sitter.Node, source_bytes: bytes) -> str:
    """Decode the bytes that correspond to a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def iter_nodes(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Iterative preorder traversal of the syntax tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk(root: tree_sitter.Node) -> Iterator[tuple[tree_sitter.Node, bool]]:
    """
    Iterative traversal yielding ``(node, entering)`` pairs.

    Every node is produced twice: once with ``entering=True`` before its
    children and once with ``entering=False`` after them.
    """
    stack: list[tuple[tree_sitter.Node, bool]] = [(root, True)]
    while stack:
        node, entering = stack.pop()
        yield node, entering
        if entering:
            stack.append((node, False))
            stack.extend((child, True) for child in reversed(node.children))


def ancestors(node: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    parent = node.parent
    while parent is not None:
        yield parent
        parent = parent.parent


def has_ancestor(node: tree_sitter.Node, types) -> bool:
    return any(p.type in types for p in ancestors(node))


def is_comment(node: tree_sitter.Node) -> bool:
    return node.type in COMMENT_TYPES


def first_child_of_type(node: tree_sitter.Node, type_name: str) -> Optional[tree_sitter.Node]:
    for child in node.children:
        if child.type == type_name:
            return child
    return None


def block_statements(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    """
    Return the ``statements`` list of the first ``{ ... }`` block owned by
    ``node``, or None when that block is empty.

    Works for function bodies, if/guard/loop bodies, catch blocks and
    closures, which all inline their braces into the owning node.
    """
    seen_brace = False
    for child in node.children:
        if child.type == "{":
            seen_brace = True
        elif child.type == "}" and seen_brace:
            return None
        elif child.type == "statements" and (seen_brace or node.type == "switch_entry"):
            return child
    return None


def statement_list(statements: Optional[tree_sitter.Node]) -> list[tree_sitter.Node]:
    """Named children of a statements node, comments excluded."""
    if statements is None:
        return []
    return [c for c in statements.named_children if not is_comment(c)]


def is_return(node: tree_sitter.Node, source_bytes: bytes) -> bool:
    if node.type != "control_transfer_statement" or not node.children:
        return False
    return node_text(node.children[0], source_bytes) == "return"


def is_reference(node: tree_sitter.Node) -> bool:
    """True for identifiers used as expressions (not declaring a name)."""
    if node.type != "simple_identifier":
        return False
    parent = node.parent
    return parent is None or parent.type not in _NAME_POSITIONS


def member_name(node: tree_sitter.Node, source_bytes: bytes) -> Optional[str]:
    """Member name accessed by a navigation_expression (``a.b`` -> ``b``)."""
    suffix = node.child_by_field_name("suffix")
    if suffix is None:
        suffix = first_child_of_type(node, "navigation_suffix")
    if suffix is None:
        return None
    name = suffix.child_by_field_name("suffix")
    if name is None and suffix.named_children:
        name = suffix.named_children[-1]
    return node_text(name, source_bytes) if name is not None else None


def binary_operator(node: tree_sitter.Node, source_bytes: bytes) -> str:
    op = node.child_by_field_name("op")
    if op is None:
        lhs = node.child_by_field_name("lhs")
        for child in node.children:
            if child != lhs and (not child.is_named or child.type == "custom_operator"):
                op = child
                break
    return node_text(op, source_bytes) if op is not None else ""


def binary_operands(node: tree_sitter.Node) -> list[tree_sitter.Node]:
    lhs = node.child_by_field_name("lhs")
    rhs = node.child_by_field_name("rhs")
    if lhs is not None and rhs is not None:
        return [lhs, rhs]
    return [c for c in node.named_children if not is_comment(c) and c.type != "custom_operator"]


def declaration_name(node: tree_sitter.Node, source_bytes: bytes) -> str:
    if node.type == "init_declaration":
        return "init"
    if node.type == "deinit_declaration":
        return "deinit"
    name_node = node.child_by_field_name("name")
    return node_text(name_node, source_bytes) if name_node is not None else "<?>"


def declaration_kind(node: tree_sitter.Node, source_bytes: bytes) -> str:
    """class/struct/enum/actor/extension/protocol for type declarations."""
    kind = node.child_by_field_name("declaration_kind")
    if kind is not None:
        return node_text(kind, source_bytes)
    for child in node.children:
        if not child.is_named and child.type in (
            "class", "struct", "enum", "actor", "extension", "protocol"
        ):
            return child.type
    return ""


def modifier_words(node: tree_sitter.Node, source_bytes: bytes) -> set[str]:
    """Keywords in a declaration's modifier list (``public``, ``private`` ...)."""
    words: set[str] = set()
    holders = [c for c in node.children if c.type == "modifiers"] or [node]
    for holder in holders:
        for child in holder.named_children:
            if child.type.endswith("_modifier"):
                words.update(node_text(child, source_bytes).replace("(", " ").split())
    return words


def binding_patterns(decl: tree_sitter.Node, source_bytes: bytes) -> list[tuple[str, tree_sitter.Node]]:
    """
    Identifier bindings of a property_declaration as ``(name, pattern)``.

    Tuple and wildcard patterns are skipped.
    """
    bindings = []
    for child in decl.named_children:
        if child.type == "simple_identifier":
            bindings.append((node_text(child, source_bytes), child))
            continue
        if child.type != "pattern":
            continue
        named = [c for c in child.named_children if not is_comment(c)]
        if len(named) == 1 and named[0].type == "simple_identifier":
            bindings.append((node_text(named[0], source_bytes), child))
    return bindings


def binding_mutability(decl: tree_sitter.Node, source_bytes: bytes) -> str:
    """``let`` or ``var`` for a property_declaration."""
    pattern = first_child_of_type(decl, "value_binding_pattern")
    if pattern is not None:
        return node_text(pattern, source_bytes).split()[-1]
    for child in decl.children:
        if child.type in ("let", "var"):
            return child.type
    return ""
