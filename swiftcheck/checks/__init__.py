"""Registry of analysis checks, in the order they run."""

from __future__ import annotations

from typing import Callable, Dict, List

from ..context import AnalysisContext
from ..issues import Issue

from . import (
    attributes,
    bindings,
    blocks,
    closures,
    complexity,
    expressions,
    literals,
    naming,
    refactoring,
    style,
    symbols,
    syntax,
)

Check = Callable[[AnalysisContext], List[Issue]]

CHECKS: Dict[str, Check] = {
    "syntax": syntax.run_syntax_errors,
    "unused_variables": bindings.run_unused_variables,
    "immutable_assignments": bindings.run_immutable_assignments,
    "unreachable_code": blocks.run_unreachable_code,
    "cyclomatic_complexity": complexity.run_cyclomatic_complexity,
    "force_unwraps": expressions.run_force_unwraps,
    "long_functions": complexity.run_long_functions,
    "guard_usage": blocks.run_guard_usage,
    "magic_numbers": literals.run_magic_numbers,
    "naming_conventions": naming.run_naming_conventions,
    "empty_catch_blocks": blocks.run_empty_catch_blocks,
    "retain_cycles": closures.run_retain_cycles,
    "empty_collection_checks": expressions.run_empty_collection_checks,
    "deprecated_api": symbols.run_deprecated_api,
    "string_literals": literals.run_string_literals,
    "optional_chaining": expressions.run_optional_chaining,
    "operator_precedence": expressions.run_operator_precedence,
    "code_style": style.run_code_style,
    "duplicate_functions": refactoring.run_duplicate_functions,
    "refactoring_opportunities": refactoring.run_refactoring_opportunities,
    "symbol_usage": symbols.run_symbol_usage,
    "attribute_usage": attributes.run_attribute_usage,
}

__all__ = ["CHECKS", "Check"]
