"""Issue data model for checker findings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def __str__(self) -> str:
        return self.value


class Category:
    """Report categories attached to issues when they are emitted."""

    SYNTAX = "Syntax"
    FORCE_UNWRAPS = "Force Unwraps"
    UNUSED_VARIABLES = "Unused Variables"
    IMMUTABLE_ASSIGNMENTS = "Immutable Assignments"
    UNREACHABLE_CODE = "Unreachable Code"
    OPERATOR_PRECEDENCE = "Operator Precedence"
    CODE_STYLE = "Code Style"
    REFACTORING = "Refactoring Opportunities"
    MACRO_USAGE = "Macro Usage"
    MEMORY_LEAKS = "Memory Leaks"
    EXCEPTION_HANDLING = "Exception Handling"
    MAGIC_NUMBERS = "Magic Numbers"
    OPTIONAL_CHAINING = "Optional Chaining"
    COMPLEXITY = "Complexity"
    CONTROL_FLOW = "Control Flow"
    COLLECTIONS = "Collections"
    NAMING = "Naming Conventions"
    SYMBOL_USAGE = "Symbol Usage"
    DEPRECATED_API = "Deprecated APIs"
    LOCALIZATION = "Localization"
    OTHER = "Other Issues"


@dataclass(frozen=True)
class Issue:
    """Structured representation of a detected code smell."""

    description: str
    line: int
    column: int
    severity: Severity
    category: str = ""

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.severity}: {self.description}"
