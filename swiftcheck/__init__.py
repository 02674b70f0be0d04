"""
swiftcheck

Static analysis for Swift source files. Parses a file with tree-sitter and
runs a catalog of syntactic checks over the tree and the raw text lines:
unused and immutable bindings, force unwraps, unreachable statements,
complexity, naming, retain cycles, duplicate logic, attribute and macro
misuse and more.

Example:
    checker = SwiftChecker()
    for issue in checker.run_all_checks("Sources/App/Model.swift"):
        print(issue)
"""

from swiftcheck.checker import SwiftChecker
from swiftcheck.checks import CHECKS
from swiftcheck.config import DEFAULT_CONFIG, CheckerConfig, load_config
from swiftcheck.errors import (
    CheckerError,
    ConfigError,
    SourceDecodeError,
    SourceFileNotFound,
    UnknownCheckError,
)
from swiftcheck.issues import Category, Issue, Severity
from swiftcheck.reporter import AnalysisReporter, infer_category
from swiftcheck.source_parser import SourceParser, SourceUnit, parse_swift_source

__version__ = "0.1.0"

__all__ = [
    # Orchestration
    "SwiftChecker",
    "CHECKS",

    # Issues
    "Issue",
    "Severity",
    "Category",

    # Parsing
    "SourceParser",
    "SourceUnit",
    "parse_swift_source",

    # Configuration
    "CheckerConfig",
    "DEFAULT_CONFIG",
    "load_config",

    # Errors
    "CheckerError",
    "ConfigError",
    "SourceDecodeError",
    "SourceFileNotFound",
    "UnknownCheckError",

    # Reporting
    "AnalysisReporter",
    "infer_category",
]
