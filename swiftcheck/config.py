"""
Checker configuration.

Thresholds and lookup tables used by the checks live in one frozen
``CheckerConfig``. ``load_config`` reads a JSON object whose keys are field
names and merges it over the defaults, e.g.::

    {
        "complexity_threshold": 15,
        "deprecated_apis": {"UIAlertView": "UIAlertController"},
        "flag_each_excess_blank_line": false
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .errors import ConfigError

log = logging.getLogger(__name__)


DEFAULT_DEPRECATED_APIS = MappingProxyType({
    "UIWebView": "WKWebView",
    "NSURLConnection": "URLSession",
    "stringByAppendingPathComponent": "appendingPathComponent",
    "performSelector": "Swift function calls or closures",
    "CGContextSetRGBFillColor": "setFillColor(_:)",
    "dispatch_async": "DispatchQueue.async",
    "M_PI": "Double.pi",
    "stringByAppendingString": "append()",
    "substringFromIndex": "dropFirst()",
    "substringToIndex": "prefix()",
    "stringByReplacingOccurrencesOfString": "replacingOccurrences(of:with:)",
})

# Attributes that are complete without arguments.
DEFAULT_STANDARD_ATTRIBUTES = frozenset({
    "discardableResult", "autoclosure", "escaping", "frozen", "objc",
    "IBOutlet", "IBAction", "IBDesignable", "IBInspectable", "main",
    "testable", "UIApplicationMain", "NSApplicationMain", "lazy",
    "available", "inline", "usableFromInline", "inlinable",
})

# Freestanding macros that are complete without arguments.
DEFAULT_STANDARD_MACROS = frozenset({
    "file", "fileID", "filePath", "line", "column", "function", "dsohandle",
    "sourceLocation", "else", "endif",
})


@dataclass(frozen=True)
class CheckerConfig:
    # cyclomatic_complexity / long_functions
    complexity_threshold: int = 10
    long_function_threshold: int = 50

    # optional_chaining
    max_optional_chain_depth: int = 3
    dedupe_optional_chains: bool = True

    # duplicate_functions / refactoring_opportunities
    duplicate_similarity_threshold: float = 0.8
    max_duplicate_bucket: int = 200
    large_function_statements: int = 20
    large_type_members: int = 30
    max_inherited_types: int = 3
    repeated_statement_min_length: int = 20

    # magic_numbers
    magic_number_exemptions: frozenset = frozenset({0, 1, 2, -1, 100})

    # symbol_usage
    unused_reference_threshold: int = 1
    short_name_whitelist: frozenset = frozenset({"i", "j", "k", "x", "y", "z"})
    single_reference_exemptions: frozenset = frozenset({"main", "init"})

    # code_style
    allowed_indent_deltas: frozenset = frozenset({-4, -2, 0, 2, 4})
    max_blank_lines: int = 2
    flag_each_excess_blank_line: bool = True

    # string_literals
    localization_min_length: int = 5

    # deprecated_api / attribute_usage
    deprecated_apis: Mapping[str, str] = field(default_factory=lambda: DEFAULT_DEPRECATED_APIS)
    standard_attributes: frozenset = DEFAULT_STANDARD_ATTRIBUTES
    standard_macros: frozenset = DEFAULT_STANDARD_MACROS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: "CheckerConfig | None" = None) -> "CheckerConfig":
        base = base or cls()
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        updates: dict[str, Any] = {}
        for name, value in data.items():
            current = getattr(base, name)
            if isinstance(current, frozenset):
                if not isinstance(value, (list, tuple, set, frozenset)):
                    raise ConfigError(f"'{name}' must be a list")
                updates[name] = frozenset(value)
            elif isinstance(current, Mapping):
                if not isinstance(value, Mapping):
                    raise ConfigError(f"'{name}' must be an object")
                merged = dict(current)
                merged.update(value)
                updates[name] = MappingProxyType(merged)
            elif isinstance(current, bool):
                if not isinstance(value, bool):
                    raise ConfigError(f"'{name}' must be true or false")
                updates[name] = value
            elif isinstance(current, (int, float)):
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigError(f"'{name}' must be a number")
                if isinstance(current, int) and not float(value).is_integer():
                    raise ConfigError(f"'{name}' must be an integer")
                updates[name] = type(current)(value)
            else:
                updates[name] = value
        return replace(base, **updates)


DEFAULT_CONFIG = CheckerConfig()


def load_config(path: str | Path | None) -> CheckerConfig:
    """Load a JSON configuration file, falling back to the defaults."""
    if path is None:
        return DEFAULT_CONFIG

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")

    log.debug("loaded configuration from %s: %s", path, sorted(data))
    return CheckerConfig.from_dict(data)
