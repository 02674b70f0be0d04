"""
tests/conftest.py

Shared fixtures for the swiftcheck test suite. Most tests analyse small
inline Swift snippets through ``SwiftChecker.analyze_source``.
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from swiftcheck import CheckerConfig, SwiftChecker


@pytest.fixture
def checker():
    return SwiftChecker()


@pytest.fixture
def analyze():
    """
    Run checks over a dedented Swift snippet.

    ``analyze(source, "force_unwraps")`` runs one check,
    ``analyze(source)`` runs the whole catalog, keyword arguments override
    configuration fields.
    """
    def _analyze(source: str, *checks: str, **config):
        cfg = CheckerConfig.from_dict(config) if config else None
        names = list(checks) if checks else None
        return SwiftChecker(cfg).analyze_source(textwrap.dedent(source), names)
    return _analyze


@pytest.fixture
def swift_file(tmp_path):
    """Write a dedented snippet to a .swift file and return its path."""
    def _write(source: str, name: str = "Sample.swift") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path
    return _write
