"""Infrastructure failures raised by the checker (never used for findings)."""

from __future__ import annotations

from pathlib import Path


class CheckerError(Exception):
    """Base class for failures that abort a whole invocation."""


class SourceFileNotFound(CheckerError, FileNotFoundError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"Source file not found: {self.path}")


class SourceDecodeError(CheckerError):
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Cannot decode {self.path} as UTF-8: {reason}")


class UnknownCheckError(CheckerError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown check: {self.name!r}"


class ConfigError(CheckerError):
    """Raised for unreadable or invalid configuration files."""
