"""
Tree-sitter based Swift source parsing.

Turns a Swift file (or in-memory text) into a ``SourceUnit``: the decoded
text, the tree-sitter tree and a ``LocationResolver`` over the same bytes.
A unit is built fresh for every check invocation and never cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter

from .errors import SourceDecodeError, SourceFileNotFound
from .location import LocationResolver
from .utils import create_swift_parser


@dataclass
class SourceUnit:
    """One parsed Swift file."""

    path: Path
    text: str
    source_bytes: bytes
    tree: tree_sitter.Tree
    resolver: LocationResolver = field(init=False)

    def __post_init__(self):
        self.resolver = LocationResolver(self.source_bytes)

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error

    def lines(self) -> list[str]:
        """Raw text lines, keeping a trailing empty line after a final newline."""
        return self.text.split("\n")


class SourceParser:
    """
    Swift source parser using tree-sitter.

    Example:
        parser = SourceParser()
        unit = parser.parse_file("Sources/App/Model.swift")
        if unit.has_errors:
            print("file parsed with recovery")
    """

    def __init__(self):
        self.parser = create_swift_parser()
        self.log = logging.getLogger(__name__)

    def parse_file(self, file_path: str | Path) -> SourceUnit:
        """
        Read and parse a Swift source file.

        Raises:
            SourceFileNotFound: the path does not name a readable file
            SourceDecodeError: the file is not valid UTF-8
        """
        file_path = Path(file_path)

        if not file_path.is_file():
            raise SourceFileNotFound(file_path)

        try:
            source = file_path.read_bytes()
        except OSError as e:
            raise SourceFileNotFound(file_path) from e

        try:
            text = source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SourceDecodeError(file_path, str(e)) from e

        return self._build(file_path, text, source)

    def parse_source(self, text: str, path: str | Path = "<string>") -> SourceUnit:
        """Parse Swift code held in memory."""
        return self._build(Path(path), text, text.encode("utf-8"))

    def _build(self, path: Path, text: str, source: bytes) -> SourceUnit:
        tree = self.parser.parse(source)
        unit = SourceUnit(path=path, text=text, source_bytes=source, tree=tree)
        if unit.has_errors:
            self.log.info("%s: parsed with syntax errors, checking the recovered tree", path)
        return unit


def parse_swift_source(file_path: str | Path) -> SourceUnit:
    """Convenience function to parse a Swift source file."""
    return SourceParser().parse_file(file_path)
