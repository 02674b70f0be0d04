"""Analysis context shared across checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import tree_sitter

from .config import DEFAULT_CONFIG, CheckerConfig
from .issues import Issue, Severity
from .source_parser import SourceUnit
from .utils import iter_nodes, node_text


@dataclass
class AnalysisContext:
    unit: SourceUnit
    config: CheckerConfig = field(default=DEFAULT_CONFIG)

    @property
    def tree(self) -> tree_sitter.Tree:
        return self.unit.tree

    @property
    def source_bytes(self) -> bytes:
        return self.unit.source_bytes

    def text(self, node: tree_sitter.Node | None) -> str:
        return node_text(node, self.source_bytes) if node is not None else ""

    def iter_nodes(self) -> Iterator[tree_sitter.Node]:
        return iter_nodes(self.tree.root_node)

    def location(self, node: tree_sitter.Node) -> tuple[int, int]:
        return self.unit.resolver.location_for(node)

    def make_issue(
        self,
        node: tree_sitter.Node,
        description: str,
        category: str,
        severity: Severity = Severity.WARNING,
    ) -> Issue:
        """Create an Issue at the node's first significant token."""
        line, column = self.location(node)
        return Issue(
            description=description,
            line=line,
            column=column,
            severity=severity,
            category=category,
        )

    def make_line_issue(
        self,
        line: int,
        description: str,
        category: str,
        severity: Severity = Severity.WARNING,
    ) -> Issue:
        return Issue(
            description=description,
            line=line,
            column=1,
            severity=severity,
            category=category,
        )
