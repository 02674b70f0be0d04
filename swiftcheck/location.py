"""Mapping from byte offsets in a source unit to 1-based (line, column)."""

from __future__ import annotations

from bisect import bisect_right

import tree_sitter

from .utils import is_comment


class LocationResolver:
    """
    Resolves byte offsets to ``(line, column)``.

    Lines and columns are 1-based. Columns count UTF-8 bytes from the start
    of the line, the same unit tree-sitter uses for ``start_point``.
    """

    def __init__(self, source_bytes: bytes):
        self.source_bytes = source_bytes
        self._line_starts = [0]
        for index, byte in enumerate(source_bytes):
            if byte == 0x0A:
                self._line_starts.append(index + 1)

    def location(self, offset: int) -> tuple[int, int]:
        offset = max(0, min(offset, len(self.source_bytes)))
        line_index = bisect_right(self._line_starts, offset) - 1
        return line_index + 1, offset - self._line_starts[line_index] + 1

    def location_for(self, node: tree_sitter.Node) -> tuple[int, int]:
        """Location of the first significant token of ``node``."""
        return self.location(self._significant_start(node))

    def end_location_for(self, node: tree_sitter.Node) -> tuple[int, int]:
        """Location of the last byte covered by ``node``."""
        return self.location(max(node.start_byte, node.end_byte - 1))

    def _significant_start(self, node: tree_sitter.Node) -> int:
        # Comments are extras in the grammar, so they can lead a node's span.
        current = node
        while current.child_count:
            for child in current.children:
                if not is_comment(child):
                    current = child
                    break
            else:
                return node.start_byte
        offset = current.start_byte
        while offset < len(self.source_bytes) and self.source_bytes[offset] in b" \t\r\n":
            offset += 1
        return offset
