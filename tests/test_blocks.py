"""
tests/test_blocks.py

Tests for the block-structure checks: unreachable statements, guard
candidates and empty catch blocks.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


UNREACHABLE = "Unreachable code detected after return statement"


class TestUnreachableCode:
    """Tests for unreachable_code."""

    def test_only_first_statement_after_return(self, analyze):
        """Statements after a return are reported once, at the first one."""
        issues = analyze("""\
            func value(a: Int) -> Int {
                return a
                print(a)
                print(a)
            }
            """, "unreachable_code")

        assert [i.description for i in issues] == [UNREACHABLE]
        assert issues[0].line == 3
        assert issues[0].column == 5

    def test_return_as_last_statement(self, analyze):
        issues = analyze("""\
            func value(a: Int) -> Int {
                print(a)
                return a
            }
            """, "unreachable_code")

        assert issues == []

    def test_nested_block_is_checked_on_its_own(self, analyze):
        """A return inside an if only affects that if's block."""
        issues = analyze("""\
            func value(a: Int) -> Int {
                if a > 0 {
                    return a
                    print(a)
                }
                return 0
            }
            """, "unreachable_code")

        assert [i.line for i in issues] == [4]

    def test_comments_after_return_are_not_code(self, analyze):
        issues = analyze("""\
            func value(a: Int) -> Int {
                return a
                // trailing note
            }
            """, "unreachable_code")

        assert issues == []


class TestGuardUsage:
    """Tests for guard_usage."""

    MESSAGE = "Consider using guard statement for early return instead of nested if-let"

    def test_if_let_ending_in_return(self, analyze):
        issues = analyze("""\
            func unwrap(x: Int?) -> Int {
                if let value = x {
                    return value
                }
                return 0
            }
            """, "guard_usage")

        assert [i.description for i in issues] == [self.MESSAGE]
        assert issues[0].line == 2

    def test_if_let_with_else_is_fine(self, analyze):
        issues = analyze("""\
            func unwrap(x: Int?) -> Int {
                if let value = x {
                    return value
                } else {
                    return 0
                }
            }
            """, "guard_usage")

        assert issues == []

    def test_plain_condition_is_fine(self, analyze):
        """Only optional bindings are guard candidates."""
        issues = analyze("""\
            func check(x: Int) -> Int {
                if x > 0 {
                    return x
                }
                return 0
            }
            """, "guard_usage")

        assert issues == []


class TestEmptyCatchBlocks:
    """Tests for empty_catch_blocks."""

    def test_empty_catch(self, analyze):
        issues = analyze("""\
            func load() {
                do {
                    try fetch()
                } catch {
                }
            }
            """, "empty_catch_blocks")

        assert [i.description for i in issues] == [
            "Empty catch block. Errors should be handled or logged"
        ]
        assert issues[0].line == 4

    def test_catch_with_only_comment_is_empty(self, analyze):
        issues = analyze("""\
            func load() {
                do {
                    try fetch()
                } catch {
                    // ignore
                }
            }
            """, "empty_catch_blocks")

        assert len(issues) == 1

    def test_handled_catch(self, analyze):
        issues = analyze("""\
            func load() {
                do {
                    try fetch()
                } catch {
                    print(error)
                }
            }
            """, "empty_catch_blocks")

        assert issues == []
