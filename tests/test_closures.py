"""
tests/test_closures.py

Tests for retain_cycles.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


MESSAGE = (
    "Potential retain cycle: closure uses 'self' strongly. "
    "Consider using [weak self] or [unowned self]"
)


class TestRetainCycles:
    """Tests for retain_cycles."""

    def test_strong_self_in_closure(self, analyze):
        issues = analyze("""\
            class Counter {
                var value = 0
                func start() {
                    schedule {
                        self.value += 1
                    }
                }
            }
            """, "retain_cycles")

        assert [i.description for i in issues] == [MESSAGE]
        assert (issues[0].line, issues[0].column) == (4, 18)

    def test_weak_self_capture(self, analyze):
        issues = analyze("""\
            class Counter {
                var value = 0
                func start() {
                    schedule { [weak self] in
                        self?.value += 1
                    }
                }
            }
            """, "retain_cycles")

        assert issues == []

    def test_unowned_self_capture(self, analyze):
        issues = analyze("""\
            class Counter {
                var value = 0
                func start() {
                    schedule { [unowned self] in
                        self.value += 1
                    }
                }
            }
            """, "retain_cycles")

        assert issues == []

    def test_closure_without_self(self, analyze):
        issues = analyze("""\
            func start() {
                schedule {
                    print(1)
                }
            }
            """, "retain_cycles")

        assert issues == []

    def test_self_in_nested_closure_counts_for_outer(self, analyze):
        """The outer closure is reported too because the walk includes nested closures."""
        issues = analyze("""\
            class Counter {
                var value = 0
                func start() {
                    schedule {
                        later {
                            self.value += 1
                        }
                    }
                }
            }
            """, "retain_cycles")

        assert [i.line for i in issues] == [4, 5]
