"""
tests/test_complexity.py

Tests for cyclomatic_complexity and long_functions.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


def function_with_ifs(name: str, count: int) -> str:
    """A Swift function with `count` independent if statements."""
    body = "".join(f"    if x > {n} {{ print(x) }}\n" for n in range(count))
    return f"func {name}(x: Int) {{\n{body}}}\n"


class TestCyclomaticComplexity:
    """Tests for cyclomatic_complexity."""

    def test_over_threshold_is_reported(self, analyze):
        """Ten decision points give complexity 11, above the default of 10."""
        issues = analyze(function_with_ifs("busy", 10), "cyclomatic_complexity")

        assert [i.description for i in issues] == [
            "Function 'busy' has a cyclomatic complexity of 11, which exceeds the threshold of 10"
        ]
        assert (issues[0].line, issues[0].column) == (1, 6)

    def test_at_threshold_is_not_reported(self, analyze):
        issues = analyze(function_with_ifs("calm", 9), "cyclomatic_complexity")

        assert issues == []

    def test_logical_operators_count(self, analyze):
        issues = analyze("""\
            func gate(a: Bool, b: Bool, c: Bool) {
                if a && b || c {
                    print(a)
                }
            }
            """, "cyclomatic_complexity", complexity_threshold=3)

        assert len(issues) == 1
        assert "complexity of 4" in issues[0].description

    def test_nested_function_has_its_own_count(self, analyze):
        """Decision points inside a nested function do not count for the outer one."""
        source = (
            "func outer(x: Int) {\n"
            + "\n".join("    " + line for line in function_with_ifs("inner", 10).splitlines())
            + "\n    inner(x: x)\n}\n"
        )
        issues = analyze(source, "cyclomatic_complexity")

        assert len(issues) == 1
        assert "'inner'" in issues[0].description

    def test_threshold_from_config(self, analyze):
        issues = analyze(function_with_ifs("busy", 10), "cyclomatic_complexity",
                         complexity_threshold=20)

        assert issues == []


class TestLongFunctions:
    """Tests for long_functions."""

    def test_long_body_is_reported(self, analyze):
        body = "".join("    print(1)\n" for _ in range(8))
        issues = analyze(f"func chatty() {{\n{body}}}\n", "long_functions",
                         long_function_threshold=5)

        assert [i.description for i in issues] == [
            "Function 'chatty' is 10 lines long, which exceeds the recommended maximum of 5 lines"
        ]

    def test_short_body_is_fine(self, analyze):
        issues = analyze("""\
            func quiet() {
                print(1)
            }
            """, "long_functions")

        assert issues == []

    def test_initializers_are_measured(self, analyze):
        body = "".join("        print(1)\n" for _ in range(6))
        source = f"class Model {{\n    init() {{\n{body}    }}\n}}\n"
        issues = analyze(source, "long_functions", long_function_threshold=5)

        assert len(issues) == 1
        assert issues[0].description.startswith("Function 'init' is 8 lines long")
