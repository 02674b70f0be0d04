"""
tests/test_expressions.py

Tests for expression-level checks: force unwraps and casts, count
comparisons, optional chain depth and operator precedence.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


# ============================================================================
# Force unwraps
# ============================================================================

class TestForceUnwraps:
    """Tests for force_unwraps."""

    def test_force_unwrap(self, analyze):
        issues = analyze("""\
            func read(x: Int?) -> Int {
                return x!
            }
            """, "force_unwraps")

        assert [i.description for i in issues] == [
            "Force unwrap operator used which may cause runtime crashes"
        ]
        assert (issues[0].line, issues[0].column) == (2, 12)

    def test_force_cast(self, analyze):
        issues = analyze("""\
            func read(value: Any) -> String {
                return value as! String
            }
            """, "force_unwraps")

        assert [i.description for i in issues] == [
            "Force cast operator 'as!' used which may cause runtime crashes"
        ]

    def test_safe_forms_are_fine(self, analyze):
        issues = analyze("""\
            func read(x: Int?, value: Any) -> Int {
                let y = x ?? 0
                let s = value as? String
                print(s)
                return y != 0 ? 1 : 0
            }
            """, "force_unwraps")

        assert issues == []


# ============================================================================
# Empty collection checks
# ============================================================================

class TestEmptyCollectionChecks:
    """Tests for empty_collection_checks."""

    def test_count_equals_zero(self, analyze):
        issues = analyze("""\
            func check(items: [Int]) -> Bool {
                return items.count == 0
            }
            """, "empty_collection_checks")

        assert [i.description for i in issues] == [
            "Use 'isEmpty' instead of comparing count to zero to check for empty collections"
        ]

    def test_count_greater_than_zero(self, analyze):
        issues = analyze("""\
            func check(items: [Int]) -> Bool {
                return items.count > 0
            }
            """, "empty_collection_checks")

        assert [i.description for i in issues] == [
            "Use '!isEmpty' instead of comparing count to zero to check for empty collections"
        ]

    def test_other_comparisons_are_fine(self, analyze):
        issues = analyze("""\
            func check(items: [Int]) -> Bool {
                return items.count == 3 || items.isEmpty
            }
            """, "empty_collection_checks")

        assert issues == []


# ============================================================================
# Optional chaining
# ============================================================================

class TestOptionalChaining:
    """Tests for optional_chaining."""

    def test_deep_chain_reported_once(self, analyze):
        """`a?.b?.c?.d?.e` has depth 4 and yields a single issue."""
        issues = analyze("""\
            func read(a: Node?) {
                print(a?.b?.c?.d?.e)
            }
            """, "optional_chaining")

        assert [i.description for i in issues] == [
            "Excessive optional chaining depth (4). Consider unwrapping optionals or using guard/if let"
        ]
        assert issues[0].line == 2

    def test_depth_three_is_allowed(self, analyze):
        issues = analyze("""\
            func read(a: Node?) {
                print(a?.b?.c?.d)
            }
            """, "optional_chaining")

        assert issues == []

    def test_legacy_policy_reports_every_node(self, analyze):
        """Without deduplication every navigation node of the chain reports."""
        issues = analyze("""\
            func read(a: Node?) {
                print(a?.b?.c?.d?.e)
            }
            """, "optional_chaining", dedupe_optional_chains=False)

        assert len(issues) > 1
        assert all("depth (4)" in i.description for i in issues)


# ============================================================================
# Operator precedence
# ============================================================================

class TestOperatorPrecedence:
    """Tests for operator_precedence."""

    AMBIGUOUS = "Consider adding explicit parentheses to clarify operator precedence"
    MIXED = "Mixed logical and arithmetic operators - use parentheses to clarify precedence"

    def test_long_chain_of_one_precedence_class(self, analyze):
        issues = analyze("""\
            func total(a: Int, b: Int, c: Int, d: Int) -> Int {
                return a + b * c - d
            }
            """, "operator_precedence")

        assert [i.description for i in issues] == [self.AMBIGUOUS]

    def test_mixed_logical_and_arithmetic(self, analyze):
        issues = analyze("""\
            func gate(a: Int, b: Int, c: Int, d: Bool) -> Bool {
                return a + b > c && d
            }
            """, "operator_precedence")

        assert [i.description for i in issues] == [self.MIXED]

    def test_simple_expression_is_fine(self, analyze):
        issues = analyze("""\
            func total(a: Int, b: Int) -> Int {
                return a + b
            }
            """, "operator_precedence")

        assert issues == []
