"""
Tests for the condition formula parser.

Tests tokenizing, element classification, serialization and the editor
element list produced by parse_formula.

Version: 1.0.0
"""

import pytest

from core.agent_pipeline.formula import (
    AND,
    CLOSE_BRACKET,
    IF,
    OPEN_BRACKET,
    OR,
    ConditionRef,
    FunctionElement,
    MathElement,
    OperatorElement,
    ValueElement,
    classify_token,
    parse_formula,
    serialize,
    tokenize,
)
from core.agent_pipeline.enum import FormulaFunction, LogicalOperator


# ============================================================================
# CLASSIFICATION
# ============================================================================

@pytest.mark.unit
class TestClassifyToken:
    """Test mapping raw tokens to elements."""

    def test_operators_case_insensitive(self):
        """Test AND/OR are recognized in any case."""
        assert classify_token("AND") == AND
        assert classify_token("or") == OR
        assert classify_token("And") == OperatorElement(LogicalOperator.AND)

    def test_brackets(self):
        """Test brackets become bracket elements."""
        assert classify_token("(") == OPEN_BRACKET
        assert classify_token(")") == CLOSE_BRACKET

    def test_function(self):
        """Test IF is a function element."""
        assert classify_token("if") == FunctionElement(FormulaFunction.IF)

    def test_condition_reference(self):
        """Test integers become condition references."""
        assert classify_token("3") == ConditionRef(3)
        assert classify_token("-1") == ConditionRef(-1)

    def test_math_and_values(self):
        """Test math symbols and other tokens are kept verbatim."""
        assert classify_token("+") == MathElement("+")
        assert classify_token("=") == MathElement("=")
        assert classify_token("priority") == ValueElement("priority")


# ============================================================================
# TOKENIZING
# ============================================================================

@pytest.mark.unit
class TestTokenize:
    """Test splitting formulas into elements."""

    def test_empty(self):
        """Test empty formula has no tokens."""
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_nested_formula(self):
        """Test a formula with a group."""
        assert tokenize("0 AND ( 1 OR 2 )") == [
            ConditionRef(0), AND, OPEN_BRACKET, ConditionRef(1), OR, ConditionRef(2), CLOSE_BRACKET,
        ]

    def test_brackets_attached_to_indices(self):
        """Test brackets written against indices are separate tokens."""
        assert tokenize("0 AND (1 OR 2)") == tokenize("0 AND ( 1 OR 2 )")

    def test_extra_whitespace(self):
        """Test repeated whitespace is ignored."""
        assert tokenize("  0   OR\t1 ") == [ConditionRef(0), OR, ConditionRef(1)]


# ============================================================================
# SERIALIZATION
# ============================================================================

@pytest.mark.unit
class TestSerialize:
    """Test joining elements back into a formula."""

    def test_single_spaces(self):
        """Test tokens are joined with single spaces."""
        elements = [IF, ConditionRef(0), AND, OPEN_BRACKET, ConditionRef(1), CLOSE_BRACKET]
        assert serialize(elements) == "IF 0 AND ( 1 )"

    def test_empty_values_skipped(self):
        """Test empty placeholder tokens are left out."""
        assert serialize([ConditionRef(0), ValueElement(""), OR, ConditionRef(1)]) == "0 OR 1"

    def test_operators_normalized_to_upper_case(self):
        """Test lower-case operators serialize upper-case."""
        assert serialize(tokenize("(0 or 1) and 2")) == "( 0 OR 1 ) AND 2"

    @pytest.mark.parametrize("formula", [
        "0",
        "0 AND 1 AND 2",
        "0 AND ( 1 OR 2 )",
        "IF 0 OR ( 1 AND IF 2 )",
        "0 + 1",
    ])
    def test_normalized_formula_unchanged(self, formula):
        """Test a normalized formula survives parse and serialize."""
        assert serialize(parse_formula(formula, 3)) == formula

    def test_elements_survive_serialize_and_tokenize(self):
        """Test an element list reads back as the same elements."""
        elements = [
            IF, OPEN_BRACKET, ConditionRef(0), OR, ConditionRef(12), CLOSE_BRACKET,
            AND, ConditionRef(1), MathElement("="), ValueElement("high"),
            FunctionElement(FormulaFunction.IF), OperatorElement(LogicalOperator.OR), ConditionRef(2),
        ]
        assert tokenize(serialize(elements)) == elements


# ============================================================================
# EDITOR ELEMENT LIST
# ============================================================================

@pytest.mark.unit
class TestParseFormula:
    """Test the element list shown to an editor."""

    def test_empty_formula_with_conditions(self):
        """Test an empty formula stands for condition 0."""
        assert parse_formula("", 1) == [ConditionRef(0)]
        assert parse_formula("", 3) == [ConditionRef(0)]

    def test_empty_formula_without_conditions(self):
        """Test no elements without conditions."""
        assert parse_formula("", 0) == []

    def test_out_of_range_references_dropped(self):
        """Test references to missing conditions are left out."""
        assert parse_formula("0 AND 5", 2) == [ConditionRef(0), AND]

    def test_negative_references_dropped(self):
        """Test negative references are left out."""
        assert parse_formula("-1 OR 1", 2) == [OR, ConditionRef(1)]

    def test_other_tokens_kept(self):
        """Test non-reference tokens are kept even when invalid."""
        assert parse_formula("( 0 = x", 1) == [
            OPEN_BRACKET, ConditionRef(0), MathElement("="), ValueElement("x"),
        ]
