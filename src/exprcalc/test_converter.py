"""
Tests for infix to postfix conversion.
"""

import pytest

from exprcalc.converter import format_postfix, to_postfix
from exprcalc.errors import ParseError
from exprcalc.models import Operator, OperatorKind
from exprcalc.tokenizer import tokenize


def postfix_of(expression: str) -> str:
    return format_postfix(to_postfix(tokenize(expression)))


class TestPrecedence:
    """Test operator ordering."""

    def test_multiply_after_add(self):
        assert postfix_of("1 + 2 * 3") == "0 1 + 2 3 * +"

    def test_multiply_before_add(self):
        assert postfix_of("2 * 3 + 1") == "0 2 3 * + 1 +"

    def test_subtraction_is_left_associative(self):
        assert postfix_of("8 - 2 - 1") == "0 8 + 2 - 1 -"

    def test_division_is_left_associative(self):
        assert postfix_of("8 / 2 / 2") == "0 8 2 / 2 / +"

    def test_leading_minus(self):
        assert postfix_of("-1 + 5 - 3") == "0 1 - 5 + 3 -"


class TestParentheses:
    """Test grouping."""

    def test_group_overrides_precedence(self):
        assert postfix_of("2 * (3 + 4)") == "0 2 3 4 + * +"

    def test_nested_groups(self):
        assert postfix_of("((1 - 2))") == "0 1 2 - +"

    def test_parentheses_are_dropped(self):
        for expression in ["(1)", "1 + (2 * (3 - 4))", "((8 - 1) / 6) - ((3 + 7) * 2)"]:
            tokens = tokenize(expression)
            parens = sum(
                1 for t in tokens
                if isinstance(t, Operator) and not t.is_arithmetic
            )
            postfix = to_postfix(tokens)
            assert len(postfix) == len(tokens) - parens
            assert all(
                not isinstance(t, Operator) or t.is_arithmetic for t in postfix
            )

    def test_unmatched_left_paren(self):
        with pytest.raises(ParseError, match="Bad parentheses"):
            to_postfix(tokenize("(1+2"))

    def test_unmatched_right_paren(self):
        with pytest.raises(ParseError, match="Bad parentheses"):
            to_postfix(tokenize("(1+2))"))

    def test_close_before_open(self):
        with pytest.raises(ParseError):
            to_postfix(tokenize(")1("))


class TestOperatorKind:
    """Test operator kind capabilities."""

    def test_priorities(self):
        assert OperatorKind.MULTIPLY.priority > OperatorKind.ADD.priority
        assert OperatorKind.DIVIDE.priority == OperatorKind.MULTIPLY.priority
        assert OperatorKind.SUBTRACT.priority == OperatorKind.ADD.priority

    def test_parentheses_have_no_priority(self):
        assert OperatorKind.LEFT_PAREN.priority is None
        assert not OperatorKind.RIGHT_PAREN.is_arithmetic

    def test_from_symbol(self):
        assert OperatorKind.from_symbol("/") is OperatorKind.DIVIDE
        assert OperatorKind.from_symbol("x") is None
