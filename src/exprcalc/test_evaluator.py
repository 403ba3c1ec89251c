"""
Tests for postfix evaluation.
"""

import pytest

from exprcalc.errors import DivisionByZeroError, InternalError
from exprcalc.evaluator import evaluate_postfix
from exprcalc.models import ADD, DIVIDE, LEFT_PAREN, MULTIPLY, SUBTRACT, Number


class TestArithmetic:
    """Test operator application."""

    def test_add(self):
        assert evaluate_postfix([Number(2), Number(3), ADD]) == 5

    def test_second_popped_is_left_operand(self):
        assert evaluate_postfix([Number(3), Number(6), SUBTRACT]) == -3
        assert evaluate_postfix([Number(6), Number(3), DIVIDE]) == 2

    def test_chained(self):
        # 2 * (3 + 4)
        postfix = [Number(2), Number(3), Number(4), ADD, MULTIPLY]
        assert evaluate_postfix(postfix) == 14

    def test_single_number(self):
        assert evaluate_postfix([Number(1.5)]) == 1.5


class TestDivisionByZero:
    """Test the divisor epsilon."""

    def test_exact_zero(self):
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            evaluate_postfix([Number(1), Number(0), DIVIDE])

    @pytest.mark.parametrize("divisor", [1e-10, -1e-10, 5e-10, -9.99e-10])
    def test_tiny_divisor_either_sign(self, divisor):
        with pytest.raises(DivisionByZeroError):
            evaluate_postfix([Number(1), Number(divisor), DIVIDE])

    def test_divisor_at_epsilon_is_allowed(self):
        assert evaluate_postfix([Number(1), Number(1e-9), DIVIDE]) == pytest.approx(1e9)

    def test_custom_epsilon(self):
        with pytest.raises(DivisionByZeroError):
            evaluate_postfix([Number(1), Number(0.01), DIVIDE], epsilon=0.1)

    def test_is_an_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            evaluate_postfix([Number(1), Number(0), DIVIDE])


class TestMalformedPostfix:
    """Test structurally invalid sequences."""

    def test_empty(self):
        with pytest.raises(InternalError):
            evaluate_postfix([])

    def test_operator_underflow(self):
        with pytest.raises(InternalError, match="Insufficient operands"):
            evaluate_postfix([Number(1), ADD])

    def test_leftover_values(self):
        with pytest.raises(InternalError, match="expected 1"):
            evaluate_postfix([Number(1), Number(2)])

    def test_structural_token(self):
        with pytest.raises(InternalError):
            evaluate_postfix([Number(1), Number(2), LEFT_PAREN])
