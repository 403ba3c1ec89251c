"""
exprcalc - Arithmetic Expression Calculator

Evaluates one-line arithmetic expressions with + - * /, parentheses, a
leading sign and decimal numbers written with '.' or ','. Expressions are
tokenized, converted to postfix with the shunting-yard algorithm and
reduced on a value stack.
"""

from exprcalc.calculator import Calculator, evaluate_expression
from exprcalc.errors import (
    CalculatorError,
    DivisionByZeroError,
    EncodingError,
    InternalError,
    ParseError,
)

__version__ = "1.0.0"

__all__ = [
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "EncodingError",
    "InternalError",
    "ParseError",
    "evaluate_expression",
]
