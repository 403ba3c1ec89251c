"""
Exception hierarchy for exprcalc.

Every failure raised by the evaluation pipeline derives from CalculatorError,
so callers that only want to report a message can catch a single type.
"""


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class EncodingError(CalculatorError, ValueError):
    """Raised when input contains characters outside the ASCII range."""
    pass


class ParseError(CalculatorError, ValueError):
    """Raised when input is empty, has a bad character, or bad parentheses."""
    pass


class DivisionByZeroError(CalculatorError, ArithmeticError):
    """Raised when a divisor is too close to zero."""
    pass


class InternalError(CalculatorError):
    """
    Raised when a postfix sequence cannot be reduced to a single value.

    Input that converts cleanly but does not alternate numbers and
    operators (for example "1 2" or "1 +") ends up here.
    """
    pass
