"""
Token models for exprcalc.

A token is either a Number or an Operator. Operator kinds split into the
arithmetic operators, which have a priority, and the structural parentheses,
which only steer conversion.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# =============================================================================
# Enums
# =============================================================================

class OperatorKind(str, Enum):
    """Operator and parenthesis kinds, keyed by their source symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"

    @property
    def is_arithmetic(self) -> bool:
        return self in _PRIORITIES

    @property
    def priority(self) -> int | None:
        """Binding priority, or None for parentheses."""
        return _PRIORITIES.get(self)

    @classmethod
    def from_symbol(cls, symbol: str) -> "OperatorKind | None":
        try:
            return cls(symbol)
        except ValueError:
            return None


_PRIORITIES = {
    OperatorKind.ADD: 1,
    OperatorKind.SUBTRACT: 1,
    OperatorKind.MULTIPLY: 2,
    OperatorKind.DIVIDE: 2,
}


# =============================================================================
# Tokens
# =============================================================================

@dataclass(frozen=True)
class Number:
    """A numeric literal."""
    value: float

    def __str__(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class Operator:
    """An arithmetic operator or a parenthesis."""
    kind: OperatorKind

    @property
    def is_arithmetic(self) -> bool:
        return self.kind.is_arithmetic

    def __str__(self) -> str:
        return self.kind.value


Token = Union[Number, Operator]

ADD = Operator(OperatorKind.ADD)
SUBTRACT = Operator(OperatorKind.SUBTRACT)
MULTIPLY = Operator(OperatorKind.MULTIPLY)
DIVIDE = Operator(OperatorKind.DIVIDE)
LEFT_PAREN = Operator(OperatorKind.LEFT_PAREN)
RIGHT_PAREN = Operator(OperatorKind.RIGHT_PAREN)
