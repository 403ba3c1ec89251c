"""Postfix evaluation with a single value stack."""

import operator
from typing import Iterable

import structlog

from exprcalc.errors import DivisionByZeroError, InternalError
from exprcalc.models import Number, OperatorKind, Token

logger = structlog.get_logger()

DIVISION_EPSILON = 1e-9

_BIN_OPS = {
    OperatorKind.ADD: operator.add,
    OperatorKind.SUBTRACT: operator.sub,
    OperatorKind.MULTIPLY: operator.mul,
    OperatorKind.DIVIDE: operator.truediv,
}


def evaluate_postfix(postfix: Iterable[Token], epsilon: float = DIVISION_EPSILON) -> float:
    """
    Reduce a postfix token list to a single value.

    For each operator the most recently pushed value is the right operand.

    Raises:
        DivisionByZeroError: if a divisor's magnitude is below ``epsilon``.
        InternalError: if the sequence does not reduce to exactly one value.
    """
    stack: list[float] = []

    for token in postfix:
        if isinstance(token, Number):
            stack.append(token.value)
            continue

        op = _BIN_OPS.get(token.kind)
        if op is None:
            raise InternalError(f"Unexpected token in postfix sequence: {token}")
        if len(stack) < 2:
            raise InternalError(f"Insufficient operands for {token}")

        a = stack.pop()
        b = stack.pop()
        if token.kind is OperatorKind.DIVIDE and abs(a) < epsilon:
            raise DivisionByZeroError("Division by zero")
        stack.append(float(op(b, a)))

    if len(stack) != 1:
        logger.debug("Unbalanced postfix sequence", stack_size=len(stack))
        raise InternalError(f"Stack has {len(stack)} elements after evaluation, expected 1")

    return stack[0]
