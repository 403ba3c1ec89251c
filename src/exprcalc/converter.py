"""
Infix to postfix conversion (shunting-yard).

Operators of equal priority are emitted left to right, and multiply/divide
are emitted ahead of any pending add/subtract. Parentheses are consumed and
never appear in the output.
"""

from typing import Iterable

import structlog

from exprcalc.errors import ParseError
from exprcalc.models import Number, Operator, OperatorKind, Token

logger = structlog.get_logger()


def _binds_tighter(incoming: Operator, stacked: Operator) -> bool:
    return incoming.kind.priority > stacked.kind.priority


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """
    Reorder an infix token list into postfix order.

    Raises:
        ParseError: if the parentheses are not balanced.
    """
    output: list[Token] = []
    stack: list[Operator] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
            continue

        if token.is_arithmetic:
            while stack and stack[-1].is_arithmetic and not _binds_tighter(token, stack[-1]):
                output.append(stack.pop())
            stack.append(token)
        elif token.kind is OperatorKind.LEFT_PAREN:
            stack.append(token)
        else:
            while stack and stack[-1].is_arithmetic:
                output.append(stack.pop())
            if not stack or stack[-1].kind is not OperatorKind.LEFT_PAREN:
                raise ParseError("Bad parentheses")
            stack.pop()

    while stack:
        top = stack.pop()
        if top.kind is OperatorKind.LEFT_PAREN:
            raise ParseError("Bad parentheses")
        output.append(top)

    logger.debug("Converted to postfix", postfix=format_postfix(output))
    return output


def format_postfix(tokens: Iterable[Token]) -> str:
    """Render tokens as a space separated string, e.g. "0 1 2 * +"."""
    return " ".join(str(token) for token in tokens)
