"""
Tokenizer for exprcalc.

Turns a line of text into an infix token list. The list always starts with
an implicit zero so that a leading sign applies to it: "-1" reads as "0 - 1"
and a bare "1" as "0 + 1".
"""

import math
import re

import structlog

from exprcalc.errors import EncodingError, ParseError
from exprcalc.models import ADD, Number, Operator, OperatorKind, Token

logger = structlog.get_logger()

_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_SIGNS = ("+", "-")
_SPACE = " "


def check_encoding(text: str) -> None:
    """Reject input containing anything outside 7-bit ASCII."""
    for ch in text:
        if ord(ch) > 127:
            raise EncodingError("Bad input, supports only ascii characters")


def preprocess(text: str) -> str:
    """Accept ',' as a decimal separator by rewriting it to '.'."""
    return text.replace(",", ".")


def tokenize(text: str) -> list[Token]:
    """
    Convert an expression into its infix token list.

    Raises:
        ParseError: if the input is blank, contains a character that
            cannot start a token, or has a literal too large for a float.
        EncodingError: if the input is not ASCII.
    """
    if not text.strip(_SPACE):
        raise ParseError("Empty string")

    check_encoding(text)
    text = preprocess(text)

    tokens: list[Token] = [Number(0.0)]
    if text.lstrip(_SPACE)[0] not in _SIGNS:
        tokens.append(ADD)

    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch == _SPACE:
            pos += 1
            continue

        kind = OperatorKind.from_symbol(ch)
        if kind is not None:
            tokens.append(Operator(kind))
            pos += 1
            continue

        match = _NUMBER_RE.match(text, pos)
        if match is None:
            raise ParseError("Couldnt parse, bad character")
        value = float(match.group())
        if not math.isfinite(value):
            raise ParseError("Number is too large")
        tokens.append(Number(value))
        pos = match.end()

    logger.debug("Tokenized expression", token_count=len(tokens))
    return tokens
