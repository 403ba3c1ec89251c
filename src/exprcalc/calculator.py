"""
Expression calculator.

Chains the tokenizer, the shunting-yard converter and the postfix evaluator.
Every call works on its own token lists, so a Calculator can be reused and
shared freely.
"""

import structlog

from exprcalc.config import Settings, settings as default_settings
from exprcalc.converter import format_postfix, to_postfix
from exprcalc.errors import CalculatorError
from exprcalc.evaluator import evaluate_postfix
from exprcalc.tokenizer import tokenize

logger = structlog.get_logger()


class Calculator:
    """Evaluates arithmetic expressions with + - * / and parentheses."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    def calculate(self, expression: str) -> float:
        """
        Evaluate ``expression`` and return its value.

        Raises any CalculatorError subclass unchanged; no partial result is
        ever returned.
        """
        log = logger.bind(expression=expression)
        try:
            tokens = tokenize(expression)
            postfix = to_postfix(tokens)
            result = evaluate_postfix(postfix, epsilon=self.settings.division_epsilon)
        except CalculatorError as e:
            log.info("Evaluation failed", error_type=type(e).__name__, error=str(e))
            raise

        log.debug("Evaluated expression", postfix=format_postfix(postfix), result=result)
        return result

    def format_result(self, value: float) -> str:
        """Fixed-point text with the configured number of decimals."""
        return f"{value:.{self.settings.output_precision}f}"


def evaluate_expression(expression: str) -> float:
    """Evaluate ``expression`` with default settings."""
    return Calculator().calculate(expression)
