"""
Built-in self-test suite.

A fixed set of expressions with known answers, used by ``exprcalc test`` to
check an installation end to end.
"""

import structlog
from pydantic import BaseModel, Field

from exprcalc.calculator import Calculator
from exprcalc.errors import CalculatorError

logger = structlog.get_logger()


class SelfTestCase(BaseModel):
    """A single expression and what it should produce."""
    expression: str
    expected: float = 0.0
    should_fail: bool = False


class SelfTestOutcome(BaseModel):
    """Result of running one case."""
    index: int
    case: SelfTestCase
    passed: bool
    result: float | None = None
    error_message: str | None = None


class SelfTestReport(BaseModel):
    """Outcomes of a full self-test run."""
    outcomes: list[SelfTestOutcome] = Field(default_factory=list)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.passed)

    @property
    def all_passed(self) -> bool:
        return self.failed_count == 0


SELF_TEST_CASES: tuple[SelfTestCase, ...] = (
    SelfTestCase(expression="-1 + 5 - 3", expected=1),
    SelfTestCase(expression="-10 + (8 * 2.5) - (3 / 1,5)", expected=8),
    SelfTestCase(expression="1 + (2 * (2.5 + 2.5 + (3 - 2))) - (3 / 1.5)", expected=11),
    SelfTestCase(expression="1", expected=1),
    SelfTestCase(
        expression="62834501 * 231 + (5534121 - 312312312) * 132 - 123125345",
        expected=-26103076826,
    ),
    SelfTestCase(expression="(3.3 + 4.45) + 7.31 * 2.99 - 1.34 - 9.23", expected=19.0369),
    SelfTestCase(
        expression="5,23 - 2,12 + 4,66 / (8,12 - (5,44 + 1,66)) + 9,99",
        expected=17.668627451,
    ),
    SelfTestCase(
        expression="(8 -   1 +   3) /   6 - ((  3 + 7) * 2   )",
        expected=-18.3333333333,
    ),
    SelfTestCase(expression="1.1 + 2.1 + abc", should_fail=True),
    SelfTestCase(expression="(1+2", should_fail=True),
    SelfTestCase(expression="(1+2))", should_fail=True),
    SelfTestCase(expression="1/0", should_fail=True),
)


def _run_case(calculator: Calculator, index: int, case: SelfTestCase, tolerance: float) -> SelfTestOutcome:
    try:
        result = calculator.calculate(case.expression)
    except CalculatorError as e:
        return SelfTestOutcome(index=index, case=case, passed=case.should_fail, error_message=str(e))

    passed = not case.should_fail and abs(case.expected - result) <= tolerance
    return SelfTestOutcome(index=index, case=case, passed=passed, result=result)


def run_self_test(
    calculator: Calculator | None = None,
    cases: tuple[SelfTestCase, ...] | list[SelfTestCase] = SELF_TEST_CASES,
    tolerance: float | None = None,
) -> SelfTestReport:
    """Run ``cases`` through ``calculator`` and collect a report."""
    calculator = calculator or Calculator()
    if tolerance is None:
        tolerance = calculator.settings.self_test_tolerance

    report = SelfTestReport()
    for index, case in enumerate(cases):
        outcome = _run_case(calculator, index, case, tolerance)
        report.outcomes.append(outcome)
        if not outcome.passed:
            logger.warning(
                "Self-test case failed",
                index=index,
                expression=case.expression,
                result=outcome.result,
                error=outcome.error_message,
            )

    return report
