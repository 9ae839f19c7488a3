"""
Reduce per-case results to one verdict and explain failures.
"""

from typing import Sequence

from rulesim.core.errors import OracleError, RulesAssertionError
from rulesim.schemas.testing import (
    CaseResult,
    Expectation,
    TestCase,
    TestResult,
    TestState,
    TestSummary,
)


def summarize(cases: Sequence[TestCase], results: Sequence[TestResult]) -> TestSummary:
    """Pair each case with its result; success only if every result is SUCCESS."""
    if len(cases) != len(results):
        raise OracleError(
            f"Rules API returned {len(results)} results for {len(cases)} test cases"
        )

    tests = [CaseResult(case=case, result=result) for case, result in zip(cases, results)]
    success = all(result.state == TestState.SUCCESS for result in results)
    return TestSummary(success=success, tests=tests)


def failure_message(case: TestCase, result: TestResult) -> str:
    if result.debug_messages:
        return "\n\n".join(result.debug_messages)

    outcome = "succeed" if case.expectation == Expectation.ALLOW else "fail"
    return f"Expected the {case.request.method.value} operation to {outcome}."


def assert_summary(summary: TestSummary) -> None:
    """Raise RulesAssertionError for the first failing case of `summary`."""
    if summary.success:
        return

    for test in summary.tests:
        if test.result.state != TestState.SUCCESS:
            raise RulesAssertionError(failure_message(test.case, test.result))


def assert_result(result: TestResult, case: TestCase) -> None:
    if result.state == TestState.SUCCESS:
        return

    raise RulesAssertionError(failure_message(case, result))
