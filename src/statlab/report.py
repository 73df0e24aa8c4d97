"""Presentation helpers for test results.

Formatting rules:
    - p < 0.0001  -> "< 0.0001"
    - p < 0.001   -> scientific notation, 2 decimals ("5.00e-04")
    - otherwise   -> fixed, 4 decimals ("0.0500")

Significance stars: p < 0.001 "***", p < 0.01 "**", p < 0.05 "*".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from statlab._errors import InvalidArgumentError
from statlab.kernel import TTestResult, ZTestResult, VALID_TEST_TYPES

__all__ = [
    'AssumptionCheck',
    'format_p_value',
    'significance_stars',
    'describe_test_result',
    'check_test_assumptions',
]

logger = logging.getLogger(__name__)

_MIN_T_SAMPLE = 30
_MIN_ONE_PROP_COUNT = 10
_MIN_TWO_PROP_COUNT = 5


@dataclass(frozen=True)
class AssumptionCheck:
    valid: bool
    warnings: Tuple[str, ...]


def format_p_value(p_value: float) -> str:
    if p_value < 0.0001:
        return "< 0.0001"
    if p_value < 0.001:
        return f"{p_value:.2e}"
    return f"{p_value:.4f}"


def significance_stars(p_value: float) -> str:
    if p_value < 0.001:
        return "***"
    if p_value < 0.01:
        return "**"
    if p_value < 0.05:
        return "*"
    return ""


def describe_test_result(
    result: Union[TTestResult, ZTestResult],
    context: Optional[str] = None,
) -> str:
    """One-sentence plain-language summary of a test result.

    Example:
        "The result is statistically significant (p = 0.0123) with a
        medium effect size (0.55). Users preferred the new layout."
    """
    significance = (
        "statistically significant" if result.reject_null
        else "not statistically significant"
    )

    effect = ""
    if result.effect_size != 0:
        effect = (
            f" with a {result.effect_size_interpretation} effect size"
            f" ({result.effect_size:.2f})"
        )

    suffix = f" {context}" if context else ""

    return f"The result is {significance} (p = {format_p_value(result.p_value)}){effect}.{suffix}"


def check_test_assumptions(test_type: str, data: Mapping[str, Any]) -> AssumptionCheck:
    """Rule-of-thumb checks for the normal approximations behind each test.

    Args:
        test_type: "one-sample-t", "two-sample-t", "one-prop-z" or "two-prop-z"
        data: The engine inputs (same field names as the engine arguments)

    Returns:
        AssumptionCheck; ``valid`` is False when any warning was raised
    """
    if test_type not in VALID_TEST_TYPES:
        raise InvalidArgumentError(f"test_type must be one of {VALID_TEST_TYPES}, got {test_type!r}")

    warnings = []

    if test_type == "one-sample-t":
        if data.get("sample_size", 0) < _MIN_T_SAMPLE:
            warnings.append(
                "Sample size < 30: t-test may be less reliable. "
                "Ensure data is approximately normal."
            )

    elif test_type == "two-sample-t":
        if min(data.get("n1", 0), data.get("n2", 0)) < _MIN_T_SAMPLE:
            warnings.append(
                "Sample size < 30 in at least one group: t-test may be less reliable. "
                "Ensure data is approximately normal."
            )

    elif test_type == "one-prop-z":
        n = data.get("sample_size", 0)
        p0 = data.get("hypothesized_proportion", 0.5)
        if n * p0 < _MIN_ONE_PROP_COUNT or n * (1 - p0) < _MIN_ONE_PROP_COUNT:
            warnings.append(
                "Normal approximation may be poor. Recommend np ≥ 10 and n(1-p) ≥ 10."
            )

    else:
        n1 = data.get("n1", 0)
        n2 = data.get("n2", 0)
        p1 = data.get("successes1", 0) / n1 if n1 > 0 else 0.0
        p2 = data.get("successes2", 0) / n2 if n2 > 0 else 0.0
        counts = (n1 * p1, n1 * (1 - p1), n2 * p2, n2 * (1 - p2))
        if any(count < _MIN_TWO_PROP_COUNT for count in counts):
            warnings.append("Some expected counts < 5. Normal approximation may be poor.")

    for message in warnings:
        logger.debug("%s assumption warning: %s", test_type, message)

    return AssumptionCheck(valid=not warnings, warnings=tuple(warnings))
