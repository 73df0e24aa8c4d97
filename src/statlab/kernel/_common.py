"""Common types for the hypothesis-test engines.

Result records are frozen dataclasses: each engine call builds a fresh
record and nothing mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from statlab._errors import InvalidArgumentError
from statlab.kernel.math import TWO_SIDED, LESS, GREATER

__all__ = [
    'VALID_ALTERNATIVES',
    'VALID_TEST_TYPES',
    'ConfidenceInterval',
    'TTestResult',
    'ZTestResult',
]


VALID_ALTERNATIVES = ("two-sided", "less", "greater")

VALID_TEST_TYPES = ("one-sample-t", "two-sample-t", "one-prop-z", "two-prop-z")

_ALTERNATIVE_CODES = {
    "two-sided": TWO_SIDED,
    "less": LESS,
    "greater": GREATER,
}


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def __contains__(self, value: float) -> bool:
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class TTestResult:
    """
    Outcome of a one- or two-sample t-test.

    Attributes
    ----------
    test_type : str
        "one-sample-t" or "two-sample-t".
    t_statistic : float
        t statistic; ±inf when the standard error is zero and means differ.
    degrees_of_freedom : float
        n - 1, Welch-Satterthwaite df, or n1 + n2 - 2 when the standard
        error is zero.
    p_value : float
        p-value in [0, 1] for the chosen alternative.
    alternative : str
        "two-sided", "less" or "greater".
    confidence_interval : ConfidenceInterval
        Two-sided interval for the mean (difference) at ``confidence_level``.
    confidence_level : float
        1 - alpha.
    effect_size : float
        Signed Cohen's d.
    effect_size_interpretation : str
        "negligible", "small", "medium" or "large".
    reject_null : bool
        Whether H0 is rejected at ``alpha``.
    alpha : float
        Significance level used.
    """
    test_type: str
    t_statistic: float
    degrees_of_freedom: float
    p_value: float
    alternative: str
    confidence_interval: ConfidenceInterval
    confidence_level: float
    effect_size: float
    effect_size_interpretation: str
    reject_null: bool
    alpha: float

    @property
    def statistic(self) -> float:
        return self.t_statistic


@dataclass(frozen=True)
class ZTestResult:
    """
    Outcome of a one- or two-proportion z-test.

    Same fields as :class:`TTestResult` with ``z_statistic`` in place of
    the t statistic, no degrees of freedom, and Cohen's h as effect size.
    """
    test_type: str
    z_statistic: float
    p_value: float
    alternative: str
    confidence_interval: ConfidenceInterval
    confidence_level: float
    effect_size: float
    effect_size_interpretation: str
    reject_null: bool
    alpha: float

    @property
    def statistic(self) -> float:
        return self.z_statistic


# =============================================================================
# Validation helpers
# =============================================================================

def check_alpha(alpha: float) -> None:
    if not 0.0 < alpha < 1.0:
        raise InvalidArgumentError(f"Alpha must be between 0 and 1, got {alpha}")


def alternative_code(alternative: str) -> int:
    """Map an alternative name to the p-value kernel code."""
    try:
        return _ALTERNATIVE_CODES[alternative]
    except (KeyError, TypeError):
        raise InvalidArgumentError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        ) from None


def degenerate_statistic(estimate: float, reference: float) -> float:
    """Statistic for a zero standard error: 0 if equal, else ±inf."""
    if estimate == reference:
        return 0.0
    return float("inf") if estimate > reference else float("-inf")
