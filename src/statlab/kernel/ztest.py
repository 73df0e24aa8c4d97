"""Proportion Z-Tests.

One-proportion and two-proportion z-tests based on the normal
approximation to the binomial.

The statistic and the confidence interval use different standard errors:
    - one-proportion: statistic under H0 (p0), interval from p̂
    - two-proportion: statistic pooled, interval unpooled
"""

import logging
import math

from statlab._config import DEFAULT_ALPHA
from statlab._errors import InvalidArgumentError
from statlab.kernel.math._stats import _normal_quantile
from statlab.kernel.math._tdist import _z_test_pvalue
from ._common import (
    ConfidenceInterval,
    ZTestResult,
    alternative_code,
    check_alpha,
)
from .effect import cohens_h, interpret_cohens_h

__all__ = [
    'one_prop_ztest',
    'two_prop_ztest',
]

logger = logging.getLogger(__name__)


def _z_critical(alpha: float) -> float:
    return -_normal_quantile(alpha / 2.0)


def _check_successes(successes: int, n: int, name: str) -> None:
    if successes < 0 or successes > n:
        raise InvalidArgumentError(f"{name} must be between 0 and {n}, got {successes}")


def one_prop_ztest(
    successes: int,
    sample_size: int,
    hypothesized_proportion: float,
    alternative: str = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> ZTestResult:
    """One-proportion z-test against p0.

    z = (p̂ - p0) / √(p0(1-p0)/n)

    Args:
        successes: Number of successes, 0 <= successes <= sample_size
        sample_size: n >= 1
        hypothesized_proportion: p0 in (0, 1)
        alternative: "two-sided", "less" or "greater"
        alpha: Significance level in (0, 1)

    Returns:
        ZTestResult; the interval is clamped to [0, 1]

    Raises:
        InvalidArgumentError: on any invalid argument
    """
    if sample_size < 1:
        raise InvalidArgumentError(f"Sample size must be at least 1, got {sample_size}")
    _check_successes(successes, sample_size, "successes")
    if not 0.0 < hypothesized_proportion < 1.0:
        raise InvalidArgumentError(
            f"Hypothesized proportion must be between 0 and 1, got {hypothesized_proportion}"
        )
    check_alpha(alpha)
    code = alternative_code(alternative)

    n = sample_size
    p0 = hypothesized_proportion
    p_hat = successes / n

    se = math.sqrt(p0 * (1.0 - p0) / n)

    # Unreachable for p0 in (0, 1)
    if se == 0:
        logger.debug("one-proportion z-test: zero standard error, degenerate result")
        return ZTestResult(
            test_type="one-prop-z",
            z_statistic=0.0,
            p_value=1.0,
            alternative=alternative,
            confidence_interval=ConfidenceInterval(p_hat, p_hat),
            confidence_level=1.0 - alpha,
            effect_size=0.0,
            effect_size_interpretation="negligible",
            reject_null=False,
            alpha=alpha,
        )

    z_stat = (p_hat - p0) / se
    p_value = _z_test_pvalue(z_stat, code)

    se_sample = math.sqrt(p_hat * (1.0 - p_hat) / n)
    margin = _z_critical(alpha) * se_sample
    effect = cohens_h(p_hat, p0)

    return ZTestResult(
        test_type="one-prop-z",
        z_statistic=z_stat,
        p_value=p_value,
        alternative=alternative,
        confidence_interval=ConfidenceInterval(
            max(0.0, p_hat - margin),
            min(1.0, p_hat + margin),
        ),
        confidence_level=1.0 - alpha,
        effect_size=effect,
        effect_size_interpretation=interpret_cohens_h(effect),
        reject_null=p_value < alpha,
        alpha=alpha,
    )


def two_prop_ztest(
    successes1: int,
    n1: int,
    successes2: int,
    n2: int,
    alternative: str = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> ZTestResult:
    """Two-proportion z-test on p1 - p2.

    z = (p̂1 - p̂2) / √(p̄(1-p̄)(1/n1 + 1/n2)),  p̄ = (x1 + x2) / (n1 + n2)

    When p̄ is 0 or 1 (no variation in either group) the result is
    z = 0, p = 1.

    Args:
        successes1, n1: Successes and trials of group 1 (n1 >= 1)
        successes2, n2: Successes and trials of group 2 (n2 >= 1)
        alternative: "two-sided", "less" or "greater"
        alpha: Significance level in (0, 1)

    Returns:
        ZTestResult; the interval is clamped to [-1, 1]

    Raises:
        InvalidArgumentError: on any invalid argument
    """
    if n1 < 1 or n2 < 1:
        raise InvalidArgumentError(f"Both sample sizes must be at least 1, got {n1}, {n2}")
    _check_successes(successes1, n1, "successes1")
    _check_successes(successes2, n2, "successes2")
    check_alpha(alpha)
    code = alternative_code(alternative)

    p1 = successes1 / n1
    p2 = successes2 / n2
    diff = p1 - p2

    p_pooled = (successes1 + successes2) / (n1 + n2)
    se = math.sqrt(p_pooled * (1.0 - p_pooled) * (1.0 / n1 + 1.0 / n2))

    if se == 0:
        logger.debug("two-proportion z-test: zero pooled standard error, degenerate result")
        return ZTestResult(
            test_type="two-prop-z",
            z_statistic=0.0,
            p_value=1.0,
            alternative=alternative,
            confidence_interval=ConfidenceInterval(diff, diff),
            confidence_level=1.0 - alpha,
            effect_size=0.0,
            effect_size_interpretation="negligible",
            reject_null=False,
            alpha=alpha,
        )

    z_stat = diff / se
    p_value = _z_test_pvalue(z_stat, code)

    se_unpooled = math.sqrt(p1 * (1.0 - p1) / n1 + p2 * (1.0 - p2) / n2)
    margin = _z_critical(alpha) * se_unpooled
    effect = cohens_h(p1, p2)

    return ZTestResult(
        test_type="two-prop-z",
        z_statistic=z_stat,
        p_value=p_value,
        alternative=alternative,
        confidence_interval=ConfidenceInterval(
            max(-1.0, diff - margin),
            min(1.0, diff + margin),
        ),
        confidence_level=1.0 - alpha,
        effect_size=effect,
        effect_size_interpretation=interpret_cohens_h(effect),
        reject_null=p_value < alpha,
        alpha=alpha,
    )
