"""T-Tests from Summary Statistics.

One-sample t-test and Welch's two-sample t-test. Both engines take summary
statistics (mean, standard deviation, sample size), never raw samples.

Design:
    validate -> standard error -> zero-SE branch -> statistic -> p-value
    -> two-sided confidence interval -> Cohen's d -> decision

The two-sample test does not assume equal variances (Welch), while its
effect size uses the pooled standard deviation. The confidence interval
is always two-sided, whatever the alternative.
"""

import logging
import math

from statlab._config import DEFAULT_ALPHA
from statlab._errors import InvalidArgumentError
from statlab.kernel.math._tdist import _t_test_pvalue, t_critical_value
from ._common import (
    ConfidenceInterval,
    TTestResult,
    alternative_code,
    check_alpha,
    degenerate_statistic,
)
from .effect import cohens_d, cohens_d_two_groups, interpret_cohens_d

__all__ = [
    'one_sample_ttest',
    'two_sample_ttest',
    'welch_df',
]

logger = logging.getLogger(__name__)


def welch_df(var1: float, n1: float, var2: float, n2: float) -> float:
    """Welch-Satterthwaite degrees of freedom.

    df = (v1/n1 + v2/n2)² / ((v1/n1)²/(n1-1) + (v2/n2)²/(n2-1))

    Never exceeds n1 + n2 - 2. Undefined (nan) when both variances are 0.
    The ratio is scale-free, so both terms are divided by the larger one
    first; squaring tiny variances would otherwise underflow to 0.
    """
    v1_n1 = var1 / n1
    v2_n2 = var2 / n2
    scale = max(v1_n1, v2_n2)
    if scale == 0:
        return math.nan
    r1 = v1_n1 / scale
    r2 = v2_n2 / scale
    sum_r = r1 + r2
    return (sum_r * sum_r) / ((r1 * r1) / (n1 - 1) + (r2 * r2) / (n2 - 1))


def one_sample_ttest(
    sample_mean: float,
    sample_std: float,
    sample_size: int,
    hypothesized_mean: float,
    alternative: str = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> TTestResult:
    """One-sample t-test: does the population mean differ from μ0?

    t = (x̄ - μ0) / (s / √n),  df = n - 1

    Args:
        sample_mean: Sample mean x̄
        sample_std: Sample standard deviation s (>= 0)
        sample_size: n (>= 2)
        hypothesized_mean: μ0
        alternative: "two-sided", "less" or "greater"
        alpha: Significance level in (0, 1)

    Returns:
        TTestResult

    Raises:
        InvalidArgumentError: on any invalid argument
    """
    if sample_size < 2:
        raise InvalidArgumentError(f"Sample size must be at least 2, got {sample_size}")
    if sample_std < 0:
        raise InvalidArgumentError(f"Standard deviation must be non-negative, got {sample_std}")
    check_alpha(alpha)
    code = alternative_code(alternative)

    n = sample_size
    df = n - 1
    se = sample_std / math.sqrt(n)

    if se == 0:
        logger.debug("one-sample t-test: zero standard error, degenerate result")
        differs = sample_mean != hypothesized_mean
        return TTestResult(
            test_type="one-sample-t",
            t_statistic=degenerate_statistic(sample_mean, hypothesized_mean),
            degrees_of_freedom=df,
            p_value=0.0 if differs else 1.0,
            alternative=alternative,
            confidence_interval=ConfidenceInterval(sample_mean, sample_mean),
            confidence_level=1.0 - alpha,
            effect_size=0.0,
            effect_size_interpretation="negligible",
            reject_null=differs,
            alpha=alpha,
        )

    t_stat = (sample_mean - hypothesized_mean) / se
    p_value = _t_test_pvalue(t_stat, float(df), code)

    margin = t_critical_value(df, alpha, True) * se
    effect = cohens_d(sample_mean, hypothesized_mean, sample_std)

    return TTestResult(
        test_type="one-sample-t",
        t_statistic=t_stat,
        degrees_of_freedom=df,
        p_value=p_value,
        alternative=alternative,
        confidence_interval=ConfidenceInterval(sample_mean - margin, sample_mean + margin),
        confidence_level=1.0 - alpha,
        effect_size=effect,
        effect_size_interpretation=interpret_cohens_d(effect),
        reject_null=p_value < alpha,
        alpha=alpha,
    )


def two_sample_ttest(
    mean1: float,
    std1: float,
    n1: int,
    mean2: float,
    std2: float,
    n2: int,
    alternative: str = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> TTestResult:
    """Welch's two-sample t-test on mean1 - mean2.

    t = (x̄1 - x̄2) / √(s1²/n1 + s2²/n2)

    Degrees of freedom follow Welch-Satterthwaite and may be fractional.
    When the standard error is zero the Welch formula is undefined and
    n1 + n2 - 2 is reported instead.

    Args:
        mean1, std1, n1: Summary statistics of group 1 (n1 >= 2, std1 >= 0)
        mean2, std2, n2: Summary statistics of group 2 (n2 >= 2, std2 >= 0)
        alternative: "two-sided", "less" or "greater"
        alpha: Significance level in (0, 1)

    Returns:
        TTestResult

    Raises:
        InvalidArgumentError: on any invalid argument
    """
    if n1 < 2 or n2 < 2:
        raise InvalidArgumentError(f"Both sample sizes must be at least 2, got {n1}, {n2}")
    if std1 < 0 or std2 < 0:
        raise InvalidArgumentError(f"Standard deviations must be non-negative, got {std1}, {std2}")
    check_alpha(alpha)
    code = alternative_code(alternative)

    var1 = std1 * std1
    var2 = std2 * std2
    se = math.sqrt(var1 / n1 + var2 / n2)
    diff = mean1 - mean2

    if se == 0:
        logger.debug("two-sample t-test: zero standard error, degenerate result")
        differs = mean1 != mean2
        return TTestResult(
            test_type="two-sample-t",
            t_statistic=degenerate_statistic(mean1, mean2),
            degrees_of_freedom=n1 + n2 - 2,
            p_value=0.0 if differs else 1.0,
            alternative=alternative,
            confidence_interval=ConfidenceInterval(diff, diff),
            confidence_level=1.0 - alpha,
            effect_size=0.0,
            effect_size_interpretation="negligible",
            reject_null=differs,
            alpha=alpha,
        )

    t_stat = diff / se
    df = welch_df(var1, n1, var2, n2)
    p_value = _t_test_pvalue(t_stat, df, code)

    margin = t_critical_value(df, alpha, True) * se
    # Effect size uses the pooled SD, not the Welch SE
    effect = cohens_d_two_groups(mean1, std1, n1, mean2, std2, n2)

    return TTestResult(
        test_type="two-sample-t",
        t_statistic=t_stat,
        degrees_of_freedom=df,
        p_value=p_value,
        alternative=alternative,
        confidence_interval=ConfidenceInterval(diff - margin, diff + margin),
        confidence_level=1.0 - alpha,
        effect_size=effect,
        effect_size_interpretation=interpret_cohens_d(effect),
        reject_null=p_value < alpha,
        alpha=alpha,
    )
