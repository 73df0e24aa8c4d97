"""Student's t-distribution Functions.

Numba-compiled t-distribution built on the regularized incomplete beta
function:

    P(T <= t) = 1 - ½ I_x(df/2, ½),  x = df / (df + t²),  t >= 0

Above LARGE_DF degrees of freedom every function delegates to the
standard normal distribution.

Functions:
    - t_pdf: density, computed in log space
    - t_cdf, t_sf: lower and upper tail probabilities
    - t_quantile: inverse CDF (Cornish-Fisher seed + Newton-Raphson)
    - t_critical_value: positive critical value for a significance level
    - t_test_pvalue, z_test_pvalue: directional p-values

Alternative codes (as in the p-value kernels):
    0 = two-sided, -1 = less, 1 = greater
"""

import math

from statlab.optim import optimized_jit, fast_jit
from statlab._config import DEFAULT_ALPHA, LARGE_DF
from statlab._errors import InvalidArgumentError
from ._special import _log_gamma, _betainc
from ._stats import _normal_cdf, _normal_sf, _normal_quantile

__all__ = [
    't_pdf',
    't_cdf',
    't_sf',
    't_quantile',
    't_critical_value',
    't_test_pvalue',
    'z_test_pvalue',
    'TWO_SIDED',
    'LESS',
    'GREATER',
]


TWO_SIDED = 0
LESS = -1
GREATER = 1

_NEWTON_MAX_ITER = 10
_NEWTON_PDF_EPS = 1e-15
_NEWTON_TOL = 1e-10


# =============================================================================
# Kernels
# =============================================================================

@optimized_jit
def _t_pdf(t: float, df: float) -> float:
    log_coeff = _log_gamma(0.5 * (df + 1.0)) - _log_gamma(0.5 * df) - 0.5 * math.log(df * math.pi)
    log_body = -0.5 * (df + 1.0) * math.log(1.0 + t * t / df)
    return math.exp(log_coeff + log_body)


@fast_jit
def _t_half_tail(t: float, df: float) -> float:
    """½ I_x(df/2, ½) = P(T > |t|)."""
    x = df / (df + t * t)
    return 0.5 * _betainc(x, 0.5 * df, 0.5)


@optimized_jit
def _t_cdf(t: float, df: float) -> float:
    if df > LARGE_DF:
        return _normal_cdf(t)

    p = _t_half_tail(t, df)
    if t >= 0.0:
        return 1.0 - p
    return p


@optimized_jit
def _t_sf(t: float, df: float) -> float:
    if df > LARGE_DF:
        return _normal_sf(t)

    p = _t_half_tail(t, df)
    if t >= 0.0:
        return p
    return 1.0 - p


@optimized_jit
def _t_quantile(p: float, df: float) -> float:
    z = _normal_quantile(p)
    if df > LARGE_DF:
        return z

    # Cornish-Fisher expansion as starting point
    z2 = z * z
    z3 = z2 * z
    z5 = z3 * z2
    t = z + (z3 + z) / (4.0 * df) + (5.0 * z5 + 16.0 * z3 + 3.0 * z) / (96.0 * df * df)

    # Newton-Raphson refinement
    for _ in range(_NEWTON_MAX_ITER):
        pdf = _t_pdf(t, df)
        if abs(pdf) < _NEWTON_PDF_EPS:
            break

        delta = (_t_cdf(t, df) - p) / pdf
        t -= delta

        if abs(delta) < _NEWTON_TOL:
            break

    return t


@fast_jit
def _clamp_probability(p: float) -> float:
    if p < 0.0:
        return 0.0
    if p > 1.0:
        return 1.0
    return p


@optimized_jit
def _t_test_pvalue(t: float, df: float, alternative: int) -> float:
    if alternative == LESS:
        p = _t_cdf(t, df)
    elif alternative == GREATER:
        p = _t_sf(t, df)
    else:
        p = 2.0 * _t_sf(abs(t), df)
    return _clamp_probability(p)


@optimized_jit
def _z_test_pvalue(z: float, alternative: int) -> float:
    if alternative == LESS:
        p = _normal_cdf(z)
    elif alternative == GREATER:
        p = _normal_sf(z)
    else:
        p = 2.0 * _normal_sf(abs(z))
    return _clamp_probability(p)


# =============================================================================
# Validation
# =============================================================================

def _check_df(df: float) -> None:
    if not df > 0:
        raise InvalidArgumentError(f"Degrees of freedom must be positive, got {df}")


def _check_alpha(alpha: float) -> None:
    if not 0.0 < alpha < 1.0:
        raise InvalidArgumentError(f"Alpha must be between 0 and 1, got {alpha}")


def _check_alternative_code(alternative: int) -> None:
    if alternative not in (TWO_SIDED, LESS, GREATER):
        raise InvalidArgumentError(
            f"alternative must be 0 (two-sided), -1 (less) or 1 (greater), got {alternative}"
        )


# =============================================================================
# Public API
# =============================================================================

def t_pdf(t: float, df: float) -> float:
    """Student's t density.

    f(t; ν) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) · (1 + t²/ν)^(-(ν+1)/2)

    Raises:
        InvalidArgumentError: df <= 0
    """
    _check_df(df)
    return _t_pdf(float(t), float(df))


def t_cdf(t: float, df: float) -> float:
    """Student's t CDF P(T <= t). Exactly 0.5 at t = 0.

    Raises:
        InvalidArgumentError: df <= 0
    """
    _check_df(df)
    return _t_cdf(float(t), float(df))


def t_sf(t: float, df: float) -> float:
    """Student's t survival function P(T > t).

    Raises:
        InvalidArgumentError: df <= 0
    """
    _check_df(df)
    return _t_sf(float(t), float(df))


def t_quantile(p: float, df: float) -> float:
    """Inverse of the t CDF.

    Starts from the normal quantile with a third-order Cornish-Fisher
    correction and runs at most 10 Newton-Raphson steps.

    Args:
        p: Probability, 0 < p < 1
        df: Degrees of freedom, df > 0 (fractional allowed)

    Returns:
        t such that P(T <= t) = p

    Raises:
        InvalidArgumentError: p outside (0, 1) or df <= 0
    """
    if not 0.0 < p < 1.0:
        raise InvalidArgumentError(f"Probability must be between 0 and 1, got {p}")
    _check_df(df)
    return _t_quantile(float(p), float(df))


def t_critical_value(df: float, alpha: float = DEFAULT_ALPHA, two_tailed: bool = True) -> float:
    """Positive critical value of the t-distribution.

    Args:
        df: Degrees of freedom
        alpha: Significance level (default: 0.05)
        two_tailed: Split alpha over both tails (default: True)

    Returns:
        quantile(1 - alpha/2) for two-tailed, quantile(1 - alpha) otherwise
    """
    _check_alpha(alpha)
    _check_df(df)
    p = 1.0 - alpha / 2.0 if two_tailed else 1.0 - alpha
    return _t_quantile(p, float(df))


def t_test_pvalue(t: float, df: float, alternative: int = TWO_SIDED) -> float:
    """P-value of a t statistic.

    Args:
        t: t statistic
        df: Degrees of freedom
        alternative: 0 = two-sided, -1 = less, 1 = greater

    Returns:
        p-value clamped to [0, 1]
    """
    _check_df(df)
    _check_alternative_code(alternative)
    return _t_test_pvalue(float(t), float(df), int(alternative))


def z_test_pvalue(z: float, alternative: int = TWO_SIDED) -> float:
    """P-value of a standard normal statistic (same codes as t_test_pvalue)."""
    _check_alternative_code(alternative)
    return _z_test_pvalue(float(z), int(alternative))
