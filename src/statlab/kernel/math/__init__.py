"""Mathematical and Statistical Kernels.

Scalar distribution functions compiled with Numba JIT.

Strategy:
    - Compiled kernels (underscore-prefixed) carry no validation and are
      called from other kernels in nopython mode
    - Public wrappers validate their arguments and raise
      InvalidArgumentError before calling the kernel

Submodules:
    special: log-gamma, log-beta, regularized incomplete beta
    stats: Standard normal distribution (pdf, cdf, sf, quantile)
    tdist: Student's t-distribution and p-value policy
"""

from ._special import (
    log_gamma,
    log_beta,
    regularized_incomplete_beta,
    betainc,
)

from ._stats import (
    normal_pdf,
    normal_cdf,
    normal_sf,
    normal_quantile,
)

from ._tdist import (
    t_pdf,
    t_cdf,
    t_sf,
    t_quantile,
    t_critical_value,
    t_test_pvalue,
    z_test_pvalue,
    TWO_SIDED,
    LESS,
    GREATER,
)

__all__ = [
    # Special functions
    'log_gamma',
    'log_beta',
    'regularized_incomplete_beta',
    'betainc',

    # Standard normal
    'normal_pdf',
    'normal_cdf',
    'normal_sf',
    'normal_quantile',

    # T-distribution
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
