"""statlab Kernel Module.

Hypothesis-test engines, effect sizes and power analysis built on the
compiled distribution kernels in :mod:`statlab.kernel.math`.

Submodules:
    math: Special functions, standard normal and t-distribution kernels
    ttest: One-sample and Welch two-sample t-tests
    ztest: One- and two-proportion z-tests
    effect: Cohen's d and h with interpretation labels
    power: Power, sample size and power curves

All test engines work on summary statistics and return frozen result
records (TTestResult, ZTestResult).
"""

from . import math
from . import ttest
from . import ztest
from . import effect
from . import power

from ._common import (
    VALID_ALTERNATIVES,
    VALID_TEST_TYPES,
    ConfidenceInterval,
    TTestResult,
    ZTestResult,
)
from ._runner import TEST_ENGINES, run_test

__all__ = [
    'math',
    'ttest',
    'ztest',
    'effect',
    'power',
    'VALID_ALTERNATIVES',
    'VALID_TEST_TYPES',
    'ConfidenceInterval',
    'TTestResult',
    'ZTestResult',
    'TEST_ENGINES',
    'run_test',
]
