"""statlab: hypothesis testing and distribution kernels.

Numerical core of an interactive statistics course: special functions,
Student's t-distribution, t- and z-tests from summary statistics, effect
sizes, and power / sample-size planning. Scalar kernels are compiled
with Numba.

Quick Start:
    from statlab import one_sample_ttest, describe_test_result

    result = one_sample_ttest(
        sample_mean=105, sample_std=15, sample_size=25, hypothesized_mean=100,
    )
    print(describe_test_result(result))
"""

import logging

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

from ._errors import InvalidArgumentError

from .kernel.math import (
    log_gamma,
    log_beta,
    regularized_incomplete_beta,
    betainc,
    normal_pdf,
    normal_cdf,
    normal_sf,
    normal_quantile,
    t_pdf,
    t_cdf,
    t_sf,
    t_quantile,
    t_critical_value,
    t_test_pvalue,
    z_test_pvalue,
)

from .kernel import (
    ConfidenceInterval,
    TTestResult,
    ZTestResult,
    run_test,
)
from .kernel.ttest import one_sample_ttest, two_sample_ttest, welch_df
from .kernel.ztest import one_prop_ztest, two_prop_ztest
from .kernel.effect import (
    cohens_d,
    cohens_d_two_groups,
    interpret_cohens_d,
    cohens_h,
    interpret_cohens_h,
)
from .kernel.power import (
    PowerResult,
    PowerCurvePoint,
    calculate_power,
    sample_size_for_power,
    sample_size_for_proportions,
    generate_power_curve,
    power_analysis,
)

from .report import (
    AssumptionCheck,
    format_p_value,
    significance_stars,
    describe_test_result,
    check_test_assumptions,
)
from .presets import (
    HypothesisTestPreset,
    HYPOTHESIS_TEST_PRESETS,
    get_preset_by_id,
    run_preset,
)

__all__ = [
    '__version__',
    'InvalidArgumentError',

    # Special functions
    'log_gamma',
    'log_beta',
    'regularized_incomplete_beta',
    'betainc',

    # Distributions
    'normal_pdf',
    'normal_cdf',
    'normal_sf',
    'normal_quantile',
    't_pdf',
    't_cdf',
    't_sf',
    't_quantile',
    't_critical_value',
    't_test_pvalue',
    'z_test_pvalue',

    # Tests
    'ConfidenceInterval',
    'TTestResult',
    'ZTestResult',
    'one_sample_ttest',
    'two_sample_ttest',
    'welch_df',
    'one_prop_ztest',
    'two_prop_ztest',
    'run_test',

    # Effect sizes
    'cohens_d',
    'cohens_d_two_groups',
    'interpret_cohens_d',
    'cohens_h',
    'interpret_cohens_h',

    # Power
    'PowerResult',
    'PowerCurvePoint',
    'calculate_power',
    'sample_size_for_power',
    'sample_size_for_proportions',
    'generate_power_curve',
    'power_analysis',

    # Presentation
    'AssumptionCheck',
    'format_p_value',
    'significance_stars',
    'describe_test_result',
    'check_test_assumptions',

    # Presets
    'HypothesisTestPreset',
    'HYPOTHESIS_TEST_PRESETS',
    'get_preset_by_id',
    'run_preset',
]
