"""Tests for statlab.kernel.math._tdist module.

Tests for Student's t-distribution functions:
    - t_pdf: density
    - t_cdf, t_sf: CDF and survival function
    - t_quantile, t_critical_value: inverse CDF
    - t_test_pvalue, z_test_pvalue: directional p-values
"""

import math

import pytest
import numpy as np

# Check dependencies
try:
    import scipy.stats
    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from statlab import InvalidArgumentError
from statlab.kernel.math import (
    t_pdf, t_cdf, t_sf, t_quantile, t_critical_value,
    t_test_pvalue, z_test_pvalue, normal_cdf, normal_pdf,
    TWO_SIDED, LESS, GREATER,
)


# =============================================================================
# Test PDF
# =============================================================================

class TestTPdf:
    """Test Student's t density."""

    def test_peak_values(self):
        np.testing.assert_allclose(t_pdf(0.0, 1.0), 1.0 / math.pi, rtol=1e-10)
        np.testing.assert_allclose(t_pdf(0.0, 10.0), 0.38910838396603115, rtol=1e-8)

    def test_symmetry(self, df_values):
        for df in df_values:
            for t in [0.5, 1.0, 2.5]:
                np.testing.assert_allclose(t_pdf(t, df), t_pdf(-t, df), rtol=1e-10)

    def test_cauchy(self):
        """df = 1 is the Cauchy distribution."""
        for t in [-3.0, -0.5, 0.0, 1.0, 7.0]:
            np.testing.assert_allclose(t_pdf(t, 1.0), 1.0 / (math.pi * (1.0 + t * t)), rtol=1e-10)

    def test_decreasing_in_abs_t(self):
        assert t_pdf(0.0, 10.0) > t_pdf(1.0, 10.0) > t_pdf(2.0, 10.0)

    def test_approaches_normal(self):
        np.testing.assert_allclose(t_pdf(0.0, 1000.0), normal_pdf(0.0), atol=1e-3)

    @pytest.mark.skipif(not SCIPY_AVAILABLE, reason="scipy not available")
    def test_matches_scipy(self, df_values):
        for df in df_values:
            for t in [-4.0, -1.0, 0.0, 0.7, 3.0]:
                np.testing.assert_allclose(t_pdf(t, df), scipy.stats.t.pdf(t, df), rtol=1e-8,
                    err_msg=f"t_pdf({t}, {df}) failed")

    def test_invalid_df(self):
        with pytest.raises(InvalidArgumentError):
            t_pdf(0.0, 0.0)
        with pytest.raises(InvalidArgumentError):
            t_pdf(0.0, -1.0)


# =============================================================================
# Test CDF / SF
# =============================================================================

class TestTCdf:
    """Test Student's t CDF."""

    def test_at_zero_exact(self):
        """t_cdf(0, df) is exactly 0.5 for every df."""
        for df in [0.5, 1.0, 2.5, 10.0, 100.0, 999.0, 1000.0, 5000.0]:
            assert t_cdf(0.0, df) == 0.5

    def test_increasing(self):
        for df in [1.0, 3.0, 10.0]:
            values = [t_cdf(t, df) for t in np.linspace(-6.0, 6.0, 49)]
            for i in range(len(values) - 1):
                assert values[i] < values[i + 1]

    def test_known_percentiles(self):
        np.testing.assert_allclose(t_cdf(2.228138851986274, 10.0), 0.975, rtol=1e-8)
        np.testing.assert_allclose(t_cdf(2.0422724563012373, 30.0), 0.975, rtol=1e-8)

    def test_cauchy(self):
        for t in [-5.0, -1.0, 0.3, 2.0]:
            np.testing.assert_allclose(t_cdf(t, 1.0), 0.5 + math.atan(t) / math.pi, rtol=1e-8)

    def test_large_df_normal_limit(self):
        np.testing.assert_allclose(t_cdf(1.96, 1000.0), normal_cdf(1.96), atol=1e-2)
        assert t_cdf(1.96, 1001.0) == normal_cdf(1.96)

    def test_extreme_t(self):
        assert t_cdf(10.0, 10.0) > 0.9999
        assert t_cdf(-10.0, 10.0) < 0.0001
        assert t_cdf(math.inf, 5.0) == 1.0
        assert t_cdf(-math.inf, 5.0) == 0.0

    def test_sf_complement(self, df_values):
        for df in df_values:
            for t in [-2.0, 0.0, 0.4, 2.0]:
                np.testing.assert_allclose(t_cdf(t, df) + t_sf(t, df), 1.0, rtol=1e-12)

    def test_sf_tail_precision(self):
        """Upper tail is computed directly, not as 1 - cdf."""
        sf = t_sf(40.0, 30.0)
        assert 0.0 < sf < 1e-20

    @pytest.mark.skipif(not SCIPY_AVAILABLE, reason="scipy not available")
    def test_matches_scipy(self, df_values):
        for df in df_values:
            for t in [-3.5, -1.0, 0.25, 1.5, 4.0]:
                np.testing.assert_allclose(t_cdf(t, df), scipy.stats.t.cdf(t, df), rtol=1e-7,
                    err_msg=f"t_cdf({t}, {df}) failed")

    def test_invalid_df(self):
        with pytest.raises(InvalidArgumentError):
            t_cdf(1.0, 0.0)
        with pytest.raises(InvalidArgumentError):
            t_sf(1.0, -3.0)


# =============================================================================
# Test Quantile
# =============================================================================

class TestTQuantile:
    """Test inverse t CDF."""

    def test_median(self):
        for df in [1.0, 4.0, 50.0]:
            assert t_quantile(0.5, df) == 0.0

    def test_known_values(self):
        np.testing.assert_allclose(t_quantile(0.975, 10.0), 2.228138851986274, atol=1e-6)
        np.testing.assert_allclose(t_quantile(0.975, 30.0), 2.0422724563012373, atol=1e-6)
        np.testing.assert_allclose(t_quantile(0.95, 5.0), 2.015048372669157, atol=1e-6)
        np.testing.assert_allclose(t_quantile(0.025, 24.0), -2.0638985616280205, atol=1e-6)

    def test_inverts_cdf(self):
        """cdf(quantile(p)) ≈ p for p in (0.01, 0.99), df >= 2."""
        for df in [2.0, 3.5, 10.0, 60.0, 500.0]:
            for p in [0.011, 0.05, 0.3, 0.5, 0.8, 0.95, 0.989]:
                np.testing.assert_allclose(t_cdf(t_quantile(p, df), df), p, atol=1e-4)

    def test_round_trip_from_t(self):
        """quantile(cdf(t)) ≈ t for |t| < 5, df >= 2."""
        for df in [2.0, 5.0, 10.0, 30.0]:
            for t in [-4.0, -2.0, -1.0, 0.0, 0.5, 1.5, 3.0, 4.5]:
                np.testing.assert_allclose(t_quantile(t_cdf(t, df), df), t, atol=1e-3)

    def test_large_df_uses_normal(self):
        np.testing.assert_allclose(t_quantile(0.975, 2000.0), 1.959963984540054, atol=1e-9)

    @pytest.mark.skipif(not SCIPY_AVAILABLE, reason="scipy not available")
    def test_matches_scipy_fractional_df(self):
        for df in [2.3, 7.9, 45.6]:
            for p in [0.025, 0.1, 0.9, 0.995]:
                np.testing.assert_allclose(t_quantile(p, df), scipy.stats.t.ppf(p, df), rtol=1e-6)

    def test_invalid(self):
        for p in [0.0, 1.0, -0.2, 1.5]:
            with pytest.raises(InvalidArgumentError):
                t_quantile(p, 10.0)
        with pytest.raises(InvalidArgumentError):
            t_quantile(0.5, 0.0)


class TestTCriticalValue:

    def test_two_tailed(self):
        assert t_critical_value(10.0) == t_quantile(0.975, 10.0)
        np.testing.assert_allclose(t_critical_value(24, 0.05), 2.0638985616280205, atol=1e-6)

    def test_one_tailed(self):
        np.testing.assert_allclose(t_critical_value(10, 0.05, two_tailed=False),
                                   1.8124611228107335, atol=1e-6)

    def test_smaller_alpha_larger_value(self):
        assert t_critical_value(15, 0.01) > t_critical_value(15, 0.05) > t_critical_value(15, 0.1)

    def test_invalid(self):
        for alpha in [0.0, 1.0, -0.05]:
            with pytest.raises(InvalidArgumentError):
                t_critical_value(10, alpha)
        with pytest.raises(InvalidArgumentError):
            t_critical_value(0, 0.05)


# =============================================================================
# Test P-values
# =============================================================================

class TestPvalues:
    """Test directional p-value policy."""

    def test_two_sided_at_zero(self):
        for df in [5.0, 10.0, 30.0]:
            assert t_test_pvalue(0.0, df, TWO_SIDED) == 1.0
        assert z_test_pvalue(0.0, TWO_SIDED) == 1.0

    def test_two_sided_symmetric(self):
        assert t_test_pvalue(2.1, 12.0) == t_test_pvalue(-2.1, 12.0)

    def test_one_sided_less(self):
        assert t_test_pvalue(-3.0, 10.0, LESS) < 0.01
        assert t_test_pvalue(3.0, 10.0, LESS) > 0.9

    def test_one_sided_greater(self):
        assert t_test_pvalue(3.0, 10.0, GREATER) < 0.01
        assert t_test_pvalue(-3.0, 10.0, GREATER) > 0.9

    def test_two_sided_is_double_upper_tail(self):
        np.testing.assert_allclose(t_test_pvalue(1.7, 8.0, TWO_SIDED),
                                   2.0 * t_test_pvalue(1.7, 8.0, GREATER), rtol=1e-12)
        np.testing.assert_allclose(z_test_pvalue(1.0, TWO_SIDED), 0.31731050786291404, rtol=1e-10)

    def test_infinite_statistic(self):
        assert t_test_pvalue(math.inf, 10.0, TWO_SIDED) == 0.0
        assert t_test_pvalue(math.inf, 10.0, LESS) == 1.0

    @pytest.mark.skipif(not SCIPY_AVAILABLE, reason="scipy not available")
    def test_matches_scipy(self):
        for t_stat, df in [(0.0, 10.0), (1.0, 10.0), (2.0, 30.0), (-1.5, 50.0)]:
            expected = 2 * scipy.stats.t.sf(abs(t_stat), df)
            np.testing.assert_allclose(t_test_pvalue(t_stat, df), expected, rtol=1e-7)

    def test_invalid_alternative(self):
        with pytest.raises(InvalidArgumentError):
            t_test_pvalue(1.0, 10.0, 2)
        with pytest.raises(InvalidArgumentError):
            z_test_pvalue(1.0, -2)
