"""Tests for statlab.kernel.power module.

Tests for power analysis:
    - calculate_power
    - sample_size_for_power, sample_size_for_proportions
    - generate_power_curve
    - power_analysis
"""

import dataclasses
import types
import typing

import pytest
import numpy as np

from statlab import InvalidArgumentError
from statlab.kernel import power as power_module
from statlab.kernel.power import (
    PowerResult,
    PowerCurvePoint,
    calculate_power,
    sample_size_for_power,
    sample_size_for_proportions,
    generate_power_curve,
    power_analysis,
)


# =============================================================================
# Test Power
# =============================================================================

class TestCalculatePower:
    """Test calculate_power."""

    def test_zero_effect_is_alpha(self):
        for alpha in [0.01, 0.05, 0.1]:
            assert calculate_power(0.0, 50, alpha) == alpha
            assert calculate_power(0.0, 50, alpha, "one-sample") == alpha

    def test_too_small_sample(self):
        assert calculate_power(0.5, 1) == 0.0
        assert calculate_power(0.5, 0, test_type="one-sample") == 0.0

    def test_known_two_sample(self):
        """d = 0.5 with 64 per group gives the textbook 80% power."""
        power = calculate_power(0.5, 64)
        assert 0.79 < power < 0.82

    def test_known_one_sample(self):
        power = calculate_power(0.5, 32, test_type="one-sample")
        assert 0.79 < power < 0.82

    def test_bounded(self):
        for d in [0.01, 0.3, 1.0, 3.0]:
            for n in [2, 5, 20, 100, 1000]:
                power = calculate_power(d, n)
                assert 0.0 <= power <= 1.0

    def test_large_effect_saturates(self):
        assert calculate_power(3.0, 100) > 0.999

    def test_sign_of_effect_irrelevant(self):
        for n in [5, 10, 40]:
            np.testing.assert_allclose(calculate_power(-0.5, n), calculate_power(0.5, n), rtol=1e-9)

    def test_increases_with_effect(self):
        assert calculate_power(0.2, 30) < calculate_power(0.5, 30) < calculate_power(0.8, 30)

    def test_smaller_alpha_less_power(self):
        assert calculate_power(0.5, 30, alpha=0.01) < calculate_power(0.5, 30, alpha=0.05)

    def test_one_sample_more_powerful(self):
        """Same n: one-sample noncentrality is √2 larger."""
        assert calculate_power(0.5, 20, test_type="one-sample") > calculate_power(0.5, 20)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgumentError):
            calculate_power(0.5, 30, alpha=0.0)
        with pytest.raises(InvalidArgumentError):
            calculate_power(0.5, 30, test_type="paired")


# =============================================================================
# Test Sample Size
# =============================================================================

class TestSampleSizeForPower:
    """Test sample_size_for_power."""

    def test_two_sample_medium_effect(self):
        assert sample_size_for_power(0.5, 0.8) == 63

    def test_one_sample_medium_effect(self):
        assert sample_size_for_power(0.5, 0.8, test_type="one-sample") == 32

    def test_is_minimal(self):
        for d, target in [(0.3, 0.8), (0.5, 0.9), (0.8, 0.8), (1.2, 0.95)]:
            n = sample_size_for_power(d, target)
            assert calculate_power(d, n) >= target
            if n > 2:
                assert calculate_power(d, n - 1) < target

    def test_smaller_effect_needs_more(self):
        assert sample_size_for_power(0.2) > sample_size_for_power(0.5) > sample_size_for_power(0.8)

    @pytest.mark.parametrize("test_type", ["one-sample", "two-sample"])
    @pytest.mark.parametrize("d", [2.0, 2.5, 3.0, 4.0])
    def test_large_effects_reach_target(self, d, test_type):
        """Small-n designs need more than the normal-approximation guess."""
        n = sample_size_for_power(d, 0.8, 0.05, test_type)

        assert n >= 2
        assert calculate_power(d, n, 0.05, test_type) >= 0.8
        if n > 2:
            assert calculate_power(d, n - 1, 0.05, test_type) < 0.8

    def test_at_least_two(self):
        assert sample_size_for_power(5.0, 0.5) >= 2

    def test_negative_effect(self):
        assert sample_size_for_power(-0.5, 0.8) == sample_size_for_power(0.5, 0.8)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgumentError):
            sample_size_for_power(0.0)
        for power in [0.0, 1.0, 1.5]:
            with pytest.raises(InvalidArgumentError):
                sample_size_for_power(0.5, power)
        with pytest.raises(InvalidArgumentError):
            sample_size_for_power(0.5, 0.8, alpha=1.0)
        with pytest.raises(InvalidArgumentError):
            sample_size_for_power(0.5, 0.8, test_type="three-sample")


class TestSampleSizeForProportions:
    """Test sample_size_for_proportions."""

    def test_known_value(self):
        assert sample_size_for_proportions(0.6, 0.5) == 388

    def test_symmetric(self):
        assert sample_size_for_proportions(0.3, 0.45) == sample_size_for_proportions(0.45, 0.3)

    def test_larger_gap_needs_fewer(self):
        assert sample_size_for_proportions(0.5, 0.7) < sample_size_for_proportions(0.5, 0.6)

    def test_higher_power_needs_more(self):
        assert sample_size_for_proportions(0.5, 0.6, power=0.9) > sample_size_for_proportions(0.5, 0.6)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgumentError):
            sample_size_for_proportions(0.5, 0.5)
        for p in [0.0, 1.0, -0.1]:
            with pytest.raises(InvalidArgumentError):
                sample_size_for_proportions(p, 0.5)
        with pytest.raises(InvalidArgumentError):
            sample_size_for_proportions(0.4, 0.5, power=1.0)
        with pytest.raises(InvalidArgumentError):
            sample_size_for_proportions(0.4, 0.5, alpha=0.0)


# =============================================================================
# Test Curves and Summary
# =============================================================================

class TestPowerCurve:
    """Test generate_power_curve."""

    def test_is_lazy(self):
        curve = generate_power_curve(0.5)
        assert isinstance(curve, types.GeneratorType)

    def test_range_and_spacing(self):
        points = list(generate_power_curve(0.5, max_n=200))
        ns = [p.n for p in points]

        assert ns[0] == 2
        assert ns[-1] <= 200
        assert ns[:19] == list(range(2, 21))
        steps = np.diff(ns)
        assert np.all(steps >= 1)
        assert np.all(np.diff(steps) >= 0)

    def test_monotone(self):
        for test_type in ["one-sample", "two-sample"]:
            powers = [p.power for p in generate_power_curve(0.5, test_type=test_type, max_n=300)]
            assert np.all(np.diff(powers) >= -1e-12)

    def test_points_match_calculate_power(self):
        for point in generate_power_curve(0.4, alpha=0.01, max_n=50):
            assert isinstance(point, PowerCurvePoint)
            assert point.power == calculate_power(0.4, point.n, 0.01)

    def test_generator_return_type(self):
        hints = typing.get_type_hints(power_module._power_curve)
        assert hints["return"] == typing.Iterator[PowerCurvePoint]

    def test_small_max_n(self):
        assert list(generate_power_curve(0.5, max_n=1)) == []

    def test_invalid_arguments_raise_eagerly(self):
        with pytest.raises(InvalidArgumentError):
            generate_power_curve(0.5, alpha=2.0)
        with pytest.raises(InvalidArgumentError):
            generate_power_curve(0.5, test_type="paired")


class TestPowerAnalysis:
    """Test power_analysis."""

    def test_solve_for_power(self):
        result = power_analysis(0.5, sample_size=64)

        assert isinstance(result, PowerResult)
        assert result.sample_size == 64
        assert result.power == calculate_power(0.5, 64)
        np.testing.assert_allclose(result.beta, 1.0 - result.power)
        assert result.test_type == "two-sample"

    def test_solve_for_sample_size(self):
        result = power_analysis(0.5, power=0.8)

        assert result.sample_size == 63
        assert result.power >= 0.8
        assert result.alpha == 0.05

    def test_exactly_one_target(self):
        with pytest.raises(InvalidArgumentError):
            power_analysis(0.5)
        with pytest.raises(InvalidArgumentError):
            power_analysis(0.5, sample_size=30, power=0.8)

    def test_frozen(self):
        result = power_analysis(0.5, sample_size=30)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.power = 1.0
