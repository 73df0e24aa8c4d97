"""Standardized Effect Sizes.

Functions:
    - cohens_d: (mean - reference) / sd
    - cohens_d_two_groups: mean difference over the pooled standard deviation
    - cohens_h: 2·asin(√p1) - 2·asin(√p2) for proportions
    - interpret_cohens_d, interpret_cohens_h: Cohen's conventional labels

Thresholds on the absolute value:
    |d| < 0.2 negligible, < 0.5 small, < 0.8 medium, otherwise large
"""

import math

from statlab._errors import InvalidArgumentError

__all__ = [
    'cohens_d',
    'cohens_d_two_groups',
    'pooled_std',
    'interpret_cohens_d',
    'cohens_h',
    'interpret_cohens_h',
]


_THRESHOLDS = (
    (0.2, 'negligible'),
    (0.5, 'small'),
    (0.8, 'medium'),
)


def _interpret(value: float) -> str:
    magnitude = abs(value)
    for bound, label in _THRESHOLDS:
        if magnitude < bound:
            return label
    return 'large'


def cohens_d(mean: float, reference: float, std: float) -> float:
    """Cohen's d of a mean against a reference value (0 when std <= 0)."""
    if std <= 0:
        return 0.0
    return (mean - reference) / std


def pooled_std(std1: float, n1: float, std2: float, n2: float) -> float:
    """Pooled standard deviation sqrt(((n1-1)s1² + (n2-1)s2²) / (n1+n2-2))."""
    pooled_var = ((n1 - 1) * std1 * std1 + (n2 - 1) * std2 * std2) / (n1 + n2 - 2)
    return math.sqrt(pooled_var)


def cohens_d_two_groups(
    mean1: float,
    std1: float,
    n1: float,
    mean2: float,
    std2: float,
    n2: float,
) -> float:
    """Cohen's d for two groups using the pooled standard deviation.

    Returns 0 when the pooled standard deviation is not positive.
    """
    sd = pooled_std(std1, n1, std2, n2)
    if sd <= 0:
        return 0.0
    return (mean1 - mean2) / sd


def interpret_cohens_d(d: float) -> str:
    return _interpret(d)


def cohens_h(p1: float, p2: float) -> float:
    """Cohen's h between two proportions (signed).

    Raises:
        InvalidArgumentError: a proportion outside [0, 1]
    """
    if not (0.0 <= p1 <= 1.0 and 0.0 <= p2 <= 1.0):
        raise InvalidArgumentError(f"Proportions must be between 0 and 1, got {p1}, {p2}")

    return 2.0 * math.asin(math.sqrt(p1)) - 2.0 * math.asin(math.sqrt(p2))


def interpret_cohens_h(h: float) -> str:
    return _interpret(h)
