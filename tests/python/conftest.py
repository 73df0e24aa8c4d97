"""Pytest configuration for statlab tests."""

import sys
import os

# Add src to path so the statlab package can be imported without install
_src = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
if _src not in sys.path:
    sys.path.insert(0, _src)

import pytest

from statlab.optim import disable_logging

disable_logging()

# =============================================================================
# Check available components
# =============================================================================

SCIPY_AVAILABLE = False

try:
    import scipy.stats  # noqa: F401
    import scipy.special  # noqa: F401
    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "scipy: tests comparing against scipy reference values")
    config.addinivalue_line("markers", "slow: slow tests")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def df_values():
    """Degrees of freedom covering tiny, fractional, moderate and large."""
    return [1.0, 2.0, 2.5, 5.0, 10.0, 29.7, 100.0, 1000.0]


@pytest.fixture
def welch_groups():
    """Summary statistics of two groups with unequal variances."""
    return {"mean1": 85.0, "std1": 10.0, "n1": 30, "mean2": 80.0, "std2": 12.0, "n2": 35}
