"""Package defaults and environment configuration.

Environment:
    STATLAB_JIT_CACHE: "0"/"false"/"no" disables Numba's on-disk cache
                       for compiled kernels (default: enabled).
"""

import os

__all__ = [
    'DEFAULT_ALPHA',
    'DEFAULT_POWER',
    'DEFAULT_MAX_N',
    'LARGE_DF',
    'POWER_NORMAL_DF',
    'JIT_CACHE',
]


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off', '')


# Hypothesis testing / power analysis defaults
DEFAULT_ALPHA = 0.05
DEFAULT_POWER = 0.8
DEFAULT_MAX_N = 200

# Above this df the t-distribution is replaced by the standard normal
LARGE_DF = 1000.0

# Above this df power uses the normal approximation
POWER_NORMAL_DF = 30.0

JIT_CACHE = _env_flag('STATLAB_JIT_CACHE', True)
