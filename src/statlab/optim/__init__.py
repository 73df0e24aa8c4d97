"""statlab Optimization Toolkit.

JIT decorators used to compile the scalar numerical kernels, and the
package-wide logging switches.

Quick Start:
    from statlab.optim import fast_jit

    @fast_jit
    def square(x):
        return x * x

Available Components:

    JIT Decorators:
        - optimized_jit: @njit with statlab defaults (nogil, cache,
          numpy error model)
        - fast_jit: optimized_jit with inline='always'

    Logging:
        - disable_logging(): silence the ``statlab`` logger
        - enable_logging(level): re-enable it at a given level
"""

from ._jit import (
    optimized_jit,
    fast_jit,
)

from ._logging import (
    disable_logging,
    enable_logging,
)

__all__ = [
    'optimized_jit',
    'fast_jit',
    'disable_logging',
    'enable_logging',
]
