"""JIT Decorators for Scalar Kernels.

Thin wrappers around Numba's @njit with the defaults every statlab
kernel is compiled with.

Usage:
    from statlab.optim import fast_jit

    @fast_jit
    def half(x):
        return 0.5 * x

Options:
    @optimized_jit(cache=False, error_model='python')
    def my_func(...):
        ...

Note:
    Kernels compiled here are plain Numba dispatchers, so one compiled
    kernel can call another from nopython mode.
"""

from typing import Callable, Optional, Dict, Union
from numba import njit
from numba.core.dispatcher import Dispatcher

from statlab._config import JIT_CACHE


__all__ = [
    'optimized_jit',
    'fast_jit',
]


def optimized_jit(
    func: Optional[Callable] = None,
    *,
    nogil: bool = True,
    cache: bool = JIT_CACHE,
    fastmath: bool = False,
    error_model: str = 'numpy',
    locals: Optional[Dict] = None,
    boundscheck: bool = False,
    **numba_options
) -> Union[Callable, Dispatcher]:
    """JIT decorator used for all statlab kernels.

    Args:
        func: Function to compile (when used without parentheses)
        nogil: Release GIL during execution (default: True)
        cache: Cache compiled function to disk (default: STATLAB_JIT_CACHE)
        fastmath: Enable fast math optimizations (default: False, kernels
                  rely on inf propagation)
        error_model: 'numpy' makes float division by zero produce inf/nan
                     instead of raising ZeroDivisionError (default: 'numpy')
        locals: Dictionary of local variable types
        boundscheck: Enable array bounds checking (default: False)
        **numba_options: Additional Numba options

    Returns:
        Numba Dispatcher wrapping the compiled function
    """
    numba_opts = {
        'nogil': nogil,
        'cache': cache,
        'fastmath': fastmath,
        'error_model': error_model,
        'boundscheck': boundscheck,
        **numba_options
    }
    if locals is not None:
        numba_opts['locals'] = locals

    def decorator(fn: Callable) -> Dispatcher:
        return njit(**numba_opts)(fn)

    # Handle both @optimized_jit and @optimized_jit()
    if func is not None:
        return decorator(func)
    return decorator


def fast_jit(func: Optional[Callable] = None, **kwargs) -> Union[Callable, Dispatcher]:
    """Shorthand for @optimized_jit(inline='always').

    Scalar kernels are small; inlining them into their callers removes the
    call overhead inside Newton and continued-fraction loops.
    """
    kwargs.setdefault('inline', 'always')
    return optimized_jit(func, **kwargs)
