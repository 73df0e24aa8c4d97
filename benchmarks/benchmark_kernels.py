#!/usr/bin/env python
"""Benchmark: Distribution Kernel Performance and Accuracy.

statlab scalar kernels vs scipy equivalents, called one value at a time
the way the test engines call them.

Kernels tested:
1. special: regularized incomplete beta vs scipy.special.betainc
2. normal: CDF and quantile vs scipy.stats.norm
3. tdist: CDF and quantile vs scipy.stats.t
4. power: sample_size_for_power (search over compiled kernels)

Usage:
    python benchmarks/benchmark_kernels.py
    python benchmarks/benchmark_kernels.py --kernel tdist
    python benchmarks/benchmark_kernels.py --quick
"""

import argparse
import time
import warnings
from typing import Callable, List, Tuple, Dict, Any
import numpy as np

warnings.filterwarnings('ignore')

# Check dependencies
try:
    from scipy import special, stats
    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

try:
    from statlab.kernel.math import (
        regularized_incomplete_beta,
        normal_cdf,
        normal_quantile,
        t_cdf,
        t_quantile,
    )
    from statlab.kernel.power import sample_size_for_power
    STATLAB_AVAILABLE = True
except ImportError:
    STATLAB_AVAILABLE = False


# =============================================================================
# Utilities
# =============================================================================

def timeit(func: Callable, n_runs: int = 5, warmup: int = 1) -> Tuple[float, Any]:
    """Time a function and return (avg_time, last_result)."""
    result = None
    for _ in range(warmup):
        result = func()

    start = time.perf_counter()
    for _ in range(n_runs):
        result = func()
    elapsed = time.perf_counter() - start

    return elapsed / n_runs, result


def format_time(seconds: float) -> str:
    """Format time in human-readable units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.1f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.1f}µs"
    elif seconds < 1:
        return f"{seconds * 1e3:.1f}ms"
    return f"{seconds:.2f}s"


def max_rel_error(actual: np.ndarray, expected: np.ndarray) -> float:
    scale = np.maximum(np.abs(expected), 1e-300)
    return float(np.max(np.abs(actual - expected) / scale))


def compare(
    name: str,
    statlab_fn: Callable[[], np.ndarray],
    scipy_fn: Callable[[], np.ndarray],
    n_points: int,
) -> Dict[str, Any]:
    statlab_time, actual = timeit(statlab_fn)
    scipy_time, expected = timeit(scipy_fn)
    return {
        "kernel": name,
        "n_points": n_points,
        "statlab_time": statlab_time,
        "scipy_time": scipy_time,
        "speedup": scipy_time / statlab_time if statlab_time > 0 else float('inf'),
        "max_rel_error": max_rel_error(np.asarray(actual), np.asarray(expected)),
    }


# =============================================================================
# Benchmarks
# =============================================================================

def bench_special(n_points: int, rng: np.random.Generator) -> List[Dict[str, Any]]:
    x = rng.uniform(0.0, 1.0, n_points)
    a = rng.uniform(0.5, 50.0, n_points)
    b = rng.uniform(0.5, 50.0, n_points)

    return [compare(
        "betainc",
        lambda: np.array([regularized_incomplete_beta(x[i], a[i], b[i]) for i in range(n_points)]),
        lambda: np.array([special.betainc(a[i], b[i], x[i]) for i in range(n_points)]),
        n_points,
    )]


def bench_normal(n_points: int, rng: np.random.Generator) -> List[Dict[str, Any]]:
    z = rng.uniform(-6.0, 6.0, n_points)
    p = rng.uniform(1e-6, 1.0 - 1e-6, n_points)

    return [
        compare(
            "normal_cdf",
            lambda: np.array([normal_cdf(v) for v in z]),
            lambda: np.array([stats.norm.cdf(v) for v in z]),
            n_points,
        ),
        compare(
            "normal_quantile",
            lambda: np.array([normal_quantile(v) for v in p]),
            lambda: np.array([stats.norm.ppf(v) for v in p]),
            n_points,
        ),
    ]


def bench_tdist(n_points: int, rng: np.random.Generator) -> List[Dict[str, Any]]:
    t = rng.uniform(-5.0, 5.0, n_points)
    p = rng.uniform(0.01, 0.99, n_points)
    df = rng.uniform(2.0, 200.0, n_points)

    return [
        compare(
            "t_cdf",
            lambda: np.array([t_cdf(t[i], df[i]) for i in range(n_points)]),
            lambda: np.array([stats.t.cdf(t[i], df[i]) for i in range(n_points)]),
            n_points,
        ),
        compare(
            "t_quantile",
            lambda: np.array([t_quantile(p[i], df[i]) for i in range(n_points)]),
            lambda: np.array([stats.t.ppf(p[i], df[i]) for i in range(n_points)]),
            n_points,
        ),
    ]


def bench_power(n_points: int, rng: np.random.Generator) -> List[Dict[str, Any]]:
    effects = rng.uniform(0.2, 1.5, n_points)

    def run():
        return np.array([sample_size_for_power(d) for d in effects])

    elapsed, _ = timeit(run, n_runs=3)
    return [{
        "kernel": "sample_size_for_power",
        "n_points": n_points,
        "statlab_time": elapsed,
        "scipy_time": float('nan'),
        "speedup": float('nan'),
        "max_rel_error": float('nan'),
    }]


BENCHMARKS = {
    "special": bench_special,
    "normal": bench_normal,
    "tdist": bench_tdist,
    "power": bench_power,
}


def run_benchmark(kernel: str, quick: bool = False) -> List[Dict[str, Any]]:
    """Run one kernel group and print a table."""
    print(f"\n{'='*80}")
    print(f"BENCHMARK: {kernel.upper()}")
    print(f"{'='*80}")

    sizes = [100, 1000] if quick else [100, 1000, 10000]
    if kernel == "power":
        sizes = [10, 50] if quick else [10, 50, 200]

    rng = np.random.default_rng(42)
    results = []

    print(f"{'Kernel':<24} {'Points':<8} {'scipy':<12} {'statlab':<12} {'Speedup':<10} {'Max rel err':<12}")
    print("-" * 80)

    for n_points in sizes:
        for result in BENCHMARKS[kernel](n_points, rng):
            results.append(result)
            print(f"{result['kernel']:<24} {n_points:<8} "
                  f"{format_time(result['scipy_time']) if np.isfinite(result['scipy_time']) else '-':<12} "
                  f"{format_time(result['statlab_time']):<12} "
                  f"{result['speedup']:<10.2f}x "
                  f"{result['max_rel_error']:<12.2e}")

    return results


def run_all_benchmarks(quick: bool = False):
    """Run all kernel benchmarks."""
    all_results = []

    for kernel in BENCHMARKS:
        all_results.extend(run_benchmark(kernel, quick))

    # Summary
    print(f"\n{'='*80}")
    print("OVERALL SUMMARY")
    print(f"{'='*80}")

    for name in sorted({r["kernel"] for r in all_results}):
        kernel_results = [r for r in all_results if r["kernel"] == name]
        speedups = [r["speedup"] for r in kernel_results if np.isfinite(r["speedup"])]
        errors = [r["max_rel_error"] for r in kernel_results if np.isfinite(r["max_rel_error"])]
        print(f"\n{name}:")
        if speedups:
            print(f"  Median speedup:  {np.median(speedups):.1f}x")
        if errors:
            print(f"  Max rel error:   {max(errors):.2e}")


def main():
    parser = argparse.ArgumentParser(description="Distribution Kernel Benchmarks")
    parser.add_argument("--kernel", choices=[*BENCHMARKS, "all"], default="all",
                        help="Which kernel group to benchmark")
    parser.add_argument("--quick", action="store_true", help="Quick mode with fewer points")
    args = parser.parse_args()

    print("="*80)
    print("DISTRIBUTION KERNEL BENCHMARK")
    print("="*80)
    print(f"scipy available: {SCIPY_AVAILABLE}")
    print(f"statlab available: {STATLAB_AVAILABLE}")

    if not SCIPY_AVAILABLE:
        print("ERROR: scipy is required")
        return

    if not STATLAB_AVAILABLE:
        print("ERROR: statlab is required")
        return

    if args.kernel == "all":
        run_all_benchmarks(args.quick)
    else:
        run_benchmark(args.kernel, args.quick)


if __name__ == "__main__":
    main()
