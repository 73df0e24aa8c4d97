"""Dispatch a hypothesis test by name from a plain mapping of inputs."""

from typing import Any, Mapping, Union

from statlab._errors import InvalidArgumentError
from ._common import TTestResult, ZTestResult, VALID_TEST_TYPES
from .ttest import one_sample_ttest, two_sample_ttest
from .ztest import one_prop_ztest, two_prop_ztest

__all__ = ['TEST_ENGINES', 'run_test']


TEST_ENGINES = {
    "one-sample-t": one_sample_ttest,
    "two-sample-t": two_sample_ttest,
    "one-prop-z": one_prop_ztest,
    "two-prop-z": two_prop_ztest,
}


def run_test(
    test_type: str,
    data: Mapping[str, Any],
    **overrides: Any,
) -> Union[TTestResult, ZTestResult]:
    """Run the engine for ``test_type`` with ``data`` as keyword arguments.

    Args:
        test_type: One of "one-sample-t", "two-sample-t", "one-prop-z",
                   "two-prop-z"
        data: Engine inputs, e.g. {"successes": 55, "sample_size": 100,
              "hypothesized_proportion": 0.5}
        **overrides: Extra or replacement inputs (e.g. alpha, alternative)

    Raises:
        InvalidArgumentError: unknown test type or unexpected input fields
    """
    engine = TEST_ENGINES.get(test_type)
    if engine is None:
        raise InvalidArgumentError(f"test_type must be one of {VALID_TEST_TYPES}, got {test_type!r}")

    kwargs = {**data, **overrides}
    try:
        return engine(**kwargs)
    except TypeError as e:
        raise InvalidArgumentError(f"Invalid inputs for {test_type}: {e}") from e
