"""Ready-made hypothesis-test scenarios.

Each preset bundles a test type with summary statistics that can be fed
straight to :func:`statlab.kernel.run_test`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from statlab._errors import InvalidArgumentError
from statlab.kernel import TTestResult, ZTestResult, run_test

__all__ = [
    'HypothesisTestPreset',
    'HYPOTHESIS_TEST_PRESETS',
    'get_preset_by_id',
    'run_preset',
]


@dataclass(frozen=True)
class HypothesisTestPreset:
    id: str
    name: str
    description: str
    test_type: str
    scenario: str
    data: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))


HYPOTHESIS_TEST_PRESETS = (
    HypothesisTestPreset(
        id="ab-test",
        name="A/B Test",
        description="Compare conversion rates between control and treatment",
        test_type="two-prop-z",
        scenario="Website A/B test: Is the new design better?",
        data={"successes1": 45, "n1": 1000, "successes2": 52, "n2": 1000},
    ),
    HypothesisTestPreset(
        id="quality-control",
        name="Quality Control",
        description="Test if defect rate exceeds acceptable threshold",
        test_type="one-prop-z",
        scenario="Manufacturing QC: Is defect rate above 2%?",
        data={"successes": 28, "sample_size": 1000, "hypothesized_proportion": 0.02},
    ),
    HypothesisTestPreset(
        id="drug-trial",
        name="Drug Trial",
        description="Compare treatment effect between drug and placebo",
        test_type="two-sample-t",
        scenario="Clinical trial: Does the drug reduce symptoms?",
        data={"mean1": 4.2, "std1": 1.5, "n1": 50, "mean2": 5.8, "std2": 1.7, "n2": 50},
    ),
    HypothesisTestPreset(
        id="benchmark",
        name="Performance Benchmark",
        description="Test if new algorithm is faster than baseline",
        test_type="one-sample-t",
        scenario="Algorithm optimization: Is response time under 100ms?",
        data={"sample_mean": 95, "sample_std": 15, "sample_size": 30, "hypothesized_mean": 100},
    ),
    HypothesisTestPreset(
        id="survey",
        name="Survey Analysis",
        description="Compare satisfaction scores between groups",
        test_type="two-sample-t",
        scenario="Customer satisfaction: Premium vs Free users",
        data={"mean1": 4.3, "std1": 0.8, "n1": 100, "mean2": 3.9, "std2": 1.0, "n2": 150},
    ),
)

_PRESETS_BY_ID = {preset.id: preset for preset in HYPOTHESIS_TEST_PRESETS}


def get_preset_by_id(preset_id: str) -> Optional[HypothesisTestPreset]:
    return _PRESETS_BY_ID.get(preset_id)


def run_preset(preset_id: str, **overrides: Any) -> Union[TTestResult, ZTestResult]:
    """Run a preset scenario, optionally overriding alpha/alternative/inputs.

    Raises:
        InvalidArgumentError: unknown preset id
    """
    preset = _PRESETS_BY_ID.get(preset_id)
    if preset is None:
        raise InvalidArgumentError(
            f"Unknown preset {preset_id!r}, expected one of {tuple(_PRESETS_BY_ID)}"
        )
    return run_test(preset.test_type, preset.data, **overrides)
