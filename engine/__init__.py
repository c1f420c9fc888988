"""
engine/
-------
Playback, recording & comparison layer.

    from engine import Stepper, Recorder, compare
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS, clamp_index, interval_for_speed
from engine.recorder import (
    Recorder, RunMetrics, ComparisonResult, compare, lookup,
    KIND_ALGORITHM, KIND_DATA_STRUCTURE, KINDS,
)
from engine.analysis import (
    base_complexity, complexity_rank,
    time_efficiency_comparison, space_efficiency_comparison, use_case_recommendation,
)

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "clamp_index",
    "interval_for_speed",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "lookup",
    "KIND_ALGORITHM",
    "KIND_DATA_STRUCTURE",
    "KINDS",
    "base_complexity",
    "complexity_rank",
    "time_efficiency_comparison",
    "space_efficiency_comparison",
    "use_case_recommendation",
]
