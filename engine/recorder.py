"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete generator run (all Steps), then computes the
analytics metrics shown next to a trace and in Comparison Mode.

Usage:
    rec = Recorder()
    rec.start("bubbleSort", [5, 3, 8, 4, 2])
    rec.run_to_completion()          # runs the generator to the end
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    Hold two Recorders (one per key), run both to completion on the SAME
    input, then call compare(rec1, rec2) → ComparisonResult.  The two
    runs are independent; either may run first.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo, get_algorithm, get_data_structure
from algorithms.payloads import Number
from algorithms.step import Step
from config.logging import get_logger
from engine.analysis import space_efficiency_comparison, time_efficiency_comparison, use_case_recommendation
from engine.stepper import Stepper

logger = get_logger(__name__)

KIND_ALGORITHM      = "algorithm"
KIND_DATA_STRUCTURE = "dataStructure"
KINDS = (KIND_ALGORITHM, KIND_DATA_STRUCTURE)


def lookup(key: str, kind: str = KIND_ALGORITHM) -> Optional[AlgoInfo]:
    """Find a descriptor in the catalog `kind` names; None if either is unknown."""
    if kind == KIND_ALGORITHM:
        return get_algorithm(key)
    if kind == KIND_DATA_STRUCTURE:
        return get_data_structure(key)
    return None


# ---------------------------------------------------------------------------
# Metrics dataclass — the analytics card
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    key:              str   = ""
    name:             str   = ""
    kind:             str   = KIND_ALGORITHM
    input_size:       int   = 0
    total_steps:      int   = 0          # number of Steps yielded
    comparison_steps: int   = 0          # steps with a non-empty `comparisons`
    swap_steps:       int   = 0          # steps with a non-empty `swaps`
    wall_time_ms:     float = 0.0        # wall-clock time to run to completion
    final_message:    str   = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":             self.key,
            "name":            self.name,
            "kind":            self.kind,
            "inputSize":       self.input_size,
            "totalSteps":      self.total_steps,
            "comparisonSteps": self.comparison_steps,
            "swapSteps":       self.swap_steps,
            "wallTimeMs":      self.wall_time_ms,
            "finalMessage":    self.final_message,
        }


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    fewer_steps:   str = ""   # name of the run with the shorter trace, or "tie"
    time_verdict:  str = ""
    space_verdict: str = ""
    use_case:      str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "left":         self.left.to_dict(),
            "right":        self.right.to_dict(),
            "fewerSteps":   self.fewer_steps,
            "timeVerdict":  self.time_verdict,
            "spaceVerdict": self.space_verdict,
            "useCase":      self.use_case,
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : A Stepper loaded with the trace, for step-by-step access.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._info:   Optional[AlgoInfo]      = None
        self._kind:   str                     = KIND_ALGORITHM
        self._values: List[Number]            = []
        self._rng:    Optional[random.Random] = None

    @property
    def info(self) -> Optional[AlgoInfo]:
        return self._info

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        key: str,
        values: List[Number],
        kind: str = KIND_ALGORITHM,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Select the generator and input for this run."""
        info = lookup(key, kind)
        if info is None:
            raise ValueError(f"Unknown {kind}: {key}")

        self._info    = info
        self._kind    = kind
        self._values  = list(values)
        self._rng     = rng
        self.steps    = []
        self.metrics  = None
        self.stepper  = None

    def run_to_completion(self) -> RunMetrics:
        """Run the generator to the end, keep every step, compute metrics."""
        if self._info is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.steps = self._info.generate(self._values, self._rng)
        wall_ms = (time.monotonic() - started) * 1000

        self.stepper = Stepper()
        self.stepper.start(self.steps)

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(f"{self._kind} {self._info.key}: {self.metrics.total_steps} steps "
                    f"for {len(self._values)} values in {self.metrics.wall_time_ms} ms")
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "key":        self._info.key if self._info else "",
            "kind":       self._kind,
            "input":      list(self._values),
            "metrics":    self.metrics.to_dict() if self.metrics else {},
            "totalSteps": len(self.steps),
            "steps":      [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._info
        last = self.steps[-1] if self.steps else None

        return RunMetrics(
            key=info.key if info else "",
            name=info.name if info else "",
            kind=self._kind,
            input_size=len(self._values),
            total_steps=len(self.steps),
            comparison_steps=sum(1 for s in self.steps if s.comparisons),
            swap_steps=sum(1 for s in self.steps if s.swaps),
            wall_time_ms=round(wall_ms, 2),
            final_message=last.message if last else "",
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    if left.info is None or right.info is None:
        raise RuntimeError("Both recorders must be started before comparing.")

    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    if l.total_steps == r.total_steps:
        fewer = "tie"
    else:
        fewer = l.name if l.total_steps < r.total_steps else r.name

    return ComparisonResult(
        left=l,
        right=r,
        fewer_steps=fewer,
        time_verdict=time_efficiency_comparison(left.info, right.info),
        space_verdict=space_efficiency_comparison(left.info, right.info),
        use_case=use_case_recommendation(left.info, right.info),
    )
