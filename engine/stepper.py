"""
stepper.py — Trace Playback Cursor
===================================
Traces are generated eagerly, so playback is nothing more than a cursor
over a finished list of Steps.  A front end (or the API) drives the
cursor; the Stepper never calls back into a generator.

    IDLE ──start()──▶ PAUSED ◀──pause()── PLAYING
                        │                   ▲
                        └──────play()───────┘
    PLAYING reaching the last step   ▶ FINISHED
    reset() from anywhere            ▶ IDLE

Auto-advance is pull-based: the host calls tick() on its own timer and
the Stepper decides, from an injectable clock, whether the configured
interval has elapsed.

In comparison mode a second trace rides along.  It is indexed with the
primary cursor clamped to its own length, so the shorter run keeps
showing its final frame while the longer one continues.

Not thread-safe; drive it from one thread or one event loop.
"""

import time
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from algorithms.step import Step


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed: a 1..100 slider, with a few named positions
# ---------------------------------------------------------------------------
MIN_SPEED = 1
MAX_SPEED = 100

SPEED_PRESETS: Dict[str, int] = {
    "slow":   10,
    "medium": 50,
    "fast":   80,
    "turbo":  MAX_SPEED,
}


def _clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def interval_for_speed(speed: int) -> float:
    """Seconds between auto-advance ticks: (1000 - 9 * speed) ms."""
    return (1000 - 9 * _clamp_speed(speed)) / 1000.0


def clamp_index(idx: int, length: int) -> int:
    """Largest valid index not past `idx`; 0 for an empty sequence."""
    if length <= 0:
        return 0
    return max(0, min(idx, length - 1))


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        steps       : Primary trace.
        secondary   : Comparison trace, empty outside comparison mode.
        current_idx : Cursor into `steps`; -1 before anything is loaded.
        state       : StepperState.
        speed       : Slider position, MIN_SPEED..MAX_SPEED.
        on_step     : Called with the new Step whenever the cursor moves.
        clock       : Zero-arg monotonic time source (seconds).
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.steps:       List[Step]   = []
        self.secondary:   List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       int          = SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Step], None]] = on_step
        self.clock:       Callable[[], float] = clock

        self._last_advance: float = 0.0

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def start(self, steps: Sequence[Step], secondary: Optional[Sequence[Step]] = None) -> None:
        """Load a finished trace (and optionally a comparison trace), paused on step 0."""
        self.steps     = list(steps)
        self.secondary = list(secondary or [])
        self._unload_cursor(StepperState.PAUSED)
        if self.steps:
            self._move_to(0)

    def reset(self) -> None:
        self.steps     = []
        self.secondary = []
        self._unload_cursor(StepperState.IDLE)

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Move forward one step; False (and FINISHED) when already on the last one."""
        last = len(self.steps) - 1
        if self.current_idx >= last:
            if self.steps:
                self.state = StepperState.FINISHED
            return False

        self._move_to(self.current_idx + 1)
        if self.current_idx == last and self.is_playing:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Move back one step; False when already on the first."""
        if self.current_idx <= 0:
            return False
        self._move_to(self.current_idx - 1)
        if self.is_finished:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        if not 0 <= idx < len(self.steps):
            return False
        self._move_to(idx)
        return True

    def rewind(self) -> None:
        if self.steps:
            self._move_to(0)
            self.state = StepperState.PAUSED

    def jump_to_end(self) -> None:
        if self.steps:
            self._move_to(len(self.steps) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Auto-advance
    # ------------------------------------------------------------------
    def play(self) -> None:
        # nothing loaded, or nothing left to play
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state         = StepperState.PLAYING
        self._last_advance = self.clock()

    def pause(self) -> None:
        if self.is_playing:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def tick(self) -> bool:
        """
        Host timer hook.  Advances one step when playing and at least
        `interval` seconds have passed since the last advance; returns
        whether it moved.
        """
        if not self.is_playing:
            return False
        now = self.clock()
        if now - self._last_advance < self.interval:
            return False
        self._last_advance = now
        return self.next_step()

    def set_speed(self, preset: str) -> None:
        """Named slider position; unknown names fall back to medium."""
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, percent: int) -> None:
        self.speed = _clamp_speed(percent)

    @property
    def interval(self) -> float:
        return interval_for_speed(self.speed)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def paired_step(self) -> Optional[Step]:
        """Comparison-trace step shown beside the current one."""
        if not self.secondary or self.current_idx < 0:
            return None
        return self.secondary[clamp_index(self.current_idx, len(self.secondary))]

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def progress(self) -> float:
        """Fraction of the trace already shown: 0.0 on the first step, 1.0 on the last."""
        if not self.steps:
            return 0.0
        if len(self.steps) == 1:
            return 1.0
        return self.current_idx / (len(self.steps) - 1)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    def to_dict(self) -> Dict[str, Any]:
        """Cursor position plus the step(s) on screen, in wire shape."""
        current = self.current_step
        paired  = self.paired_step
        d: Dict[str, Any] = {
            "state":      self.state.value,
            "index":      self.current_idx,
            "totalSteps": self.total_steps,
            "progress":   self.progress,
            "speed":      self.speed,
            "step":       current.to_dict() if current is not None else None,
        }
        if self.secondary:
            d["pairedStep"]  = paired.to_dict() if paired is not None else None
            d["pairedTotal"] = len(self.secondary)
        return d

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _unload_cursor(self, state: StepperState) -> None:
        self.current_idx = -1
        self.state       = state

    def _move_to(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
