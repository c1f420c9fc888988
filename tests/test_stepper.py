import pytest

from algorithms.step import StepBuilder
from engine.stepper import (
    SPEED_PRESETS,
    Stepper,
    StepperState,
    clamp_index,
    interval_for_speed,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def _trace(n):
    sb = StepBuilder([])
    steps = [sb.build(f"step {i}") for i in range(n - 1)]
    steps.append(sb.final("done complete"))
    return steps


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stepper(clock):
    s = Stepper(clock=clock)
    s.start(_trace(4))
    return s


def test_interval_for_speed():
    assert interval_for_speed(1) == pytest.approx(0.991)
    assert interval_for_speed(50) == pytest.approx(0.55)
    assert interval_for_speed(100) == pytest.approx(0.1)
    # out-of-range values clamp to the slider bounds
    assert interval_for_speed(500) == pytest.approx(0.1)
    assert interval_for_speed(0) == pytest.approx(0.991)


def test_clamp_index():
    assert clamp_index(5, 3) == 2
    assert clamp_index(1, 3) == 1
    assert clamp_index(-2, 3) == 0
    assert clamp_index(4, 0) == 0


def test_start_shows_first_step(stepper):
    assert stepper.state == StepperState.PAUSED
    assert stepper.current_idx == 0
    assert stepper.current_step.message == "step 0"
    assert stepper.total_steps == 4
    assert stepper.progress == 0.0


def test_next_and_prev(stepper):
    assert stepper.next_step()
    assert stepper.next_step()
    assert stepper.current_idx == 2
    assert stepper.prev_step()
    assert stepper.current_idx == 1

    stepper.rewind()
    assert not stepper.prev_step()


def test_next_past_end_finishes(stepper):
    stepper.jump_to_end()
    assert stepper.is_finished
    assert stepper.progress == 1.0
    assert not stepper.next_step()

    assert stepper.prev_step()
    assert stepper.state == StepperState.PAUSED


def test_goto_bounds(stepper):
    assert stepper.goto_step(3)
    assert stepper.current_step.is_final
    assert not stepper.goto_step(4)
    assert not stepper.goto_step(-1)
    assert stepper.current_idx == 3


def test_on_step_callback(clock):
    seen = []
    s = Stepper(on_step=lambda step: seen.append(step.step_number), clock=clock)
    s.start(_trace(3))
    s.next_step()
    s.goto_step(0)
    assert seen == [0, 1, 0]


def test_tick_respects_interval(stepper, clock):
    stepper.set_speed_value(50)
    stepper.play()
    assert stepper.is_playing

    clock.advance(0.5)
    assert not stepper.tick()
    clock.advance(0.1)
    assert stepper.tick()
    assert stepper.current_idx == 1


def test_playing_to_last_step_finishes(stepper, clock):
    stepper.set_speed("turbo")
    stepper.play()
    for _ in range(3):
        clock.advance(1.0)
        stepper.tick()

    assert stepper.current_idx == 3
    assert stepper.is_finished
    assert not stepper.tick()


def test_pause_and_toggle(stepper, clock):
    stepper.toggle_play()
    assert stepper.is_playing
    stepper.toggle_play()
    assert stepper.state == StepperState.PAUSED

    clock.advance(5)
    assert not stepper.tick()


def test_play_ignored_when_idle_or_finished(clock):
    s = Stepper(clock=clock)
    s.play()
    assert s.state == StepperState.IDLE

    s.start(_trace(2))
    s.jump_to_end()
    s.play()
    assert s.is_finished


def test_speed_presets(stepper):
    stepper.set_speed("slow")
    assert stepper.speed == SPEED_PRESETS["slow"]
    stepper.set_speed("warp")
    assert stepper.speed == SPEED_PRESETS["medium"]
    stepper.set_speed_value(1000)
    assert stepper.speed == 100


def test_paired_step_holds_last_frame(clock):
    s = Stepper(clock=clock)
    s.start(_trace(5), secondary=_trace(2))

    assert s.paired_step.step_number == 0
    s.goto_step(4)
    assert s.paired_step.step_number == 1
    assert s.paired_step.is_final


def test_reset(stepper):
    stepper.reset()
    assert stepper.state == StepperState.IDLE
    assert stepper.current_step is None
    assert stepper.paired_step is None
    assert stepper.progress == 0.0


def test_to_dict_reports_cursor_and_pair(clock):
    s = Stepper(clock=clock)
    s.start(_trace(3), secondary=_trace(2))
    s.goto_step(2)
    d = s.to_dict()

    assert d["state"] == "paused"
    assert d["index"] == 2
    assert d["totalSteps"] == 3
    assert d["progress"] == 1.0
    assert d["step"]["isFinal"] is True
    assert d["pairedStep"]["stepNumber"] == 1
    assert d["pairedTotal"] == 2


def test_to_dict_without_trace(clock):
    d = Stepper(clock=clock).to_dict()
    assert d["state"] == "idle"
    assert d["step"] is None
    assert "pairedStep" not in d
