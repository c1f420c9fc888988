import random

from algorithms.binary_search import binary_search
from algorithms.linear_search import linear_search
from algorithms.random_source import TARGET_RANGE, make_rng, pick_search_target

from conftest import assert_well_formed


class _FixedTarget(random.Random):
    """Random whose first draw always lands in the sample-from-values branch."""

    def __init__(self, index):
        super().__init__(0)
        self._index = index

    def random(self):
        return 0.99

    def randrange(self, *args, **kwargs):
        return self._index


class _RangeTarget(random.Random):
    """Random that always draws `value` from the fixed target range."""

    def __init__(self, value):
        super().__init__(0)
        self._value = value

    def random(self):
        return 0.0

    def randint(self, a, b):
        return self._value


def test_make_rng_passes_through():
    rng = random.Random(1)
    assert make_rng(rng) is rng
    assert isinstance(make_rng(None), random.Random)


def test_pick_target_from_empty_uses_range(rng):
    for _ in range(20):
        target = pick_search_target([], rng)
        assert TARGET_RANGE[0] <= target <= TARGET_RANGE[1]


def test_linear_search_finds_sampled_target(sample_input):
    steps = list(linear_search(sample_input, _FixedTarget(2)))

    assert_well_formed(steps)
    assert steps[0].message == "Starting Linear Search for target: 8"
    assert steps[-2].message == "Found 8 at index 2!"
    assert [s.comparisons for s in steps[1:-2]] == [[0], [1], [2]]


def test_linear_search_reports_missing_target(sample_input):
    steps = list(linear_search(sample_input, _RangeTarget(15)))

    assert_well_formed(steps)
    assert steps[-2].message == "15 not found in the array"
    assert sum(1 for s in steps if s.comparisons) == len(sample_input)


def test_linear_search_empty_input(rng):
    steps = list(linear_search([], rng))

    assert len(steps) == 2
    assert steps[-1].is_final
    assert "empty" in steps[-1].message


def test_binary_search_works_on_sorted_copy(sample_input, rng):
    steps = list(binary_search(sample_input, rng))

    assert_well_formed(steps)
    for step in steps:
        assert step.array == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert sample_input == [5, 3, 8, 4, 2, 1, 9, 7, 6]


def test_binary_search_halves_toward_target(sample_input):
    # sorted copy is [1..9]; index 6 holds 7
    steps = list(binary_search(sample_input, _FixedTarget(6)))
    messages = [s.message for s in steps]

    assert messages[1] == "Initial search range: [0...8]"
    assert messages[2] == "Checking middle element at index 4: 5"
    assert messages[3] == "5 < 7, searching right half"
    assert "Found 7 at index 6!" in messages
    assert messages[-1] == "Binary Search complete!"


def test_binary_search_missing_target(sample_input):
    steps = list(binary_search(sample_input, _RangeTarget(20)))

    assert steps[-2].message == "20 not found in the array"
    assert steps[-1].source_line == 20


def test_seeded_searches_are_reproducible(sample_input, rng_factory):
    assert list(linear_search(sample_input, rng_factory())) == list(linear_search(sample_input, rng_factory()))
    assert list(binary_search(sample_input, rng_factory())) == list(binary_search(sample_input, rng_factory()))
