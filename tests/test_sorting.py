import pytest

from algorithms import algorithms_by_category
from algorithms.bubble_sort import bubble_sort
from algorithms.heap_sort import heap_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.merge_sort import merge_sort
from algorithms.quick_sort import quick_sort
from algorithms.selection_sort import selection_sort

from conftest import assert_well_formed

SORTS = [bubble_sort, selection_sort, insertion_sort, quick_sort, merge_sort, heap_sort]

INPUTS = [
    [5, 3, 8, 4, 2, 1, 9, 7, 6],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [2, 2, 1, 1, 3],
    [4.5, -1, 0, 3.25],
    [7],
]


@pytest.mark.parametrize("sort", SORTS, ids=lambda f: f.__name__)
@pytest.mark.parametrize("values", INPUTS)
def test_final_array_is_sorted(sort, values):
    steps = list(sort(values))

    assert_well_formed(steps)
    assert steps[-1].array == sorted(values)
    assert all(len(s.array) == len(values) for s in steps)


@pytest.mark.parametrize("sort", SORTS, ids=lambda f: f.__name__)
def test_input_is_not_mutated(sort, sample_input):
    list(sort(sample_input))
    assert sample_input == [5, 3, 8, 4, 2, 1, 9, 7, 6]


@pytest.mark.parametrize("sort", SORTS, ids=lambda f: f.__name__)
def test_empty_input_is_start_then_complete(sort):
    steps = list(sort([]))

    assert len(steps) == 2
    assert steps[0].message.startswith("Starting")
    assert steps[1].message == "Sorting complete!"
    assert steps[1].is_final


@pytest.mark.parametrize("sort", SORTS, ids=lambda f: f.__name__)
def test_same_input_same_trace(sort, sample_input):
    assert list(sort(sample_input)) == list(sort(sample_input))


def test_every_sort_is_registered():
    keys = [info.key for info in algorithms_by_category("sorting")]
    assert keys == ["bubbleSort", "selectionSort", "insertionSort", "quickSort", "mergeSort", "heapSort"]


def test_bubble_sort_stops_early_on_sorted_input():
    steps = list(bubble_sort([1, 2, 3, 4, 5]))
    messages = [s.message for s in steps]

    assert "Array is sorted, no more swaps needed" in messages
    assert not any(s.swaps for s in steps)
    # one pass of n-1 comparisons, then the early exit
    assert sum(1 for s in steps if s.comparisons) == 4
    assert messages[-2] == "Array is sorted, no more swaps needed"


def test_bubble_sort_compares_adjacent_pairs():
    steps = list(bubble_sort([3, 1, 2]))
    compared = [s.comparisons for s in steps if s.comparisons]
    assert compared[0] == [0, 1]
    assert all(b == a + 1 for a, b in compared)


def test_selection_sort_reports_position():
    steps = list(selection_sort([3, 1, 2]))
    messages = [s.message for s in steps]

    assert "Swapped 3 with 1; 1 is now at sorted position 0" in messages
    assert steps[-1].source_line == 16


def test_insertion_sort_records_stopping_comparison():
    steps = list(insertion_sort([1, 2]))
    compares = [s for s in steps if s.source_line == 10]

    assert len(compares) == 1
    assert compares[0].message == "Comparing 1 > 2"
    assert "2 is already at its correct position" in [s.message for s in steps]


def test_quick_sort_narrates_pivots():
    steps = list(quick_sort([3, 1, 2]))
    messages = [s.message for s in steps]

    assert messages[1] == "Choosing pivot: 2 at index 2"
    assert "Pivot 2 is now at index 1" in messages


def test_quick_sort_sorts_deep_partitions():
    values = list(range(12, 0, -1))
    assert list(quick_sort(values))[-1].array == sorted(values)


def test_merge_sort_is_stable_on_ties():
    steps = list(merge_sort([2, 1, 2]))
    compares = [s for s in steps if s.source_line == 21]
    assert compares
    assert steps[-1].array == [1, 2, 2]


def test_heap_sort_builds_heap_first():
    steps = list(heap_sort([1, 5, 3]))
    messages = [s.message for s in steps]

    build = messages.index("Building max heap")
    built = messages.index("Max heap built successfully")
    assert build < built
    assert steps[built].array[0] == 5


@pytest.mark.parametrize("sort", SORTS, ids=lambda f: f.__name__)
@pytest.mark.parametrize("values", INPUTS)
def test_comparisons_and_swaps_never_share_a_step(sort, values):
    for step in sort(values):
        assert not (step.comparisons and step.swaps), step.message


def test_selection_sort_shows_no_op_pass():
    steps = list(selection_sort([1, 3, 2]))
    no_op = [s for s in steps if s.message == "1 is already at its correct position 0"]

    assert len(no_op) == 1
    assert no_op[0].source_line == 13
    assert no_op[0].comparisons == []
    assert no_op[0].swaps == []
    # the next pass still swaps 3 and 2
    assert "Swapped 3 with 2; 2 is now at sorted position 1" in [s.message for s in steps]


def test_heap_sort_heapify_compares_both_children():
    steps = list(heap_sort([1, 5, 3]))

    left = [s for s in steps if s.source_line == 25]
    right = [s for s in steps if s.source_line == 29]
    assert left[0].message == "Comparing 1 with left child 5"
    assert left[0].comparisons == [0, 1]
    # right child is measured against the new largest, not the root
    assert right[0].message == "Comparing 5 with right child 3"
    assert right[0].comparisons == [1, 2]


def test_heap_sort_heapify_swaps_are_separate_from_extraction():
    steps = list(heap_sort([1, 5, 3]))
    built = [s.message for s in steps].index("Max heap built successfully")
    swaps = [s for s in steps if s.swaps]

    assert {s.source_line for s in swaps} == {11, 34}

    sift = [s for s in swaps if s.source_line == 34]
    assert len(sift) == 1
    assert sift[0].message == "Swapped 1 with 5"
    assert sift[0].swaps == [0, 1]
    assert sift[0].step_number < steps[built].step_number

    extract = [s for s in swaps if s.source_line == 11]
    assert [s.swaps for s in extract] == [[0, 2], [0, 1]]
    assert all(s.message.startswith("Moved root") for s in extract)
    assert all(s.step_number > steps[built].step_number for s in extract)


def test_merge_sort_divides_then_copies_leftovers():
    steps = list(merge_sort([3, 1, 2]))
    messages = [s.message for s in steps]

    divides = [s for s in steps if s.source_line == 7]
    assert [s.message for s in divides] == [
        "Dividing array from index 0 to 2",
        "Dividing array from index 1 to 2",
    ]
    assert divides[0].comparisons == [0, 2]
    assert messages.index("Dividing array from index 0 to 2") < messages.index(
        "Merging subarrays from index 1-1 and 2-2"
    )

    right = [s for s in steps if s.source_line == 30]
    left = [s for s in steps if s.source_line == 29]
    assert [s.message for s in right] == ["Placing remaining right element 2 at position 2"]
    assert [s.message for s in left] == ["Placing remaining left element 3 at position 2"]
    assert right[0].swaps == [2]
    assert left[0].comparisons == []
