import pytest

from algorithms import get_algorithm, get_data_structure
from engine.analysis import (
    SPACE_RANK,
    TIME_RANK,
    UNKNOWN_RANK,
    base_complexity,
    complexity_rank,
    space_efficiency_comparison,
    time_efficiency_comparison,
    use_case_recommendation,
)


@pytest.mark.parametrize("text,expected", [
    ("O(n²)", "O(n²)"),
    ("O(n log n) average, O(n²) worst case", "O(n log n)"),
    ("Average: O(1) for search, insert, delete; Worst: O(n)", "O(1)"),
    ("linear", "linear"),
])
def test_base_complexity(text, expected):
    assert base_complexity(text) == expected


def test_rank_tables():
    assert complexity_rank("O(1)") < complexity_rank("O(log n)") < complexity_rank("O(n)")
    assert complexity_rank("O(n log n)") < complexity_rank("O(n²)") < complexity_rank("O(2^n)")
    assert complexity_rank("O(n!)", TIME_RANK) == 7
    assert complexity_rank("O(2^n)", SPACE_RANK) == UNKNOWN_RANK
    assert complexity_rank("O(h) where h is the height of the tree", SPACE_RANK) == UNKNOWN_RANK


def test_time_verdict_prefers_faster():
    bubble, merge = get_algorithm("bubbleSort"), get_algorithm("mergeSort")

    expected = "Merge Sort is generally faster than Bubble Sort with time complexity O(n log n) vs O(n²)."
    assert time_efficiency_comparison(bubble, merge) == expected
    assert time_efficiency_comparison(merge, bubble) == expected


def test_time_verdict_tie_on_base_class():
    quick, merge = get_algorithm("quickSort"), get_algorithm("mergeSort")
    assert time_efficiency_comparison(quick, merge) == (
        "Both have similar time complexity: O(n log n) average, O(n²) worst case."
    )


def test_space_verdict():
    heap, merge = get_algorithm("heapSort"), get_algorithm("mergeSort")
    assert space_efficiency_comparison(merge, heap) == (
        "Heap Sort uses less memory than Merge Sort with space complexity O(1) vs O(n)."
    )
    assert space_efficiency_comparison(heap, get_algorithm("bubbleSort")) == (
        "Both have similar space requirements: O(1)."
    )


def test_unknown_complexity_ranks_slowest():
    bst = get_algorithm("bstInsertion")
    linear = get_algorithm("linearSearch")
    verdict = space_efficiency_comparison(bst, linear)
    assert verdict.startswith("Linear Search uses less memory than BST Insertion")


def test_use_case_recommendation():
    stack, queue = get_data_structure("stack"), get_data_structure("queue")
    sentence = use_case_recommendation(stack, queue)

    assert sentence.startswith("Stack is best for ")
    assert ", while Queue is best for " in sentence
    assert sentence.endswith(".")
    assert stack.best_for.lower() in sentence
