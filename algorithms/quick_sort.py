"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot = last element of the range.  Every pivot choice, comparison and
swap is a step at every recursion depth.  The "recursively sorting
left/right subarray" narration is only emitted for the top levels
(depth < NARRATION_DEPTH) to keep traces readable; deeper levels still
run, so the final array is always fully sorted.
"""

from typing import Generator, List

from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder
from config.logging import get_logger

logger = get_logger(__name__)

NARRATION_DEPTH = 2


CODE: List[str] = [
    "def quick_sort(arr, low=0, high=None):",                 # 1
    "    if high is None:",                                   # 2
    "        high = len(arr) - 1",                            # 3
    "    if low < high:",                                     # 4
    "        # Partition the array and get the pivot index",  # 5
    "        pivot_index = partition(arr, low, high)",        # 6
    "",                                                       # 7
    "        # Recursively sort the sub-arrays",              # 8
    "        quick_sort(arr, low, pivot_index - 1)",          # 9
    "        quick_sort(arr, pivot_index + 1, high)",         # 10
    "",                                                       # 11
    "    return arr",                                         # 12
    "",                                                       # 13
    "",                                                       # 14
    "def partition(arr, low, high):",                         # 15
    "    # Choose the rightmost element as pivot",            # 16
    "    pivot = arr[high]",                                  # 17
    "",                                                       # 18
    "    # Index of the last element smaller than the pivot",  # 19
    "    i = low - 1",                                        # 20
    "",                                                       # 21
    "    for j in range(low, high):",                         # 22
    "        if arr[j] < pivot:",                             # 23
    "            i += 1",                                     # 24
    "            arr[i], arr[j] = arr[j], arr[i]",            # 25
    "",                                                       # 26
    "    # Move the pivot just after the smaller elements",   # 27
    "    arr[i + 1], arr[high] = arr[high], arr[i + 1]",      # 28
    "",                                                       # 29
    "    return i + 1",                                       # 30
]


def quick_sort(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values)
    sb  = StepBuilder(arr)

    yield sb.build("Starting Quick Sort", 1)
    yield from _sort(sb, arr, 0, len(arr) - 1, 0)
    yield sb.final("Sorting complete!", 12)


def _sort(sb: StepBuilder, arr: List[Number], low: int, high: int, depth: int) -> Generator[Step, None, None]:
    if low >= high:
        return

    pivot = arr[high]
    yield sb.build(f"Choosing pivot: {pivot} at index {high}", 17, comparisons=[high])

    i = low - 1
    for j in range(low, high):
        yield sb.build(f"Comparing {arr[j]} with pivot {pivot}", 23, comparisons=[j, high])

        if arr[j] < pivot:
            i += 1
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                yield sb.build(f"Swapped {arr[j]} and {arr[i]}", 25, swaps=[i, j])

    pivot_index = i + 1
    arr[pivot_index], arr[high] = arr[high], arr[pivot_index]
    yield sb.build(f"Placing pivot {pivot} at its correct position", 28, swaps=[pivot_index, high])
    yield sb.build(f"Pivot {pivot} is now at index {pivot_index}", 30)

    narrate = depth < NARRATION_DEPTH
    if not narrate:
        logger.debug(f"quick_sort: depth {depth} range [{low}, {high}] runs without narration")

    if low < pivot_index - 1:
        if narrate:
            yield sb.build(f"Recursively sorting left subarray [{low}...{pivot_index - 1}]", 9)
        yield from _sort(sb, arr, low, pivot_index - 1, depth + 1)

    if pivot_index + 1 < high:
        if narrate:
            yield sb.build(f"Recursively sorting right subarray [{pivot_index + 1}...{high}]", 10)
        yield from _sort(sb, arr, pivot_index + 1, high, depth + 1)
