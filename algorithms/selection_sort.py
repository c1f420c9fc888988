"""
selection_sort.py — Selection Sort
===================================
Each outer pass scans the unsorted suffix for its minimum and swaps it
into place.  A pass whose minimum is already in place still gets its own
step, so no-op passes stay visible.
"""

from typing import Generator, List

from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def selection_sort(arr):",                               # 1
    "    n = len(arr)",                                       # 2
    "",                                                       # 3
    "    for i in range(n - 1):",                             # 4
    "        # Find the minimum element in the unsorted part",  # 5
    "        min_index = i",                                  # 6
    "",                                                       # 7
    "        for j in range(i + 1, n):",                      # 8
    "            if arr[j] < arr[min_index]:",                # 9
    "                min_index = j",                          # 10
    "",                                                       # 11
    "        # Swap the minimum into the first unsorted slot",  # 12
    "        if min_index != i:",                             # 13
    "            arr[i], arr[min_index] = arr[min_index], arr[i]",  # 14
    "",                                                       # 15
    "    return arr",                                         # 16
]


def selection_sort(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    yield sb.build("Starting Selection Sort", 1)

    for i in range(n - 1):
        min_index = i
        yield sb.build(f"Finding minimum element starting from index {i}", 6, comparisons=[i])

        for j in range(i + 1, n):
            yield sb.build(f"Comparing {arr[min_index]} and {arr[j]}", 9, comparisons=[min_index, j])

            if arr[j] < arr[min_index]:
                min_index = j
                yield sb.build(
                    f"New minimum found: {arr[min_index]} at index {min_index}", 10,
                    comparisons=[min_index],
                )

        if min_index != i:
            arr[i], arr[min_index] = arr[min_index], arr[i]
            yield sb.build(
                f"Swapped {arr[min_index]} with {arr[i]}; {arr[i]} is now at sorted position {i}", 14,
                swaps=[i, min_index],
            )
        else:
            yield sb.build(f"{arr[i]} is already at its correct position {i}", 13)

    yield sb.final("Sorting complete!", 16)
