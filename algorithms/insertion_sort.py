"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element at a time.  Every comparison against
the element being inserted is a step (including the one that stops the
shifting), every shift is a step, and the final placement is either a
"placed" step or an explicit "already in place" step.
"""

from typing import Generator, List

from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def insertion_sort(arr):",                               # 1
    "    n = len(arr)",                                       # 2
    "",                                                       # 3
    "    for i in range(1, n):",                              # 4
    "        # Element to insert into the sorted prefix",     # 5
    "        current = arr[i]",                               # 6
    "        j = i - 1",                                      # 7
    "",                                                       # 8
    "        # Shift larger elements one position ahead",     # 9
    "        while j >= 0 and arr[j] > current:",             # 10
    "            arr[j + 1] = arr[j]",                        # 11
    "            j -= 1",                                     # 12
    "",                                                       # 13
    "        # Place current in its correct position",        # 14
    "        arr[j + 1] = current",                           # 15
    "",                                                       # 16
    "    return arr",                                         # 17
]


def insertion_sort(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    yield sb.build("Starting Insertion Sort", 1)

    for i in range(1, n):
        current = arr[i]
        j = i - 1
        yield sb.build(f"Current element: {current} at index {i}", 6, comparisons=[i])

        while j >= 0:
            yield sb.build(f"Comparing {arr[j]} > {current}", 10, comparisons=[j, j + 1])
            if not arr[j] > current:
                break

            arr[j + 1] = arr[j]
            yield sb.build(f"Shifted {arr[j]} to position {j + 1}", 11, swaps=[j, j + 1])
            j -= 1

        if j + 1 != i:
            arr[j + 1] = current
            yield sb.build(f"Placed {current} at position {j + 1}", 15, swaps=[j + 1])
        else:
            yield sb.build(f"{current} is already at its correct position", 15)

    yield sb.final("Sorting complete!", 17)
