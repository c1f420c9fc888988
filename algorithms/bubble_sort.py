"""
bubble_sort.py — Bubble Sort
=============================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare an adjacent pair  →  `comparisons = [j, j+1]`
  2. Swap the pair             →  `swaps = [j, j+1]`
  3. End of a pass             →  narration only
  4. A pass with zero swaps    →  explicit "already sorted" step, then stop

Source lines are 1-based and match the CODE listing exported alongside
the generator so a code view can highlight them live.
"""

from typing import Generator, List

from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


# ---------------------------------------------------------------------------
# Source listing: each string is one displayed line; source_line = index + 1
# ---------------------------------------------------------------------------
CODE: List[str] = [
    "def bubble_sort(arr):",                                  # 1
    "    n = len(arr)",                                       # 2
    "",                                                       # 3
    "    for i in range(n):",                                 # 4
    "        # Flag to stop early if the array is already sorted",  # 5
    "        swapped = False",                                # 6
    "",                                                       # 7
    "        # Last i elements are already in place",         # 8
    "        for j in range(n - i - 1):",                     # 9
    "            # Compare adjacent elements",                # 10
    "            if arr[j] > arr[j + 1]:",                    # 11
    "                # Swap them if they are in the wrong order",  # 12
    "                arr[j], arr[j + 1] = arr[j + 1], arr[j]",  # 13
    "                swapped = True",                         # 14
    "",                                                       # 15
    "        # No swaps in this pass: the array is sorted",   # 16
    "        if not swapped:",                                # 17
    "            break",                                      # 18
    "",                                                       # 19
    "    return arr",                                         # 20
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    yield sb.build("Starting Bubble Sort", 1)

    for i in range(n):
        swapped = False

        for j in range(n - i - 1):
            yield sb.build(f"Comparing {arr[j]} and {arr[j + 1]}", 11, comparisons=[j, j + 1])

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield sb.build(f"Swapped {arr[j + 1]} and {arr[j]}", 13, swaps=[j, j + 1])

        if not swapped:
            yield sb.build("Array is sorted, no more swaps needed", 18)
            break

        yield sb.build(f"Completed pass {i + 1}", 4)

    yield sb.final("Sorting complete!", 20)
