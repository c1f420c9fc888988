"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort over index ranges of a single buffer.

Yields a Step at:
  1. Each divide point                →  comparisons = [start, end-1]
  2. The start of each merge          →  comparisons = both sub-range bounds
  3. Each head-to-head comparison     →  comparisons = [left idx, right idx]
  4. Each placement into the buffer   →  swaps = [k]
  5. Each leftover copy (left, right) →  swaps = [k]
"""

from typing import Generator, List

from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def merge_sort(arr):",                                   # 1
    "    # Base case: zero or one element is already sorted",  # 2
    "    if len(arr) <= 1:",                                  # 3
    "        return arr",                                     # 4
    "",                                                       # 5
    "    # Divide the array into two halves",                 # 6
    "    mid = len(arr) // 2",                                # 7
    "    left = arr[:mid]",                                   # 8
    "    right = arr[mid:]",                                  # 9
    "",                                                       # 10
    "    # Recursively sort both halves, then merge them",    # 11
    "    return merge(merge_sort(left), merge_sort(right))",  # 12
    "",                                                       # 13
    "",                                                       # 14
    "def merge(left, right):",                                # 15
    "    result = []",                                        # 16
    "    i = j = 0",                                          # 17
    "",                                                       # 18
    "    # Take the smaller head element until one side runs out",  # 19
    "    while i < len(left) and j < len(right):",            # 20
    "        if left[i] <= right[j]:",                        # 21
    "            result.append(left[i])",                     # 22
    "            i += 1",                                     # 23
    "        else:",                                          # 24
    "            result.append(right[j])",                    # 25
    "            j += 1",                                     # 26
    "",                                                       # 27
    "    # Copy whatever remains on either side",             # 28
    "    result.extend(left[i:])",                            # 29
    "    result.extend(right[j:])",                           # 30
    "    return result",                                      # 31
]


def merge_sort(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values)
    sb  = StepBuilder(arr)

    yield sb.build("Starting Merge Sort", 1)
    yield from _sort(sb, arr, 0, len(arr))
    yield sb.final("Sorting complete!", 12)


def _sort(sb: StepBuilder, arr: List[Number], start: int, end: int) -> Generator[Step, None, None]:
    """Sort arr[start:end] in place."""
    if end - start <= 1:
        return

    mid = (start + end) // 2
    yield sb.build(f"Dividing array from index {start} to {end - 1}", 7, comparisons=[start, end - 1])

    yield from _sort(sb, arr, start, mid)
    yield from _sort(sb, arr, mid, end)

    yield sb.build(
        f"Merging subarrays from index {start}-{mid - 1} and {mid}-{end - 1}", 15,
        comparisons=[start, mid - 1, mid, end - 1],
    )

    left  = arr[start:mid]
    right = arr[mid:end]
    i = j = 0
    k = start

    while i < len(left) and j < len(right):
        yield sb.build(f"Comparing {left[i]} and {right[j]}", 21, comparisons=[start + i, mid + j])

        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
            yield sb.build(f"Placing {arr[k]} at position {k}", 22, swaps=[k])
        else:
            arr[k] = right[j]
            j += 1
            yield sb.build(f"Placing {arr[k]} at position {k}", 25, swaps=[k])
        k += 1

    while i < len(left):
        arr[k] = left[i]
        yield sb.build(f"Placing remaining left element {arr[k]} at position {k}", 29, swaps=[k])
        i += 1
        k += 1

    while j < len(right):
        arr[k] = right[j]
        yield sb.build(f"Placing remaining right element {arr[k]} at position {k}", 30, swaps=[k])
        j += 1
        k += 1
