"""
binary_search.py — Binary Search
=================================
The input is sorted ascending first; every step's `array` shows that
sorted copy.  The live range is announced up front and after each
halving, and the middle probe is a step of its own.
"""

import random
from typing import Generator, List, Optional

from algorithms.payloads import Number
from algorithms.random_source import make_rng, pick_search_target
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def binary_search(arr, target):",                        # 1
    "    left, right = 0, len(arr) - 1",                      # 2
    "",                                                       # 3
    "    while left <= right:",                               # 4
    "        # Find the middle index",                        # 5
    "        mid = (left + right) // 2",                      # 6
    "",                                                       # 7
    "        # Check if the target is at mid",                # 8
    "        if arr[mid] == target:",                         # 9
    "            return mid",                                 # 10
    "",                                                       # 11
    "        # Target is greater: ignore the left half",      # 12
    "        if arr[mid] < target:",                          # 13
    "            left = mid + 1",                             # 14
    "        # Target is smaller: ignore the right half",     # 15
    "        else:",                                          # 16
    "            right = mid - 1",                            # 17
    "",                                                       # 18
    "    # Target not found",                                 # 19
    "    return -1",                                          # 20
]


def binary_search(
    values: List[Number],
    rng: Optional[random.Random] = None,
) -> Generator[Step, None, None]:
    arr    = sorted(values)
    rng    = make_rng(rng)
    target = pick_search_target(arr, rng)
    sb     = StepBuilder(arr)

    yield sb.build(f"Starting Binary Search for target: {target} in sorted array", 1)

    if not arr:
        yield sb.final(f"Binary Search complete! The array is empty, so {target} is not present.", 20)
        return

    left, right = 0, len(arr) - 1
    yield sb.build(f"Initial search range: [{left}...{right}]", 2, comparisons=[left, right])

    while left <= right:
        mid = (left + right) // 2
        yield sb.build(f"Checking middle element at index {mid}: {arr[mid]}", 6, comparisons=[mid])

        if arr[mid] == target:
            yield sb.build(f"Found {target} at index {mid}!", 10, comparisons=[mid])
            yield sb.final("Binary Search complete!", 10)
            return

        if arr[mid] < target:
            yield sb.build(f"{arr[mid]} < {target}, searching right half", 13, comparisons=[mid])
            left = mid + 1
            line = 14
        else:
            yield sb.build(f"{arr[mid]} > {target}, searching left half", 16, comparisons=[mid])
            right = mid - 1
            line = 17

        if left <= right:
            yield sb.build(f"New search range: [{left}...{right}]", line, comparisons=[left, right])

    yield sb.build(f"{target} not found in the array", 20)
    yield sb.final("Binary Search complete!", 20)
