"""
linear_search.py — Linear Search
=================================
Scans left to right for a randomly chosen target (see random_source).
Every element check is a step; the scan stops at the first hit.
"""

import random
from typing import Generator, List, Optional

from algorithms.payloads import Number
from algorithms.random_source import make_rng, pick_search_target
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def linear_search(arr, target):",                        # 1
    "    for i in range(len(arr)):",                          # 2
    "        # Check if the current element is the target",   # 3
    "        if arr[i] == target:",                           # 4
    "            return i  # Found: return its index",        # 5
    "",                                                       # 6
    "    return -1  # Not found",                             # 7
]


def linear_search(
    values: List[Number],
    rng: Optional[random.Random] = None,
) -> Generator[Step, None, None]:
    arr    = list(values)
    rng    = make_rng(rng)
    target = pick_search_target(arr, rng)
    sb     = StepBuilder(arr)

    yield sb.build(f"Starting Linear Search for target: {target}", 1)

    if not arr:
        yield sb.final(f"Linear Search complete! The array is empty, so {target} is not present.", 7)
        return

    found = -1
    for i, value in enumerate(arr):
        yield sb.build(f"Checking if {value} == {target}", 4, comparisons=[i])

        if value == target:
            found = i
            yield sb.build(f"Found {target} at index {i}!", 5, comparisons=[i])
            break

    if found == -1:
        yield sb.build(f"{target} not found in the array", 7)
        yield sb.final("Linear Search complete!", 7)
    else:
        yield sb.final("Linear Search complete!", 5)
