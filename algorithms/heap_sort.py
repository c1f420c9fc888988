"""
heap_sort.py — Heap Sort
=========================
Max-heap build followed by repeated root extraction.  Heapify emits its
own comparison steps (left vs root, right vs largest-so-far) and swap
steps, separate from the extraction loop's root-to-end swaps.
"""

from typing import Generator, List

from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def heap_sort(arr):",                                    # 1
    "    n = len(arr)",                                       # 2
    "",                                                       # 3
    "    # Build a max heap",                                 # 4
    "    for i in range(n // 2 - 1, -1, -1):",                # 5
    "        heapify(arr, n, i)",                             # 6
    "",                                                       # 7
    "    # Extract elements from the heap one by one",        # 8
    "    for i in range(n - 1, 0, -1):",                      # 9
    "        # Move the current root to the end",             # 10
    "        arr[0], arr[i] = arr[i], arr[0]",                # 11
    "",                                                       # 12
    "        # Restore the heap property on the reduced heap",  # 13
    "        heapify(arr, i, 0)",                             # 14
    "",                                                       # 15
    "    return arr",                                         # 16
    "",                                                       # 17
    "",                                                       # 18
    "def heapify(arr, n, i):",                                # 19
    "    largest = i",                                        # 20
    "    left = 2 * i + 1",                                   # 21
    "    right = 2 * i + 2",                                  # 22
    "",                                                       # 23
    "    # Is the left child larger than the root?",          # 24
    "    if left < n and arr[left] > arr[largest]:",          # 25
    "        largest = left",                                 # 26
    "",                                                       # 27
    "    # Is the right child larger than the largest so far?",  # 28
    "    if right < n and arr[right] > arr[largest]:",        # 29
    "        largest = right",                                # 30
    "",                                                       # 31
    "    # If the largest is not the root, swap and keep sifting down",  # 32
    "    if largest != i:",                                   # 33
    "        arr[i], arr[largest] = arr[largest], arr[i]",    # 34
    "        heapify(arr, n, largest)",                       # 35
]


def heap_sort(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values)
    n   = len(arr)
    sb  = StepBuilder(arr)

    yield sb.build("Starting Heap Sort", 1)

    if n:
        yield sb.build("Building max heap", 5)
        for i in range(n // 2 - 1, -1, -1):
            yield from _heapify(sb, arr, n, i)
        yield sb.build("Max heap built successfully", 6)

    for i in range(n - 1, 0, -1):
        arr[0], arr[i] = arr[i], arr[0]
        yield sb.build(f"Moved root {arr[i]} to the end at position {i}", 11, swaps=[0, i])

        yield from _heapify(sb, arr, i, 0)
        yield sb.build(f"Placed {arr[i]} at its correct position", 14)

    yield sb.final("Sorting complete!", 16)


def _heapify(sb: StepBuilder, arr: List[Number], n: int, i: int) -> Generator[Step, None, None]:
    largest = i
    left    = 2 * i + 1
    right   = 2 * i + 2

    yield sb.build(f"Heapifying subtree rooted at index {i}", 20, comparisons=[i])

    if left < n:
        yield sb.build(f"Comparing {arr[i]} with left child {arr[left]}", 25, comparisons=[i, left])
        if arr[left] > arr[largest]:
            largest = left
            yield sb.build(
                f"Left child {arr[left]} is larger than current largest {arr[i]}", 26,
                comparisons=[largest],
            )

    if right < n:
        yield sb.build(
            f"Comparing {arr[largest]} with right child {arr[right]}", 29,
            comparisons=[largest, right],
        )
        if arr[right] > arr[largest]:
            previous = arr[largest]
            largest  = right
            yield sb.build(
                f"Right child {arr[right]} is larger than current largest {previous}", 30,
                comparisons=[largest],
            )

    if largest != i:
        arr[i], arr[largest] = arr[largest], arr[i]
        yield sb.build(f"Swapped {arr[largest]} with {arr[i]}", 34, swaps=[i, largest])
        yield from _heapify(sb, arr, n, largest)
