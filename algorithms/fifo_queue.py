"""
fifo_queue.py — Queue (FIFO)
=============================
enqueue ≤5 values → front → dequeue up to 3 → is_empty → clear (if
needed).  Dequeues report the removed value through `dequeued_value`.

(Named fifo_queue so it never shadows the standard-library `queue`.)
"""

from collections import deque
from typing import Deque, Generator, List

from algorithms.payloads import MAX_STRUCTURE_ELEMENTS, Number, QueueState
from algorithms.step import Step, StepBuilder

MAX_ENQUEUES = 5
MAX_DEQUEUES = 3


CODE: List[str] = [
    "from collections import deque",                          # 1
    "",                                                       # 2
    "",                                                       # 3
    "class Queue:",                                           # 4
    "    def __init__(self):",                                # 5
    "        self.items = deque()",                           # 6
    "",                                                       # 7
    "    def enqueue(self, item):",                           # 8
    "        # Add the item at the rear",                     # 9
    "        self.items.append(item)",                        # 10
    "",                                                       # 11
    "    def dequeue(self):",                                 # 12
    "        if self.is_empty():",                            # 13
    "            raise IndexError('dequeue from empty queue')",  # 14
    "        # Remove and return the front item",             # 15
    "        return self.items.popleft()",                    # 16
    "",                                                       # 17
    "    def front(self):",                                   # 18
    "        if self.is_empty():",                            # 19
    "            raise IndexError('front of empty queue')",   # 20
    "        return self.items[0]",                           # 21
    "",                                                       # 22
    "    def is_empty(self):",                                # 23
    "        return len(self.items) == 0",                    # 24
    "",                                                       # 25
    "    def size(self):",                                    # 26
    "        return len(self.items)",                         # 27
    "",                                                       # 28
    "    def clear(self):",                                   # 29
    "        self.items.clear()",                             # 30
]


def fifo_queue(values: List[Number]) -> Generator[Step, None, None]:
    arr = list(values[:MAX_STRUCTURE_ELEMENTS])
    items: Deque[Number] = deque()
    sb  = StepBuilder(arr, snapshot=lambda: QueueState(items=tuple(items)))

    yield sb.build("Starting Queue Operations", 4, operation="initialize")
    yield sb.build("Created an empty queue", 6, operation="initialize")

    for i in range(min(MAX_ENQUEUES, len(arr))):
        yield sb.build(f"Enqueuing {arr[i]} to the queue", 8,
                       comparisons=[i], operation="enqueue", current_value=arr[i])
        items.append(arr[i])
        yield sb.build(f"Enqueued {arr[i]} to the queue", 10,
                       operation="enqueue", highlight_index=len(items) - 1)

    if items:
        yield sb.build("Checking the front element", 18, operation="front")
        yield sb.build(f"Front element is {items[0]}", 21, operation="front", highlight_index=0)

    for _ in range(min(MAX_DEQUEUES, len(items))):
        yield sb.build("Dequeuing element from the queue", 12, operation="dequeue", highlight_index=0)
        dequeued = items.popleft()
        yield sb.build(f"Dequeued {dequeued} from the queue", 16,
                       operation="dequeue", dequeued_value=dequeued)

    yield sb.build("Checking if queue is empty", 23, operation="isEmpty")
    is_empty = not items
    yield sb.build(f"Queue is {'empty' if is_empty else 'not empty'}", 24, operation="isEmpty")

    if not is_empty:
        yield sb.build("Clearing the queue", 29, operation="clear")
        items.clear()
        yield sb.build("Queue cleared", 30, operation="clear")

    yield sb.final("Queue operations complete!", 30, operation="complete")
