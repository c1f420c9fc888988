"""
stack.py — Stack (LIFO)
========================
push ≤5 values → peek → pop up to 3 → is_empty → clear (if needed).
Every operation has a "before" and an "after" step; pops report the
removed value through `popped_value`.
"""

from typing import Generator, List

from algorithms.payloads import MAX_STRUCTURE_ELEMENTS, Number, StackState
from algorithms.step import Step, StepBuilder

MAX_PUSHES = 5
MAX_POPS   = 3


CODE: List[str] = [
    "class Stack:",                                           # 1
    "    def __init__(self):",                                # 2
    "        self.items = []",                                # 3
    "",                                                       # 4
    "    def push(self, item):",                              # 5
    "        # Add the item to the top",                      # 6
    "        self.items.append(item)",                        # 7
    "",                                                       # 8
    "    def pop(self):",                                     # 9
    "        if self.is_empty():",                            # 10
    "            raise IndexError('pop from empty stack')",   # 11
    "        # Remove and return the top item",               # 12
    "        return self.items.pop()",                        # 13
    "",                                                       # 14
    "    def peek(self):",                                    # 15
    "        if self.is_empty():",                            # 16
    "            raise IndexError('peek from empty stack')",  # 17
    "        # Look at the top item without removing it",     # 18
    "        return self.items[-1]",                          # 19
    "",                                                       # 20
    "    def is_empty(self):",                                # 21
    "        return len(self.items) == 0",                    # 22
    "",                                                       # 23
    "    def size(self):",                                    # 24
    "        return len(self.items)",                         # 25
    "",                                                       # 26
    "    def clear(self):",                                   # 27
    "        self.items = []",                                # 28
]


def stack(values: List[Number]) -> Generator[Step, None, None]:
    arr   = list(values[:MAX_STRUCTURE_ELEMENTS])
    items: List[Number] = []
    sb    = StepBuilder(arr, snapshot=lambda: StackState(items=tuple(items)))

    yield sb.build("Starting Stack Operations", 1, operation="initialize")
    yield sb.build("Created an empty stack", 3, operation="initialize")

    for i in range(min(MAX_PUSHES, len(arr))):
        yield sb.build(f"Pushing {arr[i]} onto the stack", 5,
                       comparisons=[i], operation="push", current_value=arr[i])
        items.append(arr[i])
        yield sb.build(f"Pushed {arr[i]} onto the stack", 7,
                       operation="push", highlight_index=len(items) - 1)

    if items:
        yield sb.build("Peeking at the top element", 15, operation="peek")
        yield sb.build(f"Top element is {items[-1]}", 19,
                       operation="peek", highlight_index=len(items) - 1)

    for _ in range(min(MAX_POPS, len(items))):
        yield sb.build("Popping element from the stack", 9,
                       operation="pop", highlight_index=len(items) - 1)
        popped = items.pop()
        yield sb.build(f"Popped {popped} from the stack", 13, operation="pop", popped_value=popped)

    yield sb.build("Checking if stack is empty", 21, operation="isEmpty")
    is_empty = not items
    yield sb.build(f"Stack is {'empty' if is_empty else 'not empty'}", 22, operation="isEmpty")

    if not is_empty:
        yield sb.build("Clearing the stack", 27, operation="clear")
        items.clear()
        yield sb.build("Stack cleared", 28, operation="clear")

    yield sb.final("Stack operations complete!", 28, operation="complete")
