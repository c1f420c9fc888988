"""
linked_list.py — Singly Linked List
====================================
Nodes live in an append-only arena; a node's `id` is its arena index
and `next` holds the successor's index.  Unlinking a node only rewires
pointers, so arena indices (and `highlight_nodes` / `deleted_node`)
stay valid for the whole trace.

Script over the truncated input:
  • insert the first three values at the head
  • insert the next three values at the tail (walking the list each time)
  • search for the middle input value
  • delete the first input value
"""

from typing import Generator, List, Optional

from algorithms.payloads import MAX_STRUCTURE_ELEMENTS, LinkedListState, ListNode, Number
from algorithms.step import Step, StepBuilder

HEAD_INSERTS = 3
TAIL_INSERTS = 3


CODE: List[str] = [
    "class Node:",                                            # 1
    "    def __init__(self, value):",                         # 2
    "        self.value = value",                             # 3
    "        self.next = None",                               # 4
    "",                                                       # 5
    "",                                                       # 6
    "class LinkedList:",                                      # 7
    "    def __init__(self):",                                # 8
    "        self.head = None",                               # 9
    "",                                                       # 10
    "    def insert_at_head(self, value):",                   # 11
    "        node = Node(value)",                             # 12
    "        # New node points at the old head",              # 13
    "        node.next = self.head",                          # 14
    "        self.head = node",                               # 15
    "",                                                       # 16
    "    def insert_at_tail(self, value):",                   # 17
    "        node = Node(value)",                             # 18
    "        if self.head is None:",                          # 19
    "            self.head = node",                           # 20
    "            return",                                     # 21
    "        # Walk to the last node",                        # 22
    "        current = self.head",                            # 23
    "        while current.next is not None:",                # 24
    "            current = current.next",                     # 25
    "        current.next = node",                            # 26
    "",                                                       # 27
    "    def delete(self, value):",                           # 28
    "        if self.head is None:",                          # 29
    "            return",                                     # 30
    "        # Deleting the head just moves head forward",    # 31
    "        if self.head.value == value:",                   # 32
    "            self.head = self.head.next",                 # 33
    "            return",                                     # 34
    "        # Find the node before the one to delete",       # 35
    "        current = self.head",                            # 36
    "        while current.next is not None:",                # 37
    "            if current.next.value == value:",            # 38
    "                current.next = current.next.next",       # 39
    "                return",                                 # 40
    "            current = current.next",                     # 41
    "",                                                       # 42
    "    def search(self, value):",                           # 43
    "        current = self.head",                            # 44
    "        index = 0",                                      # 45
    "        while current is not None:",                     # 46
    "            if current.value == value:",                 # 47
    "                return index",                           # 48
    "            current = current.next",                     # 49
    "            index += 1",                                 # 50
    "        return -1",                                      # 51
]


class _Arena:
    """Mutable working list; `snapshot` freezes it for a Step."""

    def __init__(self):
        self.values: List[Number]          = []
        self.nexts:  List[Optional[int]]   = []
        self.head:   Optional[int]         = None

    def append(self, value: Number, next_idx: Optional[int] = None) -> int:
        self.values.append(value)
        self.nexts.append(next_idx)
        return len(self.values) - 1

    def snapshot(self) -> LinkedListState:
        return LinkedListState(
            nodes=tuple(ListNode(value=v, next=n, id=i) for i, (v, n) in enumerate(zip(self.values, self.nexts))),
            head=self.head,
        )


def linked_list(values: List[Number]) -> Generator[Step, None, None]:
    arr  = list(values[:MAX_STRUCTURE_ELEMENTS])
    ll   = _Arena()
    sb   = StepBuilder(arr, snapshot=ll.snapshot)

    yield sb.build("Starting Linked List Operations", 1, operation="initialize")
    yield sb.build("Created an empty linked list", 9, operation="initialize")

    # ---- insert at head ---------------------------------------------------
    for i in range(min(HEAD_INSERTS, len(arr))):
        value = arr[i]
        yield sb.build(f"Inserting {value} at the head", 12,
                       comparisons=[i], operation="insertAtHead", current_value=value)
        ll.head = ll.append(value, ll.head)
        yield sb.build(f"Inserted {value} at the head", 15,
                       operation="insertAtHead", highlight_nodes=[ll.head])

    # ---- insert at tail ---------------------------------------------------
    for i in range(HEAD_INSERTS, min(HEAD_INSERTS + TAIL_INSERTS, len(arr))):
        value = arr[i]
        yield sb.build(f"Inserting {value} at the tail", 18,
                       comparisons=[i], operation="insertAtTail", current_value=value)

        idx = ll.head
        while True:
            yield sb.build(f"Traversing: at node with value {ll.values[idx]}", 25,
                           operation="insertAtTail", highlight_nodes=[idx])
            if ll.nexts[idx] is None:
                break
            idx = ll.nexts[idx]

        new_idx = ll.append(value)
        ll.nexts[idx] = new_idx
        yield sb.build(f"Inserted {value} at the tail", 26,
                       operation="insertAtTail", highlight_nodes=[new_idx])

    if not arr:
        yield sb.final("Linked List operations complete!", 51, operation="complete")
        return

    # ---- search -----------------------------------------------------------
    target = arr[len(arr) // 2]
    yield sb.build(f"Searching for value {target}", 43, operation="search", current_value=target)

    idx, index, found = ll.head, 0, False
    while idx is not None:
        yield sb.build(f"Checking node with value {ll.values[idx]}", 47,
                       operation="search", highlight_nodes=[idx])
        if ll.values[idx] == target:
            found = True
            yield sb.build(f"Found {target} at index {index}", 48,
                           operation="search", highlight_nodes=[idx])
            break
        idx = ll.nexts[idx]
        index += 1

    if not found:
        yield sb.build(f"Value {target} not found in the list", 51, operation="search")

    # ---- delete -----------------------------------------------------------
    target = arr[0]
    yield sb.build(f"Deleting value {target}", 28, operation="delete", current_value=target)

    if ll.values[ll.head] == target:
        old_head = ll.head
        yield sb.build(f"Value {target} found at the head", 32,
                       operation="delete", highlight_nodes=[old_head])
        ll.head = ll.nexts[old_head]
        yield sb.build(f"Deleted {target} from the head", 33,
                       operation="delete", deleted_node=old_head)
    else:
        idx, found = ll.head, False
        while idx is not None:
            yield sb.build(f"Checking node with value {ll.values[idx]}", 38,
                           operation="delete", highlight_nodes=[idx])
            nxt = ll.nexts[idx]
            if nxt is not None and ll.values[nxt] == target:
                found = True
                yield sb.build(f"Found {target} at the next node", 38,
                               operation="delete", highlight_nodes=[nxt])
                ll.nexts[idx] = ll.nexts[nxt]
                yield sb.build(f"Deleted {target} by updating next pointer", 39,
                               operation="delete", deleted_node=nxt)
                break
            idx = nxt

        if not found:
            yield sb.build(f"Value {target} not found in the list", 41, operation="delete")

    yield sb.final("Linked List operations complete!", 51, operation="complete")
