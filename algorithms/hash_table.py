"""
hash_table.py — Hash Table (separate chaining)
===============================================
Fixed BUCKET_COUNT buckets; hash(key) = int(key) mod BUCKET_COUNT.

For every input value: a "hashing" step, a "bucket index computed" step
(highlighting the bucket), then either an update of an existing key or
an append of a new `key -> "Value-<key>"` pair.  Afterwards one get
(first value) and one delete (second value, if present), each closing
with a found / not-found step.
"""

from typing import Generator, List, Optional

from algorithms.payloads import MAX_STRUCTURE_ELEMENTS, HashEntry, HashTableState, Number
from algorithms.step import Step, StepBuilder

BUCKET_COUNT = 10


CODE: List[str] = [
    "class HashTable:",                                       # 1
    "    def __init__(self, size=10):",                       # 2
    "        self.buckets = [[] for _ in range(size)]",       # 3
    "        self.size = size",                               # 4
    "",                                                       # 5
    "    def _hash(self, key):",                              # 6
    "        # Map the key onto a bucket index",              # 7
    "        return int(key) % self.size",                    # 8
    "",                                                       # 9
    "    def set(self, key, value):",                         # 10
    "        index = self._hash(key)",                        # 11
    "        bucket = self.buckets[index]",                   # 12
    "",                                                       # 13
    "        # Update the value if the key is already present",  # 14
    "        for entry in bucket:",                           # 15
    "            if entry[0] == key:",                        # 16
    "                entry[1] = value",                       # 17
    "                return",                                 # 18
    "",                                                       # 19
    "        # Otherwise chain a new key-value pair onto the bucket",  # 20
    "        bucket.append([key, value])",                    # 21
    "",                                                       # 22
    "    def get(self, key):",                                # 23
    "        index = self._hash(key)",                        # 24
    "        for entry_key, entry_value in self.buckets[index]:",  # 25
    "            if entry_key == key:",                       # 26
    "                return entry_value",                     # 27
    "        return None",                                    # 28
    "",                                                       # 29
    "    def remove(self, key):",                             # 30
    "        index = self._hash(key)",                        # 31
    "        bucket = self.buckets[index]",                   # 32
    "        for i, (entry_key, _) in enumerate(bucket):",    # 33
    "            if entry_key == key:",                       # 34
    "                del bucket[i]",                          # 35
    "                return True",                            # 36
    "        return False",                                   # 37
]


def bucket_index(key: Number, size: int = BUCKET_COUNT) -> int:
    return int(key) % size


class _Table:

    def __init__(self):
        self.buckets: List[List[HashEntry]] = []

    @property
    def size(self) -> int:
        return len(self.buckets)

    def create(self, size: int) -> None:
        self.buckets = [[] for _ in range(size)]

    def find(self, index: int, key: Number) -> Optional[int]:
        """Slot of `key` inside bucket `index`, or None."""
        for slot, entry in enumerate(self.buckets[index]):
            if entry.key == key:
                return slot
        return None

    def snapshot(self) -> HashTableState:
        return HashTableState(buckets=tuple(tuple(b) for b in self.buckets), size=self.size)


def hash_table(values: List[Number]) -> Generator[Step, None, None]:
    arr   = list(values[:MAX_STRUCTURE_ELEMENTS])
    table = _Table()
    sb    = StepBuilder(arr, snapshot=table.snapshot)

    yield sb.build("Starting Hash Table Operations", 1, operation="initialize")
    table.create(BUCKET_COUNT)
    yield sb.build(f"Created a hash table with {BUCKET_COUNT} buckets", 3, operation="initialize")

    # ---- insert -----------------------------------------------------------
    for i, key in enumerate(arr):
        value = f"Value-{key}"
        index = bucket_index(key)

        yield sb.build(f"Hashing key {key}", 11, comparisons=[i], operation="insert", current_value=key)
        yield sb.build(f"Hash value for key {key} is {index}", 8,
                       operation="insert", highlight_index=index, current_value=key)

        slot = table.find(index, key)
        if slot is not None:
            table.buckets[index][slot] = HashEntry(key=key, value=value)
            yield sb.build(f"Key {key} already exists, updating value to {value}", 17,
                           operation="insert", highlight_index=index, current_value=key)
        else:
            table.buckets[index].append(HashEntry(key=key, value=value))
            yield sb.build(f"Added new key-value pair: {key} -> {value} at bucket {index}", 21,
                           operation="insert", highlight_index=index, current_value=key)

    # ---- get --------------------------------------------------------------
    if arr:
        key   = arr[0]
        index = bucket_index(key)
        yield sb.build(f"Retrieving value for key {key}", 23, operation="get", current_value=key)

        slot = table.find(index, key)
        if slot is not None:
            yield sb.build(f'Found value "{table.buckets[index][slot].value}" for key {key}', 27,
                           operation="get", highlight_index=index, current_value=key)
        else:
            yield sb.build(f"Key {key} not found", 28,
                           operation="get", highlight_index=index, current_value=key)

    # ---- delete -----------------------------------------------------------
    if len(arr) > 1:
        key   = arr[1]
        index = bucket_index(key)
        yield sb.build(f"Deleting key {key}", 30, operation="delete", current_value=key)

        slot = table.find(index, key)
        if slot is not None:
            del table.buckets[index][slot]
            yield sb.build(f"Deleted key {key} from bucket {index}", 35,
                           operation="delete", highlight_index=index, current_value=key)
        else:
            yield sb.build(f"Key {key} not found for deletion", 37,
                           operation="delete", highlight_index=index, current_value=key)

    yield sb.final("Hash Table operations complete!", 37, operation="complete")
