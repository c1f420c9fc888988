"""
algorithms/__init__.py — Algorithm & Data-Structure Registry
=============================================================
Single source of truth for every generator the visualizer knows about.

    from algorithms import REGISTRY, DATA_STRUCTURES, get_algorithm

Two catalogs, each a tuple of Category groups:

    ALGORITHM_CATEGORIES       sorting · searching · tree · graph · dataStructure
    DATA_STRUCTURE_CATEGORIES  linear · nonlinear

REGISTRY / DATA_STRUCTURES flatten them into {key: AlgoInfo}.  Both are
built once at import time and never mutated; a malformed catalog
(duplicate key, non-callable generator) raises RegistryError right here
rather than at the first request.

Adding a new algorithm is: write the generator + CODE listing, add one
AlgoInfo entry to the right Category.
"""

import random
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from config.logging import get_logger

# ---------------------------------------------------------------------------
# Import all generator modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort    import bubble_sort    as _bubble,    CODE as _bubble_code
from algorithms.selection_sort import selection_sort as _selection, CODE as _selection_code
from algorithms.insertion_sort import insertion_sort as _insertion, CODE as _insertion_code
from algorithms.quick_sort     import quick_sort     as _quick,     CODE as _quick_code
from algorithms.merge_sort     import merge_sort     as _merge,     CODE as _merge_code
from algorithms.heap_sort      import heap_sort      as _heap,      CODE as _heap_code
from algorithms.linear_search  import linear_search  as _linear,    CODE as _linear_code
from algorithms.binary_search  import binary_search  as _binary,    CODE as _binary_code
from algorithms.bst_insertion  import bst_insertion  as _bst_ins,   CODE as _bst_ins_code
from algorithms.bst_traversal  import bst_traversal  as _bst_trav,  CODE as _bst_trav_code
from algorithms.bfs            import bfs            as _bfs,       CODE as _bfs_code
from algorithms.dfs            import dfs            as _dfs,       CODE as _dfs_code
from algorithms.dijkstra       import dijkstra       as _dijkstra,  CODE as _dij_code
from algorithms.linked_list    import linked_list    as _ll,        CODE as _ll_code
from algorithms.stack          import stack          as _stack,     CODE as _stack_code
from algorithms.fifo_queue     import fifo_queue     as _queue,     CODE as _queue_code
from algorithms.binary_tree    import binary_tree    as _btree,     CODE as _btree_code
from algorithms.hash_table     import hash_table     as _hash,      CODE as _hash_code
from algorithms.step import Step

logger = get_logger(__name__)


class RegistryError(ValueError):
    """The static catalog is malformed."""


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each generator
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str                  # registry key, e.g. "bubbleSort"
    name:             str                  # human label, e.g. "Bubble Sort"
    category:         str                  # category key it is listed under
    fn:               Callable             # the generator function
    code:             Tuple[str, ...]      # source listing; source_line indexes it 1-based
    description:      str = ""
    time_complexity:  str = ""             # e.g. "O(n log n)"
    space_complexity: str = ""             # e.g. "O(1)"
    best_for:         str = ""
    randomized:       bool = False         # generator takes an `rng` argument

    @property
    def source(self) -> str:
        return "\n".join(self.code)

    def generate(self, values: List[Any], rng: Optional[random.Random] = None) -> List[Step]:
        """Run the generator to completion and return the whole trace."""
        steps = self.fn(values, rng) if self.randomized else self.fn(values)
        return list(steps)

    def to_dict(self, include_code: bool = False) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "key":             self.key,
            "name":            self.name,
            "category":        self.category,
            "description":     self.description,
            "timeComplexity":  self.time_complexity,
            "spaceComplexity": self.space_complexity,
            "bestFor":         self.best_for,
        }
        if include_code:
            d["code"] = self.source
        return d


@dataclass(frozen=True)
class Category:
    key:   str
    name:  str
    items: Tuple[AlgoInfo, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":   self.key,
            "name":  self.name,
            "items": [item.to_dict() for item in self.items],
        }


# ---------------------------------------------------------------------------
# Data structures (also re-listed in the algorithm catalog below)
# ---------------------------------------------------------------------------
_LINKED_LIST = AlgoInfo(
    key="linkedList", name="Linked List", category="linear", fn=_ll, code=tuple(_ll_code),
    description="A linked list is a linear data structure where elements are stored in nodes, "
                "each pointing to the next node.",
    time_complexity="Access: O(n), Insert/Delete: O(1) at head, O(n) elsewhere",
    space_complexity="O(n)",
    best_for="Dynamic collections with frequent insertions/deletions",
)

_STACK = AlgoInfo(
    key="stack", name="Stack", category="linear", fn=_stack, code=tuple(_stack_code),
    description="A stack is a LIFO (Last In, First Out) data structure where elements are added "
                "and removed from the same end.",
    time_complexity="Push/Pop: O(1)",
    space_complexity="O(n)",
    best_for="Function call management, undo operations, expression evaluation",
)

_QUEUE = AlgoInfo(
    key="queue", name="Queue", category="linear", fn=_queue, code=tuple(_queue_code),
    description="A queue is a FIFO (First In, First Out) data structure where elements are added "
                "at the rear and removed from the front.",
    time_complexity="Enqueue/Dequeue: O(1)",
    space_complexity="O(n)",
    best_for="Task scheduling, breadth-first search, print job management",
)

_BINARY_TREE = AlgoInfo(
    key="binaryTree", name="Binary Tree", category="nonlinear", fn=_btree, code=tuple(_btree_code),
    description="A binary tree is a tree data structure in which each node has at most two children, "
                "referred to as the left child and the right child.",
    time_complexity="Average: O(log n) for search, insert, delete; Worst: O(n)",
    space_complexity="O(n)",
    best_for="Hierarchical data representation, efficient searching and sorting",
)

_HASH_TABLE = AlgoInfo(
    key="hashTable", name="Hash Table", category="nonlinear", fn=_hash, code=tuple(_hash_code),
    description="A hash table is a data structure that implements an associative array abstract "
                "data type, a structure that can map keys to values.",
    time_complexity="Average: O(1) for search, insert, delete; Worst: O(n)",
    space_complexity="O(n)",
    best_for="Fast lookups, insertions, and deletions with key-value pairs",
)


DATA_STRUCTURE_CATEGORIES: Tuple[Category, ...] = (
    Category("linear", "Linear Data Structures", (_LINKED_LIST, _STACK, _QUEUE)),
    Category("nonlinear", "Non-Linear Data Structures", (_BINARY_TREE, _HASH_TABLE)),
)


# ---------------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------------
ALGORITHM_CATEGORIES: Tuple[Category, ...] = (
    Category("sorting", "Sorting Algorithms", (
        AlgoInfo(
            key="bubbleSort", name="Bubble Sort", category="sorting", fn=_bubble, code=tuple(_bubble_code),
            description="Bubble Sort repeatedly steps through the list, compares adjacent elements "
                        "and swaps them if they are in the wrong order.",
            time_complexity="O(n²)", space_complexity="O(1)",
            best_for="Small datasets or nearly sorted arrays",
        ),
        AlgoInfo(
            key="selectionSort", name="Selection Sort", category="sorting", fn=_selection,
            code=tuple(_selection_code),
            description="Selection Sort finds the minimum element from the unsorted part and puts it "
                        "at the beginning.",
            time_complexity="O(n²)", space_complexity="O(1)",
            best_for="Small datasets with minimal memory usage requirements",
        ),
        AlgoInfo(
            key="insertionSort", name="Insertion Sort", category="sorting", fn=_insertion,
            code=tuple(_insertion_code),
            description="Insertion Sort builds the final sorted array one item at a time, similar to "
                        "sorting playing cards in your hand.",
            time_complexity="O(n²)", space_complexity="O(1)",
            best_for="Small datasets or nearly sorted arrays",
        ),
        AlgoInfo(
            key="quickSort", name="Quick Sort", category="sorting", fn=_quick, code=tuple(_quick_code),
            description="Quick Sort uses a divide-and-conquer strategy, picking a 'pivot' element and "
                        "partitioning the array around it.",
            time_complexity="O(n log n) average, O(n²) worst case", space_complexity="O(log n)",
            best_for="Large datasets with random distribution",
        ),
        AlgoInfo(
            key="mergeSort", name="Merge Sort", category="sorting", fn=_merge, code=tuple(_merge_code),
            description="Merge Sort uses a divide-and-conquer strategy, dividing the array in half, "
                        "sorting each half, then merging them back together.",
            time_complexity="O(n log n)", space_complexity="O(n)",
            best_for="Large datasets with stable sorting requirements",
        ),
        AlgoInfo(
            key="heapSort", name="Heap Sort", category="sorting", fn=_heap, code=tuple(_heap_code),
            description="Heap Sort builds a max heap from the array and repeatedly extracts the "
                        "maximum element.",
            time_complexity="O(n log n)", space_complexity="O(1)",
            best_for="Large datasets with limited memory",
        ),
    )),

    Category("searching", "Searching Algorithms", (
        AlgoInfo(
            key="linearSearch", name="Linear Search", category="searching", fn=_linear,
            code=tuple(_linear_code), randomized=True,
            description="Linear Search sequentially checks each element of the list until it finds "
                        "the target value or reaches the end.",
            time_complexity="O(n)", space_complexity="O(1)",
            best_for="Small datasets or unsorted arrays",
        ),
        AlgoInfo(
            key="binarySearch", name="Binary Search", category="searching", fn=_binary,
            code=tuple(_binary_code), randomized=True,
            description="Binary Search finds the position of a target value within a sorted array by "
                        "repeatedly dividing the search interval in half.",
            time_complexity="O(log n)", space_complexity="O(1)",
            best_for="Large sorted datasets",
        ),
    )),

    Category("tree", "Tree Algorithms", (
        AlgoInfo(
            key="bstInsertion", name="BST Insertion", category="tree", fn=_bst_ins,
            code=tuple(_bst_ins_code),
            description="Binary Search Tree insertion adds a new node while maintaining the BST "
                        "property: left child < parent < right child.",
            time_complexity="O(log n) average, O(n) worst case",
            space_complexity="O(h) where h is the height of the tree",
            best_for="Ordered data storage with fast lookups",
        ),
        AlgoInfo(
            key="bstTraversal", name="BST Traversal", category="tree", fn=_bst_trav,
            code=tuple(_bst_trav_code),
            description="Binary Search Tree traversal visits all nodes in a specific order: inorder, "
                        "preorder, or postorder.",
            time_complexity="O(n)",
            space_complexity="O(h) where h is the height of the tree",
            best_for="Processing tree nodes in a specific order",
        ),
    )),

    Category("graph", "Graph Algorithms", (
        AlgoInfo(
            key="bfs", name="Breadth-First Search", category="graph", fn=_bfs, code=tuple(_bfs_code),
            randomized=True,
            description="BFS explores all neighbors at the present depth before moving on to nodes at "
                        "the next depth level.",
            time_complexity="O(V + E) where V is vertices and E is edges", space_complexity="O(V)",
            best_for="Finding shortest path in unweighted graphs",
        ),
        AlgoInfo(
            key="dfs", name="Depth-First Search", category="graph", fn=_dfs, code=tuple(_dfs_code),
            randomized=True,
            description="DFS explores as far as possible along each branch before backtracking.",
            time_complexity="O(V + E) where V is vertices and E is edges", space_complexity="O(V)",
            best_for="Topological sorting, cycle detection, and path finding",
        ),
        AlgoInfo(
            key="dijkstra", name="Dijkstra's Algorithm", category="graph", fn=_dijkstra,
            code=tuple(_dij_code), randomized=True,
            description="Dijkstra's algorithm finds the shortest path between nodes in a weighted graph.",
            time_complexity="O(V²) with array, O((V+E)logV) with priority queue", space_complexity="O(V)",
            best_for="Finding shortest paths in weighted graphs with non-negative weights",
        ),
    )),

    Category("dataStructure", "Data Structures", (
        replace(_HASH_TABLE, category="dataStructure"),
        replace(_LINKED_LIST, category="dataStructure"),
    )),
)


# ---------------------------------------------------------------------------
# Flattened lookup tables
# ---------------------------------------------------------------------------
def _index(categories: Iterable[Category], catalog: str) -> Dict[str, AlgoInfo]:
    table: Dict[str, AlgoInfo] = {}
    for cat in categories:
        for info in cat.items:
            if info.key in table:
                raise RegistryError(f"duplicate {catalog} key {info.key!r}")
            if not callable(info.fn):
                raise RegistryError(f"{catalog} {info.key!r} has no generator")
            if info.category != cat.key:
                raise RegistryError(f"{catalog} {info.key!r} is listed under {cat.key!r} "
                                    f"but declares category {info.category!r}")
            table[info.key] = info
    return table


REGISTRY:        Dict[str, AlgoInfo] = _index(ALGORITHM_CATEGORIES, "algorithm")
DATA_STRUCTURES: Dict[str, AlgoInfo] = _index(DATA_STRUCTURE_CATEGORIES, "data structure")

logger.debug(f"registry built: {len(REGISTRY)} algorithms, {len(DATA_STRUCTURES)} data structures")


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def get_data_structure(key: str) -> Optional[AlgoInfo]:
    return DATA_STRUCTURES.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in catalog order."""
    return list(REGISTRY.values())


def list_data_structures() -> List[AlgoInfo]:
    return list(DATA_STRUCTURES.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    """Filter the algorithm catalog by category key."""
    return [a for a in REGISTRY.values() if a.category == category]


__all__ = [
    "AlgoInfo",
    "Category",
    "RegistryError",
    "ALGORITHM_CATEGORIES",
    "DATA_STRUCTURE_CATEGORIES",
    "REGISTRY",
    "DATA_STRUCTURES",
    "get_algorithm",
    "get_data_structure",
    "list_algorithms",
    "list_data_structures",
    "algorithms_by_category",
]
