"""
bst_traversal.py — BST Traversals
==================================
Builds the BST silently (same rules as bst_insertion, duplicates
ignored), then walks it three times: in-order, pre-order and
post-order.  Each walk is fully stepped and closes with a
"<Order> Traversal Result: [...]" step.
"""

from typing import Generator, List, NamedTuple

from algorithms.payloads import MAX_STRUCTURE_ELEMENTS, Number
from algorithms.step import Step, StepBuilder
from algorithms.tree_arena import PositionTree


CODE: List[str] = [
    "def inorder_traversal(root):",                           # 1
    "    result = []",                                        # 2
    "",                                                       # 3
    "    def traverse(node):",                                # 4
    "        if node is None:",                               # 5
    "            return",                                     # 6
    "        # First recur on the left child",                # 7
    "        traverse(node.left)",                            # 8
    "        # Then visit the node",                          # 9
    "        result.append(node.value)",                      # 10
    "        # Finally recur on the right child",             # 11
    "        traverse(node.right)",                           # 12
    "",                                                       # 13
    "    traverse(root)",                                     # 14
    "    return result",                                      # 15
    "",                                                       # 16
    "",                                                       # 17
    "def preorder_traversal(root):",                          # 18
    "    result = []",                                        # 19
    "",                                                       # 20
    "    def traverse(node):",                                # 21
    "        if node is None:",                               # 22
    "            return",                                     # 23
    "        # First visit the node",                         # 24
    "        result.append(node.value)",                      # 25
    "        # Then recur on the left child",                 # 26
    "        traverse(node.left)",                            # 27
    "        # Finally recur on the right child",             # 28
    "        traverse(node.right)",                           # 29
    "",                                                       # 30
    "    traverse(root)",                                     # 31
    "    return result",                                      # 32
    "",                                                       # 33
    "",                                                       # 34
    "def postorder_traversal(root):",                         # 35
    "    result = []",                                        # 36
    "",                                                       # 37
    "    def traverse(node):",                                # 38
    "        if node is None:",                               # 39
    "            return",                                     # 40
    "        # First recur on the left child",                # 41
    "        traverse(node.left)",                            # 42
    "        # Then recur on the right child",                # 43
    "        traverse(node.right)",                           # 44
    "        # Finally visit the node",                       # 45
    "        result.append(node.value)",                      # 46
    "",                                                       # 47
    "    traverse(root)",                                     # 48
    "    return result",                                      # 49
]


class _Order(NamedTuple):
    """Where each traversal's narrated events point in CODE."""
    name:   str
    shape:  str
    visit_first: bool     # pre-order visits before descending
    visit_last:  bool     # post-order visits after both subtrees
    start:  int
    left:   int
    visit:  int
    right:  int
    result: int


ORDERS = (
    _Order("Inorder",   "Left -> Root -> Right", False, False, 1,  8,  10, 12, 15),
    _Order("Preorder",  "Root -> Left -> Right", True,  False, 18, 27, 25, 29, 32),
    _Order("Postorder", "Left -> Right -> Root", False, True,  35, 42, 46, 44, 49),
)


def bst_traversal(values: List[Number]) -> Generator[Step, None, None]:
    arr  = list(values[:MAX_STRUCTURE_ELEMENTS])
    tree = PositionTree()
    for value in arr:
        tree.insert(value)

    sb = StepBuilder(arr, snapshot=tree.snapshot)

    yield sb.build("Starting BST Traversal", 1)

    for order in ORDERS:
        yield sb.build(f"Starting {order.name} Traversal ({order.shape})", order.start)

        result: List[Number] = []
        if len(tree):
            yield from _walk(sb, tree, 1, order, result)

        listed = ", ".join(str(v) for v in result)
        yield sb.build(f"{order.name} Traversal Result: [{listed}]", order.result)

    yield sb.final("BST Traversal complete!", 49)


def _walk(
    sb: StepBuilder,
    tree: PositionTree,
    pos: int,
    order: _Order,
    result: List[Number],
) -> Generator[Step, None, None]:
    value = tree.value_at(pos)
    left  = tree.child(pos, right=False)
    right = tree.child(pos, right=True)

    if order.visit_first:
        yield sb.build(f"Visiting node {value}", order.visit, highlight_nodes=[pos])
        result.append(value)

    if left is not None:
        yield sb.build(f"Visiting left subtree of {value}", order.left, highlight_nodes=[pos])
        yield from _walk(sb, tree, left, order, result)

    if not order.visit_first and not order.visit_last:
        yield sb.build(f"Visiting node {value}", order.visit, highlight_nodes=[pos])
        result.append(value)

    if right is not None:
        yield sb.build(f"Visiting right subtree of {value}", order.right, highlight_nodes=[pos])
        yield from _walk(sb, tree, right, order, result)

    if order.visit_last:
        yield sb.build(f"Visiting node {value}", order.visit, highlight_nodes=[pos])
        result.append(value)
