"""
bst_insertion.py — Binary Search Tree Insertion
================================================
Inserts the (truncated) input one value at a time.  Each descent emits a
"go left" / "go right" decision step highlighting the node being
compared, before a child is created or descended into.  Values already
in the tree are skipped with an explicit step.
"""

from typing import Generator, List

from algorithms.payloads import MAX_STRUCTURE_ELEMENTS, Number
from algorithms.step import Step, StepBuilder
from algorithms.tree_arena import PositionTree, left_of, right_of


CODE: List[str] = [
    "class TreeNode:",                                        # 1
    "    def __init__(self, value):",                         # 2
    "        self.value = value",                             # 3
    "        self.left = None",                               # 4
    "        self.right = None",                              # 5
    "",                                                       # 6
    "",                                                       # 7
    "def insert_into_bst(root, value):",                      # 8
    "    # If the tree is empty, create a new node",          # 9
    "    if root is None:",                                   # 10
    "        return TreeNode(value)",                         # 11
    "",                                                       # 12
    "    # Otherwise, recur down the tree",                   # 13
    "    if value < root.value:",                             # 14
    "        # Insert into the left subtree",                 # 15
    "        root.left = insert_into_bst(root.left, value)",  # 16
    "    elif value > root.value:",                           # 17
    "        # Insert into the right subtree",                # 18
    "        root.right = insert_into_bst(root.right, value)",  # 19
    "",                                                       # 20
    "    # Duplicates are ignored; return the unchanged node",  # 21
    "    return root",                                        # 22
]


def bst_insertion(values: List[Number]) -> Generator[Step, None, None]:
    arr  = list(values[:MAX_STRUCTURE_ELEMENTS])
    tree = PositionTree()
    sb   = StepBuilder(arr, snapshot=tree.snapshot)

    yield sb.build("Starting BST Insertion", 1)

    for i, value in enumerate(arr):
        yield sb.build(f"Inserting value: {value}", 8, comparisons=[i], current_value=value)

        if not len(tree):
            tree.place(1, value)
            yield sb.build(f"Created root node with value {value}", 11, highlight_nodes=[1])
            continue

        pos = 1
        while True:
            node_value = tree.value_at(pos)

            if value < node_value:
                yield sb.build(f"{value} < {node_value}, going to left child", 14, highlight_nodes=[pos])
                child = left_of(pos)
                if child not in tree:
                    tree.place(child, value)
                    yield sb.build(f"Inserted {value} as left child of {node_value}", 16, highlight_nodes=[child])
                    break
                pos = child

            elif value > node_value:
                yield sb.build(f"{value} > {node_value}, going to right child", 17, highlight_nodes=[pos])
                child = right_of(pos)
                if child not in tree:
                    tree.place(child, value)
                    yield sb.build(f"Inserted {value} as right child of {node_value}", 19, highlight_nodes=[child])
                    break
                pos = child

            else:
                yield sb.build(f"Value {value} already exists in the tree, not inserting", 21, highlight_nodes=[pos])
                break

    yield sb.final("BST construction complete!", 22)
