"""
binary_tree.py — Binary Tree (data structure tour)
===================================================
Runs the classic BST operations over the truncated input, in order:

  1. insert   every value (equal values go right)
  2. search   for the first value
  3. traverse in-order, closing with a result step
  4. delete   the first value (leaf / one child / two children)

Every step carries `operation` so a renderer can label the phase.
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
    "class BinaryTree:",                                      # 8
    "    def __init__(self):",                                # 9
    "        self.root = None",                               # 10
    "",                                                       # 11
    "    def insert(self, value):",                           # 12
    "        node = TreeNode(value)",                         # 13
    "        if self.root is None:",                          # 14
    "            self.root = node",                           # 15
    "            return",                                     # 16
    "",                                                       # 17
    "        current = self.root",                            # 18
    "        while True:",                                    # 19
    "            # Smaller values go left, equal or larger go right",  # 20
    "            if value < current.value:",                  # 21
    "                if current.left is None:",               # 22
    "                    current.left = node",                # 23
    "                    return",                             # 24
    "                current = current.left",                 # 25
    "            else:",                                      # 26
    "                if current.right is None:",              # 27
    "                    current.right = node",               # 28
    "                    return",                             # 29
    "                current = current.right",                # 30
    "",                                                       # 31
    "    def search(self, value):",                           # 32
    "        current = self.root",                            # 33
    "        while current is not None:",                     # 34
    "            if value < current.value:",                  # 35
    "                current = current.left",                 # 36
    "            elif value > current.value:",                # 37
    "                current = current.right",                # 38
    "            else:",                                      # 39
    "                return True",                            # 40
    "        return False",                                   # 41
    "",                                                       # 42
    "    def in_order(self, node, visit):",                   # 43
    "        if node is not None:",                           # 44
    "            self.in_order(node.left, visit)",            # 45
    "            visit(node.value)",                          # 46
    "            self.in_order(node.right, visit)",           # 47
    "",                                                       # 48
    "    def delete(self, node, value):",                     # 49
    "        if node is None:",                               # 50
    "            return None",                                # 51
    "        if value < node.value:",                         # 52
    "            node.left = self.delete(node.left, value)",  # 53
    "        elif value > node.value:",                       # 54
    "            node.right = self.delete(node.right, value)",  # 55
    "        else:",                                          # 56
    "            # Zero or one child: replace the node with that child",  # 57
    "            if node.left is None:",                      # 58
    "                return node.right",                      # 59
    "            if node.right is None:",                     # 60
    "                return node.left",                       # 61
    "            # Two children: copy the in-order successor, then delete it",  # 62
    "            successor = node.right",                     # 63
    "            while successor.left is not None:",          # 64
    "                successor = successor.left",             # 65
    "            node.value = successor.value",               # 66
    "            node.right = self.delete(node.right, successor.value)",  # 67
    "        return node",                                    # 68
]


def binary_tree(values: List[Number]) -> Generator[Step, None, None]:
    arr  = list(values[:MAX_STRUCTURE_ELEMENTS])
    tree = PositionTree()
    sb   = StepBuilder(arr, snapshot=tree.snapshot)

    yield sb.build("Starting Binary Tree Operations", 1)

    # ---- insert -----------------------------------------------------------
    for i, value in enumerate(arr):
        yield sb.build(f"Inserting value: {value}", 12, comparisons=[i], operation="insert", current_value=value)

        if not len(tree):
            tree.place(1, value)
            yield sb.build(f"Created root node with value {value}", 15, operation="insert", highlight_nodes=[1])
            continue

        pos = 1
        while True:
            node_value = tree.value_at(pos)
            goes_left  = value < node_value

            if goes_left:
                yield sb.build(f"{value} < {node_value}, going to left child", 21,
                               operation="insert", highlight_nodes=[pos])
            else:
                yield sb.build(f"{value} >= {node_value}, going to right child", 26,
                               operation="insert", highlight_nodes=[pos])

            child = left_of(pos) if goes_left else right_of(pos)
            if child in tree:
                pos = child
                continue

            tree.place(child, value)
            side = "left" if goes_left else "right"
            yield sb.build(f"Inserted {value} as {side} child of {node_value}", 23 if goes_left else 28,
                           operation="insert", highlight_nodes=[child])
            break

    if not arr:
        yield sb.final("Binary Tree operations complete!", 68)
        return

    # ---- search -----------------------------------------------------------
    target = arr[0]
    yield sb.build(f"Searching for value {target}", 32, operation="search", current_value=target)
    found = yield from _descend(sb, tree, target, "search", (34, 36, 38))
    if found is not None:
        yield sb.build(f"Found value {target}!", 40, operation="search", highlight_nodes=[found])
    else:
        yield sb.build(f"Value {target} not found in the tree", 41, operation="search")

    # ---- in-order traversal ----------------------------------------------
    yield sb.build("Starting in-order traversal (Left, Root, Right)", 43, operation="traverse")
    result: List[Number] = []
    yield from _in_order(sb, tree, 1, result)
    listed = ", ".join(str(v) for v in result)
    yield sb.build(f"In-order traversal result: [{listed}]", 43, operation="traverse")

    # ---- delete -----------------------------------------------------------
    yield sb.build(f"Deleting value {target}", 49, operation="delete", current_value=target)
    pos = yield from _descend(sb, tree, target, "delete", (49, 53, 55))

    if pos is None:
        yield sb.build(f"Value {target} not found, nothing to delete", 51, operation="delete")
    else:
        left  = tree.child(pos, right=False)
        right = tree.child(pos, right=True)

        if left is None and right is None:
            tree.remove(pos)
            yield sb.build(f"Node {target} is a leaf, removed it", 59,
                           operation="delete", deleted_node=pos)
        elif left is None or right is None:
            tree.remove(pos)
            line = 59 if left is None else 61
            yield sb.build(f"Node {target} has one child, replaced it with its subtree", line,
                           operation="delete", deleted_node=pos, highlight_nodes=[pos])
        else:
            successor = tree.leftmost(right)
            succ_value = tree.value_at(successor)
            yield sb.build(f"Node {target} has two children, in-order successor is {succ_value}", 63,
                           operation="delete", highlight_nodes=[pos, successor])
            tree.remove(pos)
            yield sb.build(f"Replaced {target} with successor {succ_value} and removed the successor's old node", 67,
                           operation="delete", deleted_node=pos, highlight_nodes=[pos])

    yield sb.final("Binary Tree operations complete!", 68)


def _descend(sb: StepBuilder, tree: PositionTree, target: Number, operation: str, lines):
    """
    Walk from the root toward `target`, one narrated step per node.
    Returns the matching position, or None when the walk falls off.
    """
    check_line, left_line, right_line = lines
    pos = 1
    while pos in tree:
        node_value = tree.value_at(pos)
        yield sb.build(f"Checking node with value {node_value}", check_line,
                       operation=operation, highlight_nodes=[pos])

        if target < node_value:
            yield sb.build(f"{target} < {node_value}, going to left child", left_line,
                           operation=operation, highlight_nodes=[pos])
            pos = left_of(pos)
        elif target > node_value:
            yield sb.build(f"{target} > {node_value}, going to right child", right_line,
                           operation=operation, highlight_nodes=[pos])
            pos = right_of(pos)
        else:
            return pos
    return None


def _in_order(sb: StepBuilder, tree: PositionTree, pos: int, result: List[Number]):
    if pos not in tree:
        return
    value = tree.value_at(pos)
    left  = tree.child(pos, right=False)
    right = tree.child(pos, right=True)

    if left is not None:
        yield sb.build(f"Traversing left subtree of {value}", 45, operation="traverse", highlight_nodes=[pos])
        yield from _in_order(sb, tree, left, result)

    yield sb.build(f"Visiting node {value}", 46, operation="traverse", highlight_nodes=[pos])
    result.append(value)

    if right is not None:
        yield sb.build(f"Traversing right subtree of {value}", 47, operation="traverse", highlight_nodes=[pos])
        yield from _in_order(sb, tree, right, result)
