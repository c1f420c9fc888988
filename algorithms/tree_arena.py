"""
tree_arena.py — Position-Encoded Binary Tree
=============================================
Working state shared by the tree generators (BST insertion, BST
traversal, Binary Tree data structure).

Nodes live in a dict keyed by 1-indexed heap-style position:
root = 1, left child of p = 2p, right child of p = 2p + 1.
Child links are never stored; they are derived from which positions
exist, so ancestry is always recoverable from positions alone.
"""

from typing import Dict, List, Optional

from algorithms.payloads import Number, TreeNode, TreeState


def left_of(position: int) -> int:
    return 2 * position


def right_of(position: int) -> int:
    return 2 * position + 1


class PositionTree:

    def __init__(self):
        # position -> value, in insertion order
        self._nodes: Dict[int, Number] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, position: int) -> bool:
        return position in self._nodes

    def value_at(self, position: int) -> Number:
        return self._nodes[position]

    def child(self, position: int, right: bool) -> Optional[int]:
        """Position of the left/right child if that node exists."""
        pos = right_of(position) if right else left_of(position)
        return pos if pos in self._nodes else None

    def subtree_positions(self, position: int) -> List[int]:
        """Pre-order positions of every node under (and including) `position`."""
        if position not in self._nodes:
            return []
        return (
            [position]
            + self.subtree_positions(left_of(position))
            + self.subtree_positions(right_of(position))
        )

    def leftmost(self, position: int) -> int:
        while left_of(position) in self._nodes:
            position = left_of(position)
        return position

    def snapshot(self) -> TreeState:
        return TreeState(tree_nodes=tuple(
            TreeNode(
                value=value,
                position=pos,
                left=self.child(pos, right=False),
                right=self.child(pos, right=True),
            )
            for pos, value in self._nodes.items()
        ))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, position: int, value: Number) -> None:
        self._nodes[position] = value

    def insert(self, value: Number, duplicates_right: bool = False) -> Optional[int]:
        """
        Insert without narration.  Returns the new node's position, or
        None when `value` is already present and duplicates are ignored.
        """
        pos = 1
        while pos in self._nodes:
            current = self._nodes[pos]
            if value < current:
                pos = left_of(pos)
            elif value > current or duplicates_right:
                pos = right_of(pos)
            else:
                return None
        self._nodes[pos] = value
        return pos

    def remove(self, position: int) -> None:
        """
        Standard BST deletion of the node at `position`.

        A node with one child is replaced by that child's whole subtree,
        re-encoded so each moved node keeps the 2p / 2p+1 rule relative
        to its new parent.  A node with two children takes the value of
        its in-order successor, which is then removed instead.
        """
        left  = self.child(position, right=False)
        right = self.child(position, right=True)

        if left is not None and right is not None:
            successor = self.leftmost(right)
            self._nodes[position] = self._nodes[successor]
            self.remove(successor)
            return

        del self._nodes[position]
        survivor = left if left is not None else right
        if survivor is not None:
            self._move_subtree(survivor, position)

    def _move_subtree(self, src: int, dst: int) -> None:
        moved: Dict[int, Number] = {}

        def collect(old: int, new: int) -> None:
            if old not in self._nodes:
                return
            moved[new] = self._nodes[old]
            collect(left_of(old), left_of(new))
            collect(right_of(old), right_of(new))

        collect(src, dst)
        for pos in self.subtree_positions(src):
            del self._nodes[pos]
        self._nodes.update(moved)
