"""
payloads.py — Structural Payloads
==================================
A Step always carries the primary `array`.  Data-structure and graph
generators additionally attach ONE structural payload describing the
auxiliary structure at that instant.  The payload type is the tag:

    LinkedListState  → "linkedList"
    StackState       → "stack"
    QueueState       → "queue"
    TreeState        → "binaryTree"
    HashTableState   → "hashTable"
    GraphState       → "graph"

All payloads are frozen and built from tuples, so a Step can hold one
without copying and later steps can never mutate it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

Number = Union[int, float]

# Inputs are truncated to these sizes so diagrams stay legible
MAX_STRUCTURE_ELEMENTS = 7
MAX_GRAPH_NODES        = 6


class StructureKind(str, Enum):
    LINKED_LIST = "linkedList"
    STACK       = "stack"
    QUEUE       = "queue"
    BINARY_TREE = "binaryTree"
    HASH_TABLE  = "hashTable"
    GRAPH       = "graph"


# ---------------------------------------------------------------------------
# Linked list  (index-addressed arena)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ListNode:
    value: Number
    next:  Optional[int]      # arena index of the successor, None = end of list
    id:    int

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "next": self.next, "id": self.id}


@dataclass(frozen=True)
class LinkedListState:
    kind: ClassVar[StructureKind] = StructureKind.LINKED_LIST

    nodes: Tuple[ListNode, ...] = ()
    head:  Optional[int]        = None

    def values_in_order(self) -> List[Number]:
        """Walk `next` pointers from head; unlinked arena slots are skipped."""
        out: List[Number] = []
        idx = self.head
        seen = set()
        while idx is not None and idx not in seen:
            seen.add(idx)
            node = self.nodes[idx]
            out.append(node.value)
            idx = node.next
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": [n.to_dict() for n in self.nodes], "head": self.head}


# ---------------------------------------------------------------------------
# Stack / Queue
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StackState:
    kind: ClassVar[StructureKind] = StructureKind.STACK

    items: Tuple[Number, ...] = ()     # bottom → top

    def to_dict(self) -> Dict[str, Any]:
        return {"items": list(self.items)}


@dataclass(frozen=True)
class QueueState:
    kind: ClassVar[StructureKind] = StructureKind.QUEUE

    items: Tuple[Number, ...] = ()     # front → rear

    def to_dict(self) -> Dict[str, Any]:
        return {"items": list(self.items)}


# ---------------------------------------------------------------------------
# Binary tree  (1-indexed heap-style positions)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TreeNode:
    value:    Number
    position: int
    left:     Optional[int] = None     # position of left child
    right:    Optional[int] = None     # position of right child

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "position": self.position, "left": self.left, "right": self.right}


@dataclass(frozen=True)
class TreeState:
    kind: ClassVar[StructureKind] = StructureKind.BINARY_TREE

    tree_nodes: Tuple[TreeNode, ...] = ()

    def node_at(self, position: int) -> Optional[TreeNode]:
        for node in self.tree_nodes:
            if node.position == position:
                return node
        return None

    def in_order_values(self) -> List[Number]:
        out: List[Number] = []

        def walk(pos: Optional[int]) -> None:
            node = self.node_at(pos) if pos else None
            if node is None:
                return
            walk(node.left)
            out.append(node.value)
            walk(node.right)

        walk(1)
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {"treeNodes": [n.to_dict() for n in self.tree_nodes]}


# ---------------------------------------------------------------------------
# Hash table  (separate chaining)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class HashEntry:
    key:   Number
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class HashTableState:
    kind: ClassVar[StructureKind] = StructureKind.HASH_TABLE

    buckets: Tuple[Tuple[HashEntry, ...], ...] = ()
    size:    int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hashTable": {
                "buckets": [[e.to_dict() for e in bucket] for bucket in self.buckets],
                "size": self.size,
            }
        }


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphEdge:
    source: int
    target: int
    weight: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"source": self.source, "target": self.target}
        if self.weight is not None:
            d["weight"] = self.weight
        return d


@dataclass(frozen=True)
class GraphState:
    kind: ClassVar[StructureKind] = StructureKind.GRAPH

    nodes: Tuple[int, ...]       = ()
    edges: Tuple[GraphEdge, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "graph": {
                "nodes": [{"id": n} for n in self.nodes],
                "edges": [e.to_dict() for e in self.edges],
            }
        }


Structure = Union[LinkedListState, StackState, QueueState, TreeState, HashTableState, GraphState]


__all__ = [
    "Number",
    "MAX_STRUCTURE_ELEMENTS",
    "MAX_GRAPH_NODES",
    "StructureKind",
    "ListNode",
    "LinkedListState",
    "StackState",
    "QueueState",
    "TreeNode",
    "TreeState",
    "HashEntry",
    "HashTableState",
    "GraphEdge",
    "GraphState",
    "Structure",
]
