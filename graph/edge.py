"""
edge.py — Graph Edge
====================
A directed connection between two node ids.

Design decisions:
  - `source` and `target` are node ids, NOT Node references.
    Edges stay plain values with no references back into the graph.
  - `weight` is None for unweighted graphs (BFS / DFS) so the frozen
    GraphEdge omits it; Dijkstra graphs always carry an integer weight.
"""

from typing import Optional


class Edge:
    """
    Attributes:
        id     : "<source>-><target>", unique because the generator never
                 adds the same ordered pair twice.
        source : ID of the tail node.
        target : ID of the head node.
        weight : Integer cost, or None when the graph is unweighted.
    """

    __slots__ = ("id", "source", "target", "weight")

    def __init__(self, source: int, target: int, weight: Optional[int] = None):
        self.id:     str           = f"{source}->{target}"
        self.source: int           = source
        self.target: int           = target
        self.weight: Optional[int] = weight


    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
