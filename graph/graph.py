"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for a synthesised graph.  The traversal
generators read it and freeze it into each Step's payload.

Responsibilities:
  1. Building nodes & edges              (add / create)
  2. Adjacency queries                   (neighbours, get_edge_between)
  3. Random-graph factory                (generate_random)

Design decisions:
  - Nodes stored in a dict keyed by integer id, in creation order.
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge_id)]`
    is maintained incrementally and keeps insertion order, which is the
    order traversals examine neighbours in.
  - Always directed: an edge i → j says nothing about j → i.
"""

import random
from typing import Dict, List, Optional, Tuple

from config.logging import get_logger
from graph.edge import Edge
from graph.node import Node

logger = get_logger(__name__)

# out-degree of every generated node is drawn from this range (inclusive)
OUT_DEGREE_RANGE = (2, 3)
WEIGHT_RANGE     = (1, 10)


class Graph:
    """
    Attributes:
        nodes    : {node_id: Node}
        edges    : {edge_id: Edge}
        weighted : bool – whether edges carry weights
        _adj     : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, weighted: bool = False):
        self.nodes:    Dict[int, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.weighted: bool            = weighted
        self._adj:     Dict[int, List[Tuple[int, str]]] = {}

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: int) -> Node:
        return self.add_node(Node(node_id))

    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        self._adj.setdefault(edge.source, []).append((edge.target, edge.id))
        return edge

    def create_edge(self, source: int, target: int, weight: Optional[int] = None) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, Edge]]:
        """Return [(neighbour_id, edge)] in the order the edges were added."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]

    def get_edge_between(self, a: int, b: int) -> Optional[Edge]:
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    def has_edge(self, a: int, b: int) -> bool:
        return self.get_edge_between(a, b) is not None

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    # ==================================================================
    # GENERATOR — Factory class-method
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int,
        rng: random.Random,
        weighted: bool = False,
    ) -> "Graph":
        """
        Random directed graph on nodes 0..num_nodes-1.

        Each node gets an out-degree drawn from OUT_DEGREE_RANGE, capped
        at num_nodes - 1 so the distinct-neighbour draw always
        terminates on tiny graphs.  Neighbours are rejection-sampled
        (no self loops, no repeated targets).  Weighted graphs draw an
        integer weight from WEIGHT_RANGE per edge.
        """
        g = cls(weighted=weighted)
        for i in range(num_nodes):
            g.create_node(i)

        for i in range(num_nodes):
            degree = min(rng.randint(*OUT_DEGREE_RANGE), num_nodes - 1)
            for _ in range(degree):
                nbr = rng.randrange(num_nodes)
                while nbr == i or g.has_edge(i, nbr):
                    nbr = rng.randrange(num_nodes)
                weight = rng.randint(*WEIGHT_RANGE) if weighted else None
                g.create_edge(i, nbr, weight)

        logger.debug(f"generated graph: {g!r}")
        return g

    # ==================================================================
    # Dunder
    # ==================================================================
    def __repr__(self) -> str:
        kind = "weighted" if self.weighted else "unweighted"
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, {kind})"
