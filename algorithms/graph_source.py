"""
graph_source.py — Graph Synthesis for Traversals
=================================================
The input is a flat array, so the graph generators build a random
directed graph with one node per (truncated) input value and freeze it
once into the payload every step of the trace shares.
"""

import random
from typing import List, Optional, Tuple

from algorithms.payloads import MAX_GRAPH_NODES, GraphEdge, GraphState, Number
from algorithms.random_source import make_rng
from graph import Graph


def freeze(graph: Graph) -> GraphState:
    return GraphState(
        nodes=tuple(graph.node_ids()),
        edges=tuple(
            GraphEdge(source=e.source, target=e.target, weight=e.weight)
            for e in graph.edges.values()
        ),
    )


def synthesize(
    values: List[Number],
    rng: Optional[random.Random],
    weighted: bool = False,
) -> Tuple[List[Number], Graph, GraphState]:
    """
    Truncate `values` to MAX_GRAPH_NODES and build a random graph on
    nodes 0..n-1.

    Returns:
        (truncated array, working Graph, frozen GraphState)
    """
    arr   = list(values[:MAX_GRAPH_NODES])
    graph = Graph.generate_random(len(arr), make_rng(rng), weighted=weighted)
    return arr, graph, freeze(graph)


def format_distance(d: float) -> str:
    return "Infinity" if d == float("inf") else str(d)
