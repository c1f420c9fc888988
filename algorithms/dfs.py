"""
dfs.py — Depth-First Search
============================
Recursive DFS from node 0 over a randomly synthesised directed graph.

Every neighbour check is a step.  An unvisited neighbour gets a
"recursively visiting" step, the recursion, then a "backtracking" step
whose `current` is the node returned to.  Recursion depth is bounded
by the node cap, so plain recursion is fine.
"""

import random
from typing import Generator, List, Optional, Set

from algorithms.graph_source import synthesize
from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder
from graph import Graph


CODE: List[str] = [
    "def dfs(graph, start):",                                 # 1
    "    visited = set()",                                    # 2
    "    order = []",                                         # 3
    "",                                                       # 4
    "    def visit(node):",                                   # 5
    "        # Mark the current node as visited",             # 6
    "        visited.add(node)",                              # 7
    "        order.append(node)",                             # 8
    "",                                                       # 9
    "        # Recur for every unvisited neighbor",           # 10
    "        for neighbor in graph[node]:",                   # 11
    "            if neighbor not in visited:",                # 12
    "                visit(neighbor)",                        # 13
    "",                                                       # 14
    "    visit(start)",                                       # 15
    "    return order",                                       # 16
]


def dfs(
    values: List[Number],
    rng: Optional[random.Random] = None,
) -> Generator[Step, None, None]:
    arr, graph, frozen = synthesize(values, rng)
    sb = StepBuilder(arr, snapshot=lambda: frozen)

    visited: Set[int] = set()
    order:   List[int] = []

    yield sb.build("Starting DFS on graph", 1)

    if graph.node_count():
        yield sb.build("Starting DFS from node 0", 15, current=0)
        yield from _visit(sb, graph, 0, visited, order)

    listed = ", ".join(str(n) for n in order)
    yield sb.final(f"DFS traversal complete! Order: {listed}", 16, visited=visited)


def _visit(
    sb: StepBuilder,
    graph: Graph,
    node: int,
    visited: Set[int],
    order: List[int],
) -> Generator[Step, None, None]:
    visited.add(node)
    yield sb.build(f"Marking node {node} as visited", 7, visited=visited, current=node)

    order.append(node)
    yield sb.build(f"Adding node {node} to result", 8, visited=visited, current=node)

    for nbr, _ in graph.neighbours(node):
        yield sb.build(f"Checking neighbor {nbr} of node {node}", 11, visited=visited, current=node)

        if nbr in visited:
            yield sb.build(f"Neighbor {nbr} already visited, skipping", 12, visited=visited, current=node)
            continue

        yield sb.build(f"Neighbor {nbr} not visited, recursively visiting", 13, visited=visited, current=node)
        yield from _visit(sb, graph, nbr, visited, order)
        yield sb.build(f"Backtracking to node {node} after visiting {nbr}", 13, visited=visited, current=node)
