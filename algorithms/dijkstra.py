"""
dijkstra.py — Dijkstra's Algorithm
===================================
Array-scan Dijkstra from node 0 over a randomly synthesised, weighted,
directed graph (weights 1..10).

Each round selects the unvisited node with the smallest tentative
distance (strict <, so ties go to the earliest node id), then checks
every outgoing edge and emits an extra step for each improvement.
Unreachable nodes are still selected once their turn comes; relaxing
from infinity never improves anything.

After the main loop, one "Shortest path to node k" step is emitted per
reachable node (ascending id) carrying the reconstructed `path`.
"""

import math
import random
from typing import Dict, Generator, List, Optional

from algorithms.graph_source import format_distance, synthesize
from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "def dijkstra(graph, start):",                            # 1
    "    # Every node starts infinitely far away, except the start",  # 2
    "    distances = {node: float('inf') for node in graph}",  # 3
    "    distances[start] = 0",                               # 4
    "    previous = {node: None for node in graph}",          # 5
    "    unvisited = list(graph)",                            # 6
    "",                                                       # 7
    "    while unvisited:",                                   # 8
    "        # Pick the unvisited node with the smallest distance",  # 9
    "        current = min(unvisited, key=distances.get)",    # 10
    "        unvisited.remove(current)",                      # 11
    "",                                                       # 12
    "        # Relax every outgoing edge",                    # 13
    "        for neighbor, weight in graph[current].items():",  # 14
    "            alt = distances[current] + weight",          # 15
    "            if alt < distances[neighbor]:",              # 16
    "                distances[neighbor] = alt",              # 17
    "                previous[neighbor] = current",           # 18
    "",                                                       # 19
    "    return distances, previous",                         # 20
]


def dijkstra(
    values: List[Number],
    rng: Optional[random.Random] = None,
) -> Generator[Step, None, None]:
    arr, graph, frozen = synthesize(values, rng, weighted=True)
    sb = StepBuilder(arr, snapshot=lambda: frozen)

    yield sb.build("Starting Dijkstra's Algorithm on weighted graph", 1)

    nodes = graph.node_ids()
    if not nodes:
        yield sb.final("Dijkstra's algorithm complete!", 20)
        return

    start = 0
    distances: Dict[int, float]         = {n: math.inf for n in nodes}
    previous:  Dict[int, Optional[int]] = {n: None for n in nodes}
    distances[start] = 0
    unvisited: List[int] = list(nodes)

    yield sb.build(f"Initialized distances: Start node {start} = 0, all others = Infinity", 4,
                   distances=distances, current=start)

    while unvisited:
        current = unvisited[0]
        for n in unvisited[1:]:
            if distances[n] < distances[current]:
                current = n

        done = [n for n in nodes if n not in unvisited]
        yield sb.build(f"Selected node {current} with minimum distance {format_distance(distances[current])}", 10,
                       distances=distances, current=current, visited=done)
        unvisited.remove(current)
        done = [n for n in nodes if n not in unvisited]

        for nbr, edge in graph.neighbours(current):
            alt = distances[current] + edge.weight
            yield sb.build(
                f"Checking neighbor {nbr}: Current distance = {format_distance(distances[nbr])}, "
                f"New potential distance = {format_distance(alt)}", 15,
                distances=distances, current=current, visited=done,
            )
            if alt < distances[nbr]:
                distances[nbr] = alt
                previous[nbr]  = current
                yield sb.build(f"Updated distance to node {nbr} = {alt}, previous = {current}", 17,
                               distances=distances, current=current, visited=done)

    for node in nodes:
        if node == start:
            continue
        path = _path_to(previous, node)
        if path[0] != start:
            continue
        route = " → ".join(str(n) for n in path)
        yield sb.build(f"Shortest path to node {node}: {route} (distance: {distances[node]})", 20,
                       distances=distances, path=path, visited=nodes)

    yield sb.final("Dijkstra's algorithm complete!", 20, distances=distances, visited=nodes)


def _path_to(previous: Dict[int, Optional[int]], node: int) -> List[int]:
    path: List[int] = []
    cur: Optional[int] = node
    while cur is not None:
        path.append(cur)
        cur = previous[cur]
    return path[::-1]
