"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS from node 0 over a randomly synthesised directed
graph.  Yields a Step at every meaningful event:
  1. Dequeue a node                       →  current = node
  2. Examine each neighbour               →  "Checking neighbor …"
  3. Enqueue an unseen neighbour          →  it joins `visited`
     or skip an already-visited one
  4. After a node's full neighbour scan   →  running "Current BFS order"

`visited` is every node ever enqueued, ascending, on every step.
"""

import random
from collections import deque
from typing import Deque, Generator, List, Optional, Set

from algorithms.graph_source import synthesize
from algorithms.payloads import Number
from algorithms.step import Step, StepBuilder


CODE: List[str] = [
    "from collections import deque",                          # 1
    "",                                                       # 2
    "",                                                       # 3
    "def bfs(graph, start):",                                 # 4
    "    visited = {start}",                                  # 5
    "    queue = deque([start])",                             # 6
    "    order = []",                                         # 7
    "",                                                       # 8
    "    while queue:",                                       # 9
    "        # Take the oldest discovered node",              # 10
    "        node = queue.popleft()",                         # 11
    "        order.append(node)",                             # 12
    "",                                                       # 13
    "        # Look at every outgoing neighbor",              # 14
    "        for neighbor in graph[node]:",                   # 15
    "            if neighbor in visited:",                    # 16
    "                continue",                               # 17
    "            # First time we see it: mark and enqueue",   # 18
    "            visited.add(neighbor)",                      # 19
    "            queue.append(neighbor)",                     # 20
    "",                                                       # 21
    "    return order",                                       # 22
]


def bfs(
    values: List[Number],
    rng: Optional[random.Random] = None,
) -> Generator[Step, None, None]:
    """
    Args:
        values : Input array; its (truncated) length sets the node count.
        rng    : Randomness for graph synthesis (unseeded when None).

    Yields:
        Step – one per event (dequeue, neighbour-check, enqueue/skip, order).
    """
    arr, graph, frozen = synthesize(values, rng)
    sb = StepBuilder(arr, snapshot=lambda: frozen)

    yield sb.build("Starting BFS on graph", 4)

    order: List[int] = []
    if graph.node_count():
        start = 0
        visited: Set[int]     = {start}
        queue:   Deque[int]   = deque([start])
        yield sb.build(f"Starting at node {start}", 5, visited=visited, current=start)

        while queue:
            node = queue.popleft()
            order.append(node)
            yield sb.build(f"Visiting node {node}", 11, visited=visited, current=node)

            for nbr, _ in graph.neighbours(node):
                yield sb.build(f"Checking neighbor {nbr} of node {node}", 15, visited=visited, current=node)

                if nbr in visited:
                    yield sb.build(f"Node {nbr} already visited, skipping", 17, visited=visited, current=node)
                    continue

                visited.add(nbr)
                queue.append(nbr)
                yield sb.build(f"Marking node {nbr} as visited and adding to queue", 19,
                               visited=visited, current=node)

            yield sb.build(f"Current BFS order: {_join(order)}", 12, visited=visited, current=node)
    else:
        visited = set()

    yield sb.final(f"BFS traversal complete! Order: {_join(order)}", 22, visited=visited)


def _join(order: List[int]) -> str:
    return ", ".join(str(n) for n in order)
