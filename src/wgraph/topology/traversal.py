from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from .graph import V, WeightedGraph


def depth_first(graph: WeightedGraph[V], start: V) -> Set[V]:
    """Vertices reachable from ``start`` (``start`` included).

    ``start`` must be a vertex of ``graph``; otherwise the accessor raises
    ``KeyError``.
    """
    visited: Set[V] = set()
    stack = [start]
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        for v, _w in graph.neighbours(u):
            if v not in visited:
                stack.append(v)
    return visited


def breadth_first(graph: WeightedGraph[V], start: V) -> List[V]:
    """Vertices reachable from ``start`` in breadth-first visiting order."""
    order: List[V] = []
    seen: Set[V] = {start}
    queue: Deque[V] = deque([start])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v, _w in graph.neighbours(u):
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return order
