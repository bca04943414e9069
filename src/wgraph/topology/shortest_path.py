from __future__ import annotations

import sys
from typing import Dict, Optional, Set

from .graph import V, WeightedGraph
from .connectivity import is_empty

# Distance assigned to vertices not reachable from the source.
INFINITY = sys.maxsize


def is_reachable(distance: int) -> bool:
    return distance != INFINITY


def min_distance(
    graph: WeightedGraph[V],
    distances: Dict[V, int],
    processed: Set[V],
) -> Optional[V]:
    """Linear scan for the unprocessed vertex with the smallest distance.

    Uses ``<=`` against the running minimum, so among equal distances the
    last vertex in native order is picked. Returns None only when every
    vertex is processed.
    """
    best: Optional[V] = None
    best_dist = INFINITY
    for v in graph:
        if v not in processed and distances[v] <= best_dist:
            best_dist = distances[v]
            best = v
    return best


def dijkstras(graph: WeightedGraph[V], source: V) -> Dict[V, int]:
    """Shortest-path distance from ``source`` to every vertex.

    O(V^2) with linear-scan extraction; weights are assumed non-negative.
    Unreachable vertices map to ``INFINITY``. An empty graph yields ``{}``;
    otherwise ``source`` must be a vertex of ``graph`` (``KeyError``).
    """
    dist: Dict[V, int] = {v: INFINITY for v in graph}
    if is_empty(graph):
        return dist
    if source not in dist:
        raise KeyError(source)
    dist[source] = 0

    spt: Set[V] = set()
    for _ in range(graph.num_vertices()):
        u = min_distance(graph, dist, spt)
        spt.add(u)
        if dist[u] == INFINITY:
            continue
        for v, w in graph.neighbours(u):
            if v not in spt and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    return dist
