from __future__ import annotations

import logging
from typing import List, Set

from .graph import V, WeightedGraph
from .traversal import depth_first

logger = logging.getLogger(__name__)


def is_empty(graph: WeightedGraph[V]) -> bool:
    return graph.num_vertices() == 0


def is_connected(graph: WeightedGraph[V]) -> bool:
    """True for the empty graph, or when a traversal from the first vertex reaches all of them."""
    if is_empty(graph):
        return True
    first = next(iter(graph))
    return len(depth_first(graph, first)) == graph.num_vertices()


def connected_components(graph: WeightedGraph[V]) -> List[WeightedGraph[V]]:
    """Split ``graph`` into independent component graphs.

    Components are emitted in the order their seed vertex appears in the
    source graph; each holds its vertices in that same order plus every
    induced edge.
    """
    components: List[WeightedGraph[V]] = []
    visited: Set[V] = set()
    for seed in graph:
        if seed in visited:
            continue
        reached = depth_first(graph, seed)
        visited |= reached

        comp: WeightedGraph[V] = WeightedGraph()
        members = [v for v in graph if v in reached]
        for v in members:
            comp.add_vertex(v)
        for u in members:
            for v, w in graph.neighbours(u):
                comp.add_edge(u, v, w)
        components.append(comp)

    logger.debug("Found %d connected component(s) in %r", len(components), graph)
    return components
