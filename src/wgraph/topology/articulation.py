from __future__ import annotations

import logging
from typing import List

from .graph import V, WeightedGraph
from .connectivity import is_connected

logger = logging.getLogger(__name__)


def articulation_points(graph: WeightedGraph[V]) -> List[V]:
    """Vertices whose removal leaves the rest of the graph disconnected.

    Brute force: one scratch copy and one connectivity test per vertex,
    O(V * (V + E)). Results follow native vertex order; ``graph`` itself is
    never modified.
    """
    points: List[V] = []
    for v in graph:
        scratch = graph.copy()
        scratch.remove_vertex(v)
        if not is_connected(scratch):
            points.append(v)
    logger.debug("Articulation points: %s", points)
    return points
