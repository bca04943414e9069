import logging
from typing import Hashable, Optional

from wgraph.models import GraphReport
from wgraph.topology import (
    WeightedGraph,
    articulation_points,
    connected_components,
    dijkstras,
    is_connected,
    is_empty,
    is_reachable,
)

logger = logging.getLogger(__name__)


class GraphAnalyzer:
    """Runs every algorithm over a graph and collects the results."""

    def __init__(self, source: Optional[Hashable] = None):
        self.source = source

    def analyze(self, graph: WeightedGraph) -> GraphReport:
        if self.source is not None and not is_empty(graph) and self.source not in graph:
            raise KeyError(self.source)

        comps = connected_components(graph)
        aps = articulation_points(graph)

        distances = {}
        if self.source is not None:
            distances = {
                v: (d if is_reachable(d) else None)
                for v, d in dijkstras(graph, self.source).items()
            }

        logger.info(
            "Analyzed %d vertices / %d edges: %d component(s), %d articulation point(s)",
            graph.num_vertices(),
            graph.num_edges(),
            len(comps),
            len(aps),
        )

        return GraphReport(
            vertices=graph.num_vertices(),
            edges=graph.num_edges(),
            total_weight=graph.total_weight(),
            connected=is_connected(graph),
            components=[c.vertices for c in comps],
            articulation_points=aps,
            source=self.source,
            distances=distances,
        )
