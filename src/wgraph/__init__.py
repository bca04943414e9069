from .topology import (
    INFINITY,
    WeightedGraph,
    articulation_points,
    connected_components,
    depth_first,
    dijkstras,
    is_connected,
    is_empty,
)

__all__ = [
    "INFINITY",
    "WeightedGraph",
    "articulation_points",
    "connected_components",
    "depth_first",
    "dijkstras",
    "is_connected",
    "is_empty",
]
