from .graph import WeightedGraph
from .traversal import breadth_first, depth_first
from .connectivity import connected_components, is_connected, is_empty
from .shortest_path import INFINITY, dijkstras, is_reachable, min_distance
from .articulation import articulation_points

__all__ = [
    "WeightedGraph",
    "depth_first",
    "breadth_first",
    "is_empty",
    "is_connected",
    "connected_components",
    "INFINITY",
    "dijkstras",
    "min_distance",
    "is_reachable",
    "articulation_points",
]
