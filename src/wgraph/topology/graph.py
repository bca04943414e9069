from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar

V = TypeVar("V", bound=Hashable)


class WeightedGraph(Generic[V]):
    """Undirected adjacency-map graph with integer edge weights.

    Vertices: any hashable identifier
    Edges: symmetric, one weight per unordered pair

    Vertex enumeration follows insertion order. The algorithms rely on that
    order being stable for tie-breaks and output ordering.
    """

    def __init__(self) -> None:
        self._adj: Dict[V, Dict[V, int]] = {}

    @property
    def vertices(self) -> List[V]:
        return list(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self._adj == other._adj

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.num_vertices()}, edges={self.num_edges()})"

    def has_vertex(self, v: V) -> bool:
        return v in self._adj

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def total_weight(self) -> int:
        return sum(w for _u, _v, w in self.edges())

    def add_vertex(self, v: V) -> None:
        self._adj.setdefault(v, {})

    def remove_vertex(self, v: V) -> None:
        """Remove ``v`` and every edge incident to it."""
        for n in self._adj.pop(v):
            del self._adj[n][v]

    def add_edge(self, u: V, v: V, weight: int) -> None:
        """Connect two existing vertices; re-adding an edge replaces its weight."""
        if u not in self._adj:
            raise KeyError(u)
        if v not in self._adj:
            raise KeyError(v)
        if u == v:
            raise ValueError(f"Self-loop on vertex {u!r} is not allowed")
        w = int(weight)
        if w != weight:
            raise ValueError(f"Edge weight must be an integer, got {weight!r}")
        self._adj[u][v] = w
        self._adj[v][u] = w

    def remove_edge(self, u: V, v: V) -> None:
        del self._adj[u][v]
        del self._adj[v][u]

    def set_edge_weight(self, u: V, v: V, weight: int) -> None:
        if not self.are_adjacent(u, v):
            raise KeyError((u, v))
        self.add_edge(u, v, weight)

    def are_adjacent(self, u: V, v: V) -> bool:
        return v in self._adj.get(u, {})

    def get_edge_weight(self, u: V, v: V) -> int:
        return self._adj[u][v]

    def neighbours(self, v: V) -> List[Tuple[V, int]]:
        return list(self._adj[v].items())

    def degree(self, v: V) -> int:
        return len(self._adj[v])

    def weighted_degree(self, v: V) -> int:
        return sum(self._adj[v].values())

    def edges(self) -> List[Tuple[V, V, int]]:
        """Each undirected edge once, ordered by first endpoint in native order."""
        seen = set()
        out: List[Tuple[V, V, int]] = []
        for u, nbrs in self._adj.items():
            for v, w in nbrs.items():
                if v in seen:
                    continue
                out.append((u, v, w))
            seen.add(u)
        return out

    def copy(self) -> "WeightedGraph[V]":
        g: WeightedGraph[V] = WeightedGraph()
        g._adj = {v: dict(nbrs) for v, nbrs in self._adj.items()}
        return g

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[V, V, int]],
        vertices: Iterable[V] = (),
    ) -> "WeightedGraph[V]":
        g: WeightedGraph[V] = cls()
        for v in vertices:
            g.add_vertex(v)
        for u, v, w in edges:
            g.add_vertex(u)
            g.add_vertex(v)
            g.add_edge(u, v, w)
        return g
