from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional


@dataclass(frozen=True)
class EdgeRecord:
    """A single row of an edge-list export.

    ``v`` and ``weight`` are None for rows that only declare an isolated vertex.
    """

    u: str
    v: Optional[str] = None
    weight: Optional[int] = None

    @property
    def is_vertex_only(self) -> bool:
        return self.v is None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EdgeRecord":
        """Create an EdgeRecord from a dict (e.g., CSV row).

        Expected keys (case-insensitive, whitespace-insensitive):
            u, v, weight   (``from``/``to`` are accepted for ``u``/``v``)
        """
        norm = {str(k).strip().lower(): v for k, v in data.items() if k is not None}
        for alias, key in (("from", "u"), ("to", "v")):
            if key not in norm and alias in norm:
                norm[key] = norm[alias]

        def text(key: str) -> str:
            val = norm.get(key)
            return "" if val is None else str(val).strip()

        if "u" not in norm:
            raise KeyError("Missing required field 'u'")
        u = text("u")
        if not u:
            raise ValueError("Empty required field 'u'")

        v, raw_weight = text("v"), text("weight")
        if not v and not raw_weight:
            return cls(u=u)
        if not v:
            raise ValueError("Edge row has a weight but no 'v' endpoint")
        if v == u:
            raise ValueError(f"Self-loop on vertex {u!r}")
        try:
            weight = int(raw_weight)
        except ValueError as e:
            raise ValueError(f"Invalid integer for 'weight': {norm.get('weight')!r}") from e
        if weight < 0:
            raise ValueError(f"Negative weight {weight} on edge {u}-{v}")
        return cls(u=u, v=v, weight=weight)


@dataclass
class GraphReport:
    """Result of running every algorithm over one graph."""

    vertices: int
    edges: int
    total_weight: int
    connected: bool
    components: List[List[Hashable]]
    articulation_points: List[Hashable]
    source: Optional[Hashable] = None
    distances: Dict[Hashable, Optional[int]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertices": self.vertices,
            "edges": self.edges,
            "total_weight": self.total_weight,
            "connected": self.connected,
            "component_count": len(self.components),
            "components": [[str(v) for v in comp] for comp in self.components],
            "articulation_points": [str(v) for v in self.articulation_points],
            "source": None if self.source is None else str(self.source),
            "distances": {str(k): d for k, d in self.distances.items()},
        }
