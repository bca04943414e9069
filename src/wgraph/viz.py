import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from wgraph.topology import WeightedGraph, articulation_points, connected_components


def circular_layout(graph: WeightedGraph, *, spacing: float = 3.0):
    """
    Place each component on its own circle, components side by side.
    Returns {vertex: (x, y)}.
    """
    pos = {}
    for i, comp in enumerate(connected_components(graph)):
        verts = comp.vertices
        n = len(verts)
        cx = i * spacing
        if n == 1:
            pos[verts[0]] = (cx, 0.0)
            continue
        angles = np.linspace(0.0, 2 * np.pi, n, endpoint=False)
        for v, a in zip(verts, angles):
            pos[v] = (cx + np.cos(a), np.sin(a))
    return pos


def render_graph(
    graph: WeightedGraph,
    out_png,
    *,
    title="Weighted Graph",
    show_weights=True,
    highlight_articulation=True,
):
    """
    Draw vertices, weighted edges, and highlight articulation points.
    """
    pos = circular_layout(graph)
    cuts = set(articulation_points(graph)) if highlight_articulation else set()

    fig, ax = plt.subplots(figsize=(9, 6))

    for u, v, w in graph.edges():
        (x0, y0), (x1, y1) = pos[u], pos[v]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.2, zorder=1)
        if show_weights:
            ax.text((x0 + x1) / 2, (y0 + y1) / 2, str(w), fontsize=8, color="dimgray", zorder=2)

    verts = graph.vertices
    if verts:
        xy = np.array([pos[v] for v in verts])
        colors = ["crimson" if v in cuts else "steelblue" for v in verts]
        ax.scatter(xy[:, 0], xy[:, 1], s=220, c=colors, edgecolors="black", linewidths=0.8, zorder=3)
        for v, (x, y) in zip(verts, xy):
            ax.annotate(str(v), (x, y), ha="center", va="center", fontsize=8, color="white", zorder=4)

    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")

    plt.tight_layout()
    plt.savefig(out_png, dpi=220)
    plt.close(fig)
