"""Drawing helpers for generated trees and bipartite graphs.

Meant for eyeballing small outputs while writing a generator program:

```python
from randgraph import bipartite_graph
from randgraph.visualize import draw_edges

colors = {}
edges = bipartite_graph(12, 15, colors, rng=1)
draw_edges(edges, colors=colors, layout="bipartite").savefig("g.png")
```
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .bipartite import BLACK, WHITE, ColorBuffer
from .edges import Edge, EdgeList
from .exceptions import ConfigError

_LAYOUTS = ("spring", "kamada_kawai", "shell", "bipartite")


def to_networkx(
    edges: Iterable[Edge],
    colors: Optional[ColorBuffer] = None,
    nodes: Optional[Iterable[int]] = None,
) -> nx.Graph:
    """Build an undirected :class:`networkx.Graph` from an edge list.

    Args:
        edges: Edges to add.
        colors: Optional color buffer; nodes colored 0 or 1 get a ``color``
            attribute.
        nodes: Optional node ids to add even when isolated.

    Returns:
        The graph.
    """
    G = nx.Graph()
    if nodes is not None:
        G.add_nodes_from(nodes)
    G.add_edges_from(edges)
    if colors is not None:
        for v in G.nodes:
            try:
                c = colors[v]
            except (KeyError, IndexError):
                continue
            if c in (BLACK, WHITE):
                G.nodes[v]["color"] = int(c)
    return G


def downsample_edges(edges: Iterable[Edge], max_edges: int, seed: int = 0) -> EdgeList:
    """Randomly keep at most ``max_edges`` edges so large outputs stay readable."""
    edges = list(edges)
    if len(edges) <= max_edges:
        return edges
    rng = random.Random(seed)
    return rng.sample(edges, max_edges)


def draw_edges(
    edges: Iterable[Edge],
    *,
    colors: Optional[ColorBuffer] = None,
    layout: str = "spring",
    node_size: int = 300,
    title: Optional[str] = None,
    ax: Optional[Axes] = None,
) -> Figure:
    """Render an edge list with NetworkX + Matplotlib.

    Args:
        edges: Edges to draw.
        colors: Optional bipartite coloring; black nodes are drawn dark,
            white nodes light.
        layout: One of ``spring``, ``kamada_kawai``, ``shell`` or
            ``bipartite`` (two columns, requires ``colors``).
        node_size: Marker size passed to NetworkX.
        title: Optional axes title.
        ax: Axes to draw into; a new figure is created when omitted.

    Returns:
        The figure containing the drawing.

    Raises:
        ConfigError: If ``layout`` is unknown, or ``bipartite`` is requested
            without colors.
    """
    if layout not in _LAYOUTS:
        raise ConfigError(f"Unknown layout: {layout}")
    G = to_networkx(edges, colors)

    if layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        if colors is None:
            raise ConfigError("bipartite layout needs a color assignment")
        top = [v for v, c in G.nodes(data="color") if c == BLACK]
        pos = nx.bipartite_layout(G, top)

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    node_colors = [
        {BLACK: "tab:gray", WHITE: "tab:orange"}.get(c, "tab:blue")
        for _, c in G.nodes(data="color")
    ]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(G, pos, ax=ax, width=1.2, alpha=0.6)
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=8, font_color="black")

    if title:
        ax.set_title(title, fontsize=14)
    ax.set_axis_off()
    fig.tight_layout()
    return fig


__all__ = ["to_networkx", "downsample_edges", "draw_edges"]
