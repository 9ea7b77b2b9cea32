from __future__ import annotations

from typing import Dict, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib import colormaps
from matplotlib.colors import to_hex

from graphictools.analysis import Analysis
from graphictools.io.nxgraph import graph_to_nx
from graphictools.utils.cliques import Clique
from .layouts import base_layout, layout_line_graph_from_base


def clique_colors(cliques: Sequence[Clique], cmap: str = "tab10") -> Dict[Clique, str]:
    """
    Display color per clique, keyed by the clique itself.

    Colors cycle through the colormap in clique order; the cliques are
    not modified.
    """
    cm = colormaps[cmap]
    n_colors = getattr(cm, "N", 10)
    return {c: to_hex(cm(i % n_colors)) for i, c in enumerate(cliques)}


def _node_colors(labels, cliques: Sequence[Clique], default: str = "#9ecae1"):
    """Color each vertex by the largest maximal clique containing it."""
    colors = clique_colors(cliques)
    best: Dict[str, Clique] = {}
    for c in cliques:
        if len(c) < 2:
            continue
        for v in c:
            if v not in best or len(c) > len(best[v]):
                best[v] = c
    return [colors[best[v]] if v in best else default for v in labels]


def draw_analysis(
    analysis: Analysis,
    *,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    highlight_cliques: bool = True,
    save_path: Optional[str] = None,
):
    """
    Draw the realized graph and its line graph side by side.

    Vertices of the line graph start at the midpoints of the edges they
    stand for. With highlight_cliques, vertices of the realized
    (undirected) graph are colored by maximal clique.

    If save_path is set, saves a PNG there and closes the figure;
    otherwise shows it. Returns the matplotlib Figure.
    """
    if not analysis.graphic or analysis.graph is None or analysis.line_graph is None:
        raise ValueError("nothing to draw: the input sequence is not graphic")

    G, L = analysis.graph, analysis.line_graph
    G_nx, L_nx = graph_to_nx(G), graph_to_nx(L)
    pos_G = base_layout(G_nx, seed=seed)
    pos_L = layout_line_graph_from_base(G, pos_G, L, L_nx, seed=seed)

    fig, (axG, axL) = plt.subplots(1, 2, figsize=(12, 6))
    axG.set_title(f"G   |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}   {analysis.summary()}")
    axL.set_title(f"L(G)   |V|={L.number_of_nodes()}  |E|={L.number_of_edges()}")
    for ax in (axG, axL):
        ax.set_axis_off()

    node_color = "#9ecae1"
    if highlight_cliques and analysis.maximal_cliques:
        node_color = _node_colors(G.nodes, analysis.maximal_cliques)

    if G.number_of_nodes() > 0:
        nx.draw_networkx(
            G_nx, pos=pos_G, ax=axG, node_size=node_size, width=edge_width,
            node_color=node_color, arrows=G.directed,
        )
    if L.number_of_nodes() > 0:
        nx.draw_networkx(
            L_nx, pos=pos_L, ax=axL, node_size=node_size, width=edge_width,
            font_size=7, arrows=L.directed,
        )

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()
    return fig
