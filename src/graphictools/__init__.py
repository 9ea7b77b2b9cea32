"""
graphictools: degree-sequence realization (Havel-Hakimi and its directed
analogue), line graphs, connectivity grades and clique enumeration for
small graphs.
"""

from .graph import (
    Graph,
    MalformedNodeLabelError,
    degree_pairs,
    degree_sequence,
    edge_label,
    empty_graph,
    node_label,
)
from .sequences import (
    is_graphic_undirected,
    is_graphic_directed,
    build_undirected_graph,
    build_directed_graph,
)
from .linegraph import line_graph, iterated_line_graphs
from .utils import (
    Connectivity,
    check_connectivity,
    connected_components,
    is_connected,
    all_cliques,
    maximal_cliques,
    maximum_clique,
    clique_number,
    describe_graph,
)
from .io import parse_sequence, graph_to_nx, nx_to_graph, graph_to_g6
from .analysis import Analysis, AnalysisOptions, analyze_undirected, analyze_directed
from .viz.draw import clique_colors, draw_analysis

__all__ = [
    # Data model
    "Graph",
    "MalformedNodeLabelError",
    "degree_pairs",
    "degree_sequence",
    "edge_label",
    "empty_graph",
    "node_label",
    # Sequences
    "is_graphic_undirected",
    "is_graphic_directed",
    "build_undirected_graph",
    "build_directed_graph",
    # Line graphs
    "line_graph",
    "iterated_line_graphs",
    # Utils
    "Connectivity",
    "check_connectivity",
    "connected_components",
    "is_connected",
    "all_cliques",
    "maximal_cliques",
    "maximum_clique",
    "clique_number",
    "describe_graph",
    # IO
    "parse_sequence",
    "graph_to_nx",
    "nx_to_graph",
    "graph_to_g6",
    # Analysis
    "Analysis",
    "AnalysisOptions",
    "analyze_undirected",
    "analyze_directed",
    # Viz
    "clique_colors",
    "draw_analysis",
]
