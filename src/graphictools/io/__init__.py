from .parse import parse_sequence, format_sequence
from .nxgraph import graph_to_nx, nx_to_graph, graph_to_g6

__all__ = [
    "parse_sequence",
    "format_sequence",
    "graph_to_nx",
    "nx_to_graph",
    "graph_to_g6",
]
