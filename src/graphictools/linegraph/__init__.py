from .labeled import line_graph, line_graph_index_edges
from .iterate import iterated_line_graphs

__all__ = [
    "line_graph",
    "line_graph_index_edges",
    "iterated_line_graphs",
]
