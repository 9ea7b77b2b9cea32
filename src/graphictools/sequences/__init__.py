from .validate import is_graphic_undirected, is_graphic_directed
from .build import build_undirected_graph, build_directed_graph
from .havel_hakimi import DirectedDegreeState, directed_greedy_edges, havel_hakimi_edges

__all__ = [
    "is_graphic_undirected",
    "is_graphic_directed",
    "build_undirected_graph",
    "build_directed_graph",
    "DirectedDegreeState",
    "directed_greedy_edges",
    "havel_hakimi_edges",
]
