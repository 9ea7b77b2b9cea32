from .connectivity import (
    Connectivity,
    check_connectivity,
    connected_components,
    is_connected,
    reachable,
)
from .cliques import Clique, all_cliques, maximal_cliques, maximum_clique, clique_number
from .naming import describe_graph

__all__ = [
    "Connectivity",
    "check_connectivity",
    "connected_components",
    "is_connected",
    "reachable",
    "Clique",
    "all_cliques",
    "maximal_cliques",
    "maximum_clique",
    "clique_number",
    "describe_graph",
]
