from __future__ import annotations

from typing import List, Optional

from graphictools.graph import Graph
from .labeled import line_graph


def iterated_line_graphs(
    graph: Graph,
    k: int,
    directed: Optional[bool] = None,
) -> List[Graph]:
    """
    Return [L^0(G), ..., L^k(G)], stopping early once an iterate has no edges.

    L^0(G) is G itself.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    out = [graph]
    cur = graph
    for _ in range(k):
        if cur.number_of_edges() == 0:
            break
        cur = line_graph(cur, directed)
        out.append(cur)
    return out
