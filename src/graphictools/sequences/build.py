from __future__ import annotations

import logging
from typing import Optional, Sequence

from graphictools.graph import Graph
from .havel_hakimi import directed_greedy_edges, havel_hakimi_edges

log = logging.getLogger(__name__)


def build_undirected_graph(sequence: Sequence[int]) -> Optional[Graph]:
    """
    Realize a graphic sequence as a simple undirected graph on v1..vN.

    Vertex v{i+1} gets degree sequence[i]. Edges are listed in the order
    the Havel-Hakimi elimination discovers them, each as
    (eliminated vertex, neighbor).

    Returns None if the sequence is not graphic; a partial graph is never
    returned.
    """
    edges = havel_hakimi_edges(sequence)
    if edges is None:
        log.debug("refusing to build undirected graph from %s", list(sequence))
        return None
    return Graph.from_index_edges(len(sequence), edges, directed=False)


def build_directed_graph(
    in_degrees: Sequence[int],
    out_degrees: Sequence[int],
    *,
    forbid_antiparallel: bool = False,
) -> Optional[Graph]:
    """
    Realize an (in, out) degree pair as a simple directed graph on v1..vN.

    Returns None if the pair is not realized by the greedy construction.
    """
    edges = directed_greedy_edges(
        in_degrees, out_degrees, forbid_antiparallel=forbid_antiparallel
    )
    if edges is None:
        log.debug(
            "refusing to build directed graph from in=%s out=%s",
            list(in_degrees), list(out_degrees),
        )
        return None
    return Graph.from_index_edges(len(in_degrees), edges, directed=True)
