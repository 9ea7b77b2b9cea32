from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from graphictools.graph import Graph

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connectivity:
    """
    Connectivity grades of a graph.

    For undirected graphs only plain connectivity is meaningful:
    ``strongly`` mirrors ``weakly`` and ``unilaterally`` is always False.
    The latter is a fixed convention, not the graph-theoretic property
    (a connected undirected graph is trivially unilateral).
    """

    strongly: bool
    weakly: bool
    unilaterally: bool

    def describe(self, directed: bool) -> str:
        """One-line summary: "Connected", "Strongly Connected", ..."""
        if not directed:
            return "Connected" if self.weakly else "Disconnected"
        if self.strongly:
            return "Strongly Connected"
        if self.unilaterally:
            return "Unilaterally Connected"
        if self.weakly:
            return "Weakly Connected"
        return "Disconnected"


def reachable(start: int, adjacency: list[list[bool]]) -> list[bool]:
    """Vertices reachable from start (start included), by iterative DFS."""
    n = len(adjacency)
    visited = [False] * n
    visited[start] = True
    stack = [start]
    while stack:
        node = stack.pop()
        row = adjacency[node]
        for nbr in range(n):
            if row[nbr] and not visited[nbr]:
                visited[nbr] = True
                stack.append(nbr)
    return visited


def check_connectivity(graph: Graph, directed: Optional[bool] = None) -> Connectivity:
    """
    Classify a graph as strongly / weakly / unilaterally connected.

    Semantics for degenerate cases:
      - no vertices -> all three True (vacuously)
      - one vertex  -> connected; strongly and unilaterally for digraphs

    Unilateral connectivity is only searched for when the digraph is
    weakly but not strongly connected; otherwise it equals ``strongly``.
    """
    if directed is None:
        directed = graph.directed
    n = graph.number_of_nodes()
    if n == 0:
        return Connectivity(strongly=True, weakly=True, unilaterally=True)

    adj = graph.adjacency_matrix(directed=directed)
    radj = graph.reverse_adjacency_matrix(directed=directed)

    strongly = all(reachable(0, adj)) and all(reachable(0, radj))

    both = [[adj[i][j] or radj[i][j] for j in range(n)] for i in range(n)]
    weakly = all(reachable(0, both))

    if weakly and not strongly:
        reach = [reachable(i, adj) for i in range(n)]
        unilaterally = all(
            reach[i][j] or reach[j][i]
            for i in range(n)
            for j in range(i + 1, n)
        )
    else:
        unilaterally = strongly

    result = Connectivity(
        strongly=strongly if directed else weakly,
        weakly=weakly,
        unilaterally=unilaterally if directed else False,
    )
    log.debug("connectivity of %d-vertex graph (directed=%s): %s", n, directed, result)
    return result


def is_connected(graph: Graph) -> bool:
    """Plain connectivity, ignoring edge direction."""
    return check_connectivity(graph, directed=False).weakly


def connected_components(graph: Graph) -> list[tuple[str, ...]]:
    """Vertex sets of the components (direction ignored), in node order."""
    adj = graph.adjacency_matrix(directed=False)
    n = graph.number_of_nodes()
    seen = [False] * n
    components: list[tuple[str, ...]] = []
    for start in range(n):
        if seen[start]:
            continue
        comp = reachable(start, adj)
        members = tuple(graph.nodes[i] for i in range(n) if comp[i])
        for i in range(n):
            if comp[i]:
                seen[i] = True
        components.append(members)
    return components
