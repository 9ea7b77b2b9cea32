from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


class MalformedNodeLabelError(ValueError):
    """Raised when a label does not name a node of the graph."""


def node_label(i: int) -> str:
    """1-based label of the i-th vertex of a realized graph."""
    return f"v{i + 1}"


def edge_label(i: int, edge: tuple[str, str]) -> str:
    """Label of the line-graph vertex standing for edge i."""
    s, t = edge
    return f"e{i + 1}[{s},{t}]"


@dataclass(frozen=True)
class Graph:
    """
    Labeled simple graph as produced by the builders.

    nodes:    labels in canonical order (index i <-> nodes[i])
    edges:    (source, target) label pairs in discovery order; for undirected
              graphs each edge is stored once but read symmetrically
    directed: whether edge direction is significant

    The label -> index mapping is computed once here so that consumers
    never have to recover an index from the text of a label.
    """

    nodes: tuple[str, ...]
    edges: tuple[tuple[str, str], ...]
    directed: bool = False
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for i, v in enumerate(self.nodes):
            if v in index:
                raise MalformedNodeLabelError(f"duplicate node label {v!r}")
            index[v] = i
        object.__setattr__(self, "_index", index)
        for s, t in self.edges:
            self.index_of(s)
            self.index_of(t)

    @classmethod
    def from_index_edges(
        cls,
        n: int,
        edges: Iterable[tuple[int, int]],
        *,
        directed: bool = False,
    ) -> "Graph":
        """Build a graph on v1..vn from 0-based (u, v) index pairs."""
        nodes = tuple(node_label(i) for i in range(n))
        return cls(
            nodes=nodes,
            edges=tuple((nodes[u], nodes[v]) for u, v in edges),
            directed=directed,
        )

    def index_of(self, label: str) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise MalformedNodeLabelError(
                f"{label!r} is not a node of this graph"
            ) from None

    def number_of_nodes(self) -> int:
        return len(self.nodes)

    def number_of_edges(self) -> int:
        return len(self.edges)

    def index_edges(self) -> list[tuple[int, int]]:
        """Edges as 0-based index pairs, in stored order."""
        return [(self.index_of(s), self.index_of(t)) for s, t in self.edges]

    def adjacency_matrix(self, *, directed: bool | None = None) -> list[list[bool]]:
        """
        Square boolean matrix derived from the edge list.

        For undirected semantics adj[s][t] and adj[t][s] are both set,
        whatever order the edge was stored in.
        """
        if directed is None:
            directed = self.directed
        n = len(self.nodes)
        adj = [[False] * n for _ in range(n)]
        for s, t in self.index_edges():
            adj[s][t] = True
            if not directed:
                adj[t][s] = True
        return adj

    def reverse_adjacency_matrix(self, *, directed: bool | None = None) -> list[list[bool]]:
        if directed is None:
            directed = self.directed
        n = len(self.nodes)
        radj = [[False] * n for _ in range(n)]
        for s, t in self.index_edges():
            radj[t][s] = True
            if not directed:
                radj[s][t] = True
        return radj

    def out_degree(self, label: str) -> int:
        self.index_of(label)
        return sum(1 for s, _t in self.edges if s == label)

    def in_degree(self, label: str) -> int:
        self.index_of(label)
        return sum(1 for _s, t in self.edges if t == label)

    def degree(self, label: str) -> int:
        """Number of edge endpoints at label (in + out for digraphs)."""
        return self.out_degree(label) + self.in_degree(label)


def degree_sequence(graph: Graph) -> list[int]:
    """Realized degrees in node order."""
    return [graph.degree(v) for v in graph.nodes]


def degree_pairs(graph: Graph) -> tuple[list[int], list[int]]:
    """Realized (in_degrees, out_degrees) in node order."""
    return (
        [graph.in_degree(v) for v in graph.nodes],
        [graph.out_degree(v) for v in graph.nodes],
    )


def empty_graph(*, directed: bool = False) -> Graph:
    return Graph(nodes=(), edges=(), directed=directed)
