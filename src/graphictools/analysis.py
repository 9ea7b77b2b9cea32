from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from graphictools.graph import Graph
from graphictools.linegraph.labeled import line_graph
from graphictools.sequences.build import build_directed_graph, build_undirected_graph
from graphictools.utils.cliques import Clique, all_cliques, maximal_cliques
from graphictools.utils.connectivity import Connectivity, check_connectivity

log = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


CLIQUE_NODE_CAP = _env_int("GRAPHICTOOLS_CLIQUE_NODE_CAP", 24)


@dataclass
class AnalysisOptions:
    # clique search is skipped for graphs with more vertices than this
    clique_node_cap: int = field(default_factory=lambda: CLIQUE_NODE_CAP)
    forbid_antiparallel: bool = False


@dataclass(frozen=True)
class Analysis:
    """
    Everything computed for one input sequence.

    When the input is not graphic only ``graphic`` and ``directed`` are
    set. ``cliques`` / ``maximal_cliques`` are None for directed graphs
    and for graphs above the clique node cap.
    """

    directed: bool
    graphic: bool
    graph: Optional[Graph] = None
    line_graph: Optional[Graph] = None
    connectivity: Optional[Connectivity] = None
    cliques: Optional[List[Clique]] = None
    maximal_cliques: Optional[List[Clique]] = None

    def summary(self) -> str:
        if not self.graphic:
            return "Not graphic"
        assert self.connectivity is not None
        return self.connectivity.describe(self.directed)


def analyze_undirected(
    sequence: Sequence[int],
    options: Optional[AnalysisOptions] = None,
) -> Analysis:
    """Realize an undirected degree sequence and run every analysis on it."""
    opts = options or AnalysisOptions()
    G = build_undirected_graph(sequence)
    if G is None:
        return Analysis(directed=False, graphic=False)

    cliques: Optional[List[Clique]] = None
    maximal: Optional[List[Clique]] = None
    if G.number_of_nodes() <= opts.clique_node_cap:
        cliques = all_cliques(G)
        maximal = maximal_cliques(G)
    else:
        log.info(
            "skipping clique search: %d vertices exceeds cap %d",
            G.number_of_nodes(), opts.clique_node_cap,
        )

    return Analysis(
        directed=False,
        graphic=True,
        graph=G,
        line_graph=line_graph(G, directed=False),
        connectivity=check_connectivity(G, directed=False),
        cliques=cliques,
        maximal_cliques=maximal,
    )


def analyze_directed(
    in_degrees: Sequence[int],
    out_degrees: Sequence[int],
    options: Optional[AnalysisOptions] = None,
) -> Analysis:
    """Realize an (in, out) degree pair and run the directed analyses on it."""
    opts = options or AnalysisOptions()
    G = build_directed_graph(
        in_degrees, out_degrees, forbid_antiparallel=opts.forbid_antiparallel
    )
    if G is None:
        return Analysis(directed=True, graphic=False)
    return Analysis(
        directed=True,
        graphic=True,
        graph=G,
        line_graph=line_graph(G, directed=True),
        connectivity=check_connectivity(G, directed=True),
    )
