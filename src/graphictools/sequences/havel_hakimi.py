"""Greedy degree-sequence elimination shared by the validators and builders."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

log = logging.getLogger(__name__)

IndexEdges = List[Tuple[int, int]]


def havel_hakimi_edges(sequence: Sequence[int]) -> Optional[IndexEdges]:
    """
    Havel-Hakimi elimination on an undirected degree sequence.

    Repeatedly takes the vertex with the largest remaining degree d and
    joins it to the next d vertices in descending-degree order.
    Ties keep their previous relative order (stable sort on a persistent
    list), so the realization is deterministic.

    Returns the realized edges as 0-based index pairs in discovery order,
    or None if the sequence is not graphic.
    """
    if any(d < 0 for d in sequence):
        log.debug("not graphic: negative degree in %s", list(sequence))
        return None

    # (original index, remaining degree); private copy of the input
    degrees = [[i, int(d)] for i, d in enumerate(sequence)]
    edges: IndexEdges = []

    while True:
        degrees.sort(key=lambda e: e[1], reverse=True)
        degrees = [e for e in degrees if e[1] > 0]
        if not degrees:
            return edges

        current, d = degrees[0]
        rest = degrees[1:]
        if d > len(rest):
            log.debug("not graphic: degree %d with only %d other vertices", d, len(rest))
            return None

        for neighbor in rest[:d]:
            neighbor[1] -= 1
            edges.append((current, neighbor[0]))
        degrees = rest


@dataclass
class DirectedDegreeState:
    """
    Working bookkeeping for the directed greedy construction.

    Owned by a single call; adjacency[i][j] records an assigned edge i -> j.
    With forbid_antiparallel set, an edge in either direction blocks the
    pair, so the result is an oriented graph (no 2-cycles).
    """

    remaining_in: List[int]
    remaining_out: List[int]
    adjacency: List[List[bool]]
    forbid_antiparallel: bool = False

    @classmethod
    def fresh(
        cls,
        in_degrees: Sequence[int],
        out_degrees: Sequence[int],
        *,
        forbid_antiparallel: bool = False,
    ) -> "DirectedDegreeState":
        n = len(in_degrees)
        return cls(
            remaining_in=[int(d) for d in in_degrees],
            remaining_out=[int(d) for d in out_degrees],
            adjacency=[[False] * n for _ in range(n)],
            forbid_antiparallel=forbid_antiparallel,
        )

    def blocked(self, u: int, v: int) -> bool:
        """True iff the edge u -> v may not be added."""
        if self.adjacency[u][v]:
            return True
        return self.forbid_antiparallel and self.adjacency[v][u]


def directed_greedy_edges(
    in_degrees: Sequence[int],
    out_degrees: Sequence[int],
    *,
    forbid_antiparallel: bool = False,
) -> Optional[IndexEdges]:
    """
    Greedy realization of an (in-degree, out-degree) pair.

    Each round picks the vertex with the largest positive remaining
    out-degree and sends all of its out-edges to the eligible targets with
    the largest remaining in-degree. A target is eligible if it is another
    vertex, still needs in-edges, and does not already receive an edge
    from the current vertex. With forbid_antiparallel, an edge in the
    opposite direction also disqualifies it (no 2-cycles).

    Candidates are drawn from the vertex order of the round (descending
    remaining out-degree) and then stably sorted by remaining in-degree,
    so in-degree ties go to the vertex with more out-edges left.

    Returns the directed edges (source, target) as 0-based index pairs in
    discovery order, or None if the pair is not realized.
    """
    n = len(in_degrees)
    if n != len(out_degrees):
        log.debug("not graphic: %d in-degrees vs %d out-degrees", n, len(out_degrees))
        return None
    if any(d < 0 for d in in_degrees) or any(d < 0 for d in out_degrees):
        log.debug("not graphic: negative degree")
        return None
    if sum(in_degrees) != sum(out_degrees):
        log.debug("not graphic: in-sum %d != out-sum %d", sum(in_degrees), sum(out_degrees))
        return None

    state = DirectedDegreeState.fresh(
        in_degrees, out_degrees, forbid_antiparallel=forbid_antiparallel
    )
    # persistent vertex order; each round re-sorts it in place
    order = list(range(n))
    edges: IndexEdges = []

    while True:
        order.sort(key=lambda v: state.remaining_out[v], reverse=True)
        current = next((v for v in order if state.remaining_out[v] > 0), None)
        if current is None:
            break

        required = state.remaining_out[current]
        state.remaining_out[current] = 0
        if required > n - 1:
            log.debug("not graphic: out-degree %d with only %d other vertices", required, n - 1)
            return None

        eligible = [
            v
            for v in order
            if v != current
            and not state.blocked(current, v)
            and state.remaining_in[v] > 0
        ]
        eligible.sort(key=lambda v: state.remaining_in[v], reverse=True)
        if len(eligible) < required:
            log.debug(
                "not graphic: v%d needs %d targets, %d eligible",
                current + 1, required, len(eligible),
            )
            return None

        for target in eligible[:required]:
            state.adjacency[current][target] = True
            state.remaining_in[target] -= 1
            edges.append((current, target))

    if any(d != 0 for d in state.remaining_in):
        log.debug("not graphic: unmatched in-degrees %s", state.remaining_in)
        return None
    return edges
