from __future__ import annotations

from typing import Sequence

from .havel_hakimi import directed_greedy_edges, havel_hakimi_edges


def is_graphic_undirected(sequence: Sequence[int]) -> bool:
    """
    True iff some simple undirected graph has exactly this degree sequence.

    Negative entries make the sequence non-graphic. The empty sequence is
    graphic (realized by the empty graph).
    """
    return havel_hakimi_edges(sequence) is not None


def is_graphic_directed(
    in_degrees: Sequence[int],
    out_degrees: Sequence[int],
    *,
    forbid_antiparallel: bool = False,
) -> bool:
    """
    True iff the greedy construction realizes the (in, out) degree pair.

    Sequences of different lengths or with different sums are rejected
    before any construction is attempted.
    """
    edges = directed_greedy_edges(
        in_degrees, out_degrees, forbid_antiparallel=forbid_antiparallel
    )
    return edges is not None
