"""
Count graphic degree sequences of length n and cross-check against NetworkX.

For each n, enumerates non-increasing sequences with entries in 0..n-1 and
compares is_graphic_undirected with nx.is_valid_degree_sequence_havel_hakimi.

Usage:
  python3 graphic_counts.py --n-max 7
"""
import argparse
import sys
from itertools import combinations_with_replacement

import networkx as nx

from graphictools.sequences import build_undirected_graph, is_graphic_undirected
from graphictools.graph import degree_sequence


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--n-max', type=int, default=6)
    args = parser.parse_args()

    for n in range(1, args.n_max + 1):
        total = graphic = 0
        for combo in combinations_with_replacement(range(n - 1, -1, -1), n):
            seq = list(combo)
            total += 1
            ours = is_graphic_undirected(seq)
            theirs = nx.is_valid_degree_sequence_havel_hakimi(seq)
            if ours != theirs:
                print(f"MISMATCH n={n} seq={seq}: ours={ours} nx={theirs}", file=sys.stderr)
                sys.exit(1)
            if ours:
                graphic += 1
                G = build_undirected_graph(seq)
                assert degree_sequence(G) == seq
        print(f"n={n}: {graphic}/{total} non-increasing sequences are graphic")


if __name__ == '__main__':
    main()
