"""
Realize a degree sequence and print its analyses.

Usage:
  python3 analyze_sequence.py undirected 3,3,2,2
  python3 analyze_sequence.py directed --in 2,1,1 --out 1,2,1
  python3 analyze_sequence.py undirected 2,2,2,2 --draw cycle.png
"""
import argparse
import logging
import sys

from graphictools.analysis import AnalysisOptions, analyze_directed, analyze_undirected
from graphictools.io.parse import parse_sequence
from graphictools.utils.naming import describe_graph


def report(analysis) -> None:
    print("graphic:", analysis.graphic)
    if not analysis.graphic:
        return
    G = analysis.graph
    print("graph:", describe_graph(G))
    print("nodes:", ", ".join(G.nodes))
    for s, t in G.edges:
        print(f"  {s} {'->' if G.directed else '--'} {t}")
    print("connectivity:", analysis.summary())
    L = analysis.line_graph
    print(f"line graph: |V|={L.number_of_nodes()} |E|={L.number_of_edges()}")
    for s, t in L.edges:
        print(f"  {s} {'->' if L.directed else '--'} {t}")
    if analysis.maximal_cliques is not None:
        print(f"cliques: {len(analysis.cliques)}")
        print("maximal cliques:")
        for c in analysis.maximal_cliques:
            print("  {" + ", ".join(c) + "}")
    elif not analysis.directed:
        print("cliques: skipped (graph above clique node cap)")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Degree-sequence realization, line graph, connectivity and cliques.",
    )
    parser.add_argument("--draw", metavar="PNG", help="save a drawing of G and L(G)")
    parser.add_argument("--clique-cap", type=int, default=None,
                        help="skip clique search above this many vertices")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_u = sub.add_parser("undirected", help="analyze an undirected degree sequence")
    p_u.add_argument("sequence", help="comma-separated degrees, e.g. 3,3,2,2")

    p_d = sub.add_parser("directed", help="analyze an in/out-degree pair")
    p_d.add_argument("--in", dest="in_degrees", required=True)
    p_d.add_argument("--out", dest="out_degrees", required=True)
    p_d.add_argument("--oriented", action="store_true",
                     help="forbid 2-cycles (u->v together with v->u)")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    opts = AnalysisOptions()
    if args.clique_cap is not None:
        opts.clique_node_cap = args.clique_cap

    try:
        if args.command == "undirected":
            analysis = analyze_undirected(parse_sequence(args.sequence), opts)
        else:
            opts.forbid_antiparallel = args.oriented
            analysis = analyze_directed(
                parse_sequence(args.in_degrees),
                parse_sequence(args.out_degrees),
                opts,
            )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    report(analysis)

    if args.draw and analysis.graphic:
        import matplotlib
        matplotlib.use("Agg")
        from graphictools.viz.draw import draw_analysis

        draw_analysis(analysis, save_path=args.draw)
        print(f"saved {args.draw}", file=sys.stderr)


if __name__ == "__main__":
    main()
