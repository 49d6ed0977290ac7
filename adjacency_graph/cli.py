from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .loader import load_graph
from .viz import write_plotly_html


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="adjacency-graph", description="Undirected weighted graph inspector")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_show = sub.add_parser("show", help="Print the nodes and adjacency records of a graph")
    p_show.add_argument("graph", type=str, help="Path to a .json or edge-list graph file")

    p_viz = sub.add_parser("visualize", help="Render the graph to an HTML file")
    p_viz.add_argument("graph", type=str, help="Path to a .json or edge-list graph file")
    p_viz.add_argument("--out", type=str, default="out/graph.html", help="Output HTML path")
    p_viz.add_argument("--seed", type=int, default=0, help="Layout seed")

    args = parser.parse_args(list(argv) if argv is not None else None)

    graph_path = Path(args.graph)
    graph = load_graph(graph_path)

    if args.cmd == "show":
        n_edges = sum(1 for _ in graph.undirected_edges())
        print(f"{graph_path.name}: nodes={len(graph)}, edges={n_edges}")
        for u, v, w in sorted(graph.edges()):
            print(f"  {u} -> {v} ({w})")
        isolated = sorted(n for n in graph.nodes() if graph.degree(n) == 0)
        if isolated:
            print(f"  isolated: {', '.join(isolated)}")
        return 0

    if args.cmd == "visualize":
        out = write_plotly_html(graph, out_path=args.out, title=f"Graph: {graph_path.name}", seed=args.seed)
        print(f"Wrote graph visualization: {out}")
        return 0

    raise AssertionError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
