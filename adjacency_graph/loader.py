from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from .graph import UndirectedGraph


def load_graph(path: str | Path) -> UndirectedGraph:
    path = Path(path)
    if path.suffix.lower() == ".json":
        return graph_from_json(path.read_text(encoding="utf-8"))
    return graph_from_edge_text(path.read_text(encoding="utf-8"))


def _weight(value: Any, where: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: weight must be an integer, got {value!r}")
    return value


def _node_id(value: Any, where: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{where}: node id must be a string or integer, got {value!r}")


def graph_from_json(text: str) -> UndirectedGraph:
    """Build a graph from `{"nodes": [...], "edges": [[u, v, w], ...]}`.

    `nodes` is optional and only needed for isolated nodes; edge endpoints are
    added implicitly.
    """
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid graph JSON: {e}") from e
    if not isinstance(obj, dict):
        raise ValueError("Graph JSON must be an object")

    nodes = obj.get("nodes", [])
    edges = obj.get("edges", [])
    if not isinstance(nodes, list):
        raise ValueError(f"\"nodes\" must be a list, got {nodes!r}")
    if not isinstance(edges, list):
        raise ValueError(f"\"edges\" must be a list, got {edges!r}")

    g = UndirectedGraph()
    for i, node_id in enumerate(nodes):
        g.add_node(_node_id(node_id, f"Node #{i}"))

    for i, edge in enumerate(edges):
        if not isinstance(edge, list) or len(edge) != 3:
            raise ValueError(f"Edge #{i} must be a list of [from, to, weight]")
        u, v, w = edge
        where = f"Edge #{i}"
        g.add_edge(_node_id(u, where), _node_id(v, where), _weight(w, where))

    return g


def graph_from_edge_text(text: str) -> UndirectedGraph:
    """Build a graph from whitespace-separated `from to weight` lines.

    A line with a single token declares an isolated node. Blank lines and
    lines starting with `#` are skipped.
    """
    g = UndirectedGraph()
    for lineno, ln in enumerate(text.splitlines(), start=1):
        raw = ln.strip()
        if not raw or raw.startswith("#"):
            continue
        toks: List[str] = raw.split()
        if len(toks) == 1:
            g.add_node(toks[0])
            continue
        if len(toks) != 3:
            raise ValueError(f"Line {lineno}: expected 'from to weight', got {raw!r}")
        u, v, w = toks
        try:
            weight = int(w)
        except ValueError as e:
            raise ValueError(f"Line {lineno}: weight must be an integer, got {w!r}") from e
        g.add_edge(u, v, weight)

    return g
