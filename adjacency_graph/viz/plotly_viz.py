from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

from ..graph import Graph, NodeId


def _layout(graph: Graph, seed: int) -> Dict[NodeId, Tuple[float, float]]:
    import networkx as nx

    g = graph.to_networkx()
    if len(g) == 0:
        return {}
    pos = nx.spring_layout(g, weight=None, seed=seed)
    return {n: (float(p[0]), float(p[1])) for n, p in pos.items()}


def build_plotly_figure(graph: Graph, *, title: str = "Graph", seed: int = 0):
    import plotly.graph_objects as go

    pos = _layout(graph, seed)

    # Edges (each undirected edge drawn once) + weight labels at midpoints
    ex, ey = [], []
    lx, ly, ltext = [], [], []
    for u, v, w in graph.undirected_edges():
        pu, pv = pos[u], pos[v]
        ex += [pu[0], pv[0], None]
        ey += [pu[1], pv[1], None]
        lx.append((pu[0] + pv[0]) / 2.0)
        ly.append((pu[1] + pv[1]) / 2.0)
        ltext.append(str(w))

    nx_, ny_, ntext, nlabel = [], [], [], []
    for node_id in sorted(graph.nodes()):
        x, y = pos[node_id]
        nx_.append(x)
        ny_.append(y)
        nlabel.append(node_id)
        ntext.append(f"id={node_id}<br>degree={graph.degree(node_id)}")

    traces = [
        go.Scatter(
            x=ex,
            y=ey,
            mode="lines",
            line=dict(width=1, color="rgba(160,160,160,0.7)"),
            hoverinfo="none",
            name="edges",
        ),
        go.Scatter(
            x=lx,
            y=ly,
            mode="text",
            text=ltext,
            textfont=dict(size=10, color="#555555"),
            hoverinfo="none",
            name="weights",
        ),
        go.Scatter(
            x=nx_,
            y=ny_,
            mode="markers+text",
            marker=dict(size=14, color="#1f77b4", line=dict(width=0)),
            text=nlabel,
            textposition="top center",
            hovertext=ntext,
            hoverinfo="text",
            name="nodes",
        ),
    ]
    fig = go.Figure(data=traces)
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def write_plotly_html(
    graph: Graph,
    *,
    out_path: str | Path,
    title: str = "Graph",
    seed: int = 0,
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_plotly_figure(graph, title=title, seed=seed)
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True)
    return out_path
