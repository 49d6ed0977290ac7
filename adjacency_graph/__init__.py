from .graph import AdjacencyTable, Edge, Graph, NodeId, NodeNotInGraph, UndirectedGraph, Weight
from .loader import graph_from_edge_text, graph_from_json, load_graph

__all__ = [
    "AdjacencyTable",
    "Edge",
    "Graph",
    "NodeId",
    "NodeNotInGraph",
    "UndirectedGraph",
    "Weight",
    "graph_from_edge_text",
    "graph_from_json",
    "load_graph",
]
