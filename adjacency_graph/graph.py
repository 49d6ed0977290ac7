from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Set, Tuple, Type, TypeVar, Union, overload

NodeId = str
Weight = int
Edge = Tuple[NodeId, NodeId, Weight]
AdjacencyTable = Dict[NodeId, List[Tuple[NodeId, Weight]]]

G = TypeVar("G", bound="Graph")


class NodeNotInGraph(KeyError):
    """Raised when a lookup references a node that is not in the graph."""

    def __init__(self, node: NodeId | None = None) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        msg = "accessing a node that is not in the graph"
        if self.node is not None:
            msg += f": {self.node!r}"
        return msg


class Graph(ABC):
    """Weighted adjacency-list graph capability.

    Variants only provide storage access (`new`, `adjacency_table_mutable`,
    `adjacency_table`); every higher-level operation is implemented here on top
    of those accessors, so a different backing representation gets the whole
    API for free.
    """

    @classmethod
    @abstractmethod
    def new(cls: Type[G]) -> G:
        ...

    @abstractmethod
    def adjacency_table_mutable(self) -> AdjacencyTable:
        ...

    @abstractmethod
    def adjacency_table(self) -> Mapping[NodeId, List[Tuple[NodeId, Weight]]]:
        ...

    def add_node(self, node: NodeId) -> bool:
        self.adjacency_table_mutable().setdefault(node, [])
        return True

    @overload
    def add_edge(self, edge: Edge) -> None:
        ...

    @overload
    def add_edge(self, u: NodeId, v: NodeId, weight: Weight) -> None:
        ...

    def add_edge(self, *args: Union[Edge, NodeId, Weight]) -> None:
        if len(args) == 1:
            edge = args[0]
            if not isinstance(edge, tuple) or len(edge) != 3:
                raise TypeError("add_edge() takes an (u, v, weight) tuple or three arguments")
            u, v, weight = edge
        elif len(args) == 3:
            u, v, weight = args  # type: ignore[assignment]
        else:
            raise TypeError("add_edge() takes an (u, v, weight) tuple or three arguments")

        self.add_node(u)
        self.add_node(v)

        table = self.adjacency_table_mutable()
        table[u].append((v, weight))
        table[v].append((u, weight))

    def contains(self, node: NodeId) -> bool:
        return node in self.adjacency_table()

    def nodes(self) -> Set[NodeId]:
        return set(self.adjacency_table().keys())

    def edges(self) -> List[Edge]:
        """Every stored adjacency record as (from, to, weight).

        Storage is symmetric, so an edge between distinct nodes shows up once
        in each direction.
        """
        return [(u, v, w) for u, nbs in self.adjacency_table().items() for v, w in nbs]

    def undirected_edges(self) -> Iterator[Edge]:
        """Yield each inserted edge once (u <= v by string order)."""
        for u, nbs in self.adjacency_table().items():
            # add_edge(u, u, w) stores two consecutive records on u.
            self_loop_seen = False
            for v, w in nbs:
                if u < v:
                    yield (u, v, w)
                elif u == v:
                    if not self_loop_seen:
                        yield (u, v, w)
                    self_loop_seen = not self_loop_seen

    def neighbors(self, node: NodeId) -> List[Tuple[NodeId, Weight]]:
        try:
            return list(self.adjacency_table()[node])
        except KeyError as e:
            raise NodeNotInGraph(node) from e

    def degree(self, node: NodeId) -> int:
        return len(self.neighbors(node))

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.contains(node)

    def __len__(self) -> int:
        return len(self.adjacency_table())

    def to_networkx(self):
        """Convert to a networkx.MultiGraph for ad-hoc experimentation."""
        import networkx as nx

        g = nx.MultiGraph()
        g.add_nodes_from(self.adjacency_table().keys())
        for u, v, w in self.undirected_edges():
            g.add_edge(u, v, weight=w)
        return g


class UndirectedGraph(Graph):
    """Undirected multigraph with integer weights, backed by a dict of lists."""

    def __init__(self) -> None:
        self._adjacency_table: AdjacencyTable = {}

    @classmethod
    def new(cls) -> "UndirectedGraph":
        return cls()

    def adjacency_table_mutable(self) -> AdjacencyTable:
        return self._adjacency_table

    def adjacency_table(self) -> Mapping[NodeId, List[Tuple[NodeId, Weight]]]:
        return MappingProxyType(self._adjacency_table)

    def __repr__(self) -> str:
        return f"UndirectedGraph(nodes={len(self)}, edges={sum(1 for _ in self.undirected_edges())})"
