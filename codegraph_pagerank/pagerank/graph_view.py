"""
Graph Views for PageRank

Read-only graph access used by the solver.

Components:
- GraphView: protocol (node set + outgoing neighbors per node)
- AdjacencyGraph: immutable dict-backed view
- NetworkXGraphView: adapter over networkx.DiGraph / MultiDiGraph
"""

from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Protocol, runtime_checkable

import networkx as nx


@runtime_checkable
class GraphView(Protocol):
    """Immutable directed graph as seen by the PageRank solver."""

    def nodes(self) -> Sequence[Hashable]:
        """All node identifiers, each exactly once."""
        ...

    def outgoing_neighbors(self, node: Hashable) -> Sequence[Hashable]:
        """Targets of the edges leaving `node` (empty for a sink)."""
        ...


class AdjacencyGraph:
    """
    Dict-backed GraphView.

    Nodes default to every source and target in first-seen order.
    Passing `nodes` explicitly fixes the node set; edges pointing
    outside it are kept as-is so the solver can apply its
    dangling-reference policy.
    """

    def __init__(
        self,
        edges: Mapping[Hashable, Iterable[Hashable]],
        nodes: Iterable[Hashable] | None = None,
    ):
        self._edges: dict[Hashable, tuple[Hashable, ...]] = {
            source: tuple(targets) for source, targets in edges.items()
        }

        if nodes is None:
            seen: dict[Hashable, None] = {}
            for source, targets in self._edges.items():
                seen.setdefault(source, None)
                for target in targets:
                    seen.setdefault(target, None)
            self._nodes = tuple(seen)
        else:
            self._nodes = tuple(dict.fromkeys(nodes))

    def nodes(self) -> tuple[Hashable, ...]:
        return self._nodes

    def outgoing_neighbors(self, node: Hashable) -> tuple[Hashable, ...]:
        return self._edges.get(node, ())

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        edge_count = sum(len(targets) for targets in self._edges.values())
        return f"AdjacencyGraph(nodes={len(self._nodes)}, edges={edge_count})"


class NetworkXGraphView:
    """
    Adapt a NetworkX directed graph for PageRank computation.

    Parallel edges of a MultiDiGraph each count toward the out-degree.
    """

    def __init__(self, graph: "nx.DiGraph"):
        """
        Args:
            graph: networkx.DiGraph or networkx.MultiDiGraph

        Raises:
            TypeError: If the graph is undirected
        """
        if not graph.is_directed():
            raise TypeError("PageRank needs a directed graph (networkx.DiGraph or MultiDiGraph)")

        self._graph = graph
        self._nodes = tuple(graph.nodes())

    @classmethod
    def from_edge_list(cls, edges: Iterable[tuple[Hashable, Hashable]]) -> "NetworkXGraphView":
        """Build a view over a fresh MultiDiGraph holding `edges`."""
        G = nx.MultiDiGraph()
        G.add_edges_from(edges)
        return cls(G)

    def nodes(self) -> tuple[Hashable, ...]:
        return self._nodes

    def outgoing_neighbors(self, node: Hashable) -> list[Hashable]:
        return [target for _, target in self._graph.out_edges(node)]
