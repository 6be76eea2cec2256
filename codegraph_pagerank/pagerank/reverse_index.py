"""
Reverse Index Builder

Derives predecessor lists (node → nodes linking to it) from a GraphView.
"""

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from codegraph_pagerank.common.exceptions import MalformedGraphError
from codegraph_pagerank.infra.observability import get_logger

from .graph_view import GraphView
from .models import DanglingPolicy

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReverseIndex:
    """Predecessors and out-degree per node, fixed for one computation."""

    predecessors: Mapping[Hashable, tuple[Hashable, ...]]
    out_degree: Mapping[Hashable, int]
    dangling_edges: int = 0

    def in_degree(self, node: Hashable) -> int:
        return len(self.predecessors[node])


def build_reverse_index(
    graph: GraphView,
    dangling_policy: DanglingPolicy = DanglingPolicy.WARN,
) -> ReverseIndex:
    """
    Build the reverse-adjacency index of `graph`.

    Every declared edge is visited once. An edge into a node outside
    the node set is dropped from the index (IGNORE/WARN) or rejected
    (RAISE). Out-degree is the length of the outgoing list as reported
    by the graph, dangling targets included.

    Args:
        graph: Graph to index
        dangling_policy: Handling of edges into undeclared nodes

    Returns:
        ReverseIndex with one entry per declared node

    Raises:
        MalformedGraphError: If the policy is RAISE and a dangling edge exists
    """
    nodes = graph.nodes()
    incoming: dict[Hashable, list[Hashable]] = {node: [] for node in nodes}
    out_degree: dict[Hashable, int] = {}
    dangling = 0

    for source in nodes:
        targets = graph.outgoing_neighbors(source)
        out_degree[source] = len(targets)

        for target in targets:
            bucket = incoming.get(target)
            if bucket is not None:
                bucket.append(source)
                continue

            dangling += 1
            if dangling_policy == DanglingPolicy.RAISE:
                raise MalformedGraphError(
                    "Edge references a node outside the graph",
                    details={"source": source, "target": target},
                )
            if dangling_policy == DanglingPolicy.WARN:
                logger.warning("pagerank_dangling_edge", source=source, target=target)

    return ReverseIndex(
        predecessors=MappingProxyType({node: tuple(preds) for node, preds in incoming.items()}),
        out_degree=MappingProxyType(out_degree),
        dangling_edges=dangling,
    )
