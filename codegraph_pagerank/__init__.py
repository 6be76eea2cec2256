"""
codegraph-pagerank

PageRank scores for directed graphs by iterative relaxation.
"""

from codegraph_pagerank.common.exceptions import ConfigurationError, MalformedGraphError, PageRankError
from codegraph_pagerank.pagerank import (
    AdjacencyGraph,
    ConvergenceMode,
    DanglingPolicy,
    GraphView,
    NetworkXGraphView,
    PageRankConfig,
    PageRankEngine,
    PageRankResult,
    build_reverse_index,
    compute,
)

__version__ = "0.1.0"

__all__ = [
    "compute",
    "PageRankEngine",
    "PageRankConfig",
    "PageRankResult",
    "ConvergenceMode",
    "DanglingPolicy",
    "GraphView",
    "AdjacencyGraph",
    "NetworkXGraphView",
    "build_reverse_index",
    "PageRankError",
    "ConfigurationError",
    "MalformedGraphError",
]
