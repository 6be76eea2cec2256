"""
PageRank Computation

Components:
- GraphView / AdjacencyGraph / NetworkXGraphView: read-only graph access
- build_reverse_index: predecessor lists + out-degree
- PageRankEngine: iterative fixed-point solver
"""

from .engine import PageRankEngine, compute
from .graph_view import AdjacencyGraph, GraphView, NetworkXGraphView
from .models import ConvergenceMode, DanglingPolicy, PageRankConfig, PageRankResult
from .reverse_index import ReverseIndex, build_reverse_index

__all__ = [
    "GraphView",
    "AdjacencyGraph",
    "NetworkXGraphView",
    "ReverseIndex",
    "build_reverse_index",
    "PageRankEngine",
    "PageRankConfig",
    "PageRankResult",
    "ConvergenceMode",
    "DanglingPolicy",
    "compute",
]
