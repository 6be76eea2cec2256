"""
PageRank Engine

Iterative fixed-point solver for

    PR(A) = (1 - d) + d * sum(PR(T) / C(T) for T linking to A)

Every sweep reads one snapshot of the previous scores and produces a
fresh mapping (Jacobi update). Scores start at 1.0 and are never
normalized.
"""

from collections.abc import Callable, Hashable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from codegraph_pagerank.infra.observability import LogPerformance, get_logger

from .graph_view import GraphView
from .models import ConvergenceMode, PageRankConfig, PageRankResult
from .reverse_index import ReverseIndex, build_reverse_index

logger = get_logger(__name__)


def _sweep(
    nodes: Sequence[Hashable],
    snapshot: dict[Hashable, float],
    index: ReverseIndex,
    damping: float,
) -> dict[Hashable, float]:
    """Recompute the score of every node in `nodes` from `snapshot`."""
    teleport = 1.0 - damping
    predecessors = index.predecessors
    out_degree = index.out_degree

    scores = {}
    for node in nodes:
        total = 0.0
        for source in predecessors[node]:
            degree = out_degree[source]
            # Sources without outgoing edges contribute nothing
            if degree:
                total += snapshot[source] / degree
        scores[node] = teleport + damping * total
    return scores


def _mean_abs_change(nodes: Sequence[Hashable], old: dict[Hashable, float], new: dict[Hashable, float]) -> float:
    return sum(abs(old[node] - new[node]) for node in nodes) / len(nodes)


class PageRankEngine:
    """
    Compute PageRank scores for a directed graph.

    An engine holds only its configuration; every call to `compute`
    builds its own index and buffers, so results never depend on
    earlier calls.
    """

    def __init__(self, config: PageRankConfig | None = None):
        """
        Initialize PageRank engine.

        Args:
            config: Solver configuration (defaults: d=0.85, tol=1e-6, 100 sweeps)
        """
        self.config = config or PageRankConfig()

    @classmethod
    def from_settings(cls, settings=None, configure_logging: bool = False) -> "PageRankEngine":
        """
        Create an engine from environment settings (PAGERANK_* variables).

        Args:
            settings: PageRankSettings (defaults to get_settings())
            configure_logging: Also apply PAGERANK_LOG_LEVEL / PAGERANK_LOG_FORMAT
                via settings.configure_logging()
        """
        from codegraph_pagerank.infra.config import get_settings

        settings = settings or get_settings()
        if configure_logging:
            settings.configure_logging()
        return cls(settings.to_config())

    def compute(self, graph: GraphView) -> dict[Hashable, float]:
        """
        Compute PageRank for all nodes in graph.

        Args:
            graph: Graph to rank

        Returns:
            Dict mapping node to its PageRank score (empty for an empty graph)
        """
        return self.compute_detailed(graph).scores

    def compute_detailed(self, graph: GraphView) -> PageRankResult:
        """
        Compute PageRank and report how the iteration ended.

        Args:
            graph: Graph to rank

        Returns:
            PageRankResult with scores, sweep count and convergence state

        Raises:
            MalformedGraphError: If the dangling policy is RAISE and an edge
                points outside the node set
        """
        nodes = tuple(graph.nodes())
        if not nodes:
            logger.debug("pagerank_empty_graph")
            return PageRankResult()

        config = self.config
        index = build_reverse_index(graph, config.dangling_policy)

        logger.info(
            "pagerank_started",
            node_count=len(nodes),
            edge_count=sum(index.out_degree.values()),
            dangling_edges=index.dangling_edges,
            damping_factor=config.damping_factor,
            tolerance=config.tolerance,
            max_iterations=config.max_iterations,
        )

        with LogPerformance(logger, "pagerank", node_count=len(nodes)):
            if config.workers == 1 or len(nodes) == 1:
                return self._iterate(nodes, lambda snapshot: _sweep(nodes, snapshot, index, config.damping_factor))

            with ThreadPoolExecutor(max_workers=config.workers, thread_name_prefix="pagerank") as executor:
                return self._iterate(nodes, lambda snapshot: self._parallel_sweep(executor, nodes, snapshot, index))

    def _parallel_sweep(
        self,
        executor: ThreadPoolExecutor,
        nodes: tuple[Hashable, ...],
        snapshot: dict[Hashable, float],
        index: ReverseIndex,
    ) -> dict[Hashable, float]:
        """Split one sweep across workers; partial buffers merge after all finish."""
        chunk_size = -(-len(nodes) // self.config.workers)
        chunks = [nodes[i : i + chunk_size] for i in range(0, len(nodes), chunk_size)]

        partials = executor.map(lambda chunk: _sweep(chunk, snapshot, index, self.config.damping_factor), chunks)

        scores: dict[Hashable, float] = {}
        for partial in partials:
            scores.update(partial)
        return scores

    def _iterate(
        self,
        nodes: tuple[Hashable, ...],
        sweep: Callable[[dict[Hashable, float]], dict[Hashable, float]],
    ) -> PageRankResult:
        config = self.config
        current = {node: 1.0 for node in nodes}
        delta: float | None = None
        previous_delta: float | None = None

        for iteration in range(1, config.max_iterations + 1):
            updated = sweep(current)
            delta = _mean_abs_change(nodes, current, updated)
            current = updated

            logger.debug("pagerank_sweep", iteration=iteration, mean_abs_change=delta)

            judged = delta if config.convergence_mode == ConvergenceMode.CONSECUTIVE else previous_delta
            if iteration > 1 and judged is not None and judged < config.tolerance:
                logger.info("pagerank_converged", iterations=iteration, mean_abs_change=delta)
                return PageRankResult(scores=current, iterations=iteration, converged=True, mean_abs_change=delta)

            previous_delta = delta

        logger.warning(
            "pagerank_budget_exhausted",
            iterations=config.max_iterations,
            mean_abs_change=delta,
            tolerance=config.tolerance,
        )
        return PageRankResult(scores=current, iterations=config.max_iterations, converged=False, mean_abs_change=delta)

    def get_top_nodes(self, graph: GraphView, top_n: int = 20) -> list[tuple[Hashable, float]]:
        """
        Get top N nodes by PageRank score.

        Returns:
            List of (node, score) tuples sorted by score descending
        """
        return self.compute_detailed(graph).top(top_n)


def compute(
    graph: GraphView,
    damping_factor: float = 0.85,
    tolerance: float = 1e-6,
    max_iterations: int = 100,
    **options: Any,
) -> dict[Hashable, float]:
    """
    Compute PageRank scores for `graph`.

    Extra keyword options (convergence_mode, dangling_policy, workers)
    are forwarded to PageRankConfig.

    Raises:
        ConfigurationError: If tolerance <= 0, max_iterations < 1 or
            damping_factor is outside [0, 1); no sweep is run
    """
    config = PageRankConfig.create(
        damping_factor=damping_factor,
        tolerance=tolerance,
        max_iterations=max_iterations,
        **options,
    )
    return PageRankEngine(config).compute(graph)
