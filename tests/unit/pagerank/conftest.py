import pytest

from codegraph_pagerank.pagerank import PageRankConfig, PageRankEngine


@pytest.fixture
def config():
    """Default PageRank config."""
    return PageRankConfig(damping_factor=0.85, tolerance=1e-6, max_iterations=100)


@pytest.fixture
def engine(config):
    """Create PageRank engine."""
    return PageRankEngine(config)
