"""
PageRank Settings

Environment variables use the PAGERANK_ prefix.
Example: PAGERANK_DAMPING_FACTOR=0.9, PAGERANK_MAX_ITERATIONS=500
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from codegraph_pagerank.infra.observability import setup_logging
from codegraph_pagerank.pagerank.models import ConvergenceMode, DanglingPolicy, PageRankConfig


class PageRankSettings(BaseSettings):
    """
    Solver and logging settings loaded from the environment or `.env`.

    Range checks happen in `to_config()`, which raises
    ConfigurationError for out-of-range values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGERANK_",
        extra="ignore",
    )

    damping_factor: float = 0.85
    tolerance: float = 1e-6
    max_iterations: int = 100
    convergence_mode: ConvergenceMode = ConvergenceMode.CONSECUTIVE
    dangling_policy: DanglingPolicy = DanglingPolicy.WARN
    workers: int = 1

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    def configure_logging(self) -> None:
        """Apply log_level and log_format to structlog (call once at startup)."""
        setup_logging(level=self.log_level, format=self.log_format)

    def to_config(self) -> PageRankConfig:
        return PageRankConfig.create(
            damping_factor=self.damping_factor,
            tolerance=self.tolerance,
            max_iterations=self.max_iterations,
            convergence_mode=self.convergence_mode,
            dangling_policy=self.dangling_policy,
            workers=self.workers,
        )


@lru_cache(maxsize=1)
def get_settings() -> PageRankSettings:
    """
    Get the process-wide settings instance.

    To reload, call get_settings.cache_clear() first.
    """
    return PageRankSettings()
