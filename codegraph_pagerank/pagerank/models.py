"""
PageRank Data Models

Solver configuration and result types.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from codegraph_pagerank.common.exceptions import ConfigurationError


class ConvergenceMode(str, Enum):
    """How the mean absolute change is matched against tolerance."""

    CONSECUTIVE = "consecutive"
    """Sweep k is judged by the change between sweep k-1 and sweep k"""

    LAGGED = "lagged"
    """Sweep k is judged by the change measured one sweep earlier (lagged bookkeeping)"""


class DanglingPolicy(str, Enum):
    """What to do with an edge whose target is not a declared node."""

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"


class PageRankConfig(BaseModel):
    """
    Configuration for one PageRank computation.

    Use `PageRankConfig.create(...)` to get `ConfigurationError`
    instead of a raw pydantic error on invalid input.
    """

    model_config = ConfigDict(frozen=True)

    damping_factor: float = Field(default=0.85, ge=0.0, lt=1.0)
    """Probability of following an outgoing link"""

    tolerance: float = Field(default=1e-6, gt=0.0)
    """Stop once the mean absolute change drops below this"""

    max_iterations: int = Field(default=100, ge=1, strict=True)
    """Maximum number of sweeps"""

    convergence_mode: ConvergenceMode = ConvergenceMode.CONSECUTIVE
    """Convergence bookkeeping (see ConvergenceMode)"""

    dangling_policy: DanglingPolicy = DanglingPolicy.WARN
    """Handling of edges into undeclared nodes"""

    workers: int = Field(default=1, ge=1, le=64, strict=True)
    """Threads used for the per-node update within one sweep"""

    @classmethod
    def create(cls, **values: Any) -> "PageRankConfig":
        """
        Build a validated config.

        Raises:
            ConfigurationError: If any value is out of range
        """
        try:
            return cls(**values)
        except ValidationError as e:
            problems = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
            raise ConfigurationError("Invalid PageRank configuration", details=problems) from e


class PageRankResult(BaseModel):
    """Outcome of a PageRank computation."""

    model_config = ConfigDict(frozen=True)

    scores: dict[Any, float] = Field(default_factory=dict)
    """Final node → score mapping"""

    iterations: int = 0
    """Sweeps actually executed"""

    converged: bool = False
    """True if the tolerance was met before the sweep budget ran out"""

    mean_abs_change: float | None = None
    """Mean absolute change measured at the last sweep (None if no sweep ran)"""

    def top(self, top_n: int = 20) -> list[tuple[Any, float]]:
        """Top N (node, score) pairs, highest score first."""
        return sorted(self.scores.items(), key=lambda x: x[1], reverse=True)[:top_n]
