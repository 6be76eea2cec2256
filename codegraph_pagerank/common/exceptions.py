"""
PageRank Exception Hierarchy

사용 가이드:
    1. 설정 오류 → 계산 전에 즉시 실패 (ConfigurationError)
    2. 잘못된 그래프 → 정책에 따라 무시/경고/실패 (MalformedGraphError)
    3. 외부 에러 (pydantic 등) → 커스텀 예외로 래핑

예시:
    try:
        config = PageRankConfig(**values)
    except pydantic.ValidationError as e:
        raise ConfigurationError("Invalid PageRank configuration") from e
"""

from typing import Any


class PageRankError(Exception):
    """Base exception for all PageRank errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize PageRank error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(PageRankError):
    """Invalid solver configuration (tolerance, iteration budget, damping)."""

    pass


class MalformedGraphError(PageRankError):
    """Graph edge references a node outside the declared node set."""

    pass
