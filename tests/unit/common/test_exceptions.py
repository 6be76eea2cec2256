"""
Unit tests for PageRank exceptions.
"""

import pytest

from codegraph_pagerank.common.exceptions import ConfigurationError, MalformedGraphError, PageRankError
from codegraph_pagerank.pagerank import PageRankConfig


class TestPageRankError:
    """Test base PageRankError."""

    def test_basic_exception(self):
        exc = PageRankError("test error")

        assert str(exc) == "test error"
        assert exc.details == {}

    def test_exception_with_details(self):
        """PageRankError includes details in string."""
        exc = PageRankError("test error", details={"key": "value"})

        assert str(exc) == "test error (details: {'key': 'value'})"

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, PageRankError)
        assert issubclass(MalformedGraphError, PageRankError)


class TestConfigurationError:
    def test_wraps_validation_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            PageRankConfig.create(tolerance=-1.0, max_iterations=0)

        assert set(exc_info.value.details) == {"tolerance", "max_iterations"}
        assert exc_info.value.__cause__ is not None
