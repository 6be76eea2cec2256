"""Environment-driven settings."""

import logging

import pytest
import structlog

from codegraph_pagerank import ConfigurationError
from codegraph_pagerank.infra.config import PageRankSettings, get_settings
from codegraph_pagerank.pagerank import AdjacencyGraph, ConvergenceMode, DanglingPolicy, PageRankEngine


class TestPageRankSettings:
    def test_defaults(self):
        settings = PageRankSettings()

        assert settings.damping_factor == 0.85
        assert settings.tolerance == 1e-6
        assert settings.max_iterations == 100
        assert settings.log_format == "json"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PAGERANK_DAMPING_FACTOR", "0.9")
        monkeypatch.setenv("PAGERANK_MAX_ITERATIONS", "500")
        monkeypatch.setenv("PAGERANK_CONVERGENCE_MODE", "lagged")
        monkeypatch.setenv("PAGERANK_DANGLING_POLICY", "raise")

        config = PageRankSettings().to_config()

        assert config.damping_factor == 0.9
        assert config.max_iterations == 500
        assert config.convergence_mode == ConvergenceMode.LAGGED
        assert config.dangling_policy == DanglingPolicy.RAISE

    def test_out_of_range_env_value(self, monkeypatch):
        monkeypatch.setenv("PAGERANK_TOLERANCE", "0")

        with pytest.raises(ConfigurationError):
            PageRankSettings().to_config()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_engine_from_settings(self, monkeypatch):
        monkeypatch.setenv("PAGERANK_DAMPING_FACTOR", "0.5")

        engine = PageRankEngine.from_settings()
        scores = engine.compute(AdjacencyGraph({"a": ["b"]}))

        assert engine.config.damping_factor == 0.5
        assert scores["a"] == 0.5


class TestLoggingSettings:
    def test_configure_logging_from_env(self, monkeypatch):
        monkeypatch.setenv("PAGERANK_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PAGERANK_LOG_FORMAT", "console")

        get_settings().configure_logging()

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.ERROR
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("PAGERANK_LOG_LEVEL", "warning")

        PageRankSettings().configure_logging()

        assert logging.getLogger().level == logging.WARNING
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_engine_from_settings_applies_logging(self, monkeypatch):
        monkeypatch.setenv("PAGERANK_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PAGERANK_LOG_FORMAT", "console")

        engine = PageRankEngine.from_settings(configure_logging=True)

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.ERROR
        assert engine.config.damping_factor == 0.85
