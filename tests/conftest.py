"""
Global test configuration and fixtures
"""

import logging
import time

import pytest
import structlog

from codegraph_pagerank.infra.config import get_settings

# 느린 테스트 임계값 (초)
SLOW_TEST_THRESHOLD = 5.0


@pytest.fixture(autouse=True)
def track_test_duration(request):
    """모든 테스트의 실행 시간을 추적하고 느린 테스트 경고"""
    start_time = time.time()

    yield

    duration = time.time() - start_time
    if duration > SLOW_TEST_THRESHOLD:
        print(f"\nSLOW TEST ({duration:.2f}s): {request.node.nodeid}")


@pytest.fixture(autouse=True)
def reset_global_state():
    """Each test starts from default logging and freshly read settings."""
    root_level = logging.getLogger().level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (>5s)")


def pytest_collection_modifyitems(config, items):
    """경로 기반 자동 마커 추가"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
