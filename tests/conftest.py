"""Shared pytest fixtures for DPP metrics tests."""

import pytest

from dpp_metrics import DppMetrics, get_metrics_config


@pytest.fixture
def metrics() -> DppMetrics:
    """Return a fresh aggregator with default buckets."""
    return DppMetrics()


@pytest.fixture(autouse=True)
def _reset_config_cache():
    """Environment-backed config is cached; isolate tests from each other."""
    get_metrics_config.cache_clear()
    yield
    get_metrics_config.cache_clear()
