# tests/conftest.py - shared pytest configuration and fixtures
import copy
import os
import sys
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from content_api.core.cache import InMemoryCache  # noqa: E402
from content_api.core.config import get_default_config  # noqa: E402
from content_api.data.dataset import Dataset  # noqa: E402
from content_api.services.resource_repository import ResourceRepository  # noqa: E402

# ========================================
# Clock
# ========================================


class FakeClock:
    """Manually advanced clock for TTL tests"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ========================================
# Test data
# ========================================


@pytest.fixture
def scenario_records() -> list[dict[str, Any]]:
    """Three-resource catalog: a and c are themes, b is a windows plugin"""
    return [
        {
            "id": "a",
            "name": "Alpha",
            "type": "theme",
            "platform": "all",
            "download_count": 5,
            "updated_at": "2024-01-01T00:00:00Z",
            "author": "first",
        },
        {
            "id": "b",
            "name": "Bravo",
            "type": "plugin",
            "platform": "windows",
            "download_count": 10,
            "updated_at": "2024-02-01T00:00:00Z",
        },
        {
            "id": "c",
            "name": "Charlie",
            "type": "theme",
            "platform": "linux",
            "download_count": 1,
            "updated_at": "2024-03-01T00:00:00Z",
        },
    ]


@pytest.fixture
def scenario_dataset(scenario_records) -> Dataset:
    return Dataset.from_records(scenario_records)


@pytest.fixture
def cache(clock) -> InMemoryCache:
    return InMemoryCache(clock=clock)


@pytest.fixture
def repository(scenario_dataset, cache) -> ResourceRepository:
    return ResourceRepository(scenario_dataset, cache)


# ========================================
# FastAPI TestClient
# ========================================


@pytest.fixture
def test_config() -> dict[str, Any]:
    """Default configuration, safe to mutate per test"""
    return copy.deepcopy(get_default_config())


@pytest.fixture
def test_client(test_config, scenario_dataset, cache) -> Generator[TestClient, None, None]:
    """FastAPI TestClient over the three-resource catalog"""
    from content_api.api.main import create_app

    app = create_app(config=test_config, dataset=scenario_dataset, cache=cache)
    with TestClient(app) as client:
        yield client


# ========================================
# pytest configuration
# ========================================


def pytest_configure(config):
    """Register markers"""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
