# ABOUTME: pytest configuration for settings registry tests
# ABOUTME: Configures timeouts per test type and shared registry fixtures

import pytest
import pytest_asyncio

from registry.components.settings import CacheLayer, ConfigSnapshotBuilder, SettingsRegistry
from registry.config import configure_for_testing
from registry.implementations.memory import (
    InMemoryArtifactStore,
    InMemoryCacheStore,
    InMemoryRecordStore,
    ProcessLocalCache,
)


def pytest_configure(config):
    """Configure pytest for registry tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(scope="session", autouse=True)
def _test_logging():
    configure_for_testing()


@pytest.fixture
def record_store():
    return InMemoryRecordStore()


@pytest.fixture
def shared_cache():
    return InMemoryCacheStore()


@pytest.fixture
def artifact_store():
    return InMemoryArtifactStore()


@pytest.fixture
def cache_layer(shared_cache):
    return CacheLayer(ProcessLocalCache(), shared_cache)


@pytest.fixture
def snapshot_builder(artifact_store):
    return ConfigSnapshotBuilder(artifact_store)


@pytest_asyncio.fixture
async def registry(record_store, cache_layer, snapshot_builder):
    """A registry wired to in-memory collaborators."""
    registry = SettingsRegistry(record_store, cache_layer, snapshot_builder=snapshot_builder)
    yield registry
    await registry.close()
