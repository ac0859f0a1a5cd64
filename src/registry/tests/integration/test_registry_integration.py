# ABOUTME: Integration tests for the settings registry with real collaborators
# ABOUTME: Covers cross-process visibility, tombstones, namespaces and JSON snapshot rebuilds

import asyncio
import json

import pytest
import pytest_asyncio

from registry.components.settings import CacheLayer, ConfigSnapshotBuilder, SettingsRegistry, create_registry
from registry.config import RegistrySettings
from registry.implementations.file import JsonFileArtifactStore
from registry.implementations.memory import InMemoryCacheStore, InMemoryRecordStore, ProcessLocalCache


@pytest.fixture
def artifact_path(tmp_path):
    return tmp_path / "config" / "settings.json"


@pytest_asyncio.fixture
async def cluster(artifact_path):
    """Two registries standing in for two processes sharing storage, shared cache and artifact."""
    record_store = InMemoryRecordStore()
    shared = InMemoryCacheStore()
    artifact_store = JsonFileArtifactStore(artifact_path)

    def process():
        return SettingsRegistry(
            record_store,
            CacheLayer(ProcessLocalCache(), shared),
            snapshot_builder=ConfigSnapshotBuilder(artifact_store),
        )

    first, second = process(), process()
    yield first, second
    await shared.close()
    await record_store.close()


def read_artifact(path):
    return json.loads(path.read_text())


class TestWriteVisibility:
    """Reads after a completed write observe the new value."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_fresh_process_sees_write(self, cluster):
        writer, _ = cluster
        await writer.set("x", "a", "mod1")

        # A process with an empty local tier only shares the shared tier and storage
        reader = SettingsRegistry(writer.record_store, CacheLayer(ProcessLocalCache(), writer.cache.shared))
        assert await reader.get("x", "mod1") == "a"

        await writer.set("x", "b", "mod1")

        reader = SettingsRegistry(writer.record_store, CacheLayer(ProcessLocalCache(), writer.cache.shared))
        assert await reader.get("x", "mod1") == "b"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_shared_tier_never_serves_old_value(self, cluster):
        writer, reader = cluster
        await writer.set("x", "a")
        await writer.get("x")
        assert await writer.cache.shared.get("Setting_x_") is not None

        await writer.set("x", "b")

        assert await writer.cache.shared.get("Setting_x_") is None
        reader.cache.flush()
        assert await reader.get("x") == "b"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_other_process_local_tier_may_stay_stale(self, cluster):
        writer, reader = cluster
        await writer.set("x", "a")
        assert await reader.get("x") == "a"

        await writer.set("x", "b")

        # No broadcast invalidation: the reader keeps its local copy until flushed
        assert await reader.get("x") == "a"
        reader.cache.flush()
        assert await reader.get("x") == "b"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_write_over_stale_local_entry_after_recreate(self, cluster):
        writer, other = cluster
        await writer.set("x", "a")
        assert await other.get("x") == "a"

        # The record is replaced under a new id while other still holds the old one
        await writer.set("x", "")
        await writer.set("x", "b")

        await other.set("x", "c")

        assert await other.get("x") == "c"
        assert (await other.record_store.find("x")).value == "c"
        assert await other.record_store.count() == 1

        await other.set("x", "d")
        assert await other.get("x") == "d"
        writer.cache.flush()
        assert await writer.get("x") == "d"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_tombstone_over_stale_local_entry(self, cluster):
        writer, other = cluster
        await writer.set("x", "a")
        assert await other.get("x") == "a"

        await writer.set("x", "")
        await writer.set("x", "b")

        await other.set("x", "")

        assert await other.record_store.find("x") is None
        assert await other.get("x") == ""
        writer.cache.flush()
        assert await writer.get("x") == ""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_tombstone_visible_across_processes(self, cluster):
        first, second = cluster
        await first.set("x", "a")
        await first.get("x")

        await first.set("x", "")

        assert await first.get("x") == ""
        assert await second.get("x") == ""
        assert await first.record_store.find("x") is None


class TestNamespaces:
    """Global and module scopes are independent."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_namespace_isolation(self, cluster):
        first, second = cluster
        await first.set("x", "a", "")
        await first.set("x", "b", "mod1")

        assert await second.get("x", "") == "a"
        assert await second.get("x", "mod1") == "b"

        await first.set("x", "", "mod1")
        second.cache.flush()

        assert await second.get("x", "") == "a"
        assert await second.get("x", "mod1") == ""


class TestSnapshotRebuild:
    """The JSON artifact follows trigger-set writes."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_smtp_scenario(self, cluster, artifact_path):
        registry, _ = cluster
        await registry.set("transportType", "smtp", "mailing")
        await registry.set("hostname", "smtp.example.com", "mailing")
        await registry.set("port", "", "mailing")

        mail = read_artifact(artifact_path)["components"]["mail"]

        assert mail["transportType"] == "smtp"
        assert mail["transportOptions"] == {"host": "smtp.example.com"}

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_removing_port_drops_it_from_snapshot(self, cluster, artifact_path):
        registry, _ = cluster
        await registry.set("transportType", "smtp", "mailing")
        await registry.set("port", "587", "mailing")
        assert read_artifact(artifact_path)["components"]["mail"]["transportOptions"] == {"port": "587"}

        await registry.set("port", "", "mailing")

        assert "port" not in read_artifact(artifact_path)["components"]["mail"]["transportOptions"]

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_merge_preserves_unrelated_keys(self, cluster, artifact_path):
        artifact_path.parent.mkdir(parents=True)
        artifact_path.write_text(json.dumps({"extra": 42, "components": {"db": {"dsn": "sqlite://"}}}))
        registry, _ = cluster

        await registry.set("theme", "dark")

        config = read_artifact(artifact_path)
        assert config["extra"] == 42
        assert config["components"]["db"] == {"dsn": "sqlite://"}
        assert config["theme"] == "dark"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_corrupt_artifact_is_rebuilt(self, cluster, artifact_path):
        artifact_path.parent.mkdir(parents=True)
        artifact_path.write_text("{ not json")
        registry, _ = cluster

        await registry.set("name", "Acme")

        assert read_artifact(artifact_path)["name"] == "Acme"

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_unrelated_write_leaves_artifact_alone(self, cluster, artifact_path):
        registry, _ = cluster

        await registry.set("foo", "bar")

        assert not artifact_path.exists()

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_cache_type_written_to_snapshot(self, cluster, artifact_path):
        registry, _ = cluster

        await registry.set("type", "RedisCache", "cache")
        assert read_artifact(artifact_path)["components"]["cache"] == {"class": "RedisCache"}

        await registry.set("type", "", "cache")
        assert read_artifact(artifact_path)["components"]["cache"] == {
            "class": "registry.implementations.noop.NoOpCacheStore"
        }

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_concurrent_trigger_writes_converge(self, cluster, artifact_path):
        first, second = cluster

        await asyncio.gather(
            first.set("name", "Acme"),
            second.set("theme", "dark"),
            first.set("transportType", "sendmail", "mailing"),
        )
        # The last rebuild re-reads current state, so one more write reconciles everything
        await second.set("hostname", "smtp.example.com", "mailing")

        config = read_artifact(artifact_path)
        assert config["name"] == "Acme"
        assert config["theme"] == "dark"
        assert config["components"]["mail"]["transportType"] == "sendmail"


class TestCreateRegistry:
    """The composition root wires a working registry from settings."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_end_to_end_with_file_artifact(self, artifact_path):
        settings = RegistrySettings(ARTIFACT_PATH=str(artifact_path), CACHE_BACKEND="memory")

        async with create_registry(settings, configure_logging=False) as registry:
            await registry.set("name", "Acme")
            await registry.set_text("mailTemplate", "<p>Hello</p>", "mailing")

            assert await registry.get("name") == "Acme"
            assert await registry.get_text("mailTemplate", "mailing") == "<p>Hello</p>"

        config = read_artifact(artifact_path)
        assert config["name"] == "Acme"
        assert config["components"]["mail"]["class"] == settings.MAIL_COMPONENT_CLASS
