# ABOUTME: Unit tests for the registry exception hierarchy
# ABOUTME: Tests message, code and details handling and inheritance relationships

import pytest

from registry.exceptions import (
    RegistryException,
    ValidationException,
    StorageError,
    CacheError,
    ArtifactError,
    ConfigurationException,
)


class TestRegistryException:
    """Test suite for RegistryException."""

    @pytest.mark.unit
    def test_message_only(self):
        exc = RegistryException("Something failed")

        assert exc.message == "Something failed"
        assert exc.code is None
        assert exc.details == {}
        assert str(exc) == "Something failed"

    @pytest.mark.unit
    def test_code_and_details(self):
        details = {"name": "theme"}
        exc = RegistryException("Bad setting", code="INVALID_SETTING", details=details)

        assert exc.code == "INVALID_SETTING"
        assert exc.details == {"name": "theme"}

    @pytest.mark.unit
    def test_details_are_copied(self):
        details = {"name": "theme"}
        exc = RegistryException("Bad setting", details=details)
        details["name"] = "changed"

        assert exc.details["name"] == "theme"


class TestExceptionHierarchy:
    """Test suite for the inheritance relationships."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "exc_class", [ValidationException, StorageError, CacheError, ArtifactError, ConfigurationException]
    )
    def test_all_inherit_from_registry_exception(self, exc_class):
        assert issubclass(exc_class, RegistryException)

    @pytest.mark.unit
    def test_cache_error_is_storage_error(self):
        with pytest.raises(StorageError):
            raise CacheError("Cache unavailable", code="CACHE_UNAVAILABLE")

    @pytest.mark.unit
    def test_artifact_error_is_not_storage_error(self):
        assert not issubclass(ArtifactError, StorageError)
