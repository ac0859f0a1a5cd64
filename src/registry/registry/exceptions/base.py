# ABOUTME: Core exception classes for the settings registry
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class RegistryException(Exception):
    """Base exception class for the settings registry.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class so
    callers can catch registry failures with a single clause.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize RegistryException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(RegistryException):
    """Exception raised when a setting fails validation on write.

    Used when:
    - The setting name is missing or empty
    - A field exceeds its length limit
    - A second record would share an existing (name, module_id) pair

    Nothing has been persisted or invalidated when this is raised.
    """

    pass


class StorageError(RegistryException):
    """Exception raised for persistence failures.

    Used when the record store cannot save or delete a setting, or when a
    collaborator is used after it has been closed. Cache state is left untouched
    so cache and storage both still hold the previous value.
    """

    pass


class CacheError(StorageError):
    """Exception raised when the shared cache tier cannot be reached or updated."""

    pass


class ArtifactError(RegistryException):
    """Exception raised when the derived configuration artifact cannot be read or written.

    The registry write that triggered the rebuild is not rolled back; the next
    successful rebuild reconciles the artifact.
    """

    pass


class ConfigurationException(RegistryException):
    """Exception raised for invalid or unsupported registry configuration."""

    pass
