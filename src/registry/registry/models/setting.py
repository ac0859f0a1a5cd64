# ABOUTME: Setting model for named configuration entries scoped by an optional module id
# ABOUTME: Defines field limits and the cache key each record is stored under

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from registry.exceptions import ValidationException

MAX_NAME_LENGTH = 100
MAX_VALUE_LENGTH = 100
MAX_MODULE_ID_LENGTH = 100


class Setting(BaseModel):
    """
    A single persisted registry entry.

    Scalar settings live in ``value`` (short, at most 100 characters) while large
    payloads such as templates live in ``value_text``. ``module_id`` qualifies the
    entry with a subsystem namespace; ``None`` is the global namespace, which is a
    different scope from a module id literally stored as an empty string.

    The pair ``(name, module_id)`` is unique within a record store.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "hostname",
                "value": "smtp.example.com",
                "value_text": "",
                "module_id": "mailing",
            }
        },
    )

    id: Optional[int] = Field(default=None, description="Identifier assigned by storage, None until saved")
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, description="Setting name")
    value: str = Field(default="", max_length=MAX_VALUE_LENGTH, description="Short scalar value")
    value_text: str = Field(default="", description="Unrestricted text value")
    module_id: Optional[str] = Field(
        default=None, max_length=MAX_MODULE_ID_LENGTH, description="Module scope, None for the global namespace"
    )

    @property
    def is_new(self) -> bool:
        """True while storage has not assigned an id to this record."""
        return self.id is None

    def cache_key(self, prefix: str) -> str:
        """Return the cache key this record is stored under."""
        return build_cache_key(prefix, self.name, self.module_id or "")

    @classmethod
    def create(cls, **fields) -> "Setting":
        """Build a validated setting, raising ValidationException on bad input."""
        try:
            return cls(**fields)
        except ValidationError as e:
            raise ValidationException(
                f"Invalid setting '{fields.get('name')}': {e.error_count()} validation error(s)",
                code="INVALID_SETTING",
                details={"errors": e.errors(include_url=False), "module_id": fields.get("module_id")},
            ) from e

    def with_changes(self, **changes) -> "Setting":
        """Return a validated copy with ``changes`` applied; the original is never mutated."""
        return type(self).create(**{**self.model_dump(), **changes})


def build_cache_key(prefix: str, name: str, module_id: str = "") -> str:
    """Cache keys have the form ``<prefix>_<name>_<module_id>``."""
    return f"{prefix}_{name}_{module_id}"
