"""Validation models — rule kinds, field rules, results, and file descriptors.

Rules are immutable values created once at import time. Results are created
per call and hold no reference back to the schema that produced them.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from formguard.config import get_settings
from formguard.validators.patterns import message_for

# Error key used when the payload as a whole is unusable (not an object).
ROOT_ERROR_KEY = "__root__"


class RuleKind(str, Enum):
    """Atomic constraint kinds understood by the rule interpreter."""

    REQUIRED = "required"
    PATTERN = "pattern"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    MIN = "min"
    MAX = "max"
    ENUM = "enum"
    CUSTOM = "custom"


class SchemaDefinitionError(ValueError):
    """A schema was authored incorrectly (e.g. a refinement targets an undeclared field)."""


class UnknownFormError(KeyError):
    """No schema is registered under the requested form name."""


class FieldRule(BaseModel):
    """A single constraint on one field value."""

    kind: RuleKind
    param: Any = None  # bound, compiled pattern, option tuple, or predicate
    message: Optional[str] = None  # overrides the catalog message

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def resolve_message(self) -> str:
        if self.message is not None:
            return self.message
        return message_for(self.kind, self.param)


class ValidationResult(BaseModel):
    """Outcome of validating one payload against an object schema."""

    success: bool
    data: Optional[dict[str, Any]] = None
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def ok(cls, data: dict[str, Any]) -> "ValidationResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, errors: dict[str, list[str]]) -> "ValidationResult":
        return cls(success=False, errors=errors)

    @property
    def error_fields(self) -> list[str]:
        return list(self.errors)

    def first_error(self, field: str) -> Optional[str]:
        """First message recorded for a field, or None if it passed."""
        messages = self.errors.get(field)
        return messages[0] if messages else None


# ── File uploads ──


class UploadedFile(BaseModel):
    """Minimal description of a user-selected file."""

    name: str
    size: int = Field(ge=0, description="Size in bytes")
    content_type: str = Field(default="", alias="type")

    model_config = {"populate_by_name": True}


class FileValidationOptions(BaseModel):
    """Constraints applied by validate_file. Empty allow-lists mean no restriction."""

    max_size: int = Field(default_factory=lambda: get_settings().MAX_FILE_SIZE_BYTES, gt=0, alias="maxSize")
    allowed_types: list[str] = Field(default_factory=list, alias="allowedTypes")
    allowed_extensions: list[str] = Field(default_factory=list, alias="allowedExtensions")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class FileValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None
