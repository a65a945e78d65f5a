"""Field and object schemas — ordered rules per field plus cross-field refinements.

Evaluation policy:
    - Each field reports at most one message: the first rule it fails.
    - A failing field never stops the other fields from being checked.
    - Refinements run only once every field has passed, and all of them run.
    - Keys the schema does not declare are ignored and dropped from the output.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Literal, Optional

import structlog
from pydantic import BaseModel

from formguard.validators.models import (
    ROOT_ERROR_KEY,
    FieldRule,
    SchemaDefinitionError,
    ValidationResult,
)
from formguard.validators.patterns import MESSAGES, invalid_type
from formguard.validators.rules import evaluate, is_number

logger = structlog.get_logger()

ValueType = Literal["string", "number", "boolean", "any"]


def describe_type(value: Any) -> str:
    """Name a runtime value the way form payloads (JSON) name types."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, float) and value != value:
        return "nan"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _type_matches(expected: ValueType, value: Any) -> bool:
    if expected == "any":
        return True
    if expected == "number":
        return is_number(value)
    if expected == "boolean":
        return isinstance(value, bool)
    return isinstance(value, str)


class FieldSchema(BaseModel):
    """Ordered rules for one named field."""

    rules: tuple[FieldRule, ...] = ()
    type: ValueType = "string"
    optional: bool = False  # a missing key passes
    allow_empty: bool = False  # "" passes without running the rules

    model_config = {"frozen": True}

    def check(self, value: Any, present: bool = True) -> Optional[str]:
        """Return the first failure message for this value, or None."""
        if not present:
            return None if self.optional else MESSAGES["required"]

        if self.allow_empty and value == "":
            return None

        if not _type_matches(self.type, value):
            return invalid_type(self.type, describe_type(value))

        for rule in self.rules:
            message = evaluate(rule, value)
            if message is not None:
                return message
        return None


def field(
    *rules: FieldRule,
    type: ValueType = "string",
    optional: bool = False,
    allow_empty: bool = False,
) -> FieldSchema:
    """Shorthand for building a FieldSchema from positional rules."""
    return FieldSchema(rules=rules, type=type, optional=optional, allow_empty=allow_empty)


class Refinement(BaseModel):
    """Whole-object predicate whose failure is reported against one field."""

    predicate: Callable[[dict[str, Any]], bool]
    message: str
    path: str

    model_config = {"frozen": True}

    def holds(self, data: dict[str, Any]) -> bool:
        return bool(self.predicate(data))


class ObjectSchema:
    """Named bundle of field schemas plus refinements describing one form."""

    def __init__(
        self,
        name: str,
        fields: Mapping[str, FieldSchema],
        refinements: Iterable[Refinement] = (),
    ):
        self.name = name
        self.fields: dict[str, FieldSchema] = dict(fields)
        self.refinements: tuple[Refinement, ...] = tuple(refinements)

        for refinement in self.refinements:
            if refinement.path not in self.fields:
                raise SchemaDefinitionError(
                    f"Refinement on schema '{name}' targets undeclared field '{refinement.path}'"
                )

    def __repr__(self) -> str:
        return f"ObjectSchema(name={self.name!r}, fields={list(self.fields)})"

    def validate(self, data: Any) -> ValidationResult:
        """Validate a payload. Never raises for bad data."""
        if not isinstance(data, Mapping):
            return ValidationResult.fail({ROOT_ERROR_KEY: [invalid_type("object", describe_type(data))]})

        errors: dict[str, list[str]] = {}
        cleaned: dict[str, Any] = {}

        for name, schema in self.fields.items():
            present = name in data
            value = data.get(name)
            message = schema.check(value, present=present)
            if message is not None:
                errors[name] = [message]
            elif present:
                cleaned[name] = value

        if not errors:
            for refinement in self.refinements:
                if not refinement.holds(cleaned):
                    errors.setdefault(refinement.path, []).append(refinement.message)

        if errors:
            logger.debug("schema_validation_failed", schema=self.name, fields=list(errors))
            return ValidationResult.fail(errors)

        return ValidationResult.ok(cleaned)

    def validate_field(self, name: str, value: Any) -> Optional[str]:
        """Check a single field in isolation (no refinements), e.g. on keystroke.

        Raises:
            KeyError: if the schema does not declare the field.
        """
        return self.fields[name].check(value)

    def extend(
        self,
        name: str,
        fields: Optional[Mapping[str, FieldSchema]] = None,
        refinements: Iterable[Refinement] = (),
    ) -> "ObjectSchema":
        """Derive a new schema with extra/overridden fields and appended refinements."""
        return ObjectSchema(
            name,
            {**self.fields, **(fields or {})},
            (*self.refinements, *refinements),
        )
