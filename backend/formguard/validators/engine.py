"""Form Validation Engine — looks up a form's schema, validates, and logs the run.

This is the main entry point for form submissions. Form components hand it a
form name and the raw payload; it returns a ValidationResult with every
invalid field's message so the UI can highlight them all at once.

Usage:
    result = validation_engine.validate("register", payload)
    if not result.success:
        # Show result.errors next to each field
"""

import json
import time
from typing import Any, Optional, Union

import structlog

from formguard.validators.forms import FORM_SCHEMAS
from formguard.validators.models import ROOT_ERROR_KEY, UnknownFormError, ValidationResult
from formguard.validators.schema import ObjectSchema

logger = structlog.get_logger()


class FormValidationEngine:
    """Registry of named form schemas with a single validate() entry point.

    Design principles:
        - Deterministic: same input → same output
        - Total over data: bad payloads become failure results, never exceptions
        - Extensible: register schemas without modifying the engine
        - Observable: logs every validation run with timing
    """

    def __init__(self, schemas: Optional[dict[str, ObjectSchema]] = None):
        """Initialize with the default form schemas or a custom mapping.

        Args:
            schemas: Optional form name → schema mapping. If None, uses FORM_SCHEMAS.
        """
        self.schemas: dict[str, ObjectSchema] = dict(schemas if schemas is not None else FORM_SCHEMAS)

    @property
    def forms(self) -> list[str]:
        return list(self.schemas)

    def get_schema(self, form: str) -> ObjectSchema:
        try:
            return self.schemas[form]
        except KeyError:
            raise UnknownFormError(form) from None

    def validate(self, form: str, payload: Union[dict, str]) -> ValidationResult:
        """Validate a submitted payload against a registered form.

        Args:
            form: Registered form name (e.g. "register", "search")
            payload: Field values as a dict or a JSON object string

        Returns:
            ValidationResult with the cleaned data or field-keyed errors

        Raises:
            UnknownFormError: if no schema is registered under ``form``
        """
        schema = self.get_schema(form)
        start_time = time.perf_counter()

        if isinstance(payload, str):
            try:
                payload = json.loads(payload)
            except (json.JSONDecodeError, RecursionError) as e:
                logger.warning("form_payload_unparsable", form=form, error=str(e))
                return ValidationResult.fail({ROOT_ERROR_KEY: [f"Cannot parse form payload: {e}"]})

        result = schema.validate(payload)

        duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "form_validation_complete",
            form=form,
            success=result.success,
            error_fields=result.error_fields,
            duration_ms=round(duration, 3),
        )

        return result

    def validate_field(self, form: str, field: str, value: Any) -> Optional[str]:
        """Check one field of a form in isolation (live feedback).

        Returns:
            The field's error message, or None if the value is acceptable
        """
        return self.get_schema(form).validate_field(field, value)

    def add_schema(self, schema: ObjectSchema, form: Optional[str] = None) -> None:
        """Register a schema under ``form`` (defaults to the schema's own name)."""
        self.schemas[form or schema.name] = schema

    def remove_schema(self, form: str) -> None:
        """Remove a schema by form name."""
        self.schemas.pop(form, None)


# Module-level singleton
validation_engine = FormValidationEngine()
