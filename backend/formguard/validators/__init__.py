"""Form validators — declarative schemas, predicates, and input helpers.

Usage:
    from formguard.validators import validation_engine

    result = validation_engine.validate("register", form_data)
    if not result.success:
        # Display result.errors keyed by field name
"""

from formguard.validators.debounce import debounce
from formguard.validators.engine import FormValidationEngine, validation_engine
from formguard.validators.files import validate_file
from formguard.validators.forms import (
    FORM_SCHEMAS,
    contact_form_schema,
    password_change_schema,
    search_query_schema,
    user_login_schema,
    user_profile_update_schema,
    user_register_schema,
)
from formguard.validators.models import (
    FieldRule,
    FileValidationOptions,
    FileValidationResult,
    RuleKind,
    SchemaDefinitionError,
    UnknownFormError,
    UploadedFile,
    ValidationResult,
)
from formguard.validators.patterns import MESSAGES
from formguard.validators.predicates import (
    get_password_strength,
    is_valid_email,
    is_valid_password,
    is_valid_phone,
    is_valid_url,
    is_valid_username,
    sanitize_string,
)
from formguard.validators.schema import FieldSchema, ObjectSchema, Refinement, field

__all__ = [
    "FormValidationEngine",
    "validation_engine",
    "FORM_SCHEMAS",
    "user_register_schema",
    "user_login_schema",
    "contact_form_schema",
    "user_profile_update_schema",
    "password_change_schema",
    "search_query_schema",
    "FieldRule",
    "RuleKind",
    "FieldSchema",
    "ObjectSchema",
    "Refinement",
    "field",
    "ValidationResult",
    "SchemaDefinitionError",
    "UnknownFormError",
    "MESSAGES",
    "is_valid_email",
    "is_valid_phone",
    "is_valid_url",
    "is_valid_username",
    "is_valid_password",
    "get_password_strength",
    "sanitize_string",
    "UploadedFile",
    "FileValidationOptions",
    "FileValidationResult",
    "validate_file",
    "debounce",
]
