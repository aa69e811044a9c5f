"""SCR Validator - Validate Spatial Content Records against the schema."""

from .validator import (
    SchemaValidator,
    ValidationResult,
    Violation,
    is_valid_uri,
    validate,
    validate_file,
    validate_scr,
    validate_scr_no_id,
)

__all__ = [
    "SchemaValidator",
    "ValidationResult",
    "Violation",
    "is_valid_uri",
    "validate",
    "validate_file",
    "validate_scr",
    "validate_scr_no_id",
]
