"""SCR Validator - Validate Spatial Content Records against the schema.

This module checks candidate records (parsed JSON, raw JSON text or typed
models) against the declarative tables in ``scd_access.core.schema``:
- JSON parsing of raw text
- Required fields and value kinds
- URI syntax of references
- Array item rules

Every violated constraint is reported, not only the first one.
"""

import json
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Union
from urllib.parse import urlsplit

from ..core.schema import (
    FieldKind,
    FieldSpec,
    ObjectSchema,
    SCR_NO_ID_SCHEMA,
    SCR_SCHEMA,
    apply_defaults as fill_defaults,
)
from ..exceptions import ParseError, SchemaViolationError
from ..utils.files import read_text

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


@dataclass
class Violation:
    """A single violated field-level constraint."""
    code: str
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.code} at {self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Outcome of validating a candidate record.

    Either ``valid`` is True and ``record`` holds the typed record, or it is
    False and ``violations`` (schema problems) or ``parse_error`` (malformed
    JSON text) explain why.
    """
    valid: bool
    source: str
    record: Any = None
    violations: List[Violation] = field(default_factory=list)
    parse_error: Optional[str] = None

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def raise_for_errors(self) -> None:
        """Raise the matching exception if validation failed.

        Raises:
            ParseError: If the candidate text was not valid JSON
            SchemaViolationError: If the candidate violated the schema
        """
        if self.valid:
            return
        if self.parse_error is not None:
            raise ParseError(self.source, self.parse_error)
        raise SchemaViolationError(self.source, self.violations)

    def unwrap(self):
        """Return the typed record, raising if validation failed."""
        self.raise_for_errors()
        return self.record

    def __str__(self) -> str:
        status = "VALID" if self.valid else "INVALID"
        lines = [f"Validation Result ({self.source}): {status}"]
        if self.parse_error is not None:
            lines.append(f"  - PARSE_ERROR: {self.parse_error}")
        for violation in self.violations:
            lines.append(f"  - {violation}")
        return "\n".join(lines)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def is_valid_uri(value: str) -> bool:
    """Check that a string is a syntactically valid absolute URI."""
    if not value or any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False
    if parts.scheme.lower() in ("http", "https", "ftp", "ws", "wss"):
        return bool(parts.netloc)
    return bool(parts.netloc or parts.path)


class SchemaValidator:
    """Validator for Spatial Content Records.

    Example:
        validator = SchemaValidator(SCR_NO_ID_SCHEMA)
        result = validator.validate('{"type": "scr", "content": {...}}')
        if result.valid:
            print(result.record.content.title)
        else:
            for violation in result.violations:
                print(violation)
    """

    def __init__(self, schema: ObjectSchema = SCR_NO_ID_SCHEMA):
        """Initialize validator.

        Args:
            schema: Top-level schema to check candidates against
        """
        self.schema = schema

    def validate(
        self,
        candidate: Any,
        source: str = "request body",
        apply_defaults: bool = False,
    ) -> ValidationResult:
        """Validate a candidate record.

        Args:
            candidate: Parsed JSON (dict), JSON text (str/bytes) or a typed model
            source: Identifier of where the candidate came from, for diagnostics
            apply_defaults: Build the record from the defaulted view (local paths only)

        Returns:
            ValidationResult with the typed record or the violations
        """
        if isinstance(candidate, (str, bytes, bytearray)):
            if isinstance(candidate, str):
                candidate = candidate.lstrip("\ufeff")
            try:
                candidate = json.loads(candidate)
            except ValueError as e:
                # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
                return ValidationResult(valid=False, source=source, parse_error=str(e))
        elif hasattr(candidate, "to_dict"):
            candidate = candidate.to_dict()

        violations: List[Violation] = []
        self._check_object(candidate, self.schema, "$", violations)

        if violations:
            return ValidationResult(valid=False, source=source, violations=violations)

        data = fill_defaults(candidate, self.schema) if apply_defaults else candidate
        record = self.schema.model.from_dict(data) if self.schema.model else data
        return ValidationResult(valid=True, source=source, record=record)

    def _check_object(
        self,
        value: Any,
        schema: ObjectSchema,
        path: str,
        violations: List[Violation],
    ) -> None:
        if not isinstance(value, dict):
            violations.append(Violation(
                code="INVALID_TYPE",
                path=path,
                message=f"Expected {schema.name} object, got {_kind_of(value)}",
            ))
            return

        for spec in schema.fields:
            field_path = f"{path}.{spec.name}"
            if spec.name not in value:
                if spec.required:
                    violations.append(Violation(
                        code="MISSING_FIELD",
                        path=field_path,
                        message=f"Required field '{spec.name}' of {schema.name} is missing",
                    ))
                continue
            self._check_value(value[spec.name], spec, field_path, violations)

    def _check_value(
        self,
        value: Any,
        spec: FieldSpec,
        path: str,
        violations: List[Violation],
    ) -> None:
        if spec.kind == FieldKind.STRING:
            if not isinstance(value, str):
                violations.append(_type_violation(path, "string", value))

        elif spec.kind == FieldKind.NUMBER:
            if not _is_number(value):
                violations.append(_type_violation(path, "number", value))

        elif spec.kind == FieldKind.URI:
            if not isinstance(value, str):
                violations.append(_type_violation(path, "string", value))
            elif not is_valid_uri(value):
                violations.append(Violation(
                    code="INVALID_URI",
                    path=path,
                    message=f"Invalid url: {value!r}",
                ))

        elif spec.kind == FieldKind.OBJECT:
            self._check_object(value, spec.schema, path, violations)

        elif spec.kind == FieldKind.ARRAY:
            if not isinstance(value, list):
                violations.append(_type_violation(path, "array", value))
                return
            if len(value) < spec.min_items:
                violations.append(Violation(
                    code="TOO_FEW_ITEMS",
                    path=path,
                    message=f"Expected at least {spec.min_items} item(s), got {len(value)}",
                ))
            for index, item in enumerate(value):
                self._check_value(item, spec.item, f"{path}[{index}]", violations)


def _kind_of(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _type_violation(path: str, expected: str, value: Any) -> Violation:
    return Violation(
        code="INVALID_TYPE",
        path=path,
        message=f"Expected {expected}, got {_kind_of(value)}",
    )


def validate(
    candidate: Any,
    schema: ObjectSchema = SCR_NO_ID_SCHEMA,
    source: str = "request body",
    apply_defaults: bool = False,
) -> ValidationResult:
    """Convenience function to validate a candidate record.

    Args:
        candidate: Parsed JSON, JSON text or typed model
        schema: SCR_NO_ID_SCHEMA (creation) or SCR_SCHEMA (stored records)
        source: Identifier of the candidate for diagnostics
        apply_defaults: Build the record from the defaulted view

    Returns:
        ValidationResult
    """
    return SchemaValidator(schema).validate(candidate, source=source, apply_defaults=apply_defaults)


def validate_scr(candidate: Any, source: str = "request body") -> ValidationResult:
    """Validate against the full SCR contract (with id)."""
    return validate(candidate, schema=SCR_SCHEMA, source=source)


def validate_scr_no_id(candidate: Any, source: str = "request body") -> ValidationResult:
    """Validate against the creation contract (without id)."""
    return validate(candidate, schema=SCR_NO_ID_SCHEMA, source=source)


def validate_file(
    path: Union[str, Path],
    schema: ObjectSchema = SCR_NO_ID_SCHEMA,
) -> ValidationResult:
    """Convenience function to validate a JSON file.

    Args:
        path: Path to the .json file
        schema: Schema to validate against

    Returns:
        ValidationResult with the file name as source

    Raises:
        FileReadError: If the file cannot be read
    """
    text = read_text(path)
    return validate(text, schema=schema, source=Path(path).name)
