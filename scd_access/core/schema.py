"""Declarative schema of Spatial Content Records.

Each object type is described as a table of ``FieldSpec`` entries. The tables
are consumed by ``scd_access.validator`` and by ``apply_defaults``; nothing in
here depends on a particular validation engine.
"""
import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .models import SCR, SCRNoId


class FieldKind(Enum):
    """JSON value kinds understood by the validator."""
    STRING = "string"
    NUMBER = "number"
    URI = "uri"        # string that must parse as an absolute URI
    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True)
class FieldSpec:
    """Structural rule for a single field.

    Attributes:
        name: JSON key of the field
        kind: Expected value kind
        required: Whether the key must be present
        schema: Nested object schema (``OBJECT`` fields and ``OBJECT`` items)
        item: Spec of the array items (``ARRAY`` fields)
        min_items: Minimum number of items when the array is present
    """
    name: str
    kind: FieldKind
    required: bool = True
    schema: Optional["ObjectSchema"] = None
    item: Optional["FieldSpec"] = None
    min_items: int = 0


@dataclass(frozen=True)
class ObjectSchema:
    """Ordered set of field rules describing one JSON object type."""
    name: str
    fields: Tuple[FieldSpec, ...]
    model: Optional[type] = field(default=None, compare=False)

    def extend(self, name: str, *fields: FieldSpec, model: Optional[type] = None) -> "ObjectSchema":
        """Return a new schema with additional fields appended."""
        return ObjectSchema(name=name, fields=self.fields + tuple(fields), model=model)

    def get(self, field_name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.name == field_name:
                return spec
        return None


def _string(name: str, required: bool = True) -> FieldSpec:
    return FieldSpec(name, FieldKind.STRING, required)


def _number(name: str, required: bool = True) -> FieldSpec:
    return FieldSpec(name, FieldKind.NUMBER, required)


POSITION_SCHEMA = ObjectSchema("Position", (
    _number("lon"),
    _number("lat"),
    _number("h"),
))

QUATERNION_SCHEMA = ObjectSchema("Quaternion", (
    _number("x"),
    _number("y"),
    _number("z"),
    _number("w"),
))

GEOPOSE_SCHEMA = ObjectSchema("Geopose", (
    FieldSpec("position", FieldKind.OBJECT, schema=POSITION_SCHEMA),
    FieldSpec("quaternion", FieldKind.OBJECT, schema=QUATERNION_SCHEMA),
))

REFERENCE_SCHEMA = ObjectSchema("Reference", (
    _string("contentType"),
    FieldSpec("url", FieldKind.URI),
))

DEFINITION_SCHEMA = ObjectSchema("Definition", (
    _string("type"),
    _string("value"),
))

CONTENT_SCHEMA = ObjectSchema("Content", (
    _string("id"),
    _string("type"),
    _string("title"),
    _string("description", required=False),
    FieldSpec("keywords", FieldKind.ARRAY, required=False,
              item=FieldSpec("", FieldKind.STRING)),
    _string("placekey", required=False),
    FieldSpec("refs", FieldKind.ARRAY, required=False, min_items=1,
              item=FieldSpec("", FieldKind.OBJECT, schema=REFERENCE_SCHEMA)),
    FieldSpec("geopose", FieldKind.OBJECT, schema=GEOPOSE_SCHEMA),
    _number("size", required=False),
    _string("bbox", required=False),
    FieldSpec("definitions", FieldKind.ARRAY, required=False,
              item=FieldSpec("", FieldKind.OBJECT, schema=DEFINITION_SCHEMA)),
))

SCR_NO_ID_SCHEMA = ObjectSchema("SCRNoId", (
    _string("type"),
    FieldSpec("content", FieldKind.OBJECT, schema=CONTENT_SCHEMA),
    _string("tenant", required=False),
    _number("timestamp", required=False),
), model=SCRNoId)

SCR_SCHEMA = SCR_NO_ID_SCHEMA.extend("SCR", _string("id"), model=SCR)

# Values used for the defaulted view of partially specified records
DEFAULT_VALUES = {
    FieldKind.STRING: "",
    FieldKind.URI: "",
    FieldKind.NUMBER: 0,
    FieldKind.ARRAY: [],
}


def apply_defaults(data: Dict[str, Any], schema: ObjectSchema) -> Dict[str, Any]:
    """Return a copy of ``data`` with absent optional fields defaulted.

    Strings default to ``""``, numbers to ``0`` and arrays to ``[]`` (arrays
    with a minimum item count stay absent). Nested
    objects are only descended into when present; required fields are never
    invented. Never use the defaulted view for data that is transmitted.

    Args:
        data: Parsed JSON object
        schema: Schema describing ``data``

    Returns:
        New dictionary with defaults applied
    """
    result = dict(data)
    for spec in schema.fields:
        if spec.name not in result:
            # an empty default would break a minimum item count
            if not spec.required and spec.kind in DEFAULT_VALUES and not spec.min_items:
                result[spec.name] = copy.deepcopy(DEFAULT_VALUES[spec.kind])
            continue

        value = result[spec.name]
        if spec.kind == FieldKind.OBJECT and isinstance(value, dict) and spec.schema:
            result[spec.name] = apply_defaults(value, spec.schema)
        elif (spec.kind == FieldKind.ARRAY and isinstance(value, list)
              and spec.item is not None and spec.item.schema is not None):
            result[spec.name] = [
                apply_defaults(v, spec.item.schema) if isinstance(v, dict) else v
                for v in value
            ]
    return result
