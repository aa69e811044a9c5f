"""scd-access - Spatial Content Discovery access library.

A Python client for the spatial content discovery services of the Open
Spatial Computing Platform, including:
- Typed Spatial Content Records (SCR)
- Schema validation of records
- Location, id and tenant queries
- Creating, replacing and deleting records
"""

from .config import Config
from .exceptions import (
    SCDError,
    ConfigurationError,
    InvalidArgumentError,
    ParseError,
    SchemaViolationError,
    RequestFailedError,
    FileReadError,
)
from .core.models import (
    Position,
    Quaternion,
    Geopose,
    Reference,
    Definition,
    Content,
    SCRNoId,
    SCR,
)
from .core.schema import SCR_SCHEMA, SCR_NO_ID_SCHEMA
from .validator import validate, ValidationResult, Violation
from .fixtures import SCR_EMPTY, SCR_REFERENCE, SCR_DEFINITION, new_scr_template
from .transport import BaseTransport, RequestsTransport, TransportResponse
from .client import SCDClient

__version__ = "1.0.0"
__all__ = [
    "SCDClient",
    "Config",
    # Models
    "Position",
    "Quaternion",
    "Geopose",
    "Reference",
    "Definition",
    "Content",
    "SCRNoId",
    "SCR",
    # Validation
    "SCR_SCHEMA",
    "SCR_NO_ID_SCHEMA",
    "validate",
    "ValidationResult",
    "Violation",
    # Templates
    "SCR_EMPTY",
    "SCR_REFERENCE",
    "SCR_DEFINITION",
    "new_scr_template",
    # Transport
    "BaseTransport",
    "RequestsTransport",
    "TransportResponse",
    # Exceptions
    "SCDError",
    "ConfigurationError",
    "InvalidArgumentError",
    "ParseError",
    "SchemaViolationError",
    "RequestFailedError",
    "FileReadError",
]
