"""Custom exceptions for scd-access.

Transport failures (connection refused, DNS errors, ...) are not wrapped:
they propagate as ``requests.exceptions.RequestException`` from the transport.
"""
from typing import List, Optional


class SCDError(Exception):
    """Base exception for all scd-access errors."""

    pass


class ConfigurationError(SCDError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidArgumentError(SCDError, ValueError):
    """Raised when a required call parameter is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(f"Invalid argument: {message}")


class ParseError(SCDError):
    """Raised when file or body text is not valid JSON."""

    def __init__(self, source: str, detail: str):
        super().__init__(f"Unable to parse JSON from {source}: {detail}")
        self.source = source
        self.detail = detail


class SchemaViolationError(SCDError):
    """Raised when parsed JSON does not conform to the SCR contract."""

    def __init__(self, source: str, violations: Optional[List] = None):
        self.source = source
        self.violations = list(violations or [])
        lines = [f"Schema violation in {source}: {len(self.violations)} problem(s)"]
        lines.extend(f"  - {v}" for v in self.violations)
        super().__init__("\n".join(lines))


class RequestFailedError(SCDError):
    """Raised when the server answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str, url: Optional[str] = None):
        super().__init__(f"Request failed ({status_code} {reason}): {body}")
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.url = url


class FileReadError(SCDError):
    """Raised when an SCR file cannot be read."""

    def __init__(self, source: str, detail: str):
        super().__init__(f"Unable to get content of {source}: {detail}")
        self.source = source
        self.detail = detail
