"""HTTP transport used by the SCD client.

The client only needs ``perform(url, method, headers, body, params)``; any
object implementing ``BaseTransport`` can be injected (tests use a fake one).
Connection problems are not wrapped: ``requests.exceptions.RequestException``
propagates to the caller unchanged.
"""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

GET_METHOD = "GET"
POST_METHOD = "POST"
PUT_METHOD = "PUT"
DELETE_METHOD = "DELETE"


@dataclass
class TransportResponse:
    """Status and body of a completed HTTP exchange.

    Attributes:
        status_code: HTTP status code
        reason: HTTP status text
        text: Response body decoded as text
    """

    status_code: int
    reason: str
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Parse the body as JSON (raises ``json.JSONDecodeError``)."""
        return json.loads(self.text)


class BaseTransport(ABC):
    """Abstract base class for HTTP transports."""

    @abstractmethod
    def perform(
        self,
        url: str,
        method: str,
        headers: Dict[str, str],
        body: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        """Execute a single HTTP request.

        Args:
            url: Absolute request URL
            method: HTTP method
            headers: Request headers
            body: Request body, only for POST and PUT
            params: Query parameters

        Returns:
            TransportResponse, whatever the status code

        Raises:
            requests.exceptions.RequestException: If the request cannot complete
        """
        pass


class RequestsTransport(BaseTransport):
    """Transport backed by a ``requests.Session``.

    No retries are configured. With ``timeout=None`` a hung server blocks
    the call indefinitely.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """Initialize transport.

        Args:
            session: Session to reuse (a new one is created if omitted)
            timeout: Timeout in seconds for each request
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def perform(
        self,
        url: str,
        method: str,
        headers: Dict[str, str],
        body: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        response = self.session.request(
            method,
            url,
            headers=headers,
            params=params,
            data=body.encode("utf-8") if body is not None else None,
            timeout=self.timeout,
        )
        logger.debug(f"{method} {response.url} -> {response.status_code}")
        return TransportResponse(
            status_code=response.status_code,
            reason=response.reason or "",
            text=response.text,
        )

    def close(self) -> None:
        self.session.close()
