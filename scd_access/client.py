"""Main access point to the spatial content discovery service.

Example:
    >>> from scd_access import SCDClient, Config
    >>> client = SCDClient(Config(service_url="https://scd.example.org"))
    >>> records = client.get_contents_at_location(None, "3d", "8928308280fffff")
    >>> for scr in records:
    ...     print(scr.id, scr.content.title)
"""
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import quote

from .config import Config
from .core.models import SCR, SCRNoId
from .core.schema import SCR_NO_ID_SCHEMA, SCR_SCHEMA
from .exceptions import InvalidArgumentError, ParseError, RequestFailedError, SchemaViolationError
from .fixtures import local_result, local_results
from .transport import (
    BaseTransport,
    DELETE_METHOD,
    GET_METHOD,
    POST_METHOD,
    PUT_METHOD,
    RequestsTransport,
    TransportResponse,
)
from .utils.files import read_text
from .validator import Violation, validate

logger = logging.getLogger(__name__)

SCRS_PATH = "scrs"
TENANT_PATH = "tenant"
LOCAL_OK = "OK"

TokenProvider = Callable[[], Optional[str]]


def _body(record: Union[SCR, SCRNoId]) -> str:
    # NaN and Infinity are not JSON
    return json.dumps(record.to_dict(), allow_nan=False)


class SCDClient:
    """Client for the spatial content discovery service.

    Every operation issues at most one HTTP request. When ``config.local`` is
    set, no server access is done and canned local records (or ``"OK"`` for
    mutating operations) are returned instead.

    Operations that need authorization take a ``token``. When it is ``None``
    the client asks ``token_provider`` and then falls back to ``config.token``;
    an explicitly passed empty string is rejected.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[BaseTransport] = None,
        token_provider: Optional[TokenProvider] = None,
    ):
        """Initialize the client.

        Args:
            config: Optional Config object (loaded from the environment if omitted)
            transport: HTTP transport (a requests-backed one is created if omitted)
            token_provider: Callable returning a bearer token on demand
        """
        if config is None:
            config = Config.from_env()

        self.config = config
        self.transport = transport or RequestsTransport(timeout=config.request_timeout)
        self.token_provider = token_provider

        if config.local:
            logger.info("SCD client running in local mode, no server access will be done")

    @property
    def local(self) -> bool:
        return self.config.local

    # ==================== Read operations ====================

    def get_contents_at_location(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        h3_index: str,
        keywords: str = "",
    ) -> List[SCR]:
        """Request the available contents at a location for a specific topic.

        The location should be approximate, to avoid exposing exact client
        locations. No authorization is needed.

        Args:
            service_url: Base URL of the service (defaults to config.service_url)
            topic: Content topic
            h3_index: H3 cell index of the approximate location
            keywords: Optional keywords filter

        Returns:
            List of records at the location

        Raises:
            InvalidArgumentError: If topic or h3_index is empty
            RequestFailedError: If the server answers with an error status
        """
        if self.local:
            logger.debug("Local mode: returning local results")
            return local_results()

        topic = self._topic(topic)
        if not topic or not h3_index:
            raise InvalidArgumentError(f"Check parameters: topic={topic!r} h3Index={h3_index!r}")

        params = {"h3Index": h3_index}
        if keywords:
            params["keywords"] = keywords

        url = self._url(service_url, SCRS_PATH, topic)
        response = self._request(url, GET_METHOD, params=params)
        return self._parse_records(response, url)

    def get_content_with_id(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        record_id: str,
    ) -> SCR:
        """Request the content with the provided id from a topic.

        Args:
            service_url: Base URL of the service (defaults to config.service_url)
            topic: Content topic
            record_id: Server-assigned record id

        Returns:
            The record

        Raises:
            InvalidArgumentError: If the id is shorter than config.min_id_length
            RequestFailedError: If the server answers with an error status
        """
        if self.local:
            logger.debug("Local mode: returning local result")
            return local_result()

        if record_id is None or len(record_id) < self.config.min_id_length:
            raise InvalidArgumentError(f"Check parameters: id={record_id!r}")

        url = self._url(service_url, SCRS_PATH, self._topic(topic), record_id)
        response = self._request(url, GET_METHOD)
        return self._parse_record(response, url)

    def search_contents_for_tenant(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        token: Optional[str] = None,
    ) -> List[SCR]:
        """Request all content of the tenant authorized by the token in a topic.

        Raises:
            InvalidArgumentError: If no token is available
            RequestFailedError: If the server answers with an error status
        """
        if self.local:
            logger.debug("Local mode: returning local results")
            return local_results()

        token = self._token(token)
        if not token:
            raise InvalidArgumentError("Check parameters: a bearer token is required")

        url = self._url(service_url, TENANT_PATH, SCRS_PATH, self._topic(topic))
        response = self._request(url, GET_METHOD, token=token)
        return self._parse_records(response, url)

    # ==================== Write operations ====================

    def post_content(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        scr: Union[SCRNoId, Dict[str, Any]],
        token: Optional[str] = None,
    ) -> str:
        """Post a single content record to a topic.

        The record is validated against the creation contract before it is
        sent; the server assigns the id.

        Args:
            service_url: Base URL of the service (defaults to config.service_url)
            topic: Content topic
            scr: Record without id, typed or as parsed JSON
            token: Bearer token

        Returns:
            Server confirmation text

        Raises:
            InvalidArgumentError: If no token is available
            SchemaViolationError: If the record is not a valid SCR without id
            RequestFailedError: If the server answers with an error status
        """
        if self.local:
            logger.debug("Local mode: skipping post")
            return LOCAL_OK

        token = self._token(token)
        if not token:
            raise InvalidArgumentError("Check parameter: a bearer token is required")

        record = validate(scr, schema=SCR_NO_ID_SCHEMA, source="request body").unwrap()

        url = self._url(service_url, SCRS_PATH, self._topic(topic))
        response = self._request(url, POST_METHOD, body=_body(record), token=token)
        return response.text

    def post_scr_text(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        text: Union[str, bytes],
        token: Optional[str] = None,
        source: str = "file content",
    ) -> str:
        """Parse JSON text, validate it and post it as a new record.

        Parse and validation failures are raised before any network access.

        Args:
            service_url: Base URL of the service
            topic: Content topic
            text: JSON document of a record without id
            token: Bearer token
            source: Name of the text's origin, used in error messages

        Returns:
            Server confirmation text

        Raises:
            ParseError: If the text is not valid JSON
            SchemaViolationError: If the document is not a valid SCR without id
        """
        record = validate(text, schema=SCR_NO_ID_SCHEMA, source=source).unwrap()
        return self.post_content(service_url, topic, record, token)

    def post_scr_file(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        path: Union[str, Path],
        token: Optional[str] = None,
    ) -> str:
        """Read a .json file, validate it and post it as a new record.

        Raises:
            FileReadError: If the file cannot be read
            ParseError: If the file is not valid JSON
            SchemaViolationError: If the document is not a valid SCR without id
        """
        text = read_text(path)
        return self.post_scr_text(service_url, topic, text, token, source=Path(path).name)

    def put_content(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        scr: Union[SCR, Dict[str, Any]],
        record_id: str,
        token: Optional[str] = None,
    ) -> str:
        """Replace the record with the provided id.

        Args:
            service_url: Base URL of the service
            topic: Content topic
            scr: Full record, including its id
            record_id: Id of the record to replace
            token: Bearer token

        Returns:
            Server confirmation text

        Raises:
            InvalidArgumentError: If id or token is empty
            SchemaViolationError: If the record is not a valid SCR
            RequestFailedError: If the server answers with an error status
        """
        if self.local:
            logger.debug("Local mode: skipping put")
            return LOCAL_OK

        token = self._token(token)
        if not record_id or not token:
            raise InvalidArgumentError(
                f"Check parameters: id={record_id!r}, token {'set' if token else 'missing'}"
            )

        record = validate(scr, schema=SCR_SCHEMA, source="request body").unwrap()
        if record.id != record_id:
            logger.warning(f"Replacing record {record_id} with a body carrying id {record.id}")

        url = self._url(service_url, SCRS_PATH, self._topic(topic), record_id)
        response = self._request(url, PUT_METHOD, body=_body(record), token=token)
        return response.text

    def delete_with_id(
        self,
        service_url: Optional[str],
        topic: Optional[str],
        record_id: str,
        token: Optional[str] = None,
    ) -> str:
        """Delete the record with the provided id from a topic.

        Raises:
            RequestFailedError: If the server answers with an error status
        """
        if self.local:
            logger.debug("Local mode: skipping delete")
            return LOCAL_OK

        url = self._url(service_url, SCRS_PATH, self._topic(topic), record_id)
        response = self._request(url, DELETE_METHOD, token=self._token(token))
        return response.text

    def close(self) -> None:
        """Release the transport's connections."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    # ==================== Helpers ====================

    def _topic(self, topic: Optional[str]) -> Optional[str]:
        return self.config.topic if topic is None else topic

    def _token(self, token: Optional[str]) -> Optional[str]:
        if token is not None:
            return token
        if self.token_provider is not None:
            token = self.token_provider()
            if token is not None:
                return token
        return self.config.token

    def _url(self, service_url: Optional[str], *segments: Optional[str]) -> str:
        base = service_url if service_url is not None else self.config.service_url
        if not base:
            raise InvalidArgumentError("Check parameters: no service URL configured")
        if any(s is None for s in segments):
            raise InvalidArgumentError(f"Check parameters: {segments}")
        path = "/".join(quote(s, safe="") for s in segments)
        return f"{base.rstrip('/')}/{path}"

    def _request(
        self,
        url: str,
        method: str = GET_METHOD,
        body: Optional[str] = None,
        token: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        """Execute the actual request.

        Raises:
            RequestFailedError: If the response status is not 2xx
        """
        headers = {
            "Accept": self.config.accept_header,
            "Content-Type": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if method not in (POST_METHOD, PUT_METHOD):
            body = None

        logger.info(f"{method} {url}")
        response = self.transport.perform(url, method, headers, body=body, params=params)

        if not response.ok:
            logger.error(f"SCD request failed: {method} {url} -> {response.status_code}, {response.text}")
            raise RequestFailedError(response.status_code, response.reason, response.text, url=url)

        return response

    def _json(self, response: TransportResponse, source: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(source, str(e))

    def _parse_record(self, response: TransportResponse, source: str) -> SCR:
        return self._to_scr(self._json(response, source), source)

    def _parse_records(self, response: TransportResponse, source: str) -> List[SCR]:
        data = self._json(response, source)
        if not isinstance(data, list):
            raise SchemaViolationError(source, [Violation(
                code="INVALID_TYPE",
                path="$",
                message="Expected an array of SCR records",
            )])
        return [self._to_scr(item, source) for item in data]

    def _to_scr(self, data: Any, source: str) -> SCR:
        if not isinstance(data, dict):
            raise SchemaViolationError(source, [Violation(
                code="INVALID_TYPE",
                path="$",
                message="Expected an SCR object",
            )])
        return validate(data, schema=SCR_SCHEMA, source=source).unwrap()
