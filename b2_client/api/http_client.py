"""
HTTP client for the B2 API.

Every remote method is a POST with a JSON body. Each exchange is classified
into an explicit result (success document, API error, transport failure)
before it is turned into a return value or a typed exception.
"""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from b2_client.config import B2Config
from b2_client.exceptions import (
    APIError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "authorizationToken",
        "Authorization",
        "applicationKey",
        "accountAuthorizationToken",
        "uploadAuthToken",
    }
)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Recursively sanitizes nested dictionaries and lists.

    Args:
        data: Dictionary that may contain sensitive values.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    result = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS:
            result[key] = "***"
        elif isinstance(value, dict):
            result[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


@dataclass(frozen=True, slots=True)
class CallSuccess:
    """The service accepted the call and returned a JSON document."""

    document: dict[str, Any]

    def unwrap(self) -> dict[str, Any]:
        return self.document


@dataclass(frozen=True, slots=True)
class CallAPIFailure:
    """The service answered with status >= 400 and an error document."""

    status: int
    code: str
    message: str
    endpoint: str
    retry_after: int | None = None

    def unwrap(self) -> dict[str, Any]:
        raise self.to_exception()

    def to_exception(self) -> APIError:
        if self.status == httpx.codes.UNAUTHORIZED:
            return UnauthorizedError(
                self.message, status=self.status, code=self.code, endpoint=self.endpoint
            )
        if self.status == httpx.codes.NOT_FOUND:
            return NotFoundError(
                self.message, status=self.status, code=self.code, endpoint=self.endpoint
            )
        if self.status == httpx.codes.TOO_MANY_REQUESTS:
            return RateLimitError(
                self.message,
                status=self.status,
                code=self.code,
                endpoint=self.endpoint,
                retry_after=self.retry_after,
            )
        if self.status >= httpx.codes.INTERNAL_SERVER_ERROR:
            return ServerError(
                self.message, status=self.status, code=self.code, endpoint=self.endpoint
            )
        return APIError(self.message, status=self.status, code=self.code, endpoint=self.endpoint)


@dataclass(frozen=True, slots=True)
class CallTransportFailure:
    """The exchange did not produce a usable response."""

    reason: str
    endpoint: str
    cause: BaseException | None = None

    def unwrap(self) -> dict[str, Any]:
        raise TransportError(self.reason, endpoint=self.endpoint) from self.cause


CallResult = CallSuccess | CallAPIFailure | CallTransportFailure


class HttpClient:
    """Synchronous HTTP client for the B2 API."""

    def __init__(
        self,
        config: B2Config,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport

        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()

    def __enter__(self) -> "HttpClient":
        self._ensure_client()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def config(self) -> B2Config:
        return self._config

    def _ensure_client(self) -> httpx.Client:
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={"User-Agent": self._config.user_agent},
                )
            return self._client

    def close(self) -> None:
        """Close the underlying connection pool. Safe to call more than once."""
        with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            self._client.close()
            self._client = None

    def method_url(self, base_url: str, method_name: str) -> str:
        """Build ``{base_url}{api_prefix}/{method_name}``."""
        return f"{base_url.rstrip('/')}{self._config.api_prefix}/{method_name}"

    def execute(
        self,
        base_url: str,
        method_name: str,
        authorization: str,
        body: dict[str, Any] | None = None,
    ) -> CallResult:
        """
        Perform one remote method call without raising.

        Args:
            base_url: API base URL (from configuration or a Session).
            method_name: Remote method, e.g. "b2_list_buckets".
            authorization: Authorization header value.
            body: JSON request body, empty when None.

        Returns:
            CallSuccess, CallAPIFailure or CallTransportFailure.
        """
        payload = body or {}
        logger.debug("Calling method", method=method_name, body=sanitize_for_log(payload))
        return self._send(
            self.method_url(base_url, method_name),
            endpoint=method_name,
            headers={"Authorization": authorization},
            json=payload,
        )

    def call(
        self,
        base_url: str,
        method_name: str,
        authorization: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Perform one remote method call.

        Returns:
            Response JSON document.

        Raises:
            APIError: If the service returns status >= 400.
            TransportError: If the exchange fails or the body is unreadable.
        """
        return self.execute(base_url, method_name, authorization, body).unwrap()

    def post_content(
        self,
        url: str,
        *,
        endpoint: str,
        headers: dict[str, str],
        content: Iterable[bytes],
    ) -> dict[str, Any]:
        """
        POST a raw byte stream to an absolute URL and parse the JSON answer.

        Security:
            Only pass URLs obtained from the B2 API (e.g. an upload ticket's
            upload URL). NEVER pass user-supplied input directly.

        Args:
            url: Absolute destination URL.
            endpoint: Name used for logging and error context.
            headers: Request headers.
            content: Body chunks.

        Returns:
            Response JSON document.

        Raises:
            APIError: If the service returns status >= 400.
            TransportError: If the exchange fails or the body is unreadable.
        """
        return self._send(url, endpoint=endpoint, headers=headers, content=content).unwrap()

    @contextmanager
    def stream(
        self,
        base_url: str,
        method_name: str,
        authorization: str,
        body: dict[str, Any] | None = None,
    ) -> Iterator[httpx.Response]:
        """
        Call a remote method whose successful answer is a raw byte stream.

        The response is only yielded for status < 400; error documents are
        read and raised before the caller sees anything. The connection is
        released when the context exits.

        Yields:
            The open response; read it with ``iter_bytes``.

        Raises:
            APIError: If the service returns status >= 400.
            TransportError: If the exchange fails, including mid-stream.
        """
        client = self._ensure_client()
        payload = body or {}
        logger.debug("Streaming method", method=method_name, body=sanitize_for_log(payload))
        try:
            with client.stream(
                "POST",
                self.method_url(base_url, method_name),
                json=payload,
                headers={"Authorization": authorization},
            ) as response:
                if response.status_code >= httpx.codes.BAD_REQUEST:
                    response.read()
                    self._classify(response, method_name).unwrap()
                yield response
        except httpx.HTTPError as e:
            logger.warning("Transport failure", method=method_name, error_type=type(e).__name__)
            msg = f"Request failed: {e}"
            raise TransportError(msg, endpoint=method_name) from e

    def _send(
        self,
        url: str,
        *,
        endpoint: str,
        headers: dict[str, str],
        json: dict[str, Any] | None = None,
        content: Iterable[bytes] | None = None,
    ) -> CallResult:
        client = self._ensure_client()
        try:
            response = client.post(url, json=json, content=content, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Transport failure", method=endpoint, error_type=type(e).__name__)
            return CallTransportFailure(reason=f"Request failed: {e}", endpoint=endpoint, cause=e)
        return self._classify(response, endpoint)

    @staticmethod
    def _classify(response: httpx.Response, endpoint: str) -> CallResult:
        try:
            data = response.json()
        except ValueError as e:
            return CallTransportFailure(
                reason=f"Invalid JSON response (status={response.status_code})",
                endpoint=endpoint,
                cause=e,
            )

        if not isinstance(data, dict):
            return CallTransportFailure(
                reason=f"Unexpected response document (status={response.status_code})",
                endpoint=endpoint,
            )

        if response.status_code < httpx.codes.BAD_REQUEST:
            return CallSuccess(document=data)

        retry_after = response.headers.get("Retry-After")
        return CallAPIFailure(
            status=data.get("status", response.status_code),
            code=data.get("code", ""),
            message=data.get("message", "Unknown error"),
            endpoint=endpoint,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
        )
