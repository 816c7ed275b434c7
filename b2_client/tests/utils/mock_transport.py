"""
HTTP transports for exercising the client without a network.
"""

import json
from typing import Any

import httpx


class MockTransport(httpx.BaseTransport):
    """Returns queued responses in order and records every request."""

    def __init__(self) -> None:
        self._responses: list[dict[str, Any]] = []
        self._call_index = 0
        self.requests: list[httpx.Request] = []
        self.bodies: list[bytes] = []

    def add_response(
        self,
        status_code: int = httpx.codes.OK,
        json_data: dict[str, Any] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Add a response to the queue."""
        self._responses.append(
            {
                "status_code": status_code,
                "json_data": json_data,
                "content": content,
                "headers": headers or {},
            }
        )

    def add_error(self, status: int, code: str, message: str, **kwargs: Any) -> None:
        """Queue a B2-style error document."""
        self.add_response(
            status_code=status,
            json_data={"status": status, "code": code, "message": message},
            **kwargs,
        )

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Return next queued response."""
        self.requests.append(request)
        self.bodies.append(request.read())
        if self._call_index >= len(self._responses):
            return httpx.Response(
                httpx.codes.INTERNAL_SERVER_ERROR,
                content=b'{"status": 500, "code": "internal_error", "message": "No mock response"}',
            )

        resp_data = self._responses[self._call_index]
        self._call_index += 1

        content = resp_data["content"]
        if content is None and resp_data["json_data"] is not None:
            content = json.dumps(resp_data["json_data"]).encode()

        return httpx.Response(
            status_code=resp_data["status_code"],
            content=content or b"",
            headers=resp_data["headers"],
        )

    def json_body(self, index: int) -> dict[str, Any]:
        """Decoded JSON body of the request at ``index``."""
        return json.loads(self.bodies[index])


class FailingTransport(httpx.BaseTransport):
    """Raises a connection error for every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        msg = "Connection refused"
        raise httpx.ConnectError(msg, request=request)
