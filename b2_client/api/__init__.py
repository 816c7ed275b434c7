"""
B2 API client layer.

Provides HTTP communication with the B2 API.
"""

from b2_client.api.http_client import (
    CallAPIFailure,
    CallResult,
    CallSuccess,
    CallTransportFailure,
    HttpClient,
    sanitize_for_log,
)

__all__ = [
    "CallAPIFailure",
    "CallResult",
    "CallSuccess",
    "CallTransportFailure",
    "HttpClient",
    "sanitize_for_log",
]
