"""
B2 Cloud Storage Python Client.

A synchronous client for the B2 native API: account authorization,
bucket management, and file upload, download and listing.

Example:
    ```python
    from b2_client import B2Client, BucketType

    with B2Client() as client:
        client.authorize_account("account-id", "application-key")

        bucket = client.create_bucket("my-backups", BucketType.PRIVATE)
        ticket = client.get_upload_url(bucket)
        stored = client.upload_file(ticket, "report.pdf", "docs/report.pdf")

        client.download_file_by_id(stored, "report-copy.pdf")
    ```
"""

from b2_client.client import B2Client
from b2_client.config import B2Config
from b2_client.exceptions import (
    APIError,
    AuthenticationError,
    B2Error,
    NotFoundError,
    PaginationError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownBucketTypeError,
    ValidationError,
)
from b2_client.models import Bucket, BucketType, File, Session, UploadTicket
from b2_client.version import __version__

__all__ = [
    "__version__",
    # Main client
    "B2Client",
    "B2Config",
    # Models
    "Bucket",
    "BucketType",
    "File",
    "Session",
    "UploadTicket",
    # Exceptions
    "B2Error",
    "AuthenticationError",
    "APIError",
    "UnauthorizedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "ValidationError",
    "UnknownBucketTypeError",
    "PaginationError",
]
