"""
Domain models for B2.

These are immutable (frozen) dataclasses representing the core domain concepts.
"""

from b2_client.models.account import Session
from b2_client.models.storage import (
    Bucket,
    BucketType,
    File,
    UploadTicket,
    validate_bucket_name,
)

__all__ = [
    # Account
    "Session",
    # Storage
    "Bucket",
    "BucketType",
    "File",
    "UploadTicket",
    "validate_bucket_name",
]
