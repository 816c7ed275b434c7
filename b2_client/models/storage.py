"""
Bucket and file domain models.
"""

import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import StrEnum
from typing import Self

from b2_client.exceptions import UnknownBucketTypeError, ValidationError

BUCKET_NAME_MIN_LENGTH = 6
BUCKET_NAME_MAX_LENGTH = 50
RESERVED_BUCKET_PREFIX = "b2-"

_BUCKET_NAME_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


class BucketType(StrEnum):
    """Privacy setting of a bucket; values are the wire identifiers."""

    PUBLIC = "allPublic"
    PRIVATE = "allPrivate"

    @property
    def identifier(self) -> str:
        return self.value

    @classmethod
    def from_identifier(cls, identifier: str) -> Self:
        """
        Resolve a wire identifier to a BucketType.

        Raises:
            UnknownBucketTypeError: If the identifier is not recognized.
        """
        try:
            return cls(identifier)
        except ValueError:
            raise UnknownBucketTypeError(identifier) from None


def validate_bucket_name(name: str) -> None:
    """
    Check a bucket name against the service's naming rules.

    Raises:
        ValidationError: If the name is too short, too long, uses characters
            other than letters, digits and hyphens, or starts with "b2-".
    """
    if len(name) < BUCKET_NAME_MIN_LENGTH:
        msg = f"Bucket name must be at least {BUCKET_NAME_MIN_LENGTH} characters"
        raise ValidationError(msg, field="bucketName")
    if len(name) > BUCKET_NAME_MAX_LENGTH:
        msg = f"Bucket name must be at most {BUCKET_NAME_MAX_LENGTH} characters"
        raise ValidationError(msg, field="bucketName")
    if not _BUCKET_NAME_PATTERN.match(name):
        msg = "Bucket name may only contain letters, digits and hyphens"
        raise ValidationError(msg, field="bucketName")
    if name.lower().startswith(RESERVED_BUCKET_PREFIX):
        msg = f"Bucket name must not start with {RESERVED_BUCKET_PREFIX!r}"
        raise ValidationError(msg, field="bucketName")


@dataclass(frozen=True, kw_only=True)
class Bucket:
    """
    A named container for files.

    ``bucket_id`` is assigned by the service and stays empty until the
    bucket has been created.
    """

    name: str
    bucket_id: str = ""
    bucket_type: BucketType = BucketType.PRIVATE

    def with_type(self, bucket_type: BucketType) -> Self:
        """Copy of this bucket with a different privacy setting."""
        return replace(self, bucket_type=bucket_type)


@dataclass(frozen=True, kw_only=True)
class UploadTicket:
    """
    Short-lived destination for uploading one file.

    Request a new ticket if an upload fails because this one expired.
    """

    bucket: Bucket
    upload_url: str
    authorization_token: str = ""

    def __repr__(self) -> str:
        return f"UploadTicket(bucket={self.bucket!r}, upload_url={self.upload_url!r})"


@dataclass(frozen=True, kw_only=True)
class File:
    """
    Metadata of a stored file version.

    Attributes:
        name: File name in the bucket.
        content_type: MIME type recorded by the service.
        file_id: Service-assigned identifier of this version.
        size: Content length in bytes.
        upload_timestamp: Upload time in milliseconds since the epoch (UTC),
            0 when unknown.
    """

    name: str
    content_type: str
    file_id: str
    size: int = 0
    upload_timestamp: int = 0

    @property
    def uploaded_at(self) -> datetime | None:
        """Upload time as a UTC datetime, or None when unknown."""
        if self.upload_timestamp == 0:
            return None
        return datetime.fromtimestamp(self.upload_timestamp / 1000, tz=timezone.utc)
