"""Bucket endpoints (create, delete, update, list)."""

from b2_client.api.http_client import HttpClient
from b2_client.models.account import Session
from b2_client.models.storage import Bucket, BucketType, validate_bucket_name


def create_bucket(
    http: HttpClient, session: Session, name: str, bucket_type: BucketType
) -> Bucket:
    """
    Create a bucket.

    Args:
        http: Configured HTTP client.
        session: Authorized session.
        name: Bucket name, checked with ``validate_bucket_name`` first.
        bucket_type: Privacy setting.

    Returns:
        The new bucket with its service-assigned ID.

    Raises:
        ValidationError: If the name is rejected locally.
        APIError: If the service rejects the bucket.
    """
    validate_bucket_name(name)
    response = http.call(
        session.api_url,
        "b2_create_bucket",
        session.authorization_token,
        {
            "accountId": session.account_id,
            "bucketName": name,
            "bucketType": bucket_type.identifier,
        },
    )
    return Bucket(name=name, bucket_id=response["bucketId"], bucket_type=bucket_type)


def delete_bucket(http: HttpClient, session: Session, bucket: Bucket) -> None:
    """Delete a bucket. The service refuses if it still holds file versions."""
    http.call(
        session.api_url,
        "b2_delete_bucket",
        session.authorization_token,
        {"accountId": session.account_id, "bucketId": bucket.bucket_id},
    )


def update_bucket(http: HttpClient, session: Session, bucket: Bucket) -> Bucket:
    """
    Push the bucket's privacy setting to the service.

    Returns:
        The bucket as described by the response, with the request's values
        for any field the response omits.
    """
    response = http.call(
        session.api_url,
        "b2_update_bucket",
        session.authorization_token,
        {
            "accountId": session.account_id,
            "bucketId": bucket.bucket_id,
            "bucketType": bucket.bucket_type.identifier,
        },
    )
    return Bucket(
        name=response.get("bucketName", bucket.name),
        bucket_id=response.get("bucketId", bucket.bucket_id),
        bucket_type=BucketType.from_identifier(
            response.get("bucketType", bucket.bucket_type.identifier)
        ),
    )


def list_buckets(http: HttpClient, session: Session) -> list[Bucket]:
    """
    List all buckets of the session's account.

    Raises:
        UnknownBucketTypeError: If a bucket has an unrecognized type.
    """
    response = http.call(
        session.api_url,
        "b2_list_buckets",
        session.authorization_token,
        {"accountId": session.account_id},
    )

    return [
        Bucket(
            name=b["bucketName"],
            bucket_id=b["bucketId"],
            bucket_type=BucketType.from_identifier(b["bucketType"]),
        )
        for b in response.get("buckets", [])
    ]
