from b2_client.exceptions import (
    APIError,
    B2Error,
    RateLimitError,
    TransportError,
    UnknownBucketTypeError,
    ValidationError,
)


def test_b2_error_str_without_context() -> None:
    error = B2Error("Something failed")

    assert str(error) == "Something failed"


def test_b2_error_str_with_context() -> None:
    error = B2Error("Failed", bucket_id="b-1", page=3)

    assert "Failed" in str(error)
    assert "bucket_id='b-1'" in str(error)
    assert "page=3" in str(error)


def test_api_error_exposes_fields() -> None:
    error = APIError("Bucket is not empty", status=400, code="cannot_delete_non_empty_bucket")

    assert error.status == 400
    assert error.code == "cannot_delete_non_empty_bucket"
    assert error.message == "Bucket is not empty"
    assert "status=400" in str(error)


def test_rate_limit_error_defaults_to_429() -> None:
    error = RateLimitError()

    assert error.status == 429
    assert error.retry_after is None


def test_transport_error_is_not_an_api_error() -> None:
    assert not issubclass(TransportError, APIError)
    assert issubclass(TransportError, B2Error)


def test_unknown_bucket_type_is_a_validation_error() -> None:
    error = UnknownBucketTypeError("snapshot")

    assert isinstance(error, ValidationError)
    assert error.field == "bucketType"
    assert "snapshot" in str(error)
