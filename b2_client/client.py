"""
B2 client facade.

This is the main entry point for users of the library. It owns the HTTP
client, keeps the Session returned by authorization, and passes it to the
endpoint functions.
"""

from pathlib import Path
from typing import Self

import httpx
import structlog

from b2_client.api.endpoints import account, buckets, files
from b2_client.api.http_client import HttpClient
from b2_client.config import B2Config
from b2_client.exceptions import AuthenticationError
from b2_client.models.account import Session
from b2_client.models.storage import Bucket, BucketType, File, UploadTicket

logger = structlog.get_logger(__name__)


class B2Client:
    """
    Client for B2 cloud storage.

    Example:
        ```python
        with B2Client() as client:
            client.authorize_account(account_id, application_key)

            bucket = client.create_bucket("my-photos", BucketType.PRIVATE)
            ticket = client.get_upload_url(bucket)
            stored = client.upload_file(ticket, "cat.jpg", "2024/cat.jpg")

            for f in client.list_file_names(bucket):
                print(f.name, f.size)

            client.download_file_by_id(stored, "copy-of-cat.jpg")
        ```

    Args:
        config: Client configuration. Uses defaults if not provided.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        config: B2Config | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or B2Config()
        self._http = HttpClient(self._config, transport=transport)
        self._session: Session | None = None

    def __enter__(self) -> Self:
        self._http.__enter__()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()
        logger.debug("Client closed")

    @property
    def session(self) -> Session | None:
        """Session from the last successful authorization."""
        return self._session

    @property
    def is_authorized(self) -> bool:
        return self._session is not None

    def authorize_account(self, account_id: str, application_key: str) -> Session:
        """
        Authorize and keep the resulting Session for later calls.

        Raises:
            UnauthorizedError: If the credentials are rejected.
        """
        self._session = account.authorize_account(self._http, account_id, application_key)
        return self._session

    def create_bucket(self, name: str, bucket_type: BucketType) -> Bucket:
        return buckets.create_bucket(self._http, self._require_session(), name, bucket_type)

    def delete_bucket(self, bucket: Bucket) -> None:
        buckets.delete_bucket(self._http, self._require_session(), bucket)

    def update_bucket(self, bucket: Bucket) -> Bucket:
        return buckets.update_bucket(self._http, self._require_session(), bucket)

    def list_buckets(self) -> list[Bucket]:
        return buckets.list_buckets(self._http, self._require_session())

    def get_upload_url(self, bucket: Bucket) -> UploadTicket:
        return files.get_upload_url(self._http, self._require_session(), bucket)

    def upload_file(self, ticket: UploadTicket, source: Path | str, name: str) -> File:
        """Upload with a ticket; the ticket carries its own authorization."""
        self._require_session()
        return files.upload_file(self._http, ticket, source, name)

    def download_file_by_id(self, file: File, destination: Path | str) -> Path:
        return files.download_file_by_id(self._http, self._require_session(), file, destination)

    def delete_file_version(self, file: File) -> None:
        files.delete_file_version(self._http, self._require_session(), file)

    def get_file_info(self, file_id: str) -> File:
        return files.get_file_info(self._http, self._require_session(), file_id)

    def list_file_names(self, bucket: Bucket) -> list[File]:
        return files.list_file_names(self._http, self._require_session(), bucket)

    def _require_session(self) -> Session:
        if self._session is None:
            msg = "Not authorized. Call authorize_account() first."
            raise AuthenticationError(msg)
        return self._session
