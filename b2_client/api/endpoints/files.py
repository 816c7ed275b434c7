"""File endpoints (upload, download, delete, info, listing)."""

import time
from pathlib import Path
from typing import Any
from urllib.parse import quote

import structlog

from b2_client.api.http_client import HttpClient
from b2_client.core.hashing import compute_content_hash, iter_file_chunks
from b2_client.exceptions import PaginationError
from b2_client.models.account import Session
from b2_client.models.storage import Bucket, File, UploadTicket

logger = structlog.get_logger(__name__)

# Asks the service to pick the MIME type from the file name.
AUTO_CONTENT_TYPE = "b2/x-auto"


def get_upload_url(http: HttpClient, session: Session, bucket: Bucket) -> UploadTicket:
    """
    Get an upload ticket for a bucket.

    Tickets expire; request a new one when an upload fails with an
    authorization error. No retry happens here.
    """
    response = http.call(
        session.api_url,
        "b2_get_upload_url",
        session.authorization_token,
        {"bucketId": bucket.bucket_id},
    )
    return UploadTicket(
        bucket=bucket,
        upload_url=response["uploadUrl"],
        authorization_token=response["authorizationToken"],
    )


def encode_file_name(name: str) -> str:
    """Percent-encode a file name for the X-Bz-File-Name header."""
    return quote(name, safe="/")


def upload_file(
    http: HttpClient, ticket: UploadTicket, source: Path | str, name: str
) -> File:
    """
    Upload a local file to the ticket's upload URL.

    The SHA-1 is computed in a first pass; the body is then streamed in a
    second pass. Neither pass holds more than one chunk in memory.

    Args:
        http: Configured HTTP client.
        ticket: Upload ticket from ``get_upload_url``.
        source: Path of the file to upload.
        name: Destination file name in the bucket.

    Returns:
        The stored file. Its upload timestamp is the service's when the
        response carries one, otherwise the local clock at completion.

    Raises:
        APIError: If the service rejects the upload (e.g. expired ticket).
        TransportError: If the exchange fails.
    """
    path = Path(source)
    chunk_size = http.config.chunk_size
    size = path.stat().st_size
    content_sha1 = compute_content_hash(path, chunk_size)

    logger.debug("Uploading file", name=name, size=size, bucket_id=ticket.bucket.bucket_id)
    response = http.post_content(
        ticket.upload_url,
        endpoint="b2_upload_file",
        headers={
            "Authorization": ticket.authorization_token,
            "Content-Type": AUTO_CONTENT_TYPE,
            "Content-Length": str(size),
            "X-Bz-File-Name": encode_file_name(name),
            "X-Bz-Content-Sha1": content_sha1,
        },
        content=iter_file_chunks(path, chunk_size),
    )

    uploaded = File(
        name=name,
        content_type=response["contentType"],
        file_id=response["fileId"],
        size=size,
        upload_timestamp=response.get("uploadTimestamp") or int(time.time() * 1000),
    )
    logger.info("File uploaded", name=name, file_id=uploaded.file_id)
    return uploaded


def download_file_by_id(
    http: HttpClient, session: Session, file: File, destination: Path | str
) -> Path:
    """
    Download a file version to a local path.

    Content is streamed into ``<destination>.part`` and renamed over the
    destination once complete. On failure the partial file is removed and
    an existing destination is left untouched.

    Returns:
        The destination path.

    Raises:
        APIError: If the service rejects the download.
        TransportError: If the exchange fails, including mid-stream.
    """
    destination = Path(destination)
    partial = destination.with_name(f"{destination.name}.part")
    destination.parent.mkdir(parents=True, exist_ok=True)

    try:
        with http.stream(
            session.download_url,
            "b2_download_file_by_id",
            session.authorization_token,
            {"fileId": file.file_id},
        ) as response, partial.open("wb") as f:
            for chunk in response.iter_bytes(http.config.chunk_size):
                f.write(chunk)
        partial.replace(destination)
    except BaseException:
        partial.unlink(missing_ok=True)
        raise

    logger.info("File saved", file_id=file.file_id, destination=str(destination))
    return destination


def delete_file_version(http: HttpClient, session: Session, file: File) -> None:
    """Delete one file version. Both name and ID are required by the service."""
    http.call(
        session.api_url,
        "b2_delete_file_version",
        session.authorization_token,
        {"fileName": file.name, "fileId": file.file_id},
    )


def get_file_info(http: HttpClient, session: Session, file_id: str) -> File:
    """
    Fetch a file version's metadata.

    The upload timestamp is 0 when the response does not include one.
    """
    response = http.call(
        session.api_url,
        "b2_get_file_info",
        session.authorization_token,
        {"fileId": file_id},
    )
    return _parse_file(response)


def list_file_names(
    http: HttpClient,
    session: Session,
    bucket: Bucket,
    *,
    page_size: int | None = None,
    max_pages: int | None = None,
) -> list[File]:
    """
    List every file name in a bucket, following pagination.

    Pages are requested until the response has no ``nextFileName``. Files
    are returned in service order.

    Args:
        http: Configured HTTP client.
        session: Authorized session.
        bucket: Bucket to list.
        page_size: Files per page; defaults to the configured value.
        max_pages: Round-trip ceiling; defaults to the configured value.

    Returns:
        All files across all pages.

    Raises:
        PaginationError: If a cursor repeats or the page ceiling is reached.
        APIError: If any page request is rejected.
    """
    page_size = page_size or http.config.list_page_size
    max_pages = max_pages or http.config.max_list_pages

    files: list[File] = []
    cursor: str | None = None

    for page in range(max_pages):
        body: dict[str, Any] = {"bucketId": bucket.bucket_id, "maxFileCount": page_size}
        if cursor is not None:
            body["startFileName"] = cursor

        response = http.call(
            session.api_url, "b2_list_file_names", session.authorization_token, body
        )
        files.extend(_parse_file(f) for f in response.get("files", []))

        next_cursor = response.get("nextFileName")
        if not next_cursor:
            logger.debug("Listing complete", bucket_id=bucket.bucket_id, pages=page + 1)
            return files
        if next_cursor == cursor:
            msg = f"Listing cursor did not advance: {next_cursor!r}"
            raise PaginationError(msg, bucket_id=bucket.bucket_id, page=page + 1)
        cursor = next_cursor

    msg = f"Listing exceeded {max_pages} pages"
    raise PaginationError(msg, bucket_id=bucket.bucket_id, cursor=cursor)


def _parse_file(data: dict[str, Any]) -> File:
    size = data.get("contentLength")
    if size is None:
        size = data.get("size", 0)
    return File(
        name=data["fileName"],
        content_type=data.get("contentType", ""),
        file_id=data["fileId"],
        size=size,
        upload_timestamp=data.get("uploadTimestamp") or 0,
    )
