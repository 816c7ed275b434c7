"""Chunked reading and content hashing for uploads."""

import hashlib
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

DEFAULT_CHUNK_SIZE = 64 * 1024


def iter_chunks(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield successive chunks of at most ``chunk_size`` bytes from a binary stream.

    Args:
        stream: Open binary stream, read from its current position.
        chunk_size: Maximum size of each chunk.
    """
    while chunk := stream.read(chunk_size):
        yield chunk


def iter_file_chunks(path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield a file's content in chunks, closing it when exhausted or abandoned."""
    with path.open("rb") as f:
        yield from iter_chunks(f, chunk_size)


def compute_content_hash(
    source: Path | str | BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> str:
    """
    Compute the SHA-1 digest sent with an upload for integrity checking.

    Only one chunk is held in memory at a time.

    Args:
        source: File path or binary stream (read from its current position).
        chunk_size: Read size in bytes.

    Returns:
        Lower-case hexadecimal digest (40 characters).
    """
    digest = hashlib.sha1()
    if isinstance(source, (str, Path)):
        for chunk in iter_file_chunks(Path(source), chunk_size):
            digest.update(chunk)
    else:
        for chunk in iter_chunks(source, chunk_size):
            digest.update(chunk)
    return digest.hexdigest()
