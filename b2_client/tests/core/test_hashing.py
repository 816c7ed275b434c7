import hashlib
import io
from pathlib import Path

from b2_client.core.hashing import compute_content_hash, iter_chunks, iter_file_chunks

EMPTY_SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_compute_content_hash_of_empty_input() -> None:
    assert compute_content_hash(io.BytesIO(b"")) == EMPTY_SHA1


def test_compute_content_hash_of_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty"
    path.write_bytes(b"")

    assert compute_content_hash(path) == EMPTY_SHA1


def test_compute_content_hash_is_deterministic(tmp_path: Path) -> None:
    path = tmp_path / "data.bin"
    path.write_bytes(b"The quick brown fox jumps over the lazy dog")

    first = compute_content_hash(path)
    second = compute_content_hash(str(path))

    assert first == second == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"


def test_compute_content_hash_ignores_chunk_size() -> None:
    data = bytes(range(256)) * 33

    hashes = {compute_content_hash(io.BytesIO(data), chunk_size=size) for size in (1, 7, 1024)}

    assert hashes == {hashlib.sha1(data).hexdigest()}


def test_compute_content_hash_zero_pads_bytes() -> None:
    digest = compute_content_hash(io.BytesIO(b"abc"))

    assert len(digest) == 40
    assert digest == digest.lower()
    assert digest == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_iter_chunks_bounds_chunk_size() -> None:
    chunks = list(iter_chunks(io.BytesIO(b"abcdefghij"), chunk_size=4))

    assert chunks == [b"abcd", b"efgh", b"ij"]


def test_iter_file_chunks_reads_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "data.bin"
    path.write_bytes(b"0123456789")

    assert b"".join(iter_file_chunks(path, chunk_size=3)) == b"0123456789"
