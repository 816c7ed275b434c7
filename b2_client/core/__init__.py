from b2_client.core.hashing import compute_content_hash, iter_chunks, iter_file_chunks

__all__ = ["compute_content_hash", "iter_chunks", "iter_file_chunks"]
