"""
B2 client configuration.
"""

from dataclasses import dataclass

from b2_client.version import __version__

# The service rejects maxFileCount values above this.
MAX_LIST_PAGE_SIZE = 10000


@dataclass(frozen=True, kw_only=True)
class B2Config:
    """
    Attributes:
        api_url: Base URL used for account authorization.
        api_prefix: Path prefix placed before every remote method name.
        user_agent: User-Agent header value.
        timeout: Request timeout in seconds.
        chunk_size: Chunk size in bytes for hashing, uploads and downloads.
        list_page_size: Number of file names requested per listing page.
        max_list_pages: Maximum number of listing round-trips per call.
    """

    api_url: str = "https://api.backblazeb2.com"
    api_prefix: str = "/b2api/v1"
    user_agent: str = f"b2-client-python/{__version__}"
    timeout: float = 30.0
    chunk_size: int = 64 * 1024
    list_page_size: int = 1000
    max_list_pages: int = 10000

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if self.chunk_size <= 0:
            msg = "chunk_size must be positive"
            raise ValueError(msg)
        if not 0 < self.list_page_size <= MAX_LIST_PAGE_SIZE:
            msg = f"list_page_size must be between 1 and {MAX_LIST_PAGE_SIZE}"
            raise ValueError(msg)
        if self.max_list_pages <= 0:
            msg = "max_list_pages must be positive"
            raise ValueError(msg)
        if not self.api_prefix.startswith("/"):
            msg = "api_prefix must start with '/'"
            raise ValueError(msg)
