"""
Typed functions for each B2 remote method.

Every function except ``authorize_account`` takes the Session it runs under.
"""

from b2_client.api.endpoints.account import authorize_account, encode_authorization
from b2_client.api.endpoints.buckets import (
    create_bucket,
    delete_bucket,
    list_buckets,
    update_bucket,
)
from b2_client.api.endpoints.files import (
    delete_file_version,
    download_file_by_id,
    get_file_info,
    get_upload_url,
    list_file_names,
    upload_file,
)

__all__ = [
    # Account
    "authorize_account",
    "encode_authorization",
    # Buckets
    "create_bucket",
    "delete_bucket",
    "list_buckets",
    "update_bucket",
    # Files
    "delete_file_version",
    "download_file_by_id",
    "get_file_info",
    "get_upload_url",
    "list_file_names",
    "upload_file",
]
