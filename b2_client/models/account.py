"""
Account-related domain models.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, kw_only=True)
class Session:
    """
    Represents an authorized B2 session.

    Produced by ``authorize_account`` and passed to every other operation.
    The service may invalidate the token at any time; that is only visible
    as an ``UnauthorizedError`` from a later call.

    Attributes:
        authorization_token: Token sent as Authorization on API calls.
        account_id: Account that owns the session.
        api_url: Base URL for all further API calls.
        download_url: Base URL for file downloads.
    """

    authorization_token: str = field(repr=False)
    account_id: str
    api_url: str
    download_url: str
