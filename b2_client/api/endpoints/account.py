"""Account authorization endpoint."""

import base64

import structlog

from b2_client.api.http_client import HttpClient
from b2_client.models.account import Session

logger = structlog.get_logger(__name__)


def encode_authorization(account_id: str, application_key: str) -> str:
    """
    Build the Basic Authorization header value for account authorization.

    Args:
        account_id: B2 account (or key) ID.
        application_key: Application key paired with the ID.

    Returns:
        "Basic " followed by base64 of "account_id:application_key".
    """
    credentials = f"{account_id}:{application_key}".encode()
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"


def authorize_account(http: HttpClient, account_id: str, application_key: str) -> Session:
    """
    Obtain a Session with b2_authorize_account.

    This is the only call that does not require an existing Session.

    Args:
        http: Configured HTTP client.
        account_id: B2 account (or key) ID.
        application_key: Application key paired with the ID.

    Returns:
        Session carrying the auth token and the API/download base URLs.

    Raises:
        UnauthorizedError: If the credentials are rejected.
        APIError: If the service rejects the call for another reason.
        TransportError: If the exchange fails.
    """
    response = http.call(
        http.config.api_url,
        "b2_authorize_account",
        encode_authorization(account_id, application_key),
    )
    session = Session(
        authorization_token=response["authorizationToken"],
        account_id=account_id,
        api_url=response["apiUrl"],
        download_url=response["downloadUrl"],
    )
    logger.info("Account authorized", api_url=session.api_url)
    return session
