from collections.abc import Iterator
from unittest.mock import Mock

import pytest

from b2_client.api.http_client import HttpClient
from b2_client.config import B2Config
from b2_client.models.account import Session
from b2_client.models.storage import Bucket, BucketType
from b2_client.tests.utils.constants import ACCOUNT_ID, BUCKET_ID, BUCKET_NAME
from b2_client.tests.utils.fake_service import API_URL, AUTH_TOKEN, DOWNLOAD_URL
from b2_client.tests.utils.mock_transport import MockTransport


@pytest.fixture
def config() -> B2Config:
    return B2Config(chunk_size=4)


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def http(config: B2Config, mock_transport: MockTransport) -> Iterator[HttpClient]:
    with HttpClient(config, transport=mock_transport) as client:
        yield client


@pytest.fixture
def mock_http(config: B2Config) -> Mock:
    http = Mock(spec=HttpClient)
    http.config = config
    return http


@pytest.fixture
def session() -> Session:
    return Session(
        authorization_token=AUTH_TOKEN,
        account_id=ACCOUNT_ID,
        api_url=API_URL,
        download_url=DOWNLOAD_URL,
    )


@pytest.fixture
def bucket() -> Bucket:
    return Bucket(name=BUCKET_NAME, bucket_id=BUCKET_ID, bucket_type=BucketType.PRIVATE)
