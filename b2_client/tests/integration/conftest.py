import os

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not (os.getenv("B2_TEST_ACCOUNT_ID") and os.getenv("B2_TEST_APPLICATION_KEY"))
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason="B2_TEST_ACCOUNT_ID / B2_TEST_APPLICATION_KEY not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def b2_credentials() -> tuple[str, str]:
    account_id = os.getenv("B2_TEST_ACCOUNT_ID")
    application_key = os.getenv("B2_TEST_APPLICATION_KEY")
    if not account_id or not application_key:
        pytest.fail(
            "B2_TEST_ACCOUNT_ID and B2_TEST_APPLICATION_KEY must be set to run integration tests."
        )
    return account_id, application_key
