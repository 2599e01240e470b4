"""Shared test fixtures."""

import pytest

from silverpoint.auth import TokenManager


@pytest.fixture()
def client_id() -> str:
    return "test-client-id"


@pytest.fixture()
def client_secret() -> str:
    return "test-client-secret"


@pytest.fixture()
def location_id() -> str:
    return "70100153"


@pytest.fixture()
def tokens(client_id: str, client_secret: str) -> TokenManager:
    return TokenManager(client_id, client_secret)


@pytest.fixture()
def token_payload() -> dict:
    return {"access_token": "abc123", "token_type": "bearer", "expires_in": 1800}
