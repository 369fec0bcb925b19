from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest

from fm_identity_lib.config import IdentityProviderConfig
from fm_identity_lib.gateway import AuthGateway, reset_auth_gateway

REGION = "eu-west-1"
CLIENT_ID = "test-app-client-id"
COGNITO_URL = f"https://cognito-idp.{REGION}.amazonaws.com/"


@pytest.fixture(autouse=True)
def clean_gateway_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the process environment and the global gateway."""
    for name in (
        "COGNITO_REGION",
        "COGNITO_USER_POOL_CLIENT_ID",
        "COGNITO_ENDPOINT_URL",
        "COGNITO_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_auth_gateway()
    yield
    reset_auth_gateway()


@pytest.fixture
def configured_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COGNITO_REGION", REGION)
    monkeypatch.setenv("COGNITO_USER_POOL_CLIENT_ID", CLIENT_ID)


@pytest.fixture
def identity_config() -> IdentityProviderConfig:
    return IdentityProviderConfig(region=REGION, client_id=CLIENT_ID)


@pytest.fixture
async def gateway(identity_config: IdentityProviderConfig) -> AsyncIterator[AuthGateway]:
    """Gateway with its own lazily created httpx client, closed after the test."""
    auth_gateway = AuthGateway.from_config(identity_config)
    yield auth_gateway
    await auth_gateway.close()
