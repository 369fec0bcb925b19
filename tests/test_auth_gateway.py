"""Tests for the auth gateway operations and the global gateway handle."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import httpx
import pytest
from respx import MockRouter

import fm_identity_lib
from fm_identity_lib.config import MissingConfigurationError
from fm_identity_lib.gateway import (
    AuthGateway,
    get_auth_gateway,
    initiate_auth,
    reset_auth_gateway,
    sign_up,
)

COGNITO_URL = "https://cognito-idp.eu-west-1.amazonaws.com/"
CLIENT_ID = "test-app-client-id"


class TestSignUp:
    async def test_forwards_exactly_the_registration_fields(
        self, gateway: AuthGateway, respx_mock: MockRouter
    ) -> None:
        cognito_response = {
            "UserConfirmed": False,
            "UserSub": "5f2c7e2a-0000-4000-8000-000000000000",
            "CodeDeliveryDetails": {
                "Destination": "a***@b***",
                "DeliveryMedium": "EMAIL",
                "AttributeName": "email",
            },
        }
        route = respx_mock.post(COGNITO_URL).mock(
            return_value=httpx.Response(200, json=cognito_response)
        )

        result = await gateway.sign_up("a@b.com", "Secret123!")

        assert result == cognito_response
        request = route.calls.last.request
        assert request.headers["X-Amz-Target"] == "AWSCognitoIdentityProviderService.SignUp"
        assert json.loads(request.content) == {
            "ClientId": CLIENT_ID,
            "Username": "a@b.com",
            "Password": "Secret123!",
            "UserAttributes": [{"Name": "email", "Value": "a@b.com"}],
        }

    async def test_duplicate_user_error_surfaces(
        self, gateway: AuthGateway, respx_mock: MockRouter
    ) -> None:
        respx_mock.post(COGNITO_URL).mock(
            return_value=httpx.Response(
                400,
                json={"__type": "UsernameExistsException", "message": "User already exists"},
            )
        )

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await gateway.sign_up("a@b.com", "Secret123!")

        assert exc_info.value.response.json() == {
            "__type": "UsernameExistsException",
            "message": "User already exists",
        }


class TestInitiateAuth:
    async def test_forwards_user_password_flow(
        self, gateway: AuthGateway, respx_mock: MockRouter
    ) -> None:
        cognito_response = {
            "AuthenticationResult": {
                "AccessToken": "access",
                "IdToken": "id",
                "RefreshToken": "refresh",
                "ExpiresIn": 3600,
                "TokenType": "Bearer",
            },
            "ChallengeParameters": {},
        }
        route = respx_mock.post(COGNITO_URL).mock(
            return_value=httpx.Response(200, json=cognito_response)
        )

        result = await gateway.initiate_auth("a@b.com", "Secret123!")

        assert result == cognito_response
        request = route.calls.last.request
        assert request.headers["X-Amz-Target"] == "AWSCognitoIdentityProviderService.InitiateAuth"
        assert json.loads(request.content) == {
            "ClientId": CLIENT_ID,
            "AuthFlow": "USER_PASSWORD_AUTH",
            "AuthParameters": {"USERNAME": "a@b.com", "PASSWORD": "Secret123!"},
        }

    async def test_challenge_response_returned_unmodified(
        self, gateway: AuthGateway, respx_mock: MockRouter
    ) -> None:
        challenge = {
            "ChallengeName": "NEW_PASSWORD_REQUIRED",
            "Session": "opaque-session",
            "ChallengeParameters": {"USER_ID_FOR_SRP": "a@b.com"},
        }
        respx_mock.post(COGNITO_URL).mock(return_value=httpx.Response(200, json=challenge))

        assert await gateway.initiate_auth("a@b.com", "Secret123!") == challenge


@pytest.mark.parametrize("operation", ["sign_up", "initiate_auth"])
async def test_remote_error_is_the_same_object(operation: str) -> None:
    client = AsyncMock()
    error = httpx.ReadTimeout("timed out")
    getattr(client, operation).side_effect = error
    auth_gateway = AuthGateway(client=client, client_id=CLIENT_ID)

    with pytest.raises(httpx.ReadTimeout) as exc_info:
        await getattr(auth_gateway, operation)("a@b.com", "Secret123!")

    assert exc_info.value is error


async def test_no_credentials_retained_after_calls(
    gateway: AuthGateway, respx_mock: MockRouter
) -> None:
    respx_mock.post(COGNITO_URL).mock(return_value=httpx.Response(200, json={}))

    await gateway.sign_up("a@b.com", "Secret123!")
    await gateway.initiate_auth("a@b.com", "Secret123!")

    retained = repr(vars(gateway)) + repr(vars(gateway.client))
    assert "Secret123!" not in retained
    assert "a@b.com" not in retained


class TestGlobalGateway:
    def test_missing_configuration_is_fatal(self) -> None:
        with pytest.raises(MissingConfigurationError):
            get_auth_gateway()

    def test_returns_same_instance(self, configured_env: None) -> None:
        first = get_auth_gateway()

        assert get_auth_gateway() is first
        assert first.client_id == CLIENT_ID
        assert first.client.base_url == "https://cognito-idp.eu-west-1.amazonaws.com"

    def test_reset_creates_new_instance(self, configured_env: None) -> None:
        first = get_auth_gateway()
        reset_auth_gateway()

        assert get_auth_gateway() is not first

    async def test_module_functions_use_global_gateway(
        self, configured_env: None, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.post(COGNITO_URL).mock(
            return_value=httpx.Response(200, json={"UserConfirmed": True})
        )

        try:
            assert await sign_up("a@b.com", "Secret123!") == {"UserConfirmed": True}
            assert await initiate_auth("a@b.com", "Secret123!") == {"UserConfirmed": True}
        finally:
            await get_auth_gateway().close()

        targets = [call.request.headers["X-Amz-Target"] for call in route.calls]
        assert targets == [
            "AWSCognitoIdentityProviderService.SignUp",
            "AWSCognitoIdentityProviderService.InitiateAuth",
        ]


def test_package_exports_gateway_operations() -> None:
    assert fm_identity_lib.sign_up is sign_up
    assert fm_identity_lib.initiate_auth is initiate_auth
    assert callable(fm_identity_lib.create_auth_router)
