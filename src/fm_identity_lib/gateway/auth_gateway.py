"""Auth Gateway

Stateless facade for account creation and password login against a
Cognito user pool. Requests are assembled from caller credentials and
forwarded as-is; responses and errors come back unmodified.
"""

import logging
from typing import Any, Dict, Optional

from fm_identity_lib.clients import CognitoIdentityProviderClient
from fm_identity_lib.config import IdentityProviderConfig
from fm_identity_lib.models import InitiateAuthRequest, SignUpRequest

logger = logging.getLogger(__name__)


class AuthGateway:
    """Facade over a Cognito client bound to one app client id.

    The gateway holds only the client handle and the client id. Credentials
    exist for the duration of a single call.

    Example:
        ```python
        config = IdentityProviderConfig(region="eu-west-1", client_id="abc123")
        gateway = AuthGateway.from_config(config)

        await gateway.sign_up("a@b.com", "Secret123!")
        result = await gateway.initiate_auth("a@b.com", "Secret123!")
        tokens = result.get("AuthenticationResult")
        ```
    """

    def __init__(self, client: CognitoIdentityProviderClient, client_id: str):
        """Initialize gateway.

        Args:
            client: Cognito client used for all remote calls
            client_id: User pool app client identifier
        """
        self.client = client
        self.client_id = client_id

    @classmethod
    def from_config(cls, config: IdentityProviderConfig) -> "AuthGateway":
        """Create a gateway with its own Cognito client."""
        client = CognitoIdentityProviderClient.from_config(config)
        logger.info(f"AuthGateway initialized: region={config.region}, endpoint={client.base_url}")
        return cls(client=client, client_id=config.client_id)

    async def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """Register a new account using the email as username.

        Args:
            email: User email (validated by Cognito)
            password: User password (policy enforced by Cognito)

        Returns:
            Cognito SignUp response, unmodified

        Raises:
            httpx.HTTPStatusError: Rejected by Cognito (e.g. UsernameExistsException,
                InvalidPasswordException)
            httpx.TransportError: Network failure
        """
        request = SignUpRequest.for_email(self.client_id, email, password)
        return await self.client.sign_up(request)

    async def initiate_auth(self, email: str, password: str) -> Dict[str, Any]:
        """Log in with email and password (USER_PASSWORD_AUTH).

        Args:
            email: User email used as username
            password: User password

        Returns:
            Cognito InitiateAuth response, unmodified

        Raises:
            httpx.HTTPStatusError: Rejected by Cognito (e.g. NotAuthorizedException,
                UserNotConfirmedException)
            httpx.TransportError: Network failure
        """
        request = InitiateAuthRequest.for_password(self.client_id, email, password)
        return await self.client.initiate_auth(request)

    async def close(self) -> None:
        await self.client.close()


# Singleton instance for global access
_gateway_instance: Optional[AuthGateway] = None


def get_auth_gateway() -> AuthGateway:
    """Get or create the global AuthGateway instance.

    Configuration is read from the environment on first call.

    Returns:
        Global AuthGateway singleton

    Raises:
        MissingConfigurationError: If COGNITO_REGION or
            COGNITO_USER_POOL_CLIENT_ID is not set
    """
    global _gateway_instance

    if _gateway_instance is None:
        _gateway_instance = AuthGateway.from_config(IdentityProviderConfig.from_env())

    return _gateway_instance


def reset_auth_gateway():
    """Reset the global AuthGateway instance.

    Used for testing or reconfiguration.
    """
    global _gateway_instance
    _gateway_instance = None
    logger.warning("AuthGateway instance reset")


async def sign_up(email: str, password: str) -> Dict[str, Any]:
    """Register an account through the global gateway."""
    return await get_auth_gateway().sign_up(email, password)


async def initiate_auth(email: str, password: str) -> Dict[str, Any]:
    """Log in through the global gateway."""
    return await get_auth_gateway().initiate_auth(email, password)
