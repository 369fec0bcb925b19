"""HTTP client for the Cognito user pools API."""

import logging
from typing import Any, Dict, Optional

import httpx

from fm_identity_lib.clients.base import BaseServiceClient
from fm_identity_lib.config import IdentityProviderConfig
from fm_identity_lib.models import InitiateAuthRequest, SignUpRequest

logger = logging.getLogger(__name__)


class CognitoIdentityProviderClient(BaseServiceClient):
    """Async client for the public Cognito user pool operations.

    SignUp and InitiateAuth do not require signed requests for app clients
    without a secret, so calls are plain JSON posts. Responses are returned
    as decoded dictionaries without interpretation.

    Usage:
        client = CognitoIdentityProviderClient(region="eu-west-1")
        result = await client.initiate_auth(request)
    """

    TARGET_PREFIX = "AWSCognitoIdentityProviderService"

    def __init__(
        self,
        region: str,
        endpoint_url: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize client.

        Args:
            region: AWS region of the user pool
            endpoint_url: Optional endpoint override (default: regional Cognito endpoint)
            timeout: Request timeout in seconds (default: 30.0)
            http_client: Optional externally managed AsyncClient
        """
        self.region = region
        super().__init__(
            base_url=endpoint_url or f"https://cognito-idp.{region}.amazonaws.com",
            timeout=timeout,
            http_client=http_client,
        )

    @classmethod
    def from_config(
        cls, config: IdentityProviderConfig, http_client: Optional[httpx.AsyncClient] = None
    ) -> "CognitoIdentityProviderClient":
        return cls(
            region=config.region,
            endpoint_url=config.base_url,
            timeout=config.timeout,
            http_client=http_client,
        )

    async def send(self, operation: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Invoke a Cognito operation.

        Args:
            operation: Operation name (e.g., "SignUp")
            payload: JSON request body

        Returns:
            Decoded response body ({} if the body is empty)

        Raises:
            httpx.HTTPStatusError: If Cognito returns an error status; the
                Cognito error (__type, message) is on error.response
            httpx.TransportError: On connection or timeout failures
        """
        logger.debug(f"Calling Cognito {operation}")
        client = self._get_client()

        try:
            response = await client.post(
                f"{self.base_url}/",
                json=payload,
                headers=self._headers(operation),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Cognito {operation} failed: status={e.response.status_code}, "
                f"type={e.response.headers.get('x-amzn-ErrorType', 'unknown')}"
            )
            raise
        except httpx.TransportError as e:
            logger.error(f"Cognito {operation} transport error: {e!r}")
            raise

        if not response.content:
            return {}
        return response.json()

    async def sign_up(self, request: SignUpRequest) -> Dict[str, Any]:
        """Register a new user.

        Returns:
            Raw SignUp response (UserConfirmed, UserSub, CodeDeliveryDetails)
        """
        return await self.send("SignUp", request.to_payload())

    async def initiate_auth(self, request: InitiateAuthRequest) -> Dict[str, Any]:
        """Start an authentication flow.

        Returns:
            Raw InitiateAuth response (AuthenticationResult or ChallengeName)
        """
        return await self.send("InitiateAuth", request.to_payload())
