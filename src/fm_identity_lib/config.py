"""Identity Provider Configuration

Resolves the Cognito user pool settings the auth gateway needs from
explicit arguments or environment variables.

Environment Variables:
    COGNITO_REGION: AWS region of the user pool (required)
    COGNITO_USER_POOL_CLIENT_ID: App client identifier (required)
    COGNITO_ENDPOINT_URL: Endpoint override, e.g. a local emulator (optional)
    COGNITO_TIMEOUT_SECONDS: HTTP timeout in seconds (default: 30.0)
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class MissingConfigurationError(RuntimeError):
    """Raised when required identity provider settings are absent."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            f"Missing required identity provider configuration: {', '.join(missing)}"
        )


@dataclass(frozen=True)
class IdentityProviderConfig:
    """Settings for one Cognito user pool app client.

    Attributes:
        region: AWS region hosting the user pool (e.g. "eu-west-1")
        client_id: User pool app client identifier
        endpoint_url: Optional endpoint override; defaults to the regional endpoint
        timeout: HTTP request timeout in seconds
    """

    region: str
    client_id: str
    endpoint_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        missing = []
        if not self.region or not self.region.strip():
            missing.append("region")
        if not self.client_id or not self.client_id.strip():
            missing.append("client_id")
        if missing:
            raise MissingConfigurationError(missing)

    @property
    def base_url(self) -> str:
        """Cognito endpoint for the configured region.

        Example:
            >>> IdentityProviderConfig(region="eu-west-1", client_id="abc").base_url
            'https://cognito-idp.eu-west-1.amazonaws.com'
        """
        if self.endpoint_url:
            return self.endpoint_url.rstrip("/")
        return f"https://cognito-idp.{self.region}.amazonaws.com"

    @classmethod
    def from_env(cls) -> "IdentityProviderConfig":
        """Build configuration from environment variables.

        Returns:
            Populated IdentityProviderConfig

        Raises:
            MissingConfigurationError: If COGNITO_REGION or
                COGNITO_USER_POOL_CLIENT_ID is unset or blank
        """
        region = os.getenv("COGNITO_REGION", "").strip()
        client_id = os.getenv("COGNITO_USER_POOL_CLIENT_ID", "").strip()

        missing = []
        if not region:
            missing.append("COGNITO_REGION")
        if not client_id:
            missing.append("COGNITO_USER_POOL_CLIENT_ID")
        if missing:
            logger.error(f"Identity provider misconfigured, missing: {missing}")
            raise MissingConfigurationError(missing)

        endpoint_url = os.getenv("COGNITO_ENDPOINT_URL") or None

        timeout = DEFAULT_TIMEOUT_SECONDS
        env_timeout = os.getenv("COGNITO_TIMEOUT_SECONDS")
        if env_timeout:
            try:
                timeout = float(env_timeout)
            except ValueError:
                logger.warning(
                    f"Invalid COGNITO_TIMEOUT_SECONDS '{env_timeout}', "
                    f"defaulting to {DEFAULT_TIMEOUT_SECONDS}"
                )

        return cls(
            region=region,
            client_id=client_id,
            endpoint_url=endpoint_url,
            timeout=timeout,
        )
