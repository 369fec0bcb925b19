"""Base client for AWS JSON-protocol service calls."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

AMZ_JSON_CONTENT_TYPE = "application/x-amz-json-1.1"


class BaseServiceClient:
    """Base class for async HTTP clients speaking the AWS JSON 1.1 protocol.

    Every operation is a POST to the service root with the operation named
    in the X-Amz-Target header. The underlying httpx.AsyncClient is created
    on first use and kept open for the lifetime of the client.

    Usage:
        class ExampleClient(BaseServiceClient):
            TARGET_PREFIX = "ExampleService"

            async def describe(self, payload: dict) -> dict:
                client = self._get_client()
                response = await client.post(
                    f"{self.base_url}/",
                    json=payload,
                    headers=self._headers("Describe"),
                )
                response.raise_for_status()
                return response.json()
    """

    TARGET_PREFIX: str = ""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize service client.

        Args:
            base_url: Service endpoint (e.g., https://cognito-idp.eu-west-1.amazonaws.com)
            timeout: Request timeout in seconds (default: 30.0)
            http_client: Optional externally managed AsyncClient; never closed here
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

        logger.info(f"Initialized {self.__class__.__name__} with base_url={self.base_url}")

    def _headers(self, operation: str) -> dict:
        """Generate request headers for an operation.

        Args:
            operation: Service operation name (e.g., "SignUp")

        Returns:
            Headers dict with content type and X-Amz-Target
        """
        return {
            "Content-Type": AMZ_JSON_CONTENT_TYPE,
            "X-Amz-Target": f"{self.TARGET_PREFIX}.{operation}",
        }

    def _get_client(self) -> httpx.AsyncClient:
        """Get the shared HTTP client, creating it on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
