"""FastAPI routes exposing the auth gateway.

Usage:
    app = FastAPI()
    app.include_router(create_auth_router())

Building the router without an explicit gateway resolves the global one
immediately, so missing configuration stops the application at startup.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, HTTPException, status

from fm_identity_lib.gateway import AuthGateway, get_auth_gateway
from fm_identity_lib.models import Credentials

logger = logging.getLogger(__name__)


def _upstream_error_detail(response: httpx.Response) -> Dict[str, Optional[str]]:
    """Extract Cognito's error type and message from an error response."""
    error_type = response.headers.get("x-amzn-ErrorType")
    message = None
    try:
        body = response.json()
    except ValueError:
        body = {}
    if isinstance(body, dict):
        error_type = body.get("__type") or error_type
        message = body.get("message") or body.get("Message")
    if error_type:
        # Cognito may qualify the name ("...#UsernameExistsException") or append ":" metadata
        error_type = error_type.split(":")[0].rsplit("#", 1)[-1]
    return {"type": error_type, "message": message}


def _to_http_exception(operation: str, error: httpx.HTTPError) -> HTTPException:
    if isinstance(error, httpx.HTTPStatusError):
        return HTTPException(
            status_code=error.response.status_code,
            detail=_upstream_error_detail(error.response),
        )
    logger.error(f"Identity provider unreachable during {operation}: {error!r}")
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={"type": "IdentityProviderUnavailable", "message": str(error) or None},
    )


def create_auth_router(
    gateway: Optional[AuthGateway] = None,
    prefix: str = "/auth",
) -> APIRouter:
    """Create a router with signup and login endpoints.

    Args:
        gateway: Gateway to use (default: global gateway from environment)
        prefix: URL prefix for the routes

    Returns:
        APIRouter with POST {prefix}/signup and POST {prefix}/login

    Raises:
        MissingConfigurationError: If no gateway is given and the
            environment is not configured
    """
    auth_gateway = gateway if gateway is not None else get_auth_gateway()
    router = APIRouter(prefix=prefix, tags=["auth"])

    @router.post("/signup")
    async def signup(credentials: Credentials) -> Dict[str, Any]:
        try:
            return await auth_gateway.sign_up(
                credentials.email, credentials.password.get_secret_value()
            )
        except httpx.HTTPError as e:
            raise _to_http_exception("signup", e) from e

    @router.post("/login")
    async def login(credentials: Credentials) -> Dict[str, Any]:
        try:
            return await auth_gateway.initiate_auth(
                credentials.email, credentials.password.get_secret_value()
            )
        except httpx.HTTPError as e:
            raise _to_http_exception("login", e) from e

    return router
