"""Auth Gateway Module

Account creation and login against the configured identity provider.
"""

from .auth_gateway import (
    AuthGateway,
    get_auth_gateway,
    initiate_auth,
    reset_auth_gateway,
    sign_up,
)

__all__ = [
    "AuthGateway",
    "get_auth_gateway",
    "initiate_auth",
    "reset_auth_gateway",
    "sign_up",
]
