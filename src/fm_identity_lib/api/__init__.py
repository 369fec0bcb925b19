"""HTTP routes for the auth gateway."""

from fm_identity_lib.api.router import create_auth_router

__all__ = ["create_auth_router"]
