"""Service clients for the identity provider."""

from fm_identity_lib.clients.base import BaseServiceClient
from fm_identity_lib.clients.cognito_client import CognitoIdentityProviderClient

__all__ = [
    "BaseServiceClient",
    "CognitoIdentityProviderClient",
]
