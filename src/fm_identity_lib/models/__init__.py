"""
Data models for the identity gateway.

Pydantic models for caller credentials and the request payloads sent to
the identity provider. Responses are returned as plain dictionaries.
"""

from fm_identity_lib.models.auth import (
    AttributeType,
    AuthFlow,
    CognitoRequest,
    Credentials,
    InitiateAuthRequest,
    SignUpRequest,
)

__all__ = [
    "AttributeType",
    "AuthFlow",
    "CognitoRequest",
    "Credentials",
    "InitiateAuthRequest",
    "SignUpRequest",
]
