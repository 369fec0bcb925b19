"""Request models for the Cognito auth operations.

Field names are snake_case in Python and serialize to the PascalCase
names the Cognito JSON API expects.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class AuthFlow(str, Enum):
    """Cognito authentication flow designations used by this library"""

    USER_PASSWORD_AUTH = "USER_PASSWORD_AUTH"


class Credentials(BaseModel):
    """Email/password pair supplied by a caller for a single request."""

    email: str = Field(..., description="User email, also used as the Cognito username")
    password: SecretStr = Field(..., description="User password (policy enforced remotely)")


class CognitoRequest(BaseModel):
    """Base for request payloads sent to Cognito."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by Cognito."""
        return self.model_dump(by_alias=True, mode="json")


class AttributeType(CognitoRequest):
    name: str = Field(..., alias="Name")
    value: str = Field(..., alias="Value")


class SignUpRequest(CognitoRequest):
    """Registration request with the email as both username and attribute."""

    client_id: str = Field(..., alias="ClientId")
    username: str = Field(..., alias="Username")
    password: str = Field(..., alias="Password")
    user_attributes: List[AttributeType] = Field(default_factory=list, alias="UserAttributes")

    @classmethod
    def for_email(cls, client_id: str, email: str, password: str) -> "SignUpRequest":
        return cls(
            client_id=client_id,
            username=email,
            password=password,
            user_attributes=[AttributeType(name="email", value=email)],
        )


class InitiateAuthRequest(CognitoRequest):
    """Authentication request using direct username/password exchange."""

    client_id: str = Field(..., alias="ClientId")
    auth_flow: AuthFlow = Field(AuthFlow.USER_PASSWORD_AUTH, alias="AuthFlow")
    auth_parameters: Dict[str, str] = Field(default_factory=dict, alias="AuthParameters")

    @classmethod
    def for_password(cls, client_id: str, email: str, password: str) -> "InitiateAuthRequest":
        return cls(
            client_id=client_id,
            auth_flow=AuthFlow.USER_PASSWORD_AUTH,
            auth_parameters={"USERNAME": email, "PASSWORD": password},
        )
