"""FaultMaven Identity Library

Account creation and password login against a Cognito user pool for
FaultMaven microservices.
"""

__version__ = "0.1.0"

from fm_identity_lib.config import (
    IdentityProviderConfig,
    MissingConfigurationError,
)

from fm_identity_lib.models import (
    AuthFlow, Credentials, InitiateAuthRequest, SignUpRequest
)

from fm_identity_lib.gateway import (
    AuthGateway,
    get_auth_gateway,
    initiate_auth,
    reset_auth_gateway,
    sign_up,
)

# Lazy import for the router so FastAPI is only loaded by services that mount it
def __getattr__(name):
    """Lazy import for create_auth_router."""
    if name == "create_auth_router":
        from fm_identity_lib.api import create_auth_router
        return create_auth_router
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

__all__ = [
    # Configuration
    "IdentityProviderConfig",
    "MissingConfigurationError",
    # Models
    "AuthFlow", "Credentials", "InitiateAuthRequest", "SignUpRequest",
    # Gateway
    "AuthGateway",
    "get_auth_gateway",
    "initiate_auth",
    "reset_auth_gateway",
    "sign_up",
    # Routes (lazy loaded)
    "create_auth_router",
]
