"""
Aspen Client
============
Authentication and request-signing core of the Aspen client SDK.
"""

__version__ = "0.1.0"

# Identity
from aspen_client.identity import (
    AppAuthToken,
    AuthToken,
    DelegatedUserInfo,
    EnvironmentAppInfoProvider,
    IdentityValidator,
    Scope,
    StaticAppInfoProvider,
    UserAuthToken,
)

# Signing
from aspen_client.settings import Settings
from aspen_client.signing import (
    FixedEpochGenerator,
    FutureEpochGenerator,
    GuidNonceGenerator,
    NullEmptyNonceGenerator,
    SingleUseNonceGenerator,
    UnixEpochGenerator,
)
from aspen_client.signing.signer import RequestSigner, SignedEnvelope

# Errors
from aspen_client.errors import (
    AspenResponseException,
    AuthenticationError,
    AuthorizationError,
    EventId,
    InternalError,
    LockoutError,
    NotAuthenticatedError,
    NotFoundError,
    PolicyError,
    PreconditionError,
    ServiceUnavailableError,
    TransportTimeoutError,
    ValidationError,
)

# Auth state
from aspen_client.auth_state import AuthOutcome, AuthState, AuthStateMachine, LockoutState, classify_failure

# PIN
from aspen_client.pin import PinPolicyEngine

# Configuration and transport
from aspen_client.config import ClientConfig, RetryConfig, ValidationConfig
from aspen_client.http import HttpxInvoker, InvokerResponse

# Fluent client
from aspen_client.fluent import AspenClient, AspenFacade, FluentClient

__all__ = [
    # Identity
    "AppAuthToken",
    "AuthToken",
    "DelegatedUserInfo",
    "EnvironmentAppInfoProvider",
    "IdentityValidator",
    "Scope",
    "StaticAppInfoProvider",
    "UserAuthToken",
    # Signing
    "Settings",
    "FixedEpochGenerator",
    "FutureEpochGenerator",
    "GuidNonceGenerator",
    "NullEmptyNonceGenerator",
    "SingleUseNonceGenerator",
    "UnixEpochGenerator",
    "RequestSigner",
    "SignedEnvelope",
    # Errors
    "AspenResponseException",
    "AuthenticationError",
    "AuthorizationError",
    "EventId",
    "InternalError",
    "LockoutError",
    "NotAuthenticatedError",
    "NotFoundError",
    "PolicyError",
    "PreconditionError",
    "ServiceUnavailableError",
    "TransportTimeoutError",
    "ValidationError",
    # Auth state
    "AuthOutcome",
    "AuthState",
    "AuthStateMachine",
    "LockoutState",
    "classify_failure",
    # PIN
    "PinPolicyEngine",
    # Configuration and transport
    "ClientConfig",
    "RetryConfig",
    "ValidationConfig",
    "HttpxInvoker",
    "InvokerResponse",
    # Fluent client
    "AspenClient",
    "AspenFacade",
    "FluentClient",
]
