"""
Identity
========
Scopes, identity payloads, tokens, providers and payload validation.
"""

from .models import AppAuthToken, AuthToken, DelegatedUserInfo, Scope, UserAuthToken, default_device_id
from .providers import AppCredentialProvider, EndpointProvider, EnvironmentAppInfoProvider, StaticAppInfoProvider
from .validator import IdentityValidator, check_nonce, require_values, required_message

__all__ = [
    "AppAuthToken",
    "AuthToken",
    "DelegatedUserInfo",
    "Scope",
    "UserAuthToken",
    "default_device_id",
    "AppCredentialProvider",
    "EndpointProvider",
    "EnvironmentAppInfoProvider",
    "StaticAppInfoProvider",
    "IdentityValidator",
    "check_nonce",
    "require_values",
    "required_message",
]
