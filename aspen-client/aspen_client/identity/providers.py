"""
Identity Providers
==================
Interfaces resolving the service route and the application credentials,
plus static and environment-backed implementations.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, runtime_checkable

from .models import Scope


@runtime_checkable
class EndpointProvider(Protocol):
    """Resolves the service base route for a scope."""

    def get_base_url(self, scope: Scope) -> str:
        """Return the absolute base URL for the scope."""


@runtime_checkable
class AppCredentialProvider(Protocol):
    """Supplies the application key/secret and its granted scope."""

    @property
    def granted_scope(self) -> Optional[Scope]:
        """Scope granted to the application, None when unknown."""

    def get_api_key(self) -> str:
        """Return the application key sent with every request."""

    def get_api_secret(self) -> str:
        """Return the secret used to sign authentication payloads."""


@dataclass(frozen=True)
class StaticAppInfoProvider:
    """Hard-coded endpoint and credential provider."""
    api_key: str
    api_secret: str = field(repr=False)
    base_urls: Dict[Scope, str] = field(default_factory=dict)
    scope: Optional[Scope] = None

    @property
    def granted_scope(self) -> Optional[Scope]:
        return self.scope

    def get_base_url(self, scope: Scope) -> str:
        try:
            return self.base_urls[scope]
        except KeyError:
            raise LookupError(f"No endpoint configured for scope '{scope.value}'") from None

    def get_api_key(self) -> str:
        return self.api_key

    def get_api_secret(self) -> str:
        return self.api_secret


class EnvironmentAppInfoProvider:
    """Provider reading routes and credentials from ASPEN_* variables."""

    URL_VARIABLES = {
        Scope.DELEGATED: "ASPEN_DELEGATED_URL",
        Scope.AUTONOMOUS: "ASPEN_AUTONOMOUS_URL",
    }

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def _require(self, name: str) -> str:
        value = self._environ.get(name, "").strip()
        if not value:
            raise LookupError(f"Environment variable '{name}' is not set")
        return value

    @property
    def granted_scope(self) -> Optional[Scope]:
        raw = self._environ.get("ASPEN_APP_SCOPE", "").strip()
        if not raw:
            return None
        return Scope(raw.capitalize())

    def get_base_url(self, scope: Scope) -> str:
        return self._require(self.URL_VARIABLES[scope])

    def get_api_key(self) -> str:
        return self._require("ASPEN_API_KEY")

    def get_api_secret(self) -> str:
        return self._require("ASPEN_API_SECRET")
