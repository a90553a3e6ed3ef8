"""
Fluent Client Builder
=====================
Ordered configuration of a client:

    AspenClient.initialize(Scope.DELEGATED)
        .routing_to(endpoint_provider)
        .with_identity(app_credential_provider)
        .authenticate(user_info)
        .get_client()

Each stage returns a distinct type exposing only the next legal call.
The auth token is the only field written after construction: calls to
``authenticate`` on one instance must be serialized by the caller.
"""

from typing import Any, Mapping, Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..auth_state import AuthStateMachine
from ..config import ClientConfig
from ..errors import (
    AspenResponseException,
    FieldError,
    NotAuthenticatedError,
    translate_response,
    translate_transport_error,
    validation_failure,
)
from ..http import AuthorizedInvoker, HttpxInvoker, InvokerResponse
from ..identity.models import AppAuthToken, AuthToken, DelegatedUserInfo, Scope, UserAuthToken
from ..identity.providers import AppCredentialProvider, EndpointProvider
from ..identity.validator import IdentityValidator
from ..pin import PinPolicyEngine
from ..resources import CurrentUserClient, FinancialClient, ManagementClient, PushClient, SettingsClient
from ..resources.base import AuthorizedSession
from ..resources.models import SigninResponse
from ..settings import Settings
from ..signing.signer import RequestSigner, SignedEnvelope
from .facade import AspenFacade, insufficient_scope

logger = structlog.get_logger(__name__)

SIGNIN_PATH = "/auth/signin"

Identity = Union[DelegatedUserInfo, Mapping[str, Any]]


class AspenClient:
    """Entry point of the fluent configuration chain."""

    @staticmethod
    def initialize(
        scope: Union[Scope, Settings] = Scope.DELEGATED,
        config: Optional[ClientConfig] = None,
    ) -> "RoutingStage":
        """
        Start configuring a client.

        Args:
            scope: Requested scope, or complete Settings with custom generators
            config: Transport and validation configuration

        Returns:
            Stage expecting the endpoint provider
        """
        settings = scope if isinstance(scope, Settings) else Settings.for_scope(scope)
        return RoutingStage(settings, config or ClientConfig())


class RoutingStage:
    def __init__(self, settings: Settings, config: ClientConfig):
        self._settings = settings
        self._config = config

    def routing_to(
        self,
        endpoint_provider: EndpointProvider,
        invoker: Optional[AuthorizedInvoker] = None,
    ) -> "IdentityStage":
        """Bind the service route for the requested scope."""
        owns_invoker = invoker is None
        if owns_invoker:
            base_url = endpoint_provider.get_base_url(self._settings.scope)
            invoker = HttpxInvoker(base_url, config=self._config)
        return IdentityStage(self._settings, self._config, invoker, owns_invoker)


class IdentityStage:
    def __init__(self, settings: Settings, config: ClientConfig, invoker: AuthorizedInvoker, owns_invoker: bool = False):
        self._settings = settings
        self._config = config
        self._invoker = invoker
        self._owns_invoker = owns_invoker

    def with_identity(self, app_provider: AppCredentialProvider) -> "FluentClient":
        """Bind the application credentials used to sign and call."""
        return FluentClient(self._settings, self._config, self._invoker, app_provider, owns_invoker=self._owns_invoker)


class FluentClient:
    """Client ready to authenticate, and afterwards to issue authorized calls."""

    def __init__(
        self,
        settings: Settings,
        config: ClientConfig,
        invoker: AuthorizedInvoker,
        app_provider: AppCredentialProvider,
        pin_engine: Optional[PinPolicyEngine] = None,
        owns_invoker: bool = False,
    ):
        self._settings = settings
        self._config = config
        self._invoker = invoker
        self._app_provider = app_provider
        self._owns_invoker = owns_invoker
        self._validator = IdentityValidator(config.validation)
        self._pin_engine = pin_engine or PinPolicyEngine()
        self._auth_state = AuthStateMachine()
        self._auth_token: Optional[AuthToken] = None
        self._facade: Optional[AspenFacade] = None

    @property
    def scope(self) -> Scope:
        return self._settings.scope

    def close(self) -> None:
        """Release the HTTP client, when it was created by the builder."""
        if self._owns_invoker:
            self._invoker.close()

    def __enter__(self) -> "FluentClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @property
    def signing_settings(self) -> Settings:
        return self._settings

    @property
    def auth_token(self) -> Optional[AuthToken]:
        return self._auth_token

    @property
    def auth_state(self) -> AuthStateMachine:
        return self._auth_state

    def _check_granted_scope(self) -> None:
        granted = getattr(self._app_provider, "granted_scope", None)
        if granted is not None and Scope(granted) is not self.scope:
            logger.warning("App scope does not grant requested scope", granted=Scope(granted).value, requested=self.scope.value)
            raise insufficient_scope(self.scope)

    def _build_payload(self, identity: Optional[Identity]) -> Mapping[str, Any]:
        if self.scope is Scope.AUTONOMOUS:
            if identity is not None:
                raise validation_failure([
                    FieldError("UserInfo", f"'UserInfo' no es válido para el alcance '{self.scope.value}'."),
                ])
            return {}

        if identity is None:
            identity = DelegatedUserInfo()
        payload = identity.to_payload() if isinstance(identity, DelegatedUserInfo) else dict(identity)
        self._validator.validate_or_raise(payload)
        return payload

    def _send_signin(self, envelope: SignedEnvelope) -> InvokerResponse:
        try:
            response = self._invoker.send("POST", SIGNIN_PATH, headers=envelope.headers())
        except AspenResponseException:
            raise
        except Exception as exc:
            raise translate_transport_error(exc) from exc
        if not response.is_success:
            raise translate_response(response.status_code, response.body, response.headers)
        return response

    def _issue_token(self, response: InvokerResponse, payload: Mapping[str, Any]) -> AuthToken:
        try:
            signin = SigninResponse.model_validate(response.body)
        except PydanticValidationError as exc:
            raise AspenResponseException(
                "Sign-in response did not include a token",
                status_code=response.status_code,
            ) from exc

        if self.scope is Scope.DELEGATED:
            return UserAuthToken(
                token=signin.token,
                scope=self.scope,
                expires_at=signin.expires_at,
                device_id=payload.get("DeviceId"),
                username=signin.username,
            )
        return AppAuthToken(token=signin.token, scope=self.scope, expires_at=signin.expires_at)

    def _discard_token(self) -> None:
        self._auth_token = None
        self._facade = None

    def authenticate(self, identity: Optional[Identity] = None) -> "FluentClient":
        """
        Sign in and attach the issued token to this client.

        Local checks run first: the app's granted scope, the identity
        payload and the nonce. Only then is the signed request sent.

        Args:
            identity: End-user credentials for delegated scope, None for autonomous

        Returns:
            This client, now holding the auth token

        Raises:
            AspenResponseException: For every local or remote failure
            LookupError: If a provider cannot supply a route or credential
        """
        self._auth_state.begin()
        try:
            self._check_granted_scope()
            payload = self._build_payload(identity)
            signer = RequestSigner(
                self._app_provider.get_api_key(),
                self._app_provider.get_api_secret(),
                self._config.validation,
            )
            envelope = signer.sign(self._settings, payload)
            response = self._send_signin(envelope)
            token = self._issue_token(response, payload)
        except AspenResponseException as exc:
            self._discard_token()
            self._auth_state.fail(exc)
            raise
        except Exception:
            self._discard_token()
            self._auth_state.abort()
            raise

        self._auth_token = token
        self._facade = None
        self._auth_state.succeed()
        logger.info("Client authenticated", scope=self.scope.value, token_type=type(token).__name__)
        return self

    def get_client(self) -> AspenFacade:
        """
        Materialize the authorized facade.

        Raises:
            NotAuthenticatedError: If authenticate() has not succeeded
        """
        if self._auth_token is None:
            raise NotAuthenticatedError("get_client")
        if self._facade is None:
            session = AuthorizedSession(self._invoker, self._app_provider.get_api_key(), self._auth_token)
            self._facade = AspenFacade(session, self._pin_engine)
        return self._facade

    @property
    def financial(self) -> FinancialClient:
        return self.get_client().financial

    @property
    def management(self) -> ManagementClient:
        return self.get_client().management

    @property
    def settings(self) -> SettingsClient:
        return self.get_client().settings

    @property
    def current_user(self) -> CurrentUserClient:
        return self.get_client().current_user

    @property
    def push(self) -> PushClient:
        return self.get_client().push
