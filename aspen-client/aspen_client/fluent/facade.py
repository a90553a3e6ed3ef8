"""
Client Facade
=============
Authorized sub-clients materialized after a successful sign-in.
"""

from typing import Optional

from ..errors import AuthorizationError, EventId
from ..identity.models import Scope
from ..pin import PinPolicyEngine
from ..resources import (
    AuthorizedSession,
    CurrentUserClient,
    FinancialClient,
    ManagementClient,
    PushClient,
    SettingsClient,
)


def insufficient_scope(required: Scope) -> AuthorizationError:
    return AuthorizationError(
        f"ApiKey no tiene permisos para realizar la operación. Alcance requerido: '{required.value}'",
        event_id=EventId.INSUFFICIENT_SCOPE,
    )


class AspenFacade:
    """Groups of authorized operations sharing one token."""

    def __init__(self, session: AuthorizedSession, pin_engine: Optional[PinPolicyEngine] = None):
        self._session = session
        self.financial = FinancialClient(session)
        self.management = ManagementClient(session)
        self.settings = SettingsClient(session)
        self._current_user = CurrentUserClient(session, pin_engine)
        self._push = PushClient(session)

    @property
    def scope(self) -> Scope:
        return self._session.scope

    def _require_delegated(self) -> None:
        if self.scope is not Scope.DELEGATED:
            raise insufficient_scope(Scope.DELEGATED)

    @property
    def current_user(self) -> CurrentUserClient:
        self._require_delegated()
        return self._current_user

    @property
    def push(self) -> PushClient:
        self._require_delegated()
        return self._push
