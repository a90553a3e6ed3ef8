"""
Authentication State Machine
============================
Client-side model of the sign-in outcomes observed from Aspen.

The service owns the failed-attempt counter and the lockout flag. The
client never counts attempts nor clears a lockout: it only classifies
each outcome by its event id and remembers the last observed state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import structlog

from .errors import AspenResponseException, EventId

logger = structlog.get_logger(__name__)


class AuthState(str, Enum):
    """Observed state of an identity during sign-in."""
    UNKNOWN = "unknown"
    CREDENTIAL_CHECK = "credential_check"
    AUTHENTICATED = "authenticated"
    UNRECOGNIZED_IDENTITY = "unrecognized_identity"
    INVALID_CREDENTIAL = "invalid_credential"
    LOCKED_OUT = "locked_out"
    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_CREDENTIAL = "malformed_credential"
    SCOPE_MISMATCH = "scope_mismatch"
    REJECTED = "rejected"


EVENT_STATES: Dict[str, AuthState] = {
    EventId.IDENTITY_UNRECOGNIZED.value: AuthState.UNRECOGNIZED_IDENTITY,
    EventId.INVALID_CREDENTIAL.value: AuthState.INVALID_CREDENTIAL,
    EventId.USER_LOCKED_OUT.value: AuthState.LOCKED_OUT,
    EventId.USER_LOCKED.value: AuthState.LOCKED_OUT,
    EventId.MISSING_CREDENTIAL.value: AuthState.MISSING_CREDENTIAL,
    EventId.MALFORMED_CREDENTIAL.value: AuthState.MALFORMED_CREDENTIAL,
    EventId.INSUFFICIENT_SCOPE.value: AuthState.SCOPE_MISMATCH,
}


@dataclass(frozen=True)
class LockoutState:
    """Lockout as derived from the last outcome."""
    locked: bool = False
    transitioned: bool = False   # This attempt caused the lockout


@dataclass(frozen=True)
class AuthOutcome:
    """Classification of one sign-in attempt."""
    state: AuthState
    event_id: Optional[str] = None
    lockout: LockoutState = LockoutState()

    @property
    def is_terminal(self) -> bool:
        """True when retrying with the same credential cannot succeed."""
        return self.state in {
            AuthState.LOCKED_OUT,
            AuthState.MISSING_CREDENTIAL,
            AuthState.MALFORMED_CREDENTIAL,
            AuthState.SCOPE_MISMATCH,
        }


def classify_failure(exc: AspenResponseException) -> AuthOutcome:
    """
    Map a sign-in failure to the observed state.

    Args:
        exc: Failure raised by the sign-in request

    Returns:
        AuthOutcome for the event id, REJECTED when it is not a sign-in event
    """
    state = EVENT_STATES.get(exc.event_id or "", AuthState.REJECTED)
    lockout = LockoutState()
    if state is AuthState.LOCKED_OUT:
        lockout = LockoutState(locked=True, transitioned=exc.event_id == EventId.USER_LOCKED_OUT.value)
    return AuthOutcome(state=state, event_id=exc.event_id, lockout=lockout)


class AuthStateMachine:
    """Tracks the last observed sign-in state of one client instance."""

    def __init__(self):
        self._outcome = AuthOutcome(state=AuthState.UNKNOWN)

    @property
    def state(self) -> AuthState:
        return self._outcome.state

    @property
    def outcome(self) -> AuthOutcome:
        return self._outcome

    @property
    def lockout(self) -> LockoutState:
        return self._outcome.lockout

    def begin(self) -> None:
        """Enter credential check for a new attempt."""
        self._outcome = AuthOutcome(state=AuthState.CREDENTIAL_CHECK)

    def succeed(self) -> AuthOutcome:
        self._outcome = AuthOutcome(state=AuthState.AUTHENTICATED)
        logger.info("Sign-in succeeded")
        return self._outcome

    def abort(self) -> AuthOutcome:
        """Leave credential check after a failure outside the Aspen hierarchy."""
        self._outcome = AuthOutcome(state=AuthState.REJECTED)
        logger.warning("Sign-in aborted before a response was classified")
        return self._outcome

    def fail(self, exc: AspenResponseException) -> AuthOutcome:
        """Record a failed attempt and return its classification."""
        self._outcome = classify_failure(exc)
        log = logger.warning if self._outcome.is_terminal else logger.info
        log(
            "Sign-in failed",
            state=self._outcome.state.value,
            event_id=exc.event_id,
            status=int(exc.status_code),
            locked=self._outcome.lockout.locked,
        )
        return self._outcome
