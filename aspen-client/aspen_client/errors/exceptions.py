"""
Aspen Exceptions
================
Single exception shape surfaced by every failure path of the client.
"""

from http import HTTPStatus
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .events import EventId


class AspenResponseException(Exception):
    """Base exception for all failures reported by the Aspen client.

    Carries the event id, the HTTP status, a human readable message and,
    for domain failures that return extra machine-readable data, a
    read-only ``content`` mapping.
    """

    default_status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        event_id: Optional[Union[str, EventId]] = None,
        status_code: Optional[Union[int, HTTPStatus]] = None,
        content: Optional[Mapping[str, Any]] = None,
    ):
        if isinstance(event_id, EventId):
            event_id = event_id.value
        self._event_id = event_id
        self._status_code = HTTPStatus(status_code) if status_code is not None else self.default_status
        self._message = message
        self._content = MappingProxyType(dict(content)) if content else None
        super().__init__(message)

    @property
    def event_id(self) -> Optional[str]:
        return self._event_id

    @property
    def status_code(self) -> HTTPStatus:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def content(self) -> Optional[Mapping[str, Any]]:
        return self._content

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(event_id={self._event_id!r}, "
            f"status_code={int(self._status_code)}, message={self._message!r})"
        )


class ValidationError(AspenResponseException):
    """One or more field defects in a request (400)."""
    default_status = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, event_id=EventId.VALIDATION_FAILED, status_code=None, content=None, errors=()):
        super().__init__(message, event_id, status_code, content)
        self.errors = tuple(errors)


class AuthenticationError(AspenResponseException):
    """Identity or credential rejected (401)."""
    default_status = HTTPStatus.UNAUTHORIZED


class LockoutError(AuthenticationError):
    """Identity is locked after too many failed attempts (97413/97415)."""

    @property
    def transitioned(self) -> bool:
        """True when this attempt is the one that locked the identity."""
        return self.event_id == EventId.USER_LOCKED_OUT.value


class AuthorizationError(AspenResponseException):
    """Credential accepted but the app scope is insufficient (403)."""
    default_status = HTTPStatus.FORBIDDEN


class NotFoundError(AspenResponseException):
    """Requested resource or credential slot does not exist (404)."""
    default_status = HTTPStatus.NOT_FOUND


class PolicyError(AspenResponseException):
    """Value rejected by a PIN policy (406)."""
    default_status = HTTPStatus.NOT_ACCEPTABLE

    def __init__(self, message: str, event_id=EventId.PIN_POLICY_FAILED, status_code=None, content=None):
        super().__init__(message, event_id, status_code, content)


class PreconditionError(AspenResponseException):
    """Business precondition not met, e.g. invalid activation code (417)."""
    default_status = HTTPStatus.EXPECTATION_FAILED


class InternalError(AspenResponseException):
    """Server detected corrupt data while processing the request (500)."""
    default_status = HTTPStatus.INTERNAL_SERVER_ERROR


class ServiceUnavailableError(AspenResponseException):
    """Service or one of its dependencies is unreachable (503)."""
    default_status = HTTPStatus.SERVICE_UNAVAILABLE


class TransportTimeoutError(ServiceUnavailableError):
    """Raised specifically on transport timeouts."""
    default_status = HTTPStatus.REQUEST_TIMEOUT


class NotAuthenticatedError(RuntimeError):
    """An authorized operation was requested before authentication completed."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"'{operation}' requires a successful call to authenticate() first")
