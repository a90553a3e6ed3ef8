"""
Aspen Errors
============
Exception taxonomy, event ids and translation of failures.
"""

from .events import EventId, LOCKOUT_EVENTS
from .exceptions import (
    AspenResponseException,
    AuthenticationError,
    AuthorizationError,
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
from .models import ErrorEnvelope, FieldError
from .translator import translate_response, translate_transport_error, validation_failure

__all__ = [
    # Events
    "EventId",
    "LOCKOUT_EVENTS",
    # Exceptions
    "AspenResponseException",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "LockoutError",
    "NotAuthenticatedError",
    "NotFoundError",
    "PolicyError",
    "PreconditionError",
    "ServiceUnavailableError",
    "TransportTimeoutError",
    "ValidationError",
    # Models
    "ErrorEnvelope",
    "FieldError",
    # Translation
    "translate_response",
    "translate_transport_error",
    "validation_failure",
]
