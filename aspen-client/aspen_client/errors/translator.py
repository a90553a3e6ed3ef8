"""
Error Translator
================
Funnels local validation defects, transport failures and remote 4xx/5xx
responses into exactly one AspenResponseException.
"""

from http import HTTPStatus
from typing import Any, Dict, Iterable, Mapping, Optional, Type

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError

from .events import LOCKOUT_EVENTS, EventId
from .exceptions import (
    AspenResponseException,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    LockoutError,
    NotFoundError,
    PolicyError,
    PreconditionError,
    ServiceUnavailableError,
    TransportTimeoutError,
    ValidationError,
)
from .models import ErrorEnvelope, FieldError

logger = structlog.get_logger(__name__)

EVENT_ID_HEADER = "X-PRO-Response-EventId"

STATUS_EXCEPTIONS: Dict[int, Type[AspenResponseException]] = {
    HTTPStatus.BAD_REQUEST: ValidationError,
    HTTPStatus.UNAUTHORIZED: AuthenticationError,
    HTTPStatus.FORBIDDEN: AuthorizationError,
    HTTPStatus.NOT_FOUND: NotFoundError,
    HTTPStatus.NOT_ACCEPTABLE: PolicyError,
    HTTPStatus.EXPECTATION_FAILED: PreconditionError,
    HTTPStatus.INTERNAL_SERVER_ERROR: InternalError,
    HTTPStatus.SERVICE_UNAVAILABLE: ServiceUnavailableError,
}


def _parse_envelope(body: Any) -> ErrorEnvelope:
    if isinstance(body, Mapping):
        try:
            return ErrorEnvelope.model_validate(dict(body))
        except PydanticValidationError:
            logger.warning("Malformed error envelope", keys=sorted(body))
    return ErrorEnvelope()


def translate_response(
    status_code: int,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> AspenResponseException:
    """
    Build the exception for a failed HTTP response.

    Args:
        status_code: HTTP status of the response
        body: Decoded JSON body, raw text or None
        headers: Response headers (used as event id fallback)

    Returns:
        AspenResponseException subclass chosen by status and event id
    """
    envelope = _parse_envelope(body)
    event_id = envelope.event_id
    if event_id is None and headers:
        event_id = {k.lower(): v for k, v in headers.items()}.get(EVENT_ID_HEADER.lower())
    event_id = str(event_id) if event_id is not None else None

    message = envelope.message or httpx.codes.get_reason_phrase(status_code) or f"HTTP {status_code}"

    exc_type = STATUS_EXCEPTIONS.get(status_code, AspenResponseException)
    if exc_type is AuthenticationError and event_id in LOCKOUT_EVENTS:
        exc_type = LockoutError

    logger.debug("Translated error response", status=status_code, event_id=event_id, exc_type=exc_type.__name__)
    return exc_type(message, event_id=event_id, status_code=status_code, content=envelope.extra_content)


def translate_transport_error(exc: Exception) -> AspenResponseException:
    """
    Map transport-level failures to the common exception shape.

    Exceptions already in the Aspen hierarchy are returned unchanged.
    """
    if isinstance(exc, AspenResponseException):
        return exc
    if isinstance(exc, httpx.TimeoutException):
        return TransportTimeoutError(f"Request timed out: {exc}")
    if isinstance(exc, httpx.TransportError):
        return ServiceUnavailableError(f"Failed to connect: {exc}")
    if isinstance(exc, TimeoutError):
        return TransportTimeoutError(f"Request timed out: {exc}")
    return AspenResponseException(f"Unexpected error: {exc}")


def validation_failure(errors: Iterable[FieldError]) -> ValidationError:
    """Aggregate simultaneous field defects into one ValidationError."""
    errors = list(errors)
    message = " ".join(error.message for error in errors)
    return ValidationError(message, event_id=EventId.VALIDATION_FAILED, errors=errors)
