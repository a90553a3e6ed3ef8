"""
Tests for error translation.
"""

import httpx
import pytest

from aspen_client import (
    AspenResponseException,
    AuthenticationError,
    InternalError,
    LockoutError,
    NotFoundError,
    PreconditionError,
    ServiceUnavailableError,
    TransportTimeoutError,
    ValidationError,
)
from aspen_client.errors import FieldError, translate_response, translate_transport_error, validation_failure


class TestTranslateResponse:
    """Tests for mapping HTTP failures to exceptions."""

    @pytest.mark.parametrize("status,exc_type", [
        (400, ValidationError),
        (401, AuthenticationError),
        (404, NotFoundError),
        (417, PreconditionError),
        (500, InternalError),
        (503, ServiceUnavailableError),
    ])
    def test_status_selects_exception_type(self, status, exc_type):
        """Should pick the exception type from the HTTP status."""
        exc = translate_response(status, {"eventId": "1", "message": "boom"})

        assert type(exc) is exc_type
        assert exc.status_code == status
        assert exc.message == "boom"

    def test_numeric_event_id_is_normalized(self):
        """Should expose numeric event ids as strings."""
        exc = translate_response(400, {"eventId": 15852, "message": "'Nonce' no puede ser nulo ni vacío."})

        assert exc.event_id == "15852"

    def test_lockout_events_raise_lockout_error(self):
        """Should distinguish the attempt that caused the lockout."""
        caused = translate_response(401, {"eventId": "97415", "message": "bloqueado"})
        already = translate_response(401, {"eventId": "97413", "message": "bloqueado"})

        assert isinstance(caused, LockoutError) and caused.transitioned
        assert isinstance(already, LockoutError) and not already.transitioned
        assert isinstance(caused, AuthenticationError)

    def test_bodyless_404_uses_reason_phrase(self):
        """Should report 'Not Found' and no event id when the body is empty."""
        exc = translate_response(404, None)

        assert isinstance(exc, NotFoundError)
        assert exc.event_id is None
        assert exc.message == "Not Found"
        assert exc.content is None

    def test_event_id_header_fallback(self):
        """Should read the event id from the response header when the body has none."""
        exc = translate_response(503, None, {"x-pro-response-eventid": "20100"})

        assert exc.event_id == "20100"
        assert exc.message == "Service Unavailable"

    def test_extra_fields_become_read_only_content(self):
        """Domain data beyond eventId and message should be exposed as content."""
        exc = translate_response(
            417,
            {"eventId": "15868", "message": "Código inválido", "remainingTimeLapse": 180, "reason": "Intente de nuevo"},
        )

        assert exc.content == {"remainingTimeLapse": 180, "reason": "Intente de nuevo"}
        assert isinstance(exc.content["remainingTimeLapse"], int)
        with pytest.raises(TypeError):
            exc.content["reason"] = "changed"

    def test_unmapped_status_uses_base_exception(self):
        """Should fall back to the base exception for unmapped statuses."""
        exc = translate_response(409, {"message": "conflict"})

        assert type(exc) is AspenResponseException
        assert exc.status_code == 409

    def test_text_body_is_ignored(self):
        """Should use the reason phrase when the body is not JSON."""
        exc = translate_response(500, "<html>error</html>")

        assert exc.message == "Internal Server Error"


class TestTranslateTransportError:
    """Tests for mapping transport failures."""

    def test_timeout(self):
        """Should map transport timeouts to a 408 error."""
        exc = translate_transport_error(httpx.ReadTimeout("slow"))

        assert isinstance(exc, TransportTimeoutError)
        assert exc.status_code == 408

    def test_connection_failure(self):
        """Should map connection failures to a 503 error."""
        exc = translate_transport_error(httpx.ConnectError("refused"))

        assert type(exc) is ServiceUnavailableError
        assert exc.status_code == 503

    def test_aspen_exception_passes_through(self):
        """Should return Aspen exceptions unchanged."""
        original = NotFoundError("missing")

        assert translate_transport_error(original) is original

    def test_unexpected_error(self):
        """Should wrap unknown errors in the base exception."""
        exc = translate_transport_error(ValueError("bad"))

        assert type(exc) is AspenResponseException
        assert "bad" in exc.message


class TestValidationFailure:
    """Tests for aggregating field errors."""

    def test_messages_are_joined(self):
        """Should aggregate field messages into one 400 error."""
        exc = validation_failure([FieldError("A", "first."), FieldError("B", "second.")])

        assert exc.message == "first. second."
        assert exc.event_id == "15852"
        assert exc.status_code == 400
        assert len(exc.errors) == 2
