"""
Identity Validator
==================
Field-level validation of identity payloads, run before any request is
signed or sent.
"""

import re
from typing import Any, List, Mapping, Optional

import structlog

from ..config import ValidationConfig
from ..errors import FieldError, validation_failure

logger = structlog.get_logger(__name__)


def required_message(field_name: str) -> str:
    return f"'{field_name}' no puede ser nulo ni vacío."


def pattern_message(field_name: str, pattern: str) -> str:
    return f"'{field_name}' debe coincidir con el patrón '{pattern}'."


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def check_required(payload: Mapping[str, Any], field_name: str) -> Optional[FieldError]:
    if is_blank(payload.get(field_name)):
        return FieldError(field_name, required_message(field_name))
    return None


def check_nonce(nonce: Any, pattern: str) -> Optional[FieldError]:
    """
    Validate a nonce drawn from a generator.

    Args:
        nonce: Value returned by the nonce generator
        pattern: Regular expression the nonce must fully match

    Returns:
        FieldError if the nonce is blank or malformed, None otherwise
    """
    if is_blank(nonce):
        return FieldError("Nonce", required_message("Nonce"))
    if not re.fullmatch(pattern, str(nonce)):
        return FieldError("Nonce", pattern_message("Nonce", pattern))
    return None


class IdentityValidator:
    """Validates delegated identity payloads keyed by wire field name."""

    REQUIRED_FIELDS = ("DeviceId", "DocType", "DocNumber", "Password")

    def __init__(self, config: Optional[ValidationConfig] = None):
        self.config = config or ValidationConfig()

    def validate(self, payload: Mapping[str, Any]) -> List[FieldError]:
        """
        Collect every defect of the payload.

        Args:
            payload: Identity fields keyed by wire name

        Returns:
            List of field errors, empty when the payload is valid
        """
        errors: List[FieldError] = []
        for field_name in self.REQUIRED_FIELDS:
            error = check_required(payload, field_name)
            if error:
                errors.append(error)
                continue

            value = str(payload[field_name]).strip()
            if field_name == "DocType" and value.upper() not in self.config.doc_types:
                errors.append(FieldError(field_name, f"'{value}' no se reconoce como un tipo de identificación."))
            elif field_name == "DocNumber" and not re.fullmatch(self.config.doc_number_pattern, value):
                errors.append(FieldError(field_name, pattern_message(field_name, self.config.doc_number_pattern)))

        if errors:
            logger.info("Identity payload rejected", fields=[error.field for error in errors])
        return errors

    def validate_or_raise(self, payload: Mapping[str, Any]) -> None:
        errors = self.validate(payload)
        if errors:
            raise validation_failure(errors)


def require_values(values: Mapping[str, Any]) -> None:
    """
    Fail fast when any named argument is blank.

    Args:
        values: Argument values keyed by wire field name

    Raises:
        ValidationError: Listing every blank field
    """
    errors = [error for error in (check_required(values, name) for name in values) if error]
    if errors:
        raise validation_failure(errors)
