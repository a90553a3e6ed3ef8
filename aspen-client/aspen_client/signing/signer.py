"""
Request Signer
==============
Builds the signed authentication envelope for a sign-in attempt.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import jwt
import structlog

from ..config import ValidationConfig
from ..errors import validation_failure
from ..identity.models import Scope
from ..identity.validator import check_nonce
from ..settings import Settings

logger = structlog.get_logger(__name__)

SIGNATURE_ALGORITHM = "HS256"

# Wire headers
APP_KEY_HEADER = "X-PRO-Auth-App"
PAYLOAD_HEADER = "X-PRO-Auth-Payload"


@dataclass(frozen=True)
class SignedEnvelope:
    """Signed material for exactly one authentication attempt."""
    nonce: str
    epoch: int
    scope: Scope
    payload: Mapping[str, Any] = field(repr=False)
    api_key: str
    signature: str = field(repr=False)

    def headers(self) -> Dict[str, str]:
        """Headers carrying the envelope on the wire."""
        return {
            APP_KEY_HEADER: self.api_key,
            PAYLOAD_HEADER: self.signature,
        }


def compute_signature(secret: str, claims: Mapping[str, Any]) -> str:
    """
    Sign the claims with the application secret.

    Args:
        secret: Application secret shared with Aspen
        claims: Nonce, Epoch and identity fields

    Returns:
        Compact HS256 JWT
    """
    return jwt.encode(dict(claims), secret, algorithm=SIGNATURE_ALGORITHM)


class RequestSigner:
    """Draws a nonce and an epoch and signs the identity payload."""

    def __init__(self, api_key: str, api_secret: str, config: Optional[ValidationConfig] = None):
        self._api_key = api_key
        self._api_secret = api_secret
        self.config = config or ValidationConfig()

    def sign(self, settings: Settings, payload: Optional[Mapping[str, Any]] = None) -> SignedEnvelope:
        """
        Sign a payload using one nonce and one epoch from the settings.

        Epochs are never rejected locally; freshness is judged by the
        service.

        Raises:
            ValidationError: If the nonce is blank or malformed
        """
        nonce = settings.nonce_generator.next()
        epoch = settings.epoch_generator.next()

        error = check_nonce(nonce, self.config.nonce_pattern)
        if error:
            logger.warning("Nonce rejected before signing", scope=settings.scope.value, reason=error.message)
            raise validation_failure([error])

        claims = {"Nonce": nonce, "Epoch": int(epoch), **dict(payload or {})}
        signature = compute_signature(self._api_secret, claims)

        logger.debug("Request signed", scope=settings.scope.value, epoch=epoch)
        return SignedEnvelope(
            nonce=nonce,
            epoch=int(epoch),
            scope=settings.scope,
            payload=dict(payload or {}),
            api_key=self._api_key,
            signature=signature,
        )
