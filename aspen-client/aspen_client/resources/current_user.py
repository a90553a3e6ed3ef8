"""
Current User Resources
======================
Activation codes and the transactional PIN of the signed-in user.

Setting a PIN for the first time is gated by a one-time activation code.
Updating it requires the current PIN; once changed, the old value no
longer identifies the credential slot and the service answers 404.
"""

from typing import Any, Dict, Optional

import structlog

from ..identity.validator import require_values
from ..pin import PinPolicyEngine
from .base import AuthorizedSession, ResourceClient

logger = structlog.get_logger(__name__)


class CurrentUserClient(ResourceClient):

    def __init__(self, session: AuthorizedSession, pin_engine: Optional[PinPolicyEngine] = None):
        super().__init__(session)
        self.pin_engine = pin_engine or PinPolicyEngine()

    def request_activation_code(self) -> Optional[Dict[str, Any]]:
        """
        Ask the service to deliver an activation code to the user.

        Raises:
            ServiceUnavailableError: If the delivery channel is unavailable (20100)
        """
        result = self._session.request("POST", "/activationcode")
        logger.info("Activation code requested")
        return result

    def set_pin(self, pin_number: Optional[str], activation_code: Optional[str], validate: bool = True) -> None:
        """
        Set the transactional PIN using an activation code.

        Args:
            pin_number: New six digit PIN
            activation_code: Code previously delivered to the user
            validate: Run the local checks before calling the service

        Raises:
            ValidationError: A required argument is missing (15852)
            PolicyError: The PIN violates a policy (15860)
            PreconditionError: The activation code was rejected (15868)
        """
        if validate:
            require_values({"PinNumber": pin_number, "ActivationCode": activation_code})
            self.pin_engine.evaluate(pin_number)

        self._session.request("PUT", "/pin", body={"PinNumber": pin_number, "ActivationCode": activation_code})
        logger.info("PIN set")

    def update_pin(self, current_pin: Optional[str], new_pin: Optional[str], validate: bool = True) -> None:
        """
        Replace the current PIN.

        Raises:
            ValidationError: A required argument is missing (15852)
            PolicyError: The new PIN violates a policy (15860)
            NotFoundError: The current PIN no longer identifies a PIN slot
        """
        if validate:
            require_values({"CurrentPinNumber": current_pin, "NewPinNumber": new_pin})
            self.pin_engine.evaluate(new_pin)

        self._session.request("PATCH", "/pin", body={"CurrentPinNumber": current_pin, "NewPinNumber": new_pin})
        logger.info("PIN updated")

    def request_single_use_token(self) -> Optional[Dict[str, Any]]:
        """Ask the service to deliver a single-use token to the user."""
        return self._session.request("POST", "/tokens/send")
