"""
PIN Policies
============
Composable rules a candidate PIN must satisfy before it is submitted.
The service enforces the same rules again.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Sequence

import structlog

from ..errors import PolicyError

logger = structlog.get_logger(__name__)

PIN_LENGTH = 6


@dataclass(frozen=True)
class PolicyViolation:
    """A PIN rule that was not satisfied."""
    policy: str
    message: str


class PinPolicy(Protocol):
    name: str

    def check(self, pin: str) -> Optional[PolicyViolation]:
        """Return a violation, or None when the PIN satisfies the rule."""


class NumericPolicy:
    name = "numeric"

    def check(self, pin: str) -> Optional[PolicyViolation]:
        if not pin.isdigit() or not pin.isascii():
            return PolicyViolation(self.name, "Pin debe contener únicamente dígitos")
        return None


class LengthPolicy:
    name = "length"

    def __init__(self, length: int = PIN_LENGTH):
        self.length = length

    def check(self, pin: str) -> Optional[PolicyViolation]:
        if len(pin) != self.length:
            return PolicyViolation(self.name, "Pin es muy largo o muy corto")
        return None


class ConsecutivePolicy:
    """Rejects strictly ascending or descending runs such as 123456 or 654321."""
    name = "consecutive"

    def check(self, pin: str) -> Optional[PolicyViolation]:
        if len(pin) < 2 or not pin.isdigit():
            return None
        steps = {int(b) - int(a) for a, b in zip(pin, pin[1:])}
        if steps == {1} or steps == {-1}:
            return PolicyViolation(self.name, "Por favor utilice caracteres que no sean consecutivos")
        return None


class TwinsPolicy:
    """Rejects PINs made of a single repeated digit such as 111111."""
    name = "twins"

    def check(self, pin: str) -> Optional[PolicyViolation]:
        if len(pin) > 1 and len(set(pin)) == 1:
            return PolicyViolation(self.name, "Por favor utilice caracteres que no sean iguales")
        return None


DEFAULT_POLICIES: Sequence[PinPolicy] = (
    NumericPolicy(),
    LengthPolicy(),
    ConsecutivePolicy(),
    TwinsPolicy(),
)


class PinPolicyEngine:
    """Evaluates a PIN against every configured policy."""

    def __init__(self, policies: Optional[Iterable[PinPolicy]] = None):
        self.policies = tuple(policies) if policies is not None else tuple(DEFAULT_POLICIES)

    def check(self, pin: str) -> List[PolicyViolation]:
        """List every violated policy."""
        violations = []
        for policy in self.policies:
            violation = policy.check(pin)
            if violation:
                violations.append(violation)
        return violations

    def evaluate(self, pin: str) -> None:
        """
        Raise at the first violated policy.

        Raises:
            PolicyError: event 15860 with the policy message
        """
        for policy in self.policies:
            violation = policy.check(pin)
            if violation:
                logger.info("PIN rejected by policy", policy=violation.policy)
                raise PolicyError(violation.message)
