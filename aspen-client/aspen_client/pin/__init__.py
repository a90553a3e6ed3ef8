"""
PIN Policies
============
"""

from .policies import (
    DEFAULT_POLICIES,
    PIN_LENGTH,
    ConsecutivePolicy,
    LengthPolicy,
    NumericPolicy,
    PinPolicy,
    PinPolicyEngine,
    PolicyViolation,
    TwinsPolicy,
)

__all__ = [
    "DEFAULT_POLICIES",
    "PIN_LENGTH",
    "ConsecutivePolicy",
    "LengthPolicy",
    "NumericPolicy",
    "PinPolicy",
    "PinPolicyEngine",
    "PolicyViolation",
    "TwinsPolicy",
]
