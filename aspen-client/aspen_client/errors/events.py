"""
Event Identifiers
=================
Stable event ids returned by the Aspen service, finer grained than the
HTTP status that accompanies them.
"""

from enum import Enum


class EventId(str, Enum):
    """Known Aspen event ids."""
    VALIDATION_FAILED = "15852"
    PIN_POLICY_FAILED = "15860"
    INVALID_PIN = "15862"
    ACTIVATION_CODE_FAILED = "15868"
    SERVICE_UNAVAILABLE = "20100"

    # Sign-in outcomes
    IDENTITY_UNRECOGNIZED = "97412"
    USER_LOCKED = "97413"
    INVALID_CREDENTIAL = "97414"
    USER_LOCKED_OUT = "97415"
    MISSING_CREDENTIAL = "97416"
    MALFORMED_CREDENTIAL = "97417"

    INSUFFICIENT_SCOPE = "1000478"


LOCKOUT_EVENTS = frozenset({EventId.USER_LOCKED.value, EventId.USER_LOCKED_OUT.value})
