"""
Nonce and Epoch Generators
==========================
Interchangeable value sources for anti-replay material and timestamps.
"""

import time
import uuid
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class NonceGenerator(Protocol):
    """Source of single-use values included in signed requests."""

    def next(self) -> Optional[str]:
        """Return the next nonce."""


@runtime_checkable
class EpochGenerator(Protocol):
    """Source of the timestamp accompanying a signed request."""

    def next(self) -> int:
        """Return the next epoch in Unix seconds."""


class GuidNonceGenerator:
    """Random GUID nonces (default)."""

    def next(self) -> str:
        return str(uuid.uuid4())


class SingleUseNonceGenerator:
    """
    Yields a fixed nonce exactly once.

    Later draws return None, so a reused generator is reported as a
    missing nonce instead of silently replaying the value.
    """

    def __init__(self, nonce: str):
        self._nonce: Optional[str] = nonce

    @property
    def exhausted(self) -> bool:
        return self._nonce is None

    def next(self) -> Optional[str]:
        nonce, self._nonce = self._nonce, None
        return nonce


class NullEmptyNonceGenerator:
    """Always yields a blank nonce (None, empty or whitespace)."""

    def __init__(self, value: Optional[str] = None):
        self._value = value

    def next(self) -> Optional[str]:
        return self._value


class UnixEpochGenerator:
    """Current time in Unix seconds (default)."""

    def next(self) -> int:
        return int(time.time())


class FutureEpochGenerator:
    """Epochs shifted into the future, for clock-skew tests."""

    def __init__(self, offset_seconds: int = 3600):
        self.offset_seconds = offset_seconds

    def next(self) -> int:
        return int(time.time()) + self.offset_seconds


class FixedEpochGenerator:
    """Always yields the same epoch."""

    def __init__(self, epoch: int):
        self.epoch = epoch

    def next(self) -> int:
        return self.epoch
