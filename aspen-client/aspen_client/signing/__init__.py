"""
Request Signing
===============
Pluggable nonce/epoch sources and the signed authentication envelope.
"""

from .generators import (
    EpochGenerator,
    FixedEpochGenerator,
    FutureEpochGenerator,
    GuidNonceGenerator,
    NonceGenerator,
    NullEmptyNonceGenerator,
    SingleUseNonceGenerator,
    UnixEpochGenerator,
)

__all__ = [
    "EpochGenerator",
    "FixedEpochGenerator",
    "FutureEpochGenerator",
    "GuidNonceGenerator",
    "NonceGenerator",
    "NullEmptyNonceGenerator",
    "SingleUseNonceGenerator",
    "UnixEpochGenerator",
]
