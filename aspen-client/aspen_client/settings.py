"""
Client Settings
===============
Nonce source, epoch source and requested scope of one client instance.
"""

from dataclasses import dataclass, field

from .identity.models import Scope
from .signing.generators import EpochGenerator, GuidNonceGenerator, NonceGenerator, UnixEpochGenerator


@dataclass(frozen=True)
class Settings:
    """Signing settings owned by a client for its whole lifetime."""
    scope: Scope
    nonce_generator: NonceGenerator = field(default_factory=GuidNonceGenerator)
    epoch_generator: EpochGenerator = field(default_factory=UnixEpochGenerator)

    def __post_init__(self):
        object.__setattr__(self, "scope", Scope(self.scope))

    @classmethod
    def for_scope(cls, scope: Scope) -> "Settings":
        """Default random nonce and current epoch for the scope."""
        return cls(scope=scope)
