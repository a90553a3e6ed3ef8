"""
Identity Models
===============
Scopes, identity payloads and the tokens issued for them.
"""

import hashlib
import platform
import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class Scope(str, Enum):
    """Authorization domain requested by a client."""
    DELEGATED = "Delegated"      # Acting on behalf of an end user
    AUTONOMOUS = "Autonomous"    # Application acting for itself


def default_device_id() -> str:
    """Stable identifier for the current machine."""
    node = f"{platform.node()}:{uuid.getnode()}"
    return hashlib.sha256(node.encode()).hexdigest()[:32]


@dataclass
class DelegatedUserInfo:
    """
    Credentials of an end user for a delegated sign-in.

    Fields map to the wire names ``DeviceId``, ``DocType``, ``DocNumber``
    and ``Password``. Item assignment by wire name overrides a field with an
    arbitrary value, which is how intentionally invalid payloads are built.
    """
    doc_type: Optional[str] = None
    doc_number: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    device_id: Optional[str] = None

    WIRE_NAMES = {
        "device_id": "DeviceId",
        "doc_type": "DocType",
        "doc_number": "DocNumber",
        "password": "Password",
    }

    @classmethod
    def create(
        cls,
        doc_type: str,
        doc_number: str,
        password: str,
        device_id: Optional[str] = None,
    ) -> "DelegatedUserInfo":
        """Build a payload filling the device id for the current machine."""
        return cls(
            doc_type=doc_type,
            doc_number=doc_number,
            password=password,
            device_id=device_id or default_device_id(),
        )

    def _resolve(self, key: str) -> str:
        lowered = key.lower()
        for attr, wire_name in self.WIRE_NAMES.items():
            if lowered in (wire_name.lower(), attr):
                return attr
        raise KeyError(key)

    def __getitem__(self, key: str) -> Optional[str]:
        return getattr(self, self._resolve(key))

    def __setitem__(self, key: str, value: Any) -> None:
        setattr(self, self._resolve(key), value)

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation keyed by the case-preserved field names."""
        return {self.WIRE_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class AuthToken:
    """Bearer credential issued by a successful sign-in."""
    token: str = field(repr=False)
    scope: Scope
    expires_at: Optional[datetime] = None


@dataclass(frozen=True)
class UserAuthToken(AuthToken):
    """Token issued for a delegated end-user identity."""
    device_id: Optional[str] = None
    username: Optional[str] = None


@dataclass(frozen=True)
class AppAuthToken(AuthToken):
    """Token issued for an autonomous application identity."""
