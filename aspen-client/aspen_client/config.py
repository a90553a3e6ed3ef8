"""
Client Configuration
====================
Transport, retry and validation settings with environment overrides.
"""

import os
from dataclasses import dataclass, field
from typing import FrozenSet

DEFAULT_DOC_TYPES = frozenset({"CC", "CE", "NIT", "PAS", "TI"})
DEFAULT_DOC_NUMBER_PATTERN = r"^[0-9]{1,18}$"
DEFAULT_NONCE_PATTERN = r"^[A-Za-z0-9\-]{1,36}$"


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RetryConfig:
    """Opt-in retry for idempotent authorized reads on transport failures."""
    max_attempts: int = 1
    backoff_seconds: float = 0.5
    max_backoff_seconds: float = 5.0


@dataclass(frozen=True)
class ValidationConfig:
    """Recognized document types and the patterns enforced before signing."""
    doc_types: FrozenSet[str] = DEFAULT_DOC_TYPES
    doc_number_pattern: str = DEFAULT_DOC_NUMBER_PATTERN
    nonce_pattern: str = DEFAULT_NONCE_PATTERN

    def __post_init__(self):
        object.__setattr__(self, "doc_types", frozenset(item.strip().upper() for item in self.doc_types))

    @classmethod
    def from_env(cls) -> "ValidationConfig":
        """Build config from ASPEN_* environment variables."""
        raw_doc_types = os.environ.get("ASPEN_DOC_TYPES")
        doc_types = (
            frozenset(item.strip().upper() for item in raw_doc_types.split(",") if item.strip())
            if raw_doc_types
            else DEFAULT_DOC_TYPES
        )
        return cls(
            doc_types=doc_types,
            doc_number_pattern=os.environ.get("ASPEN_DOC_NUMBER_PATTERN", DEFAULT_DOC_NUMBER_PATTERN),
            nonce_pattern=os.environ.get("ASPEN_NONCE_PATTERN", DEFAULT_NONCE_PATTERN),
        )


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the HTTP transport used by the client."""
    timeout: float = 10.0
    verify_ssl: bool = True
    user_agent: str = "Aspen-Python-Client"
    retry: RetryConfig = field(default_factory=RetryConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build config from ASPEN_* environment variables."""
        return cls(
            timeout=float(os.environ.get("ASPEN_TIMEOUT_SECONDS", "10.0")),
            verify_ssl=_env_bool("ASPEN_VERIFY_SSL", True),
            user_agent=os.environ.get("ASPEN_USER_AGENT", "Aspen-Python-Client"),
            retry=RetryConfig(
                max_attempts=int(os.environ.get("ASPEN_RETRY_MAX_ATTEMPTS", "1")),
                backoff_seconds=float(os.environ.get("ASPEN_RETRY_BACKOFF_SECONDS", "0.5")),
            ),
            validation=ValidationConfig.from_env(),
        )
