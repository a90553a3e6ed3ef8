"""
Authorized Invoker
==================
Transport seam of the client: sends one request with an optional bearer
token and returns the decoded response. Status handling is left to the
caller; transport failures propagate as httpx exceptions.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

import httpx
from tenacity import before_sleep_log, retry_if_exception_type, stop_after_attempt, wait_exponential, Retrying

from ..config import ClientConfig

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


@dataclass(frozen=True)
class InvokerResponse:
    """Status, decoded body and headers of one response."""
    status_code: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class AuthorizedInvoker(Protocol):
    """Sends requests on behalf of the client."""

    def send(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        bearer_token: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> InvokerResponse:
        """Send one request and return the response, whatever its status."""


def decode_body(response: httpx.Response) -> Any:
    """JSON body when possible, raw text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


class HttpxInvoker:
    """
    Synchronous invoker backed by ``httpx.Client``.

    Features:
    - Connection pooling per base URL.
    - Bearer token and JSON body handling.
    - Opt-in retries of idempotent requests on transport errors.
    """

    def __init__(
        self,
        base_url: str,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.config = config or ClientConfig()
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            transport=transport,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "application/json",
            },
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()

    def __enter__(self) -> "HttpxInvoker":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _build_headers(self, bearer_token: Optional[str], headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        merged = dict(headers or {})
        if bearer_token:
            merged["Authorization"] = f"Bearer {bearer_token}"
        return merged

    def _send_once(self, method: str, path: str, body: Any, headers: Dict[str, str]) -> InvokerResponse:
        response = self.client.request(method, path, json=body, headers=headers)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return InvokerResponse(
            status_code=response.status_code,
            body=decode_body(response),
            headers=dict(response.headers),
        )

    def send(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        bearer_token: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> InvokerResponse:
        method = method.upper()
        request_headers = self._build_headers(bearer_token, headers)
        retry_config = self.config.retry
        if method not in IDEMPOTENT_METHODS or retry_config.max_attempts <= 1:
            return self._send_once(method, path, body, request_headers)

        retrying = Retrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(retry_config.max_attempts),
            wait=wait_exponential(
                multiplier=retry_config.backoff_seconds,
                max=retry_config.max_backoff_seconds,
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(self._send_once, method, path, body, request_headers)
