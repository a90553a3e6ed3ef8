"""
Authorized Session
==================
Attaches the auth token to every call and routes failures through the
error translator.
"""

from typing import Any, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

import structlog
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import AspenResponseException, translate_response, translate_transport_error
from ..http import AuthorizedInvoker
from ..identity.models import AuthToken, Scope
from ..signing.signer import APP_KEY_HEADER

T = TypeVar("T", bound=BaseModel)

logger = structlog.get_logger(__name__)


def path_segment(value: Any) -> str:
    """Percent-encode a caller value for use as one URL path segment."""
    return quote(str(value), safe="")


class AuthorizedSession:
    """Token-bearing request channel shared by the resource clients."""

    def __init__(self, invoker: AuthorizedInvoker, api_key: str, token: AuthToken):
        self._invoker = invoker
        self._api_key = api_key
        self._token = token

    @property
    def scope(self) -> Scope:
        return self._token.scope

    @property
    def token(self) -> AuthToken:
        return self._token

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_model: Optional[Type[T]] = None,
        many: bool = False,
    ) -> Union[T, List[T], Any, None]:
        """
        Execute an authorized request.

        Args:
            method: HTTP method
            path: Path relative to the scope base URL
            body: JSON body
            response_model: Pydantic model used to parse the body
            many: Parse the body as a list of response_model

        Returns:
            Parsed model(s), the raw decoded body, or None for empty bodies

        Raises:
            AspenResponseException: For every transport or HTTP failure
        """
        try:
            response = self._invoker.send(
                method,
                path,
                body=body,
                bearer_token=self._token.token,
                headers={APP_KEY_HEADER: self._api_key},
            )
        except AspenResponseException:
            raise
        except Exception as exc:
            logger.warning("Authorized request failed in transport", method=method, path=path, error=str(exc))
            raise translate_transport_error(exc) from exc

        if not response.is_success:
            raise translate_response(response.status_code, response.body, response.headers)

        if response.body is None or response_model is None:
            return response.body

        try:
            if many:
                return TypeAdapter(List[response_model]).validate_python(response.body)
            return response_model.model_validate(response.body)
        except PydanticValidationError as exc:
            logger.error("Unexpected response payload", method=method, path=path, model=response_model.__name__)
            raise AspenResponseException(
                f"Unexpected response payload for {method} {path}",
                status_code=response.status_code,
            ) from exc


class ResourceClient:
    """Base class for the authorized sub-clients."""

    def __init__(self, session: AuthorizedSession):
        self._session = session

    @property
    def scope(self) -> Scope:
        return self._session.scope
