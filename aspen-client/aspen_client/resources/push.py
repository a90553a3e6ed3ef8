"""
Push Resources
==============
"""

from typing import List

from .base import ResourceClient
from .models import PushMessage


class PushClient(ResourceClient):
    """Push messages already delivered to the current user."""

    def get_messages(self) -> List[PushMessage]:
        return self._session.request("GET", "/push/messages", response_model=PushMessage, many=True) or []
