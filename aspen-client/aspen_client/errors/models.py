"""
Error Models
============
Field-level defects and the wire error envelope.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class FieldError:
    """A single defect detected in one named field."""
    field: str
    message: str


class ErrorEnvelope(BaseModel):
    """JSON body returned by Aspen on failure.

    Only ``eventId`` and ``message`` are interpreted, every other key is
    kept as extra content.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    event_id: Optional[Union[str, int]] = Field(default=None, alias="eventId")
    message: Optional[str] = None

    @property
    def extra_content(self) -> Optional[Dict[str, Any]]:
        extra = dict(self.model_extra or {})
        return extra or None
