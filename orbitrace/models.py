"""Models for telemetry events."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class EventKind(str, Enum):
    """Kinds of events accepted by the collection endpoint."""

    CAPTURE_EXCEPTION = "capture_exception"
    CAPTURE_MESSAGE = "capture_message"


class Event(BaseModel):
    """A single telemetry event, built per capture call and never stored."""

    kind: EventKind
    message: str
    stack: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_body(self) -> Dict[str, Any]:
        """Build the JSON request body sent to the endpoint."""
        payload: Dict[str, Any] = {"message": self.message}
        if self.stack is not None:
            payload["stack"] = self.stack
        payload["metadata"] = self.metadata
        return {"event": self.kind.value, "payload": payload}
