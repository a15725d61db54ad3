"""Event notifications returned by the ``/events`` long-poll endpoint."""

from dataclasses import dataclass, field
from typing import Any

from ..errors import SessionError


@dataclass
class Notification:
    uuid: str = ""
    events: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "Notification":
        """
        Decode ``{"uuid": "...", "events": [...]}``.

        ``uuid`` is the cursor to send back on the next poll.  Event records
        are kept verbatim.
        """
        if not isinstance(payload, dict):
            raise SessionError("", f"Expected a JSON object, got {type(payload).__name__}")
        events = payload.get("events") or []
        if not isinstance(events, list):
            raise SessionError("", "Notification 'events' is not a list")
        return cls(uuid=payload.get("uuid") or "", events=events)
