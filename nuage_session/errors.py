"""Error type raised by every failing session operation."""

from typing import Any


class SessionError(Exception):
    """
    Failure carrying a ``title`` and a ``description``.

    Used uniformly for missing credentials, missing identifiers, transport
    failures, JSON encode/decode failures and server-reported errors.
    Transport and decode failures have an empty title.
    """

    def __init__(self, title: str = "", description: str = ""):
        super().__init__(f"{title}: {description}" if title else description)
        self.title = title
        self.description = description

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return {"title": self.title, "description": self.description}

    def __repr__(self) -> str:
        return f"SessionError(title={self.title!r}, description={self.description!r})"
