"""
Current-session handle.

The most recently started session is kept in a ``ContextVar`` so each
thread or asyncio task sees the session it started, and nothing else.
"""

from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nuage_session.session import Session

_current_session: "ContextVar[Session | None]" = ContextVar("nuage_current_session", default=None)


def current_session() -> "Session | None":
    """Return the active, authenticated session of this context, if any."""
    return _current_session.get()


def set_current_session(session: "Session | None") -> None:
    _current_session.set(session)
