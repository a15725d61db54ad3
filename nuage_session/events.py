"""
Background long-poll loop over ``Session.next_event``.

The listener keeps the cursor (notification uuid) between polls and hands
every notification carrying events to a caller-owned queue.
"""

import queue
import threading

from nuage_session.config import EVENT_RETRY_DELAY, EVENT_STOP_TIMEOUT
from nuage_session.errors import SessionError
from nuage_session.logging_setup import log
from nuage_session.models import Notification
from nuage_session.session import Session


class EventListener:
    """
    Poll ``/events`` in a daemon thread until stopped.

    Usage::

        listener = EventListener(session)
        listener.start()
        notification = listener.channel.get()
        listener.stop()
    """

    def __init__(
        self,
        session: Session,
        channel: "queue.Queue[Notification] | None" = None,
        last_event_id: str = "",
        retry_delay: float = EVENT_RETRY_DELAY,
    ) -> None:
        self.session = session
        self.channel: "queue.Queue[Notification]" = channel if channel is not None else queue.Queue()
        self.last_event_id = last_event_id
        self.retry_delay = retry_delay
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="nuage-events", daemon=True)
        self._thread.start()
        log.info("Event listener started on %s", self.session.url)

    def stop(self, timeout: float | None = EVENT_STOP_TIMEOUT) -> None:
        """
        Ask the loop to stop and wait up to *timeout* seconds for the thread.

        A poll already waiting on the server is not interrupted.  The thread
        is a daemon and exits once that poll returns; ``timeout=None`` waits
        for it, which can block as long as the long-poll itself.
        """
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
        log.info("Event listener stopped")

    def poll_once(self) -> Notification:
        notification = self.session.next_event(self.channel, self.last_event_id)
        if notification.uuid:
            self.last_event_id = notification.uuid
        return notification

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.poll_once()
            except SessionError as exc:
                log.warning("Event poll failed: %s", exc)
                self._stop.wait(self.retry_delay)
