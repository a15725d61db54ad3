"""
nuage_session.session
=====================
Authenticated session against the controller REST API.

Responsibilities
----------------
* Resolve resource URLs from the parent/child hierarchy:
  ``<url>/<category>``, ``<url>/<category>/<id>``, ``<url>/<root name>``
  and ``<parent personal url>/<child category>``.
* Attach XREST (password mode) authentication and X-Nuage-* pagination
  headers; certificate mode relies on the transport's client certificate.
* Dispatch and classify responses: 2xx succeeds, 300 is resubmitted once
  with ``responseChoice=1``, 404/409 carry a structured error payload,
  anything else fails with the HTTP status text.
* CRUD operations and the ``/events`` long-poll.
"""

import json
import queue
from typing import Any

import requests

from nuage_session.auth.headers import make_authorization_header
from nuage_session.config import (
    DEFAULT_PAGE_SIZE,
    ERROR_BODY_STATUSES,
    EVENTS_PATH,
    EVENTS_TIMEOUT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_ORGANIZATION,
    HEADER_PAGE_SIZE,
    JSON_CONTENT_TYPE,
    MAX_CHOICE_RESUBMISSIONS,
    MULTIPLE_CHOICES,
    REQUEST_TIMEOUT,
    RESPONSE_CHOICE,
    SUCCESS_STATUSES,
)
from nuage_session.context import current_session, set_current_session
from nuage_session.errors import SessionError
from nuage_session.logging_setup import log
from nuage_session.models import FetchingInfo, Identifiable, Identity, Notification, Rootable
from nuage_session.network.client import Certificate, build_session

# send() timeout placeholder: use the session default
_SESSION_TIMEOUT = object()


class Session:
    """
    A user session – the whole communication layer with the controller.

    Two authentication modes:

    * user + password (+ organization)::

        session = Session("csproot", "csproot", "csp", url, RootObject())

    * TLS client certificate::

        session = Session.from_certificate(("cert.pem", "key.pem"), url, RootObject())
    """

    def __init__(
        self,
        username: str,
        password: str,
        organization: str,
        url: str,
        root: Rootable,
        *,
        verify_ssl: bool = True,
        timeout: float | None = REQUEST_TIMEOUT,
        events_timeout: float | None = EVENTS_TIMEOUT,
        retries: int = 0,
        cert: Certificate | None = None,
    ) -> None:
        self.username = username
        self.password = password
        self.organization = organization
        self.certificate = cert
        self.url = url.rstrip("/")
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.events_timeout = events_timeout
        self._root = root
        self.http = build_session(verify_ssl=verify_ssl, cert=cert, retries=retries)

    @classmethod
    def from_certificate(
        cls,
        cert: Certificate,
        url: str,
        root: Rootable,
        **kwargs: Any,
    ) -> "Session":
        """Return a session authenticated by a TLS client certificate."""
        return cls("", "", "", url, root, cert=cert, **kwargs)

    @property
    def root(self) -> Rootable:
        return self._root

    def __repr__(self) -> str:
        mode = "certificate" if self.certificate else f"user={self.username!r}"
        return f"<Session {self.url} {mode}>"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> "Session":
        """
        Register as the current session and authenticate by fetching the
        root object, which populates its API key.
        """
        set_current_session(self)
        log.info("Starting session on %s", self.url)
        self.fetch(self._root)
        log.info("Session started (%s)", "certificate" if self.certificate else self.username)
        return self

    def reset(self) -> None:
        """Forget the API key and unregister as the current session."""
        self._root.api_key = ""
        if current_session() is self:
            set_current_session(None)
        log.info("Session reset on %s", self.url)

    def __enter__(self) -> "Session":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.reset()

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def _prepare_headers(self, info: FetchingInfo | None = None) -> dict[str, str]:
        headers = {
            HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
            HEADER_PAGE_SIZE: str(DEFAULT_PAGE_SIZE),
        }
        if not self.certificate:
            headers[HEADER_AUTHORIZATION] = make_authorization_header(
                self.username, self.password, self._root
            )
            headers[HEADER_ORGANIZATION] = self.organization or ""
        if info is not None:
            info.apply_to_headers(headers)
        return headers

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def general_url(self, obj: Identifiable) -> str:
        return f"{self.url}/{obj.identity.category}"

    def personal_url(self, obj: Identifiable) -> str:
        if isinstance(obj, Rootable):
            return f"{self.url}/{obj.identity.name}"
        if not obj.identifier:
            raise SessionError("VSD error", "Cannot GetPersonalURL of an object with no ID set")
        return f"{self.general_url(obj)}/{obj.identifier}"

    def children_url(self, parent: Identifiable, identity: Identity) -> str:
        if isinstance(parent, Rootable):
            return f"{self.url}/{identity.category}"
        return f"{self.personal_url(parent)}/{identity.category}"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def send(
        self,
        method: str,
        url: str,
        body: Any = None,
        info: FetchingInfo | None = None,
        timeout: Any = _SESSION_TIMEOUT,
    ) -> requests.Response:
        """
        Send one request and classify the response.

        Returns the response for 200/201/204, after copying the pagination
        headers into *info*.  Raises SessionError otherwise.
        """
        headers = self._prepare_headers(info)
        data = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as exc:
                raise SessionError("", str(exc)) from exc

        request_timeout = self.timeout if timeout is _SESSION_TIMEOUT else timeout
        choices = 0
        while True:
            log.debug("%s %s", method, url)
            try:
                response = self.http.request(
                    method, url, data=data, headers=headers, timeout=request_timeout
                )
            except requests.RequestException as exc:
                raise SessionError("", str(exc)) from exc

            log.debug("Response Status: %s %s", response.status_code, response.reason)
            log.debug("Response Headers: %s", dict(response.headers))

            if response.status_code in SUCCESS_STATUSES:
                if info is not None:
                    info.update_from_headers(response.headers)
                return response

            if response.status_code == MULTIPLE_CHOICES and choices < MAX_CHOICE_RESUBMISSIONS:
                choices += 1
                url += ("&" if "?" in url else "?") + RESPONSE_CHOICE
                log.debug("Multiple choices, resubmitting to %s", url)
                continue

            if response.status_code in ERROR_BODY_STATUSES:
                log.debug("Response Body: %s", response.text)
                raise self._server_error(response)

            raise SessionError("", f"{response.status_code} {response.reason}")

    @staticmethod
    def _server_error(response: requests.Response) -> SessionError:
        """Surface the first description of the first error group."""
        try:
            description = response.json()["errors"][0]["descriptions"][0]
            return SessionError(description.get("title", ""), description.get("description", ""))
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as exc:
            return SessionError("", f"Cannot decode error response: {exc}")

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        log.debug("Response Body: %s", response.text)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise SessionError("", str(exc)) from exc

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def fetch(self, obj: Identifiable) -> Identifiable:
        """Fetch *obj* from the server and update it in place."""
        response = self.send("GET", self.personal_url(obj))
        payload = self._decode(response)
        if payload is None:
            raise SessionError("", f"Empty response for {obj.identity.name}")
        obj.load_payload(payload)
        return obj

    def save(self, obj: Identifiable) -> Identifiable:
        """PUT *obj* and refresh it from the echoed body, if any."""
        response = self.send("PUT", self.personal_url(obj), obj.to_dict())
        payload = self._decode(response)
        if payload is not None:
            obj.load_payload(payload)
        return obj

    def delete(self, obj: Identifiable) -> None:
        self.send("DELETE", self.personal_url(obj))

    def fetch_children(
        self,
        parent: Identifiable,
        identity: Identity,
        dest: list,
        info: FetchingInfo | None = None,
    ) -> list:
        """
        Fetch the children of *parent* of type *identity* into *dest*.

        *dest* is a ``Children`` collection, or any list, which is then
        filled with the raw JSON objects.  It is left untouched when the
        server answers 204 or an empty body.
        """
        response = self.send("GET", self.children_url(parent, identity), info=info)
        if response.status_code == 204:
            return dest
        payload = self._decode(response)
        if payload is None:
            return dest
        if hasattr(dest, "load_payload"):
            dest.load_payload(payload)
        else:
            dest[:] = payload if isinstance(payload, list) else [payload]
        return dest

    def create_child(self, parent: Identifiable, child: Identifiable) -> Identifiable:
        """POST *child* under *parent* and update it from the response."""
        response = self.send("POST", self.children_url(parent, child.identity), child.to_dict())
        payload = self._decode(response)
        if payload is not None:
            child.load_payload(payload)
        return child

    def assign_children(
        self,
        parent: Identifiable,
        children: list[Identifiable],
        identity: Identity,
    ) -> None:
        """Replace the *identity* members of *parent* with *children*."""
        url = self.children_url(parent, identity)
        ids = []
        for child in children:
            if not child.identifier:
                raise SessionError("VSD Error", "One of the object to assign has no ID")
            ids.append(child.identifier)
        self.send("PUT", url, ids)

    # Storer names
    fetch_entity = fetch
    save_entity = save
    delete_entity = delete

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def next_event(self, channel: "queue.Queue[Notification]", last_event_id: str = "") -> Notification:
        """
        Long-poll ``/events`` once.

        A notification carrying events is put on *channel*.  The returned
        notification's ``uuid`` is the cursor for the next call.  An empty
        body does not raise: it returns an empty notification that keeps
        *last_event_id* as its cursor.
        """
        url = self.url + EVENTS_PATH
        if last_event_id:
            url += f"?uuid={last_event_id}"

        response = self.send("GET", url, timeout=self.events_timeout)
        payload = self._decode(response)
        if payload is None:
            return Notification(uuid=last_event_id)
        notification = Notification.from_payload(payload)
        if notification.events:
            log.debug("Received %d event(s)", len(notification.events))
            channel.put(notification)
        return notification
