"""
nuage_session
=============
Client-side session layer for a Nuage-style REST network controller.

Package structure
-----------------
nuage_session/
├── __init__.py       – package init and public API
├── config.py         – header names, defaults, env-var configuration
├── errors.py         – SessionError (title + description)
├── logging_setup.py  – package logger and colorlog setup
├── context.py        – current-session handle (contextvars)
├── session.py        – Session: URLs, auth headers, dispatch, CRUD, events
├── events.py         – EventListener: background /events long-poll
├── cli.py            – argparse CLI (``python -m nuage_session``)
├── auth/             – XREST Authorization header
├── network/          – requests.Session factory
└── models/           – Identity, RemoteObject, FetchingInfo, Notification

Quick start
-----------
    from nuage_session import Session, RootObject, Children, FetchingInfo
    from nuage_session.models import resource_class

    session = Session("csproot", "csproot", "csp",
                      "https://vsd:8443/nuage/api/v6", RootObject())
    session.start()

    enterprises = Children(resource_class("enterprises"))
    session.fetch_children(session.root, enterprises.identity, enterprises,
                           FetchingInfo(page=0, page_size=25))
"""

from .config import build_api_url
from .context import current_session
from .errors import SessionError
from .events import EventListener
from .models import (
    Children,
    FetchingInfo,
    Identifiable,
    Identity,
    Notification,
    RemoteObject,
    RootObject,
    Rootable,
)
from .session import Session

__version__ = "1.0.0"

__all__ = [
    "Children",
    "EventListener",
    "FetchingInfo",
    "Identifiable",
    "Identity",
    "Notification",
    "RemoteObject",
    "RootObject",
    "Rootable",
    "Session",
    "SessionError",
    "build_api_url",
    "current_session",
]
