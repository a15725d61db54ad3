"""Resource model – identities, remote objects, pagination and notifications."""

from .fetching import FetchingInfo
from .identity import Identifiable, Identity, Rootable
from .notification import Notification
from .remote_object import Children, RemoteObject, RootObject, resource_class

__all__ = [
    "Children",
    "FetchingInfo",
    "Identifiable",
    "Identity",
    "Notification",
    "RemoteObject",
    "RootObject",
    "Rootable",
    "resource_class",
]
