"""
Concrete resource base classes.

Payload decoding is explicit: ``load_payload`` accepts either a bare JSON
object or a one-element JSON list, which is how the controller answers
single-resource requests.
"""

from typing import Any, Iterable

from ..errors import SessionError
from .identity import Identifiable, Identity, Rootable

# python attribute -> remote key, shared by every resource
_COMMON_ATTRIBUTES = {
    "id":                "ID",
    "parent_id":         "parentID",
    "parent_type":       "parentType",
    "owner":             "owner",
    "creation_date":     "creationDate",
    "last_updated_date": "lastUpdatedDate",
}


def _single(payload: Any) -> dict:
    if isinstance(payload, list):
        if len(payload) != 1:
            raise SessionError("", f"Expected a single object, got a list of {len(payload)}")
        payload = payload[0]
    if not isinstance(payload, dict):
        raise SessionError("", f"Expected a JSON object, got {type(payload).__name__}")
    return payload


class RemoteObject(Identifiable):
    """
    Base class for every resource reachable through a session.

    Subclasses set ``identity`` and declare their own attributes in
    ``ATTRIBUTES``::

        class Enterprise(RemoteObject):
            identity = Identity(name="enterprise", category="enterprises")
            ATTRIBUTES = {"name": "name", "description": "description"}
    """

    identity: Identity = Identity(name="object", category="objects")
    ATTRIBUTES: dict[str, str] = {}

    def __init__(self, **kwargs: Any) -> None:
        for attr in self._attribute_map():
            setattr(self, attr, None)
        self.id = ""
        self.extra: dict[str, Any] = {}
        for attr, value in kwargs.items():
            if attr not in self._attribute_map():
                raise TypeError(f"{type(self).__name__} has no attribute {attr!r}")
            setattr(self, attr, value)

    @classmethod
    def _attribute_map(cls) -> dict[str, str]:
        mapping = dict(_COMMON_ATTRIBUTES)
        for klass in reversed(cls.__mro__):
            mapping.update(klass.__dict__.get("ATTRIBUTES", {}))
        return mapping

    @property
    def identifier(self) -> str:
        return self.id or ""

    # ------------------------------------------------------------------
    # JSON mapping
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.extra)
        for attr, remote in self._attribute_map().items():
            value = getattr(self, attr)
            if attr == "id" and not value:
                value = None
            data[remote] = value
        return data

    def from_dict(self, data: dict[str, Any]) -> "RemoteObject":
        """Update attributes from a remote JSON object."""
        by_remote = {remote: attr for attr, remote in self._attribute_map().items()}
        for key, value in data.items():
            attr = by_remote.get(key)
            if attr is None:
                self.extra[key] = value
            else:
                if attr == "id":
                    value = value or ""
                setattr(self, attr, value)
        return self

    def load_payload(self, payload: Any) -> "RemoteObject":
        return self.from_dict(_single(payload))

    @classmethod
    def build(cls, data: dict[str, Any]) -> "RemoteObject":
        return cls().from_dict(data)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.identity.category} id={self.id!r}>"


class RootObject(RemoteObject, Rootable):
    """The authenticated user (``/me``), carrier of the API key."""

    identity = Identity(name="me", category="me")
    ATTRIBUTES = {
        "api_key":         "APIKey",
        "user_name":       "userName",
        "enterprise_id":   "enterpriseID",
        "enterprise_name": "enterpriseName",
        "role":            "role",
    }

    @property
    def api_key(self) -> str:
        return self._api_key or ""

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._api_key = value


class Children(list):
    """
    Destination collection for ``Session.fetch_children``.

    ``load_payload`` replaces the content with instances of
    ``resource_class`` built from a JSON list.
    """

    def __init__(self, resource_class: type[RemoteObject], items: Iterable[RemoteObject] = ()):
        super().__init__(items)
        self.resource_class = resource_class

    @property
    def identity(self) -> Identity:
        return self.resource_class.identity

    def load_payload(self, payload: Any) -> "Children":
        if isinstance(payload, dict):
            payload = [payload]
        if not isinstance(payload, list):
            raise SessionError("", f"Expected a JSON list, got {type(payload).__name__}")
        self[:] = [self.resource_class.build(_single(item)) for item in payload]
        return self


_GENERIC_CLASSES: dict[str, type[RemoteObject]] = {}


def resource_class(category: str, name: str | None = None) -> type[RemoteObject]:
    """Return a generic RemoteObject subclass bound to *category*."""
    if category not in _GENERIC_CLASSES:
        rest_name = name or category.rstrip("s")
        class_name = "".join(part.capitalize() for part in rest_name.split("_")) or "Resource"
        _GENERIC_CLASSES[category] = type(
            class_name,
            (RemoteObject,),
            {"identity": Identity(name=rest_name, category=category), "ATTRIBUTES": {}},
        )
    return _GENERIC_CLASSES[category]
