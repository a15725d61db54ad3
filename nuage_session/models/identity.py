"""
Identity and capability abstractions for REST resources.

* ``Identity``      – the REST category (collection path segment) of a
  resource type and its name (path segment when used as the root).
* ``Identifiable``  – anything with an ``identity`` and an ``identifier``.
* ``Rootable``      – an Identifiable that also holds the API key obtained
  by authentication.  The session addresses it directly under the base URL.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Identity:
    name: str
    category: str


class Identifiable(ABC):
    """A resource the session can address."""

    @property
    @abstractmethod
    def identity(self) -> Identity:
        ...

    @property
    @abstractmethod
    def identifier(self) -> str:
        """Server-assigned ID, empty until the resource has been created."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """JSON body sent on save and create."""

    @abstractmethod
    def load_payload(self, payload: Any) -> "Identifiable":
        """Update from a response body: a bare object or a one-element list."""


class Rootable(Identifiable):
    """The top-level authenticated resource."""

    @property
    @abstractmethod
    def api_key(self) -> str:
        ...

    @api_key.setter
    @abstractmethod
    def api_key(self, value: str) -> None:
        ...
