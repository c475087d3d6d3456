"""nodedump.catalog.base

Collaborator interfaces (host reflection, pin typing, scratch nodes).

The extractor never walks a global registry: callers inject these.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Union

from ..core.models import PinDescriptor
from .models import PinType, ReflectedFunction, ReflectedProperty, ReflectedType

Member = Union[ReflectedFunction, ReflectedProperty]


class PinTypeResolutionError(LookupError):
    """Raised when a member's pin type cannot be derived."""


class ReflectionCatalog(ABC):
    @abstractmethod
    def list_types(self) -> Sequence[ReflectedType]: ...

    @abstractmethod
    def list_functions(self, owner: ReflectedType) -> Sequence[ReflectedFunction]: ...

    @abstractmethod
    def list_properties(self, owner: ReflectedType) -> Sequence[ReflectedProperty]: ...

    @abstractmethod
    def metadata(self, member: Member, key: str) -> str: ...


class PinTypeResolver(ABC):
    @abstractmethod
    def resolve_pin_type(self, prop: ReflectedProperty) -> PinType: ...


class NodeFactory(ABC):
    """Creates transient nodes that populate their own pins."""

    @abstractmethod
    def instantiate(self, member_ref: Any) -> Any: ...

    @abstractmethod
    def populate_pins(self, handle: Any) -> List[PinDescriptor]: ...

    @abstractmethod
    def dispose(self, handle: Any) -> None: ...
