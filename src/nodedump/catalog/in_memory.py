"""nodedump.catalog.in_memory

In-memory reflection catalog (testing/fixtures, snapshot loading).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .base import Member, PinTypeResolutionError, PinTypeResolver, ReflectionCatalog
from .models import PinType, ReflectedFunction, ReflectedProperty, ReflectedType


class InMemoryCatalog(ReflectionCatalog, PinTypeResolver):
    """A fixed catalog; enumeration order is insertion order."""

    def __init__(self):
        self._types: List[ReflectedType] = []
        self._by_path: Dict[str, ReflectedType] = {}
        self._functions: Dict[str, List[ReflectedFunction]] = {}
        self._properties: Dict[str, List[ReflectedProperty]] = {}

    def add_type(
        self,
        rtype: ReflectedType,
        *,
        functions: Iterable[ReflectedFunction] = (),
        properties: Iterable[ReflectedProperty] = (),
    ) -> ReflectedType:
        if rtype.path in self._by_path:
            raise ValueError(f"Duplicate type path '{rtype.path}'")
        self._types.append(rtype)
        self._by_path[rtype.path] = rtype
        self._functions[rtype.path] = list(functions)
        self._properties[rtype.path] = list(properties)
        return rtype

    def find_type(self, path: str) -> Optional[ReflectedType]:
        return self._by_path.get(str(path or ""))

    def list_types(self) -> Sequence[ReflectedType]:
        return list(self._types)

    def list_functions(self, owner: ReflectedType) -> Sequence[ReflectedFunction]:
        return list(self._functions.get(owner.path, []))

    def list_properties(self, owner: ReflectedType) -> Sequence[ReflectedProperty]:
        return list(self._properties.get(owner.path, []))

    def metadata(self, member: Member, key: str) -> str:
        return str(member.metadata.get(key, "") or "")

    def resolve_pin_type(self, prop: ReflectedProperty) -> PinType:
        if prop.pin_type is None:
            raise PinTypeResolutionError(f"Property '{prop.name}' has no pin type")
        return prop.pin_type
