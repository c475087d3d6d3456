"""TypeCatalogWalker: enumerate exposable members of an injected catalog."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from ..catalog.base import Member, ReflectionCatalog
from ..catalog.models import (
    FunctionFlags,
    PropertyFlags,
    ReflectedFunction,
    ReflectedProperty,
    ReflectedType,
)
from ..core.config import DumpConfig
from ..logging import get_logger

logger = get_logger(__name__)

_CALLABLE = FunctionFlags.CALLABLE | FunctionFlags.PURE


class TypeCatalogWalker:
    def __init__(self, catalog: ReflectionCatalog, *, config: Optional[DumpConfig] = None):
        self._catalog = catalog
        self._config = config or DumpConfig()

    def is_synthetic(self, rtype: ReflectedType) -> bool:
        return str(rtype.name or "").startswith(tuple(self._config.synthetic_type_prefixes))

    def _declared_on(self, member: Member, rtype: ReflectedType) -> bool:
        owner = str(member.owner or "").strip()
        if not owner:
            # Catalog inconsistency: nothing to attribute the member to.
            logger.warning("Skipping member without owner", member=member.name, type=rtype.path)
            return False
        return owner == rtype.path

    def include_function(self, func: ReflectedFunction) -> bool:
        if func.has_any(_CALLABLE):
            return True
        if func.has_any(FunctionFlags.EVENT):
            return self._config.reserved_event_marker not in func.name
        return False

    def include_property(self, prop: ReflectedProperty) -> bool:
        if not prop.has_any(PropertyFlags.VISIBLE):
            return False
        return not prop.has_any(PropertyFlags.DEPRECATED)

    def enumerate(self) -> Iterator[Tuple[ReflectedType, Member]]:
        """Yield `(owner_type, member)` in catalog order.

        Per type: functions first, then properties, each in discovery order.
        """
        for rtype in self._catalog.list_types():
            if self.is_synthetic(rtype):
                logger.debug("Skipping synthetic type", type=rtype.name)
                continue
            for func in self._catalog.list_functions(rtype):
                if not self._declared_on(func, rtype):
                    continue
                if self.include_function(func):
                    yield rtype, func
            for prop in self._catalog.list_properties(rtype):
                if not self._declared_on(prop, rtype):
                    continue
                if self.include_property(prop):
                    yield rtype, prop
