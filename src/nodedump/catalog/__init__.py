"""Reflection catalog interfaces and implementations."""

from .base import Member, NodeFactory, PinTypeResolutionError, PinTypeResolver, ReflectionCatalog
from .in_memory import InMemoryCatalog
from .models import (
    FunctionFlags,
    ParamDirection,
    PinType,
    PropertyFlags,
    ReflectedFunction,
    ReflectedParam,
    ReflectedProperty,
    ReflectedType,
    ReflectionKind,
    TypeRef,
)
from .snapshot import CatalogSnapshotError, load_catalog_snapshot

__all__ = [
    "Member",
    "NodeFactory",
    "PinTypeResolutionError",
    "PinTypeResolver",
    "ReflectionCatalog",
    "InMemoryCatalog",
    "FunctionFlags",
    "ParamDirection",
    "PinType",
    "PropertyFlags",
    "ReflectedFunction",
    "ReflectedParam",
    "ReflectedProperty",
    "ReflectedType",
    "ReflectionKind",
    "TypeRef",
    "CatalogSnapshotError",
    "load_catalog_snapshot",
]
