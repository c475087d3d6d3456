"""Catalog snapshots (JSON) -> InMemoryCatalog.

A snapshot is a host catalog exported to JSON so the extractor can run outside
the host process:

    {"types": [{"name": "KismetMathLibrary",
                "path": "/Script/Engine.KismetMathLibrary",
                "kind": "Class",
                "functions": [{"name": "Add_VectorVector",
                               "flags": ["callable", "pure", "static"],
                               "params": [{"name": "A",
                                           "pinType": {"category": "struct",
                                                       "referencedType": "/Script/CoreUObject.Vector"}}]}],
                "properties": []}]}

Shape is validated with pydantic. Referenced type paths are resolved against
the snapshot's own types; paths listed under `"leafTypes"` resolve without a
kind (rendered as the bare path), anything else degrades to no reference.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.models import ContainerShape
from ..logging import get_logger
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

logger = get_logger(__name__)


class CatalogSnapshotError(ValueError):
    """Raised when a catalog snapshot cannot be read or is invalid."""


_FUNCTION_FLAGS = {
    "callable": FunctionFlags.CALLABLE,
    "pure": FunctionFlags.PURE,
    "event": FunctionFlags.EVENT,
    "static": FunctionFlags.STATIC,
}

_PROPERTY_FLAGS = {
    "visible": PropertyFlags.VISIBLE,
    "deprecated": PropertyFlags.DEPRECATED,
    "readonly": PropertyFlags.READ_ONLY,
    "read_only": PropertyFlags.READ_ONLY,
}


def _normalize_flags(raw: Any, known: Dict[str, Any]) -> List[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError("flags must be a list of strings")
    out: List[str] = []
    for f in raw:
        s = str(f or "").strip().lower()
        if not s:
            continue
        if s not in known:
            raise ValueError(f"Unknown flag: {s}")
        out.append(s)
    return out


class _Snapshot(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PinTypeSnapshot(_Snapshot):
    category: str = ""
    subcategory: str = ""
    referenced_type: Optional[str] = Field(default=None, alias="referencedType")
    container: ContainerShape = ContainerShape.NONE
    is_reference: bool = Field(default=False, alias="isReference")
    is_const: bool = Field(default=False, alias="isConst")


class ParamSnapshot(_Snapshot):
    name: str
    pin_type: PinTypeSnapshot = Field(default_factory=PinTypeSnapshot, alias="pinType")
    direction: ParamDirection = ParamDirection.INPUT
    hidden: bool = False
    default_value: str = Field(default="", alias="defaultValue")


class FunctionSnapshot(_Snapshot):
    name: str
    owner: Optional[str] = None
    flags: List[str] = Field(default_factory=list)
    display_name: str = Field(default="", alias="displayName")
    metadata: Dict[str, str] = Field(default_factory=dict)
    params: List[ParamSnapshot] = Field(default_factory=list)

    @field_validator("flags", mode="before")
    @classmethod
    def _flags(cls, v: Any) -> List[str]:
        return _normalize_flags(v, _FUNCTION_FLAGS)


class PropertySnapshot(_Snapshot):
    name: str
    owner: Optional[str] = None
    flags: List[str] = Field(default_factory=list)
    # Absent pin type = unresolvable; the extractor degrades to a placeholder.
    pin_type: Optional[PinTypeSnapshot] = Field(default=None, alias="pinType")
    metadata: Dict[str, str] = Field(default_factory=dict)

    @field_validator("flags", mode="before")
    @classmethod
    def _flags(cls, v: Any) -> List[str]:
        return _normalize_flags(v, _PROPERTY_FLAGS)


class TypeSnapshot(_Snapshot):
    name: str
    path: str
    kind: ReflectionKind = ReflectionKind.CLASS
    functions: List[FunctionSnapshot] = Field(default_factory=list)
    properties: List[PropertySnapshot] = Field(default_factory=list)


class CatalogSnapshot(_Snapshot):
    types: List[TypeSnapshot] = Field(default_factory=list)
    # Referenceable paths the host exports without a reflection kind.
    leaf_types: List[str] = Field(default_factory=list, alias="leafTypes")


def _combine(names: List[str], known: Dict[str, Any], empty: Any) -> Any:
    flags = empty
    for n in names:
        flags |= known[n]
    return flags


def _pin_type(raw: PinTypeSnapshot, kinds: Dict[str, Optional[ReflectionKind]]) -> PinType:
    ref: Optional[TypeRef] = None
    path = str(raw.referenced_type or "").strip()
    if path:
        if path not in kinds:
            logger.debug("Unresolved referenced type", path=path)
        else:
            ref = TypeRef(path=path, kind=kinds[path])
    return PinType(
        category=raw.category,
        subcategory=raw.subcategory,
        referenced=ref,
        container=raw.container,
        is_reference=raw.is_reference,
        is_const=raw.is_const,
    )


def catalog_from_snapshot(snapshot: CatalogSnapshot) -> InMemoryCatalog:
    leaves = (str(p).strip() for p in snapshot.leaf_types)
    kinds: Dict[str, Optional[ReflectionKind]] = {p: None for p in leaves if p}
    kinds.update({t.path: t.kind for t in snapshot.types})
    catalog = InMemoryCatalog()
    for t in snapshot.types:
        functions = [
            ReflectedFunction(
                name=f.name,
                owner=t.path if f.owner is None else f.owner,
                flags=_combine(f.flags, _FUNCTION_FLAGS, FunctionFlags.NONE),
                params=tuple(
                    ReflectedParam(
                        name=p.name,
                        pin_type=_pin_type(p.pin_type, kinds),
                        direction=p.direction,
                        hidden=p.hidden,
                        default_value=p.default_value,
                    )
                    for p in f.params
                ),
                display_name=f.display_name,
                metadata=dict(f.metadata),
            )
            for f in t.functions
        ]
        properties = [
            ReflectedProperty(
                name=p.name,
                owner=t.path if p.owner is None else p.owner,
                flags=_combine(p.flags, _PROPERTY_FLAGS, PropertyFlags.NONE),
                pin_type=_pin_type(p.pin_type, kinds) if p.pin_type is not None else None,
                metadata=dict(p.metadata),
            )
            for p in t.properties
        ]
        try:
            catalog.add_type(
                ReflectedType(name=t.name, path=t.path, kind=t.kind),
                functions=functions,
                properties=properties,
            )
        except ValueError as e:
            raise CatalogSnapshotError(str(e)) from e
    return catalog


def load_catalog_snapshot(source: Union[str, Path, Dict[str, Any]]) -> InMemoryCatalog:
    """Load a snapshot from a JSON file path or an already-parsed dict."""
    if isinstance(source, dict):
        raw: Any = source
    else:
        path = Path(source)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise CatalogSnapshotError(f"Cannot read catalog snapshot '{path}': {e}") from e
        except json.JSONDecodeError as e:
            raise CatalogSnapshotError(f"Catalog snapshot '{path}' is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogSnapshotError("Catalog snapshot must be a JSON object")
    try:
        snapshot = CatalogSnapshot.model_validate(raw)
    except ValidationError as e:
        raise CatalogSnapshotError(f"Invalid catalog snapshot: {e}") from e
    return catalog_from_snapshot(snapshot)
