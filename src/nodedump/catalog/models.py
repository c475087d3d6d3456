"""Reflection records consumed by the extractor.

These mirror what a reflection-capable host exposes about its types: a type
has member functions (with parameters) and member properties, each carrying
flags, a declaring owner and string metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Dict, Optional, Tuple

from ..core.models import ContainerShape


class ReflectionKind(str, Enum):
    CLASS = "Class"
    SCRIPT_STRUCT = "ScriptStruct"
    ENUM = "Enum"


class FunctionFlags(IntFlag):
    NONE = 0
    CALLABLE = 1
    PURE = 2
    EVENT = 4
    STATIC = 8


class PropertyFlags(IntFlag):
    NONE = 0
    VISIBLE = 1
    DEPRECATED = 2
    READ_ONLY = 4


class ParamDirection(str, Enum):
    INPUT = "input"
    OUTPUT = "output"
    RETURN = "return"


@dataclass(frozen=True)
class TypeRef:
    """A referenced type. `kind=None` renders as the bare path."""

    path: str
    kind: Optional[ReflectionKind] = None


@dataclass(frozen=True)
class PinType:
    category: str = ""
    subcategory: str = ""
    referenced: Optional[TypeRef] = None
    container: ContainerShape = ContainerShape.NONE
    is_reference: bool = False
    is_const: bool = False


PLACEHOLDER_PIN_TYPE = PinType()


@dataclass(frozen=True)
class ReflectedType:
    name: str
    path: str
    kind: ReflectionKind = ReflectionKind.CLASS

    def as_ref(self) -> TypeRef:
        return TypeRef(path=self.path, kind=self.kind)


@dataclass(frozen=True)
class ReflectedParam:
    name: str
    pin_type: PinType = PLACEHOLDER_PIN_TYPE
    direction: ParamDirection = ParamDirection.INPUT
    hidden: bool = False
    default_value: str = ""


@dataclass(frozen=True)
class ReflectedFunction:
    name: str
    # Path of the declaring type; empty when the host could not resolve it.
    owner: str
    flags: FunctionFlags = FunctionFlags.NONE
    params: Tuple[ReflectedParam, ...] = ()
    display_name: str = ""
    metadata: Dict[str, str] = field(default_factory=dict)

    def has_any(self, flags: FunctionFlags) -> bool:
        return bool(self.flags & flags)


@dataclass(frozen=True)
class ReflectedProperty:
    name: str
    owner: str
    flags: PropertyFlags = PropertyFlags.NONE
    pin_type: Optional[PinType] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def has_any(self, flags: PropertyFlags) -> bool:
        return bool(self.flags & flags)
