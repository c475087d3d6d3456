"""Pin resolution.

Pins for real members come from a scratch node (`NodeFactory`), wrapped in
`scratch_node` so the node is disposed on every exit path. The default factory,
`SignatureNodeFactory`, derives connectors from the static signature with the
pure `derive_connectors`, so no host object is ever instantiated.

Pins for variable accessors are synthesized in a fixed order.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..catalog.base import NodeFactory
from ..catalog.models import (
    FunctionFlags,
    ParamDirection,
    PinType,
    ReflectedFunction,
    ReflectedParam,
    ReflectedType,
    TypeRef,
)
from ..core.config import DEFAULT_MODULE_ROOT
from ..core.models import (
    PC_DELEGATE,
    PC_EXEC,
    PC_OBJECT,
    PSC_SELF,
    NodeKind,
    PinDescriptor,
    PinDirection,
)

PN_EXECUTE = "execute"
PN_THEN = "then"
PN_SELF = "self"
PN_OUTPUT_DELEGATE = "OutputDelegate"
PN_RETURN_VALUE = "ReturnValue"
SET_OUTPUT_PREFIX = "Output_"


def render_type_path(ref: Optional[TypeRef], module_root: str = DEFAULT_MODULE_ROOT) -> str:
    """Render a referenced type as `<module_root>.<Kind>'<path>'`.

    Types without a reflection kind render as their bare path; no reference
    renders as an empty string.
    """
    if ref is None or not ref.path:
        return ""
    if ref.kind is None:
        return ref.path
    return f"{module_root}.{ref.kind.value}'{ref.path}'"


def exec_pin(name: str, direction: PinDirection) -> PinDescriptor:
    return PinDescriptor(pinName=name, direction=direction, category=PC_EXEC)


def self_pin(owner: ReflectedType, *, module_root: str, hidden: bool = True) -> PinDescriptor:
    return PinDescriptor(
        pinName=PN_SELF,
        direction=PinDirection.INPUT,
        category=PC_OBJECT,
        subcategory=PSC_SELF,
        referencedTypePath=render_type_path(owner.as_ref(), module_root),
        isHidden=hidden,
    )


def typed_pin(
    name: str,
    direction: PinDirection,
    pin_type: PinType,
    *,
    module_root: str,
    is_const: Optional[bool] = None,
    hidden: bool = False,
    default_value: str = "",
) -> PinDescriptor:
    return PinDescriptor(
        pinName=name,
        direction=direction,
        category=pin_type.category,
        subcategory=pin_type.subcategory,
        referencedTypePath=render_type_path(pin_type.referenced, module_root),
        containerShape=pin_type.container,
        isReference=pin_type.is_reference,
        isConst=pin_type.is_const if is_const is None else is_const,
        isHidden=hidden,
        defaultValue=default_value,
    )


def _param_pin(param: ReflectedParam, direction: PinDirection, module_root: str) -> PinDescriptor:
    name = PN_RETURN_VALUE if param.direction == ParamDirection.RETURN and not param.name else param.name
    return typed_pin(
        name,
        direction,
        param.pin_type,
        module_root=module_root,
        hidden=param.hidden,
        default_value=param.default_value if direction == PinDirection.INPUT else "",
    )


def derive_connectors(
    owner: ReflectedType,
    func: ReflectedFunction,
    kind: NodeKind,
    *,
    module_root: str = DEFAULT_MODULE_ROOT,
) -> List[PinDescriptor]:
    """Connectors of a function/event node, in host allocation order."""
    pins: List[PinDescriptor] = []
    if kind == NodeKind.EVENT:
        pins.append(
            PinDescriptor(pinName=PN_OUTPUT_DELEGATE, direction=PinDirection.OUTPUT, category=PC_DELEGATE)
        )
        pins.append(exec_pin(PN_THEN, PinDirection.OUTPUT))
        for p in func.params:
            if p.direction == ParamDirection.RETURN:
                continue
            pins.append(_param_pin(p, PinDirection.OUTPUT, module_root))
        return pins

    if not func.has_any(FunctionFlags.PURE):
        pins.append(exec_pin(PN_EXECUTE, PinDirection.INPUT))
        pins.append(exec_pin(PN_THEN, PinDirection.OUTPUT))
    pins.append(self_pin(owner, module_root=module_root))
    for p in func.params:
        direction = PinDirection.INPUT if p.direction == ParamDirection.INPUT else PinDirection.OUTPUT
        pins.append(_param_pin(p, direction, module_root))
    return pins


@dataclass
class NodeHandle:
    owner: ReflectedType
    function: ReflectedFunction
    kind: NodeKind
    disposed: bool = False


class SignatureNodeFactory(NodeFactory):
    """Scratch nodes backed by the static signature (no host state)."""

    def __init__(self, *, module_root: str = DEFAULT_MODULE_ROOT):
        self._module_root = module_root

    def instantiate(self, member_ref: Any) -> NodeHandle:
        owner, func, kind = member_ref
        return NodeHandle(owner=owner, function=func, kind=kind)

    def populate_pins(self, handle: NodeHandle) -> List[PinDescriptor]:
        if handle.disposed:
            raise RuntimeError("Scratch node already disposed")
        return derive_connectors(handle.owner, handle.function, handle.kind, module_root=self._module_root)

    def dispose(self, handle: NodeHandle) -> None:
        handle.disposed = True


@contextmanager
def scratch_node(factory: NodeFactory, member_ref: Any) -> Iterator[Any]:
    handle = factory.instantiate(member_ref)
    try:
        yield handle
    finally:
        factory.dispose(handle)


class PinResolver:
    def __init__(self, *, module_root: str = DEFAULT_MODULE_ROOT, hidden_pin_names: Iterable[str] = ("WorldContextObject", "self")):
        self.module_root = module_root
        self._hidden = frozenset(hidden_pin_names)

    def _apply_visibility(self, pin: PinDescriptor) -> PinDescriptor:
        if pin.pinName in self._hidden and not pin.isHidden:
            return replace(pin, isHidden=True)
        return pin

    def resolve_pins(
        self, pins: Sequence[PinDescriptor]
    ) -> Tuple[Tuple[PinDescriptor, ...], Tuple[PinDescriptor, ...]]:
        inputs: List[PinDescriptor] = []
        outputs: List[PinDescriptor] = []
        for pin in pins:
            pin = self._apply_visibility(pin)
            if pin.direction == PinDirection.INPUT:
                inputs.append(pin)
            else:
                outputs.append(pin)
        return tuple(inputs), tuple(outputs)

    def getter_pins(self, owner: ReflectedType, name: str, pin_type: PinType) -> List[PinDescriptor]:
        return [
            self_pin(owner, module_root=self.module_root),
            typed_pin(name, PinDirection.OUTPUT, pin_type, module_root=self.module_root, is_const=True),
        ]

    def setter_pins(self, owner: ReflectedType, name: str, pin_type: PinType) -> List[PinDescriptor]:
        return [
            exec_pin(PN_EXECUTE, PinDirection.INPUT),
            self_pin(owner, module_root=self.module_root),
            typed_pin(name, PinDirection.INPUT, pin_type, module_root=self.module_root),
            exec_pin(PN_THEN, PinDirection.OUTPUT),
            typed_pin(SET_OUTPUT_PREFIX + name, PinDirection.OUTPUT, pin_type, module_root=self.module_root),
        ]
