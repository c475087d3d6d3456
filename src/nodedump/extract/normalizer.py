"""MemberNormalizer: reflected members -> NodeDescriptor records.

One normalization function per member variant, all producing the same
descriptor shape:
- callable function -> CallFunction
- event function    -> Event
- property          -> VariableGet (+ VariableSet when mutable)
- primitive         -> ControlFlow
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..catalog.base import Member, NodeFactory, PinTypeResolver, ReflectionCatalog
from ..catalog.models import (
    PLACEHOLDER_PIN_TYPE,
    FunctionFlags,
    PinType,
    PropertyFlags,
    ReflectedFunction,
    ReflectedProperty,
    ReflectedType,
)
from ..core.config import DumpConfig
from ..core.models import (
    NO_OWNER,
    NODE_TYPE_CALL_FUNCTION,
    NODE_TYPE_EVENT,
    NODE_TYPE_VARIABLE_GET,
    NODE_TYPE_VARIABLE_SET,
    NodeDescriptor,
    NodeKind,
)
from ..logging import get_logger
from .builtins import CONTROL_FLOW_PRIMITIVES, ControlFlowPrimitive
from .pins import PinResolver, SignatureNodeFactory, render_type_path, scratch_node

logger = get_logger(__name__)

META_KEYWORDS = "Keywords"
META_TOOLTIP = "ToolTip"
META_DISPLAY_NAME = "DisplayName"

_WORD_BREAK_RE = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])")


def name_to_display_string(name: str) -> str:
    """Friendly title for an identifier (`PrintString` -> `Print String`)."""
    s = str(name or "").strip()
    s = _WORD_BREAK_RE.sub(" ", s.replace("_", " "))
    return " ".join(s.split())


class MemberNormalizer:
    def __init__(
        self,
        catalog: ReflectionCatalog,
        pin_types: PinTypeResolver,
        *,
        node_factory: Optional[NodeFactory] = None,
        config: Optional[DumpConfig] = None,
    ):
        self._catalog = catalog
        self._pin_types = pin_types
        self._config = config or DumpConfig()
        self._factory = node_factory or SignatureNodeFactory(module_root=self._config.module_root)
        self._pins = PinResolver(
            module_root=self._config.module_root,
            hidden_pin_names=self._config.hidden_pin_names,
        )

    def owner_path(self, owner: ReflectedType) -> str:
        return render_type_path(owner.as_ref(), self._config.module_root) or NO_OWNER

    def normalize(self, owner: ReflectedType, member: Member, *, name: Optional[str] = None) -> List[NodeDescriptor]:
        if isinstance(member, ReflectedFunction):
            return [self.normalize_function(owner, member, name=name)]
        if isinstance(member, ReflectedProperty):
            return self.normalize_property(owner, member)
        raise TypeError(f"Unsupported member type: {type(member).__name__}")

    def display_title(self, func: ReflectedFunction, kind: NodeKind) -> str:
        title = str(func.display_name or "").strip()
        if not title:
            title = self._catalog.metadata(func, META_DISPLAY_NAME).strip()
        if not title:
            title = name_to_display_string(func.name)
        if kind == NodeKind.EVENT:
            return f"Event {title}"
        return title

    def normalize_function(
        self, owner: ReflectedType, func: ReflectedFunction, *, name: Optional[str] = None
    ) -> NodeDescriptor:
        if func.has_any(FunctionFlags.CALLABLE | FunctionFlags.PURE):
            kind, node_type = NodeKind.CALL_FUNCTION, NODE_TYPE_CALL_FUNCTION
        else:
            kind, node_type = NodeKind.EVENT, NODE_TYPE_EVENT

        with scratch_node(self._factory, (owner, func, kind)) as node:
            try:
                raw_pins = self._factory.populate_pins(node)
            except Exception as e:
                # Host factories may fail on one malformed signature; keep walking.
                logger.warning("Pin resolution failed; emitting without pins", member=func.name, owner=owner.path, error=str(e))
                raw_pins = []
        inputs, outputs = self._pins.resolve_pins(raw_pins)

        return NodeDescriptor(
            name=name or self.display_title(func, kind),
            kind=kind,
            nodeType=node_type,
            memberName=func.name,
            ownerPath=self.owner_path(owner),
            keywords=self._catalog.metadata(func, META_KEYWORDS),
            tooltip=self._catalog.metadata(func, META_TOOLTIP),
            inputs=inputs,
            outputs=outputs,
        )

    def _property_pin_type(self, owner: ReflectedType, prop: ReflectedProperty) -> PinType:
        try:
            return self._pin_types.resolve_pin_type(prop)
        except Exception as e:
            logger.warning("Pin type unresolved; using placeholder", member=prop.name, owner=owner.path, error=str(e))
            return PLACEHOLDER_PIN_TYPE

    def normalize_property(self, owner: ReflectedType, prop: ReflectedProperty) -> List[NodeDescriptor]:
        pin_type = self._property_pin_type(owner, prop)
        owner_path = self.owner_path(owner)
        keywords = self._catalog.metadata(prop, META_KEYWORDS)

        inputs, outputs = self._pins.resolve_pins(self._pins.getter_pins(owner, prop.name, pin_type))
        out = [
            NodeDescriptor(
                name=f"Get {prop.name}",
                kind=NodeKind.VARIABLE_GET,
                nodeType=NODE_TYPE_VARIABLE_GET,
                memberName=prop.name,
                ownerPath=owner_path,
                keywords=keywords,
                tooltip=f"Get {prop.name}",
                inputs=inputs,
                outputs=outputs,
            )
        ]
        if prop.has_any(PropertyFlags.READ_ONLY):
            return out

        inputs, outputs = self._pins.resolve_pins(self._pins.setter_pins(owner, prop.name, pin_type))
        out.append(
            NodeDescriptor(
                name=f"Set {prop.name}",
                kind=NodeKind.VARIABLE_SET,
                nodeType=NODE_TYPE_VARIABLE_SET,
                memberName=prop.name,
                ownerPath=owner_path,
                keywords=keywords,
                tooltip=f"Set {prop.name}",
                inputs=inputs,
                outputs=outputs,
            )
        )
        return out

    def normalize_primitive(self, primitive: ControlFlowPrimitive) -> NodeDescriptor:
        inputs, outputs = self._pins.resolve_pins(primitive.pins)
        return NodeDescriptor(
            name=primitive.name,
            kind=NodeKind.CONTROL_FLOW,
            nodeType=primitive.node_type,
            memberName="",
            ownerPath=NO_OWNER,
            inputs=inputs,
            outputs=outputs,
        )

    def control_flow_descriptors(self) -> List[NodeDescriptor]:
        return [self.normalize_primitive(p) for p in CONTROL_FLOW_PRIMITIVES]
