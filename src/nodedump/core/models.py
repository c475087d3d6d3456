"""Stdlib-only models for node descriptor documents.

A `NodeDescriptor` is one potential graph node (a function call, an event, a
variable accessor or a control-flow primitive) with its ordered input/output
pins. Descriptors are built in one pass, classified, written, then dropped.

`descriptor_to_dict` defines the JSON record shape of the bucket documents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class NodeKind(str, Enum):
    CALL_FUNCTION = "CallFunction"
    EVENT = "Event"
    VARIABLE_GET = "VariableGet"
    VARIABLE_SET = "VariableSet"
    CONTROL_FLOW = "ControlFlow"


class PinDirection(str, Enum):
    INPUT = "Input"
    OUTPUT = "Output"


class ContainerShape(str, Enum):
    NONE = "None"
    ARRAY = "Array"
    SET = "Set"
    MAP = "Map"


class Bucket(str, Enum):
    FULL = "Full"
    ESSENTIALS = "Essentials"
    DEBUG = "Debug"


# Host node-type tags, one per descriptor variant.
NODE_TYPE_CALL_FUNCTION = "K2Node_CallFunction"
NODE_TYPE_EVENT = "K2Node_Event"
NODE_TYPE_VARIABLE_GET = "K2Node_VariableGet"
NODE_TYPE_VARIABLE_SET = "K2Node_VariableSet"
NODE_TYPE_IF_THEN_ELSE = "K2Node_IfThenElse"
NODE_TYPE_EXECUTION_SEQUENCE = "K2Node_ExecutionSequence"

# Pin categories the extractor synthesizes itself.
PC_EXEC = "exec"
PC_OBJECT = "object"
PC_BOOLEAN = "bool"
PC_DELEGATE = "delegate"
PSC_SELF = "self"

NO_OWNER = "None"


@dataclass(frozen=True)
class PinDescriptor:
    pinName: str
    direction: PinDirection
    category: str = ""
    subcategory: str = ""
    referencedTypePath: str = ""
    containerShape: ContainerShape = ContainerShape.NONE
    isReference: bool = False
    isConst: bool = False
    isHidden: bool = False
    defaultValue: str = ""


@dataclass(frozen=True)
class NodeDescriptor:
    name: str
    kind: NodeKind
    nodeType: str
    memberName: str = ""
    ownerPath: str = NO_OWNER
    keywords: str = ""
    tooltip: str = ""
    inputs: Tuple[PinDescriptor, ...] = field(default_factory=tuple)
    outputs: Tuple[PinDescriptor, ...] = field(default_factory=tuple)

    @property
    def clean_name(self) -> str:
        """Display name with all whitespace removed (classification key)."""
        return "".join(self.name.split())


def pin_to_dict(pin: PinDescriptor) -> Dict[str, Any]:
    return {
        "pinName": pin.pinName,
        "direction": pin.direction.value,
        "category": pin.category,
        "subcategory": pin.subcategory,
        "referencedTypePath": pin.referencedTypePath,
        "containerShape": pin.containerShape.value,
        "isReference": bool(pin.isReference),
        "isConst": bool(pin.isConst),
        "isHidden": bool(pin.isHidden),
        "defaultValue": pin.defaultValue,
    }


def descriptor_to_dict(node: NodeDescriptor) -> Dict[str, Any]:
    return {
        "name": node.name,
        "kind": node.kind.value,
        "nodeType": node.nodeType,
        "memberName": node.memberName,
        "ownerPath": node.ownerPath,
        "keywords": node.keywords,
        "tooltip": node.tooltip,
        "inputs": [pin_to_dict(p) for p in node.inputs],
        "outputs": [pin_to_dict(p) for p in node.outputs],
    }


def descriptors_to_records(nodes: List[NodeDescriptor]) -> List[Dict[str, Any]]:
    return [descriptor_to_dict(n) for n in nodes]
