"""Hard-coded control-flow primitives.

These nodes are not owned by any reflected type, so the walker never sees
them; they are appended after the catalog walk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.models import (
    NODE_TYPE_EXECUTION_SEQUENCE,
    NODE_TYPE_IF_THEN_ELSE,
    PC_BOOLEAN,
    PinDescriptor,
    PinDirection,
)
from .pins import PN_EXECUTE, PN_THEN, exec_pin


@dataclass(frozen=True)
class ControlFlowPrimitive:
    name: str
    node_type: str
    pins: Tuple[PinDescriptor, ...]


BRANCH = ControlFlowPrimitive(
    name="Branch",
    node_type=NODE_TYPE_IF_THEN_ELSE,
    pins=(
        exec_pin(PN_EXECUTE, PinDirection.INPUT),
        PinDescriptor(pinName="Condition", direction=PinDirection.INPUT, category=PC_BOOLEAN, defaultValue="true"),
        exec_pin(PN_THEN, PinDirection.OUTPUT),
        exec_pin("else", PinDirection.OUTPUT),
    ),
)

SEQUENCE = ControlFlowPrimitive(
    name="Sequence",
    node_type=NODE_TYPE_EXECUTION_SEQUENCE,
    pins=(
        exec_pin(PN_EXECUTE, PinDirection.INPUT),
        exec_pin("then_0", PinDirection.OUTPUT),
        exec_pin("then_1", PinDirection.OUTPUT),
    ),
)

CONTROL_FLOW_PRIMITIVES: Tuple[ControlFlowPrimitive, ...] = (BRANCH, SEQUENCE)
