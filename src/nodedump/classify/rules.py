"""Bucket classification rules.

Every descriptor lands in `Full`. `Essentials` and `Debug` are decided by the
independent predicates in `RULES`; a descriptor joins a bucket when any rule
for that bucket matches.

Name rules use the display name with whitespace removed
(`"Print String"` -> `"PrintString"`).

The math-library rule is a broad substring heuristic: any member of the math
library whose name contains e.g. `Vector` qualifies, including members that are
not arithmetic. It is kept literal on purpose.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from ..core.models import Bucket, NodeDescriptor, NodeKind

DEBUG_NAME_MARKERS: Tuple[str, ...] = ("PrintString", "DrawDebug")

ESSENTIAL_NODE_TYPE_MARKERS: Tuple[str, ...] = ("IfThenElse", "ExecutionSequence")

ESSENTIAL_MEMBER_NAMES: Tuple[str, ...] = ("Delay", "RetriggerableDelay", "IsValid")

MATH_LIBRARY_MARKER = "KismetMathLibrary"

MATH_OPERATION_MARKERS: Tuple[str, ...] = (
    "Add",
    "Subtract",
    "Multiply",
    "Divide",
    "Equal",
    "Less",
    "Greater",
    "Boolean",
    "Vector",
)


def _contains_any(value: str, markers: Tuple[str, ...]) -> bool:
    return any(m in value for m in markers)


def is_debug_output(node: NodeDescriptor) -> bool:
    return _contains_any(node.clean_name, DEBUG_NAME_MARKERS)


def is_essential_control_flow(node: NodeDescriptor) -> bool:
    return node.kind == NodeKind.CONTROL_FLOW and _contains_any(node.nodeType, ESSENTIAL_NODE_TYPE_MARKERS)


def is_essential_member(node: NodeDescriptor) -> bool:
    return node.memberName in ESSENTIAL_MEMBER_NAMES


def is_essential_math(node: NodeDescriptor) -> bool:
    return MATH_LIBRARY_MARKER in node.ownerPath and _contains_any(node.memberName, MATH_OPERATION_MARKERS)


@dataclass(frozen=True)
class ClassificationRule:
    name: str
    bucket: Bucket
    predicate: Callable[[NodeDescriptor], bool]

    def matches(self, node: NodeDescriptor) -> bool:
        return bool(self.predicate(node))


RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule("debug_output", Bucket.DEBUG, is_debug_output),
    ClassificationRule("control_flow", Bucket.ESSENTIALS, is_essential_control_flow),
    ClassificationRule("member_allow_list", Bucket.ESSENTIALS, is_essential_member),
    ClassificationRule("math_library", Bucket.ESSENTIALS, is_essential_math),
)

_BUCKET_ORDER: Tuple[Bucket, ...] = (Bucket.FULL, Bucket.ESSENTIALS, Bucket.DEBUG)


def matching_rules(node: NodeDescriptor, rules: Tuple[ClassificationRule, ...] = RULES) -> Tuple[str, ...]:
    return tuple(r.name for r in rules if r.matches(node))


def classify(node: NodeDescriptor, rules: Tuple[ClassificationRule, ...] = RULES) -> Tuple[Bucket, ...]:
    """Buckets for `node`, always starting with `Full`."""
    hit = {Bucket.FULL}
    for rule in rules:
        if rule.bucket not in hit and rule.matches(node):
            hit.add(rule.bucket)
    return tuple(b for b in _BUCKET_ORDER if b in hit)
