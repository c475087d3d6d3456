"""Catalog walk, member normalization and pin resolution."""

from .builtins import BRANCH, CONTROL_FLOW_PRIMITIVES, SEQUENCE, ControlFlowPrimitive
from .normalizer import MemberNormalizer, name_to_display_string
from .pins import (
    NodeHandle,
    PinResolver,
    SignatureNodeFactory,
    derive_connectors,
    render_type_path,
    scratch_node,
)
from .sink import BUCKETS, DescriptorSink, FlushResult, bucket_document_path, output_directory
from .walker import TypeCatalogWalker

__all__ = [
    "BRANCH",
    "CONTROL_FLOW_PRIMITIVES",
    "SEQUENCE",
    "ControlFlowPrimitive",
    "MemberNormalizer",
    "name_to_display_string",
    "NodeHandle",
    "PinResolver",
    "SignatureNodeFactory",
    "derive_connectors",
    "render_type_path",
    "scratch_node",
    "BUCKETS",
    "DescriptorSink",
    "FlushResult",
    "bucket_document_path",
    "output_directory",
    "TypeCatalogWalker",
]
