"""
nodedump

Reflection catalog -> visual-scripting node descriptor library.

This package provides:
- a walker over an injected reflection catalog (types, functions, properties)
- normalization of functions, events and property accessors into one
  `NodeDescriptor` shape with resolved pins
- rule-based classification into Full / Essentials / Debug buckets
- one JSON array document per bucket
"""

from .catalog import (
    CatalogSnapshotError,
    InMemoryCatalog,
    ReflectionCatalog,
    load_catalog_snapshot,
)
from .classify import classify
from .core import Bucket, DumpConfig, NodeDescriptor, NodeKind, PinDescriptor, PinDirection
from .dumper import DumpReport, NodeDumper, dump_all_nodes
from .extract import DescriptorSink, MemberNormalizer, PinResolver, TypeCatalogWalker
from .storage import DocumentWriteError, InMemoryDocumentWriter, JsonDocumentWriter

__all__ = [
    # Catalog
    "ReflectionCatalog",
    "InMemoryCatalog",
    "CatalogSnapshotError",
    "load_catalog_snapshot",
    # Models
    "Bucket",
    "DumpConfig",
    "NodeDescriptor",
    "NodeKind",
    "PinDescriptor",
    "PinDirection",
    # Pipeline
    "TypeCatalogWalker",
    "MemberNormalizer",
    "PinResolver",
    "classify",
    "DescriptorSink",
    "NodeDumper",
    "DumpReport",
    "dump_all_nodes",
    # Writers
    "DocumentWriteError",
    "InMemoryDocumentWriter",
    "JsonDocumentWriter",
]
