"""nodedump.dumper

The full extraction run: walk -> normalize -> classify -> sink -> write.

Every run rebuilds from scratch; no state survives between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .catalog.base import NodeFactory, PinTypeResolver, ReflectionCatalog
from .classify.rules import classify
from .core.config import DumpConfig
from .extract.normalizer import MemberNormalizer
from .extract.sink import DescriptorSink
from .extract.walker import TypeCatalogWalker
from .logging import get_logger
from .storage.base import DocumentWriter
from .storage.json_files import JsonDocumentWriter

logger = get_logger(__name__)


@dataclass(frozen=True)
class DumpReport:
    counts: Dict[str, int] = field(default_factory=dict)
    written: Dict[str, str] = field(default_factory=dict)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "counts": dict(self.counts),
            "written": dict(self.written),
            "failed": dict(self.failed),
        }


class NodeDumper:
    def __init__(
        self,
        catalog: ReflectionCatalog,
        *,
        pin_types: Optional[PinTypeResolver] = None,
        node_factory: Optional[NodeFactory] = None,
        writer: Optional[DocumentWriter] = None,
        config: Optional[DumpConfig] = None,
    ):
        if pin_types is None:
            if not isinstance(catalog, PinTypeResolver):
                raise TypeError("pin_types is required when the catalog is not a PinTypeResolver")
            pin_types = catalog
        self._config = config or DumpConfig()
        self._catalog = catalog
        self._pin_types = pin_types
        self._node_factory = node_factory
        self._writer = writer or JsonDocumentWriter(indent=self._config.json_indent)

    @property
    def config(self) -> DumpConfig:
        return self._config

    def collect(self) -> DescriptorSink:
        """Walk the catalog and classify every descriptor (no writes)."""
        walker = TypeCatalogWalker(self._catalog, config=self._config)
        normalizer = MemberNormalizer(
            self._catalog,
            self._pin_types,
            node_factory=self._node_factory,
            config=self._config,
        )
        sink = DescriptorSink()
        for owner, member in walker.enumerate():
            try:
                nodes = normalizer.normalize(owner, member)
            except Exception as e:
                # One malformed member never aborts the walk; only writes are fatal.
                logger.warning(
                    "Skipping malformed member",
                    member=getattr(member, "name", ""),
                    owner=owner.path,
                    error=str(e),
                )
                continue
            for node in nodes:
                sink.add(node, classify(node))
        for node in normalizer.control_flow_descriptors():
            sink.add(node, classify(node))
        logger.debug("Catalog walk complete", **sink.counts())
        return sink

    def dump_all_nodes(self, base_file_path: str | Path) -> DumpReport:
        sink = self.collect()
        result = sink.flush(self._writer, base_file_path, config=self._config)
        report = DumpReport(
            counts=sink.counts(),
            written={b.value: str(p) for b, p in result.written.items()},
            failed={b.value: msg for b, msg in result.failed.items()},
        )
        logger.info("Node dump finished", ok=report.ok, **report.counts)
        return report


def dump_all_nodes(
    base_file_path: str | Path,
    *,
    catalog: ReflectionCatalog,
    pin_types: Optional[PinTypeResolver] = None,
    node_factory: Optional[NodeFactory] = None,
    writer: Optional[DocumentWriter] = None,
    config: Optional[DumpConfig] = None,
) -> DumpReport:
    dumper = NodeDumper(
        catalog,
        pin_types=pin_types,
        node_factory=node_factory,
        writer=writer,
        config=config,
    )
    return dumper.dump_all_nodes(base_file_path)
