"""DescriptorSink: per-bucket ordered collections, written after the walk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..core.config import DumpConfig
from ..core.models import Bucket, NodeDescriptor, descriptors_to_records
from ..logging import get_logger
from ..storage.base import DocumentWriter

logger = get_logger(__name__)

BUCKETS = (Bucket.FULL, Bucket.ESSENTIALS, Bucket.DEBUG)


def output_directory(base_path: str | Path) -> Path:
    """Directory the bucket documents go to.

    `base_path` names a file next to which the documents are written; an
    existing directory is used as-is.
    """
    p = Path(base_path).expanduser()
    if p.is_dir():
        return p
    return p.parent


def bucket_document_path(base_path: str | Path, bucket: Bucket, config: Optional[DumpConfig] = None) -> Path:
    cfg = config or DumpConfig()
    return output_directory(base_path) / cfg.document_name(bucket.value)


@dataclass
class FlushResult:
    written: Dict[Bucket, Path] = field(default_factory=dict)
    failed: Dict[Bucket, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class DescriptorSink:
    def __init__(self):
        self._collections: Dict[Bucket, List[NodeDescriptor]] = {b: [] for b in BUCKETS}

    def add(self, node: NodeDescriptor, buckets: Iterable[Bucket]) -> None:
        for b in buckets:
            self._collections[Bucket(b)].append(node)

    def collection(self, bucket: Bucket) -> List[NodeDescriptor]:
        return list(self._collections[bucket])

    def counts(self) -> Dict[str, int]:
        return {b.value: len(self._collections[b]) for b in BUCKETS}

    def flush(
        self,
        writer: DocumentWriter,
        base_path: str | Path,
        *,
        config: Optional[DumpConfig] = None,
    ) -> FlushResult:
        """Write one document per bucket; a failed bucket does not stop the others."""
        result = FlushResult()
        for bucket in BUCKETS:
            path = bucket_document_path(base_path, bucket, config)
            records = descriptors_to_records(self._collections[bucket])
            try:
                writer.write_document(records, path)
            except OSError as e:
                logger.error("Bucket document write failed", bucket=bucket.value, path=str(path), error=str(e))
                result.failed[bucket] = str(e)
                continue
            logger.info("Wrote bucket document", bucket=bucket.value, path=str(path), count=len(records))
            result.written[bucket] = path
        return result
