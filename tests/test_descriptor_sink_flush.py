from __future__ import annotations

import logging
from pathlib import Path

import pytest

from nodedump.core.config import DumpConfig
from nodedump.core.models import Bucket, NodeDescriptor, NodeKind
from nodedump.extract.sink import DescriptorSink, bucket_document_path
from nodedump.storage.base import DocumentWriteError, DocumentWriter
from nodedump.storage.in_memory import InMemoryDocumentWriter


def _node(name: str) -> NodeDescriptor:
    return NodeDescriptor(name=name, kind=NodeKind.CALL_FUNCTION, nodeType="K2Node_CallFunction", memberName=name)


class _EssentialsUnwritable(DocumentWriter):
    def __init__(self):
        self.inner = InMemoryDocumentWriter()

    def write_document(self, records, path):
        if "Essentials" in Path(path).name:
            raise DocumentWriteError(f"read-only destination: {path}")
        self.inner.write_document(records, path)


@pytest.mark.basic
def test_bucket_document_paths_sit_next_to_base_file(tmp_path) -> None:
    base = tmp_path / "dump" / "Library.json"
    assert bucket_document_path(base, Bucket.FULL) == tmp_path / "dump" / "UEBlueprintLibrary_Full.json"
    assert bucket_document_path(base, Bucket.DEBUG, DumpConfig(file_prefix="Lib")) == tmp_path / "dump" / "Lib_Debug.json"
    # An existing directory is used directly.
    assert bucket_document_path(tmp_path, Bucket.ESSENTIALS) == tmp_path / "UEBlueprintLibrary_Essentials.json"


@pytest.mark.basic
def test_sink_keeps_encounter_order_per_bucket() -> None:
    sink = DescriptorSink()
    a, b, c = _node("A"), _node("B"), _node("C")
    sink.add(a, [Bucket.FULL, Bucket.DEBUG])
    sink.add(b, [Bucket.FULL])
    sink.add(c, [Bucket.FULL, Bucket.ESSENTIALS, Bucket.DEBUG])

    assert [n.name for n in sink.collection(Bucket.FULL)] == ["A", "B", "C"]
    assert [n.name for n in sink.collection(Bucket.ESSENTIALS)] == ["C"]
    assert [n.name for n in sink.collection(Bucket.DEBUG)] == ["A", "C"]
    assert sink.counts() == {"Full": 3, "Essentials": 1, "Debug": 2}


@pytest.mark.basic
def test_failed_bucket_does_not_stop_the_others(tmp_path) -> None:
    sink = DescriptorSink()
    sink.add(_node("Delay"), [Bucket.FULL, Bucket.ESSENTIALS])
    writer = _EssentialsUnwritable()

    result = sink.flush(writer, tmp_path / "out.json")

    assert not result.ok
    assert set(result.failed) == {Bucket.ESSENTIALS}
    assert set(result.written) == {Bucket.FULL, Bucket.DEBUG}
    docs = writer.inner.documents
    assert docs[tmp_path / "UEBlueprintLibrary_Full.json"][0]["memberName"] == "Delay"
    assert docs[tmp_path / "UEBlueprintLibrary_Debug.json"] == []


class _EssentialsPermissionDenied(DocumentWriter):
    """Raises the bare OSError a third-party writer would, not DocumentWriteError."""

    def __init__(self):
        self.inner = InMemoryDocumentWriter()

    def write_document(self, records, path):
        if "Essentials" in Path(path).name:
            raise PermissionError(13, "Permission denied", str(path))
        self.inner.write_document(records, path)


@pytest.mark.basic
def test_plain_os_error_from_writer_is_recorded_per_bucket(tmp_path, caplog) -> None:
    sink = DescriptorSink()
    sink.add(_node("Print String"), [Bucket.FULL, Bucket.DEBUG])
    writer = _EssentialsPermissionDenied()

    with caplog.at_level(logging.ERROR, logger="nodedump"):
        result = sink.flush(writer, tmp_path / "out.json")

    assert set(result.failed) == {Bucket.ESSENTIALS}
    assert "Permission denied" in result.failed[Bucket.ESSENTIALS]
    assert set(result.written) == {Bucket.FULL, Bucket.DEBUG}
    assert writer.inner.documents[tmp_path / "UEBlueprintLibrary_Debug.json"][0]["name"] == "Print String"
    assert "Bucket document write failed" in caplog.text
