"""Bucket document writers."""

from .base import DocumentWriteError, DocumentWriter
from .in_memory import InMemoryDocumentWriter
from .json_files import JsonDocumentWriter, render_json_document

__all__ = [
    "DocumentWriteError",
    "DocumentWriter",
    "InMemoryDocumentWriter",
    "JsonDocumentWriter",
    "render_json_document",
]
