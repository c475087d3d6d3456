"""nodedump.storage.in_memory

In-memory document writer (testing/dev).
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, List

from .base import DocumentWriter


class InMemoryDocumentWriter(DocumentWriter):
    def __init__(self):
        self.documents: Dict[Path, List[Dict[str, Any]]] = {}

    def write_document(self, records: List[Dict[str, Any]], path: Path) -> None:
        self.documents[Path(path)] = copy.deepcopy(records)
