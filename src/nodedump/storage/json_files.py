"""nodedump.storage.json_files

Bucket documents as JSON array files (one file per bucket).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .base import DocumentWriteError, DocumentWriter


def render_json_document(records: List[Dict[str, Any]], *, indent: Optional[int] = 2) -> str:
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(records, ensure_ascii=False, indent=indent, separators=separators) + "\n"


class JsonDocumentWriter(DocumentWriter):
    def __init__(self, *, indent: Optional[int] = 2):
        self._indent = indent

    def write_document(self, records: List[Dict[str, Any]], path: Path) -> None:
        p = Path(path)
        text = render_json_document(records, indent=self._indent)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            with p.open("w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise DocumentWriteError(f"Cannot write '{p}': {e}") from e
