"""nodedump.storage.base

Document writer interface (bucket persistence).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List


class DocumentWriteError(OSError):
    """Raised when a bucket document cannot be persisted."""


class DocumentWriter(ABC):
    @abstractmethod
    def write_document(self, records: List[Dict[str, Any]], path: Path) -> None:
        """Persist `records` as one document at `path`.

        Raises DocumentWriteError on failure.
        """
