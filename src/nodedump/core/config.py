"""nodedump.core.config

Dump configuration.

`DumpConfig` centralizes the constants the extractor is parameterized by
(output file naming, type-path rendering, walker filters). Defaults mirror the
Unreal-style host the descriptors are produced for.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Tuple

DEFAULT_FILE_PREFIX = "UEBlueprintLibrary"
DEFAULT_MODULE_ROOT = "/Script/CoreUObject"
DEFAULT_JSON_INDENT = 2


@dataclass(frozen=True)
class DumpConfig:
    """Configuration for one dump run.

    Attributes:
        file_prefix: Bucket documents are written as `<file_prefix>_<Bucket>.json`.
        module_root: Prefix used when rendering referenced type paths
            (`<module_root>.Class'<path>'`).
        synthetic_type_prefixes: Type names starting with any of these are
            build artifacts of the host (skeleton / reinstancing classes).
        reserved_event_marker: Event functions whose name contains this are the
            host's generated dispatcher and never emitted.
        hidden_pin_names: Pin names that are always hidden.
        json_indent: Indentation of written documents (None = compact).

    Example:
        >>> cfg = DumpConfig(file_prefix="Lib")
        >>> cfg.document_name("Full")
        'Lib_Full.json'
    """

    file_prefix: str = DEFAULT_FILE_PREFIX
    module_root: str = DEFAULT_MODULE_ROOT
    synthetic_type_prefixes: Tuple[str, ...] = ("SKEL_", "REINST_")
    reserved_event_marker: str = "ExecuteUbergraph"
    hidden_pin_names: Tuple[str, ...] = ("WorldContextObject", "self")
    json_indent: int | None = DEFAULT_JSON_INDENT

    def document_name(self, bucket: str) -> str:
        return f"{self.file_prefix}_{bucket}.json"

    def with_overrides(self, **changes) -> "DumpConfig":
        # None and blank strings keep the current value, as in from_env.
        clean = {
            k: v for k, v in changes.items() if v is not None and not (isinstance(v, str) and not v.strip())
        }
        return replace(self, **clean) if clean else self

    @classmethod
    def from_env(cls) -> "DumpConfig":
        """Build a config from `NODEDUMP_*` environment variables.

        Blank or invalid values keep the defaults.
        """
        cfg = cls()
        prefix = str(os.getenv("NODEDUMP_FILE_PREFIX", "")).strip()
        if prefix:
            cfg = replace(cfg, file_prefix=prefix)
        root = str(os.getenv("NODEDUMP_MODULE_ROOT", "")).strip()
        if root:
            cfg = replace(cfg, module_root=root)
        raw_indent = str(os.getenv("NODEDUMP_JSON_INDENT", "")).strip()
        if raw_indent:
            try:
                indent = int(raw_indent)
            except ValueError:
                indent = DEFAULT_JSON_INDENT
            cfg = replace(cfg, json_indent=indent if indent >= 0 else None)
        return cfg
