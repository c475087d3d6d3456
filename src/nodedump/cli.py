from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Optional, Sequence

from .catalog.snapshot import CatalogSnapshotError, load_catalog_snapshot
from .core.config import DumpConfig
from .dumper import NodeDumper
from .logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodedump",
        description="Dump node descriptors (Full/Essentials/Debug) from a reflection catalog snapshot.",
    )
    parser.add_argument("snapshot", help="Catalog snapshot JSON file.")
    parser.add_argument(
        "base_path",
        help="Base file path; bucket documents are written next to it (or into it when it is a directory).",
    )
    parser.add_argument("--file-prefix", default=None, help="Document name prefix (default: UEBlueprintLibrary).")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation; negative for compact output.")
    parser.add_argument("--log-level", default=None, help="Log level (default: $NODEDUMP_LOG_LEVEL or WARNING).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)

    config = DumpConfig.from_env().with_overrides(file_prefix=(args.file_prefix or "").strip())
    if args.indent is not None:
        config = replace(config, json_indent=args.indent if args.indent >= 0 else None)

    try:
        catalog = load_catalog_snapshot(args.snapshot)
    except CatalogSnapshotError as e:
        logger.error("Cannot load catalog snapshot", path=args.snapshot, error=str(e))
        print(f"nodedump: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    report = NodeDumper(catalog, config=config).dump_all_nodes(args.base_path)
    sys.stdout.write(json.dumps(report.to_dict(), ensure_ascii=False, sort_keys=True) + "\n")
    return EXIT_OK if report.ok else EXIT_WRITE_FAILED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
