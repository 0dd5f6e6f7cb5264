"""Command line entry point for oncotree2graph."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from oncotree2graph.config import ONCOTREE2GRAPH_DEFAULT_VERSION
from oncotree2graph.exceptions import Oncotree2graphError
from oncotree2graph.ingestion import BuildOptions, ingest_oncotree
from oncotree2graph.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oncotree2graph",
        description="Flatten the OncoTree tumor-type tree into a directed graph.",
    )
    parser.add_argument("--version", default=ONCOTREE2GRAPH_DEFAULT_VERSION, help="OncoTree release to fetch")
    parser.add_argument("--url", help="Tree API endpoint override")
    parser.add_argument("--input", type=Path, help="Read the tree document from a local JSON file instead of fetching")
    parser.add_argument("--output", type=Path, help="Write the graph as node-link JSON to this path")
    parser.add_argument("--no-cache", action="store_true", help="Always fetch, ignoring the local cache")
    parser.add_argument("--no-colors", action="store_true", help="Skip renderer color mapping")
    parser.add_argument("--tree", action="store_true", help="Print the indented tumor-type tree")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=None,
        help="Logging level (default from ONCOTREE2GRAPH_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    options = BuildOptions(
        version=args.version,
        url=args.url,
        use_cache=not args.no_cache,
        output_path=args.output,
        map_colors=not args.no_colors,
    )

    try:
        raw = args.input.read_bytes() if args.input else None
        result, _ = asyncio.run(ingest_oncotree(options, raw=raw))
    except (Oncotree2graphError, OSError) as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result.summary)
    if result.unmapped_colors:
        print(f"Unmapped colors: {', '.join(result.unmapped_colors)}")
    if args.tree:
        print()
        print(result.tree)
    return 0


if __name__ == "__main__":
    sys.exit(main())
