"""Command-line entry point.

    phaeton region.osm.pbf [--output graph.msgpack] [--log-level DEBUG]

Reads the extract into a graph, prints its counts and optionally saves
a snapshot. Exit codes: 0 on success, 1 on any phaeton error, 2 on
usage errors (argparse).
Invalid PHAETON_* environment settings are reported like any other
phaeton error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import get_config
from .container import Container
from .domain.errors import PhaetonError, UsageError
from .logging_setup import configure_logging
from .services import GraphService

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phaeton",
        description="Load an OpenStreetMap road network (*.osm.pbf) into a graph.",
    )
    parser.add_argument("extract", nargs="?", help="Path to the *.osm.pbf extract")
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        default=None,
        help="Write a graph snapshot to this path",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Log level (e.g. INFO, DEBUG); overrides PHAETON_LOG_LEVEL",
    )
    parser.add_argument("-v", "--version", action="version", version=f"phaeton {__version__}")
    return parser


def run(args: argparse.Namespace, container: Container) -> int:
    """Execute a parsed invocation.

    Raises:
        UsageError: If no extract path was given.
        PhaetonError: Propagated from ingestion or persistence.
    """
    if not args.extract:
        raise UsageError("need a *.osm.pbf file as argument", argument="extract")

    service: GraphService = container.resolve(GraphService)
    graph = service.ingest(Path(args.extract))

    summary = graph.summary()
    print(f"ways:     {summary.edges}\nvertices: {summary.vertices}")

    if args.output:
        written = service.save(graph, Path(args.output))
        print(f"snapshot: {written}")

    return 0


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(get_config().observability, level=args.log_level)
        return run(args, container or Container.create_default())
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"phaeton: error: {exc}", file=sys.stderr)
        return 2
    except PhaetonError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"phaeton: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
