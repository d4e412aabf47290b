"""
Run the traversal operations on a graph file.

Usage:
    python main.py --graph cycle.json --start A --end C
"""

import argparse
import logging

from constants import DEFAULT_GRAPH
from utils.display import display_reachable_values, display_traversal
from utils.loader import load_graph

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Depth-first traversals of a graph")
    parser.add_argument("--graph", default=DEFAULT_GRAPH, help="Graph filename")
    parser.add_argument("--start", help="Start vertex key (defaults to the file's)")
    parser.add_argument("--end", help="Target vertex of the increasing path search")
    parser.add_argument(
        "--print", action="store_true", help="Print reachable values one per line"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        vertices, file_start = load_graph(args.graph)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    start_key = args.start if args.start is not None else file_start
    if start_key is None:
        parser.error(f"No start vertex given and none set in {args.graph}")
    for key in (start_key, args.end):
        if key is not None and key not in vertices:
            parser.error(f"Unknown vertex {key!r} in {args.graph}")

    logger.info("Traversing %s from %s", args.graph, start_key)
    display_traversal(vertices, start_key, args.end)
    if args.print:
        display_reachable_values(vertices[start_key])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
