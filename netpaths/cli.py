"""Command-line interface for netpaths."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from netpaths.dsl.loader import load_net_file
from netpaths.errors import NetError
from netpaths.logging import get_logger, set_global_log_level
from netpaths.model.net import Net
from netpaths.model.point import SimplePoint

logger = get_logger(__name__)


def _format_table(
    headers: List[str], rows: List[List[str]], min_width: int = 8
) -> str:
    """Align ``rows`` under ``headers`` as a plain-text table.

    Returns:
        The table, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    widths = [
        max(min_width, len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(headers)
    ]

    def line(cells: List[str]) -> str:
        return "   " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths))

    rule = "   " + "-+-".join("-" * w for w in widths)
    return "\n".join([line(headers), rule] + [line(row) for row in rows])


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _load(path: Path) -> Net[SimplePoint]:
    if not path.is_file():
        logger.error(f"Net file not found: {path}")
        sys.exit(1)
    try:
        return load_net_file(path)
    except Exception as exc:
        logger.error(f"Failed to load net '{path}': {exc}")
        sys.exit(1)


def _find_paths(
    path: Path,
    origin: str,
    destination: str,
    as_json: bool = False,
    separator: Optional[str] = None,
) -> None:
    """Print every simple path between two points of the net in ``path``."""
    net = _load(path)
    try:
        paths = net.find_paths(SimplePoint(origin), SimplePoint(destination))
    except NetError as exc:
        logger.error(exc.message)
        sys.exit(1)

    rendered = sorted(p.render(separator) for p in paths)
    logger.info(
        f"{len(rendered)} {_plural(len(rendered), 'path')} from '{origin}' to '{destination}'"
    )

    if as_json:
        payload = {
            "origin": origin,
            "destination": destination,
            "paths": [list(p.ids()) for p in sorted(paths, key=lambda p: p.render())],
        }
        print(json.dumps(payload, indent=2))
    else:
        for line in rendered:
            print(line)


def _inspect(path: Path) -> None:
    """Print the points of the net in ``path`` and any adjacency problems."""
    net = _load(path)

    rows = [
        [
            str(node.id),
            str(len(node.connected)),
            ", ".join(map(str, node.connected_ids())),
        ]
        for node in net.nodes
    ]
    print(f"{len(net)} {_plural(len(net), 'point')}")
    if rows:
        print(_format_table(["Point", "Degree", "Neighbors"], rows))

    problems = net.validate()
    for problem in problems:
        logger.warning(problem)
    if not problems:
        print("No adjacency problems found")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``netpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="netpaths",
        description="Enumerate simple paths in nets described by YAML files.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{paths,inspect}",
        help="Available commands",
    )

    paths_parser = subparsers.add_parser(
        "paths", help="List every simple path between two points"
    )
    paths_parser.add_argument("net", type=Path, help="Path to net YAML")
    paths_parser.add_argument("origin", help="Identifier of the first point")
    paths_parser.add_argument("destination", help="Identifier of the last point")
    paths_parser.add_argument(
        "--json", action="store_true", help="Print paths as JSON"
    )
    paths_parser.add_argument(
        "--separator",
        "-s",
        default=None,
        help="String placed between point identifiers (default: '-')",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the points of a net and check its adjacency"
    )
    inspect_parser.add_argument("net", type=Path, help="Path to net YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "paths":
        _find_paths(
            path=args.net,
            origin=args.origin,
            destination=args.destination,
            as_json=args.json,
            separator=args.separator,
        )
    elif args.command == "inspect":
        _inspect(args.net)


if __name__ == "__main__":
    main()
