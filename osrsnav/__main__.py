# osrsnav/__main__.py
"""Entry point: python -m osrsnav"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .client import NavClient
from .config import settings
from .edges import encode_path
from .models import Coordinate, GameState

logger = logging.getLogger("osrsnav")


def _cmd_select(client: NavClient, args: argparse.Namespace) -> int:
    selection = client.fetch_selection()
    if selection is None:
        return 1
    print(json.dumps(selection.to_wire(), indent=2))
    return 0


def _cmd_path(client: NavClient, args: argparse.Namespace) -> int:
    if args.state is not None:
        game_state = GameState.model_validate_json(args.state.read_text(encoding="utf-8"))
    else:
        game_state = GameState()

    path = client.request_path(args.start, args.end, game_state)
    if path is None:
        return 1
    print(json.dumps(encode_path(path), indent=2))
    logger.info(f"{len(path)} edges from {args.start} to {args.end}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="osrsnav", description="Query an osrsnav navigation service")
    parser.add_argument("--url", type=str, default=settings.NAV_URL, help="Base URL of the nav service")
    parser.add_argument("--timeout", type=float, default=settings.REQUEST_TIMEOUT_S)
    parser.add_argument("--log-level", type=str, default=settings.LOG_LEVEL)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("select", help="Print the data selection the service asks for")

    path_parser = sub.add_parser("path", help="Request a path between two coordinates")
    path_parser.add_argument("start", type=Coordinate.parse, help="x,y[,plane]")
    path_parser.add_argument("end", type=Coordinate.parse, help="x,y[,plane]")
    path_parser.add_argument(
        "--state",
        type=Path,
        default=None,
        help="GameState JSON file to send (default: empty state)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    commands = {"select": _cmd_select, "path": _cmd_path}
    with NavClient(args.url, timeout=args.timeout) as client:
        return commands[args.command](client, args)


if __name__ == "__main__":
    sys.exit(main())
