#!/usr/bin/env python3
"""
Sliding Tile CLI: Query the app-info channel or serve the HTTP bridge.

Usage:
    python -m sliding_tile.cli invoke                      # getVersion on the app-info channel
    python -m sliding_tile.cli invoke someMethod --arguments '{"a": 1}'
    python -m sliding_tile.cli serve --port 8080

`invoke` prints the response envelope as JSON and exits with
0 (success), 1 (error) or 2 (not implemented).
"""

import argparse
import json
import sys

import uvicorn

from sliding_tile.app_info import CHANNEL, GET_VERSION, configure_channels
from sliding_tile.channels import ChannelRegistry
from sliding_tile.config import get_settings
from sliding_tile.errors import SlidingTileError
from sliding_tile.logging import setup_logging
from sliding_tile.models import MethodCall

EXIT_CODES = {"success": 0, "error": 1, "not_implemented": 2}


def invoke(channel: str, method: str, arguments: str | None = None) -> int:
    """Invoke `method` on `channel` and print the response envelope."""
    try:
        args = json.loads(arguments) if arguments else None
    except json.JSONDecodeError as e:
        print(f"Error: --arguments is not valid JSON: {e}", file=sys.stderr)
        return 1

    registry = ChannelRegistry()
    configure_channels(registry)

    try:
        response = registry.invoke(channel, MethodCall(method=method, arguments=args))
    except SlidingTileError as e:
        print(json.dumps({"error": e.to_dict()}, indent=2), file=sys.stderr)
        return 1

    print(response.model_dump_json(indent=2))
    return EXIT_CODES[response.status]


def serve(host: str, port: int, reload: bool = False) -> None:
    uvicorn.run("app:app", host=host, port=port, reload=reload)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Sliding Tile app-info bridge")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    invoke_parser = subparsers.add_parser(
        "invoke", help="Invoke a method on a channel"
    )
    invoke_parser.add_argument(
        "method", nargs="?", default=GET_VERSION, help=f"Method name (default: {GET_VERSION})"
    )
    invoke_parser.add_argument(
        "--channel", default=CHANNEL, help=f"Channel name (default: {CHANNEL})"
    )
    invoke_parser.add_argument("--arguments", help="Method arguments as JSON")

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP bridge")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    # stdout carries only the response envelope; warnings and up go to stderr.
    setup_logging(level=30, json_output=settings.log_json, stream=sys.stderr)

    if args.command == "invoke":
        return invoke(args.channel, args.method, args.arguments)
    if args.command == "serve":
        serve(args.host, args.port, args.reload)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
