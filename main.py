"""Simple CLI entry to check entry requirements or run the web app."""

import argparse
import asyncio
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from entry_check import TripRequest, resolve_trip
from entry_check.config import get_settings
from entry_check.errors import ConfigurationError


def check(origin: str, destination: str, output: Optional[Path]) -> int:
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"Error (configuration): {exc.message}")
        return 1

    outcome = asyncio.run(resolve_trip(TripRequest(origin=origin, destination=destination), settings))
    if outcome.view is None:
        print(f"Error ({outcome.failure.value}): {outcome.message}")
        return 1

    result = json.dumps(asdict(outcome.view), indent=2)
    if output:
        output.write_text(result)
        print(f"Requirements saved to {output}")
    else:
        print(result)
    return 0


def serve(port: Optional[int]) -> int:
    import uvicorn

    from entry_check.api import app

    uvicorn.run(app, host="0.0.0.0", port=port or get_settings().port)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Look up travel entry requirements.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Query requirements for one trip")
    check_parser.add_argument("origin", help="Origin country code, e.g. US")
    check_parser.add_argument("destination", help="Destination country code, e.g. FR")
    check_parser.add_argument("--output", type=Path, help="Optional path to save the result JSON")

    serve_parser = subparsers.add_parser("serve", help="Run the web app")
    serve_parser.add_argument("--port", type=int, help="Port to listen on (defaults to $PORT or 3000)")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        return check(args.origin, args.destination, args.output)
    return serve(args.port)


if __name__ == "__main__":
    raise SystemExit(main())
