"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import logging
import sys
from pathlib import Path

from commute_zones import __version__
from commute_zones.config import get_settings
from commute_zones.flows.zones import build_zone_map
from commute_zones.schemas import StrategyName, TransportMode


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="commute-zones",
        description="15/30/45 minute commute-time zones on an interactive map",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'zones' command - compute zones and write a map page
    zones_parser = subparsers.add_parser("zones", help="Compute commute zones and write a map page")
    origin = zones_parser.add_mutually_exclusive_group()
    origin.add_argument("--address", type=str, default=None, help="Address to search for")
    origin.add_argument("--lat", type=float, default=None, help="Origin latitude")
    zones_parser.add_argument("--lon", type=float, default=None, help="Origin longitude")
    zones_parser.add_argument(
        "--mode",
        type=str,
        default=str(TransportMode.WALKING),
        choices=[str(m) for m in TransportMode],
        help="Transport mode (default: walking)",
    )
    zones_parser.add_argument(
        "--strategy",
        type=str,
        default=None,
        choices=[str(s) for s in StrategyName],
        help="Force an isochrone strategy (default: chosen per mode)",
    )
    zones_parser.add_argument(
        "--minutes",
        type=int,
        nargs="+",
        default=None,
        help="Travel-time bands in minutes (default: 15 30 45)",
    )
    zones_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output HTML path (default: <site_dir>/index.html)",
    )

    # 'serve' command - serve written pages locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Route library logging to stderr."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"OpenRouteService key: {'configured' if settings.has_ors_key else 'missing'}")
    print(f"Navitia token: {'configured' if settings.has_navitia_token else 'missing'}")
    return 0


def cmd_zones(args: argparse.Namespace) -> int:
    """Handle the 'zones' command."""
    if (args.lat is None) != (args.lon is None) and args.address is None:
        print("Error: --lat and --lon must be given together.", file=sys.stderr)
        return 1

    summary = build_zone_map(
        address=args.address,
        lat=args.lat,
        lon=args.lon,
        mode=args.mode,
        strategy=args.strategy,
        thresholds=args.minutes,
        output=args.output,
    )
    if summary.get("error"):
        print(f"Error: {summary['error']}", file=sys.stderr)
        return 1

    print(f"{summary['zones']} zone(s) via {summary['strategy']}: {summary['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the written pages locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'commute-zones zones' first.", file=sys.stderr)
        return 1

    handler = http.server.SimpleHTTPRequestHandler
    handler.directory = str(site_dir)  # type: ignore[attr-defined]

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug)

    commands = {
        "info": cmd_info,
        "zones": cmd_zones,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
