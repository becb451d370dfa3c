"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from bee_heatmap import __version__
from bee_heatmap.api import create_server
from bee_heatmap.config import get_settings
from bee_heatmap.errors import HeatmapError, InvalidInput
from bee_heatmap.flows.heatmap import heatmap_flow
from bee_heatmap.schemas import FilterPolicy, TemperatureMode


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="bee-heatmap",
        description="Heatmap of bee-activity suitability around a point",
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

    heatmap_parser = subparsers.add_parser("heatmap", help="Compute a heatmap")
    heatmap_parser.add_argument("--lat", type=float, default=None, help="Center latitude")
    heatmap_parser.add_argument("--lon", type=float, default=None, help="Center longitude")
    heatmap_parser.add_argument(
        "--resolution", type=int, default=None, help="Grid points per axis (>= 2)"
    )
    heatmap_parser.add_argument(
        "--mode",
        choices=[m.value for m in TemperatureMode],
        default=None,
        help="Temperature fetch mode (sequential is slow: one request per point)",
    )
    heatmap_parser.add_argument(
        "--policy",
        choices=[p.value for p in FilterPolicy],
        default=None,
        help="basic keeps every point; extended keeps vegetated, non-negligible points",
    )
    heatmap_parser.add_argument(
        "--month",
        type=int,
        choices=range(12),
        metavar="0-11",
        default=None,
        help="Month index, 0 = January (default: current)",
    )
    heatmap_parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Write JSON here instead of stdout"
    )

    serve_parser = subparsers.add_parser("serve", help="Serve the bee map HTTP endpoint")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Grid: {settings.grid_resolution}x{settings.grid_resolution}, ±{settings.buffer_deg}°")
    print(f"Temperature mode: {settings.temperature_mode} ({settings.request_delay_ms} ms delay)")
    print(f"Filter policy: {settings.filter_policy} (min weight {settings.min_weight})")
    return 0


def cmd_heatmap(args: argparse.Namespace) -> int:
    """Handle the 'heatmap' command."""
    try:
        points = heatmap_flow(
            lat=args.lat,
            lon=args.lon,
            resolution=args.resolution,
            mode=args.mode,
            policy=args.policy,
            month=args.month,
            output=args.output,
        )
    except InvalidInput as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except HeatmapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        print(json.dumps(points, indent=2))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the bee map endpoint locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    with create_server(port, settings) as server:
        print(f"Serving on http://localhost:{port}/api/bee-map?lat=..&lon=.. (Ctrl+C to stop)")
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

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "info": cmd_info,
        "heatmap": cmd_heatmap,
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
