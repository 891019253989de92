#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from contractdrift.__version__ import __version__
from contractdrift.helpers.logging_helper import configure_logging
from contractdrift.interfaces.cli.commands.analyze_cli import cmd_analyze
from contractdrift.interfaces.cli.commands.parse_cli import cmd_parse
from contractdrift.services.cli_bootstrap_svc import get_config_service


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="drift",
        description="contractdrift - compare an API contract against observed traffic",
        epilog="Examples:\n"
        "  drift analyze openapi.yaml traffic.json     # Print the drift dashboard\n"
        "  drift analyze openapi.json capture.har --json\n"
        "  drift parse openapi.yaml                    # Show how a file is decoded",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'drift <command> --help' for command-specific help)",
    )

    # analyze: Run the drift engine
    s = sub.add_parser("analyze", help="Compare a specification against traffic statistics")
    s.add_argument("spec", help="specification file (.yaml, .yml or .json)")
    s.add_argument("traffic", help="traffic statistics file (.json or .har)")
    s.add_argument("--json", action="store_true", help="print the dashboard as JSON instead of tables")
    s.add_argument("--name", help="report name (default: specification file name)")
    s.set_defaults(func=cmd_analyze)

    # parse: Decode a single file
    s = sub.add_parser("parse", help="Decode one input file and print it as JSON")
    s.add_argument("file", help="file to decode")
    s.set_defaults(func=cmd_parse)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(get_config_service().make_settings().log_level)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
