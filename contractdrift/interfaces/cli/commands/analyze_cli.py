"""
Analyze command: Compare a specification file against a traffic file.

Architecture:
- Uses CLI bootstrap service to get a DriftService instance
- File roles come from argument position, not from content sniffing
- Both files are always read so every parse failure is reported at once
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.markup import escape

from contractdrift.helpers.dto.intake_dto import DocumentRole, LoadedDocument
from contractdrift.helpers.exceptions import DocumentParseError
from contractdrift.interfaces.cli.cli_ui import DriftDisplay, console, print_error, print_warning
from contractdrift.services.cli_bootstrap_svc import get_drift_service
from contractdrift.services.drift_svc import DriftService


def load_input(service: DriftService, raw_path: str, role: DocumentRole) -> LoadedDocument | None:
    """Read and decode one input file, printing the reason on failure."""
    path = Path(raw_path)
    try:
        content = path.read_bytes()
    except OSError as e:
        print_error(f"Cannot read {escape(raw_path)}: {escape(e.strerror or str(e))}")
        return None

    try:
        loaded = service.load_file(path.name, content)
    except DocumentParseError as e:
        print_error(escape(str(e)))
        return None

    if loaded.role != role:
        print_warning(f"{escape(loaded.name)} looks like {loaded.role} data, using it as {role}")
    return loaded


def cmd_analyze(args: argparse.Namespace) -> int:
    """
    Analyze SPEC against TRAFFIC and print the drift dashboard.
    Returns 1 when either file cannot be read or decoded.
    """
    service = get_drift_service()

    spec = load_input(service, args.spec, "spec")
    traffic = load_input(service, args.traffic, "traffic")
    if spec is None or traffic is None:
        return 1

    try:
        dashboard = service.analyze(spec.content, traffic.content, spec_name=args.name or spec.name)
    except Exception as e:
        print_error(f"Error during analysis: {escape(str(e))}")
        return 1

    if args.json:
        console.print_json(json.dumps(dashboard.to_dict()))
    else:
        DriftDisplay.show(dashboard)
    return 0
