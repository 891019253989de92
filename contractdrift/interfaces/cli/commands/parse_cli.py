"""
Parse command: Decode a single input file and print the structured document.

Useful to check how a specification or traffic file is read before
running an analysis.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.markup import escape

from contractdrift.helpers.exceptions import DocumentParseError
from contractdrift.interfaces.cli.cli_ui import console, print_error, print_info
from contractdrift.services.cli_bootstrap_svc import get_drift_service


def cmd_parse(args: argparse.Namespace) -> int:
    """Print the decoded document for one file. Returns 1 on read/parse failure."""
    service = get_drift_service()
    path = Path(args.file)

    try:
        content = path.read_bytes()
    except OSError as e:
        print_error(f"Cannot read {escape(args.file)}: {escape(e.strerror or str(e))}")
        return 1

    try:
        loaded = service.load_file(path.name, content)
    except DocumentParseError as e:
        print_error(escape(str(e)))
        return 1

    print_info(f"{escape(loaded.name)} read as {loaded.role}")
    console.print_json(json.dumps(loaded.content, default=str))
    return 0
