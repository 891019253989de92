"""Workflow for turning a batch of uploaded files into documents.

Each file is processed independently: a file that fails to parse is
reported and does not prevent the other files from being accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from contractdrift.components.intake.document_loader_comp import MarkupParser, is_accepted_file, load_document
from contractdrift.helpers.dto.intake_dto import FileParseFailure, IntakeResult, LoadedDocument
from contractdrift.helpers.exceptions import DocumentParseError

logger = logging.getLogger(__name__)


def intake_documents_workflow(
    files: Iterable[tuple[str, str | bytes]],
    *,
    markup_parser: MarkupParser = "subset",
) -> IntakeResult:
    """Decode and classify each ``(name, content)`` pair.

    Files with unsupported extensions are skipped. When several files of
    the same role are given, the last one wins.

    Args:
        files: Pairs of file name and raw content
        markup_parser: Parser for .yaml/.yml files ("subset" or "yaml")

    Returns:
        IntakeResult with the accepted spec/traffic documents and per-file failures
    """
    spec: LoadedDocument | None = None
    traffic: LoadedDocument | None = None
    failures: list[FileParseFailure] = []
    skipped: list[str] = []

    for name, content in files:
        if not is_accepted_file(name):
            logger.debug(f"[Intake] Skipping unsupported file {name}")
            skipped.append(name)
            continue

        try:
            loaded = load_document(name, content, markup_parser=markup_parser)
        except DocumentParseError as e:
            logger.warning(f"[Intake] {e}")
            failures.append(FileParseFailure(name=name, reason=e.reason))
            continue

        logger.info(f"[Intake] Accepted {name} as {loaded.role}")
        if loaded.role == "spec":
            spec = loaded
        else:
            traffic = loaded

    return IntakeResult(spec=spec, traffic=traffic, failures=tuple(failures), skipped=tuple(skipped))
