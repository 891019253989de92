"""Service holding the caller-side state of a drift analysis session.

The engine is stateless. The "current specification" and "current traffic"
documents, and the report derived from them, live here: files are submitted
one batch at a time, and the analysis runs once both documents exist.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from contractdrift.components.intake.document_loader_comp import load_document
from contractdrift.helpers.dto.config_dto import DriftSettings
from contractdrift.helpers.dto.drift_dto import DriftDashboard
from contractdrift.helpers.dto.intake_dto import LoadedDocument, SubmissionResult
from contractdrift.workflows.drift.analyze_contract_wf import analyze_contract_workflow
from contractdrift.workflows.drift.assemble_report_wf import assemble_dashboard
from contractdrift.workflows.drift.intake_documents_wf import intake_documents_workflow

logger = logging.getLogger(__name__)


class DriftService:
    """Accepts specification/traffic files and produces drift dashboards.

    Example:
        >>> service = DriftService(DriftSettings())
        >>> result = service.submit_files([("shop.yaml", spec_text)])
        >>> result.ready
        False
        >>> result = service.submit_files([("traffic.json", traffic_text)])
        >>> result.ready
        True
    """

    def __init__(self, settings: DriftSettings) -> None:
        self._settings = settings
        self._lock = threading.Lock()
        self._spec: LoadedDocument | None = None
        self._traffic: LoadedDocument | None = None
        self._dashboard: DriftDashboard | None = None

    @property
    def settings(self) -> DriftSettings:
        return self._settings

    def analyze(
        self,
        spec_doc: dict[str, Any],
        traffic_doc: dict[str, Any],
        *,
        spec_name: str | None = None,
    ) -> DriftDashboard:
        """Run the engine on two already-parsed documents (no session state)."""
        report = analyze_contract_workflow(spec_doc, traffic_doc, spec_name=spec_name)
        return assemble_dashboard(report)

    def load_file(self, name: str, content: str | bytes) -> LoadedDocument:
        """Decode and classify one file with the configured markup parser.

        Raises:
            DocumentParseError: If the file cannot be decoded
        """
        return load_document(name, content, markup_parser=self._settings.markup_parser)

    def submit_files(self, files: Iterable[tuple[str, str | bytes]]) -> SubmissionResult:
        """Accept a batch of files and analyze once both documents are present.

        A newly accepted document replaces the stored one of the same role.
        Files that fail to parse leave the stored documents untouched.
        The specification file name is used as the report name.
        """
        intake = intake_documents_workflow(files, markup_parser=self._settings.markup_parser)

        with self._lock:
            if intake.spec is not None:
                self._spec = intake.spec
            if intake.traffic is not None:
                self._traffic = intake.traffic

            if (intake.spec is not None or intake.traffic is not None) and self._spec and self._traffic:
                self._dashboard = self.analyze(
                    self._spec.content,
                    self._traffic.content,
                    spec_name=self._spec.name,
                )
                logger.info(
                    f"[Drift] Analyzed {self._spec.name} against {self._traffic.name}: "
                    f"health {self._dashboard.health_score}%"
                )

            return SubmissionResult(
                intake=intake,
                spec_name=self._spec.name if self._spec else None,
                traffic_name=self._traffic.name if self._traffic else None,
                dashboard=self._dashboard,
            )

    def current_dashboard(self) -> DriftDashboard | None:
        """Most recent dashboard, or None before both documents were accepted."""
        with self._lock:
            return self._dashboard

    def reset(self) -> None:
        """Forget the stored documents and dashboard (start over)."""
        with self._lock:
            self._spec = None
            self._traffic = None
            self._dashboard = None
        logger.info("[Drift] Session reset")
