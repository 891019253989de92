"""Intake domain DTOs.

Results of turning uploaded files into structured documents.

Rules:
- Import only stdlib and typing (no contractdrift.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from contractdrift.helpers.dto.drift_dto import DriftDashboard

DocumentRole = Literal["spec", "traffic"]


@dataclass(frozen=True)
class LoadedDocument:
    """A decoded input file and the role it plays in the analysis."""

    name: str
    role: DocumentRole
    content: dict[str, Any]


@dataclass(frozen=True)
class FileParseFailure:
    """An input file that could not be decoded."""

    name: str
    reason: str


@dataclass(frozen=True)
class IntakeResult:
    """Outcome of processing a batch of files.

    The last accepted document of each role wins.
    """

    spec: LoadedDocument | None = None
    traffic: LoadedDocument | None = None
    failures: tuple[FileParseFailure, ...] = field(default_factory=tuple)
    skipped: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SubmissionResult:
    """Result of submitting files to the drift service."""

    intake: IntakeResult
    spec_name: str | None
    traffic_name: str | None
    dashboard: DriftDashboard | None = None

    @property
    def ready(self) -> bool:
        return self.dashboard is not None
