"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class ContractDriftError(Exception):
    """Base class for errors surfaced by contractdrift."""


class DocumentParseError(ContractDriftError):
    """Raised when an input file cannot be decoded into a document.

    Carries the file name so callers can report the failure per file.
    """

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Error parsing {filename}: {reason}")
        self.filename = filename
        self.reason = reason


class MarkupParseError(ValueError):
    """Raised when markup text falls outside the supported subset."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line
