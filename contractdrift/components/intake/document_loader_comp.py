"""Decode uploaded files into documents and decide which role they play.

Accepted files: ``.yaml``/``.yml`` (markup), ``.json`` and ``.har`` (JSON).
Markup files and documents carrying an ``openapi``/``swagger`` key are
specifications; everything else is traffic.
"""

from __future__ import annotations

import json
import logging
from pathlib import PurePath
from typing import Any, Literal

import yaml

from contractdrift.components.intake.har_aggregator_comp import aggregate_har, is_har_document
from contractdrift.components.intake.markup_parser_comp import parse_markup
from contractdrift.helpers.dto.intake_dto import DocumentRole, LoadedDocument
from contractdrift.helpers.exceptions import DocumentParseError, MarkupParseError

logger = logging.getLogger(__name__)

MARKUP_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml")
JSON_EXTENSIONS: tuple[str, ...] = (".json", ".har")
ACCEPTED_EXTENSIONS: tuple[str, ...] = MARKUP_EXTENSIONS + JSON_EXTENSIONS

MarkupParser = Literal["subset", "yaml"]


def file_extension(name: str) -> str:
    return PurePath(name).suffix.lower()


def is_accepted_file(name: str) -> bool:
    """True when the file name has one of the accepted extensions."""
    return file_extension(name) in ACCEPTED_EXTENSIONS


def _as_text(name: str, content: str | bytes) -> str:
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentParseError(name, f"not valid UTF-8 ({e.reason})") from e


def decode_document(
    name: str,
    content: str | bytes,
    *,
    markup_parser: MarkupParser = "subset",
) -> dict[str, Any]:
    """Decode file content into a mapping.

    Args:
        name: File name (its extension selects the decoder)
        content: Raw file content
        markup_parser: "subset" for the built-in parser, "yaml" for PyYAML

    Returns:
        Decoded top-level mapping

    Raises:
        DocumentParseError: If the file cannot be decoded or is not a mapping
    """
    extension = file_extension(name)
    if extension not in ACCEPTED_EXTENSIONS:
        raise DocumentParseError(name, f"unsupported file type '{extension or name}'")

    text = _as_text(name, content)
    try:
        if extension in JSON_EXTENSIONS:
            doc = json.loads(text)
        elif markup_parser == "yaml":
            doc = yaml.safe_load(text)
        else:
            doc = parse_markup(text)
    except (ValueError, MarkupParseError, yaml.YAMLError) as e:
        raise DocumentParseError(name, str(e)) from e

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise DocumentParseError(name, f"expected a mapping at top level, got {type(doc).__name__}")
    return doc


def classify_document(name: str, doc: dict[str, Any]) -> DocumentRole:
    """Decide whether a decoded document is the specification or the traffic."""
    if file_extension(name) in MARKUP_EXTENSIONS or "openapi" in doc or "swagger" in doc:
        return "spec"
    return "traffic"


def load_document(
    name: str,
    content: str | bytes,
    *,
    markup_parser: MarkupParser = "subset",
) -> LoadedDocument:
    """Decode, classify and (for HTTP archives) aggregate one file.

    Raises:
        DocumentParseError: If the file cannot be decoded
    """
    doc = decode_document(name, content, markup_parser=markup_parser)
    role = classify_document(name, doc)
    if role == "traffic" and is_har_document(doc):
        logger.info(f"[Intake] Aggregating HTTP archive {name}")
        doc = aggregate_har(doc)
    return LoadedDocument(name=name, role=role, content=doc)
