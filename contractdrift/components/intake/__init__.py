"""Intake components for turning uploaded files into structured documents.

This module provides components for:
- Parsing the minimal indentation-based markup subset
- Decoding and classifying specification/traffic files
- Aggregating HTTP archives into traffic statistics
"""

from contractdrift.components.intake.document_loader_comp import (
    classify_document,
    decode_document,
    is_accepted_file,
    load_document,
)
from contractdrift.components.intake.har_aggregator_comp import aggregate_har, is_har_document
from contractdrift.components.intake.markup_parser_comp import parse_markup, tokenize_markup

__all__ = [
    "aggregate_har",
    "classify_document",
    "decode_document",
    "is_accepted_file",
    "is_har_document",
    "load_document",
    "parse_markup",
    "tokenize_markup",
]
