"""Parser for the minimal indentation-based markup subset.

Supported:
- ``key: value`` pairs, split on the first colon (values may contain colons)
- nesting by indentation under a key with an empty value
- ``true``/``false`` coerced to booleans, surrounding quotes stripped
- ``|`` and ``>`` block scalars, kept as text
- blank lines and ``#`` comment lines

List items (``- ...``) are dropped together with the lines nested under
them, so the key that holds a list reads as an empty mapping. Lines without
a colon are ignored. Tab indentation and lines indented under a scalar
value raise MarkupParseError.

Parsing is a recursive descent over the token stream produced by
tokenize_markup().
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Any

from contractdrift.helpers.exceptions import MarkupParseError

_QUOTES = "\"'"
_BLOCK_SCALAR_INDICATORS = ("|", ">", "|-", ">-", "|+", ">+")


@dataclass(frozen=True)
class MarkupToken:
    """One significant ``key: value`` line."""

    line: int  # 1-based line number
    indent: int
    key: str
    value: str  # Raw value text, stripped; empty means "opens a mapping"
    literal: bool = False  # Block scalar text, used as is


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _nested_block_end(lines: list[str], start: int, indent: int) -> int:
    """Index of the first non-blank line from ``start`` indented no deeper than ``indent``."""
    pos = start
    while pos < len(lines):
        if lines[pos].strip() and _indent_of(lines[pos]) <= indent:
            break
        pos += 1
    return pos


def _block_scalar_text(lines: list[str], folded: bool) -> str:
    text = textwrap.dedent("\n".join(lines)).strip("\n")
    if folded:
        return " ".join(part.strip() for part in text.splitlines() if part.strip())
    return text


def tokenize_markup(text: str) -> list[MarkupToken]:
    """Split markup text into key/value tokens, dropping blanks, comments and list items."""
    tokens: list[MarkupToken] = []
    lines = text.splitlines()
    pos = 0
    while pos < len(lines):
        raw_line = lines[pos]
        number = pos + 1
        pos += 1

        stripped = raw_line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        leading = raw_line[: _indent_of(raw_line)]
        if "\t" in leading:
            raise MarkupParseError(number, "tab indentation is not supported")
        indent = len(leading)

        if stripped == "-" or stripped.startswith("- "):
            pos = _nested_block_end(lines, pos, indent)
            continue
        if ":" not in stripped:
            continue

        key, _, value = stripped.partition(":")
        key = key.strip()
        value = value.strip()
        if not key:
            raise MarkupParseError(number, "empty key")

        if value in _BLOCK_SCALAR_INDICATORS:
            end = _nested_block_end(lines, pos, indent)
            block_text = _block_scalar_text(lines[pos:end], folded=value.startswith(">"))
            tokens.append(MarkupToken(line=number, indent=indent, key=key, value=block_text, literal=True))
            pos = end
            continue

        tokens.append(MarkupToken(line=number, indent=indent, key=key, value=value))
    return tokens


def coerce_scalar(value: str) -> bool | str:
    """Coerce a raw value: booleans first, then strip one leading and one trailing quote."""
    if value == "true":
        return True
    if value == "false":
        return False
    if value[:1] in _QUOTES:
        value = value[1:]
    if value[-1:] in _QUOTES:
        value = value[:-1]
    return value


def _parse_block(tokens: list[MarkupToken], pos: int) -> tuple[dict[str, Any], int]:
    """Parse sibling tokens sharing the indentation of tokens[pos]."""
    block: dict[str, Any] = {}
    indent = tokens[pos].indent

    while pos < len(tokens) and tokens[pos].indent >= indent:
        token = tokens[pos]
        if token.indent != indent:
            raise MarkupParseError(token.line, "unexpected indentation")

        has_children = pos + 1 < len(tokens) and tokens[pos + 1].indent > indent
        if token.value or token.literal:
            if has_children:
                raise MarkupParseError(tokens[pos + 1].line, "cannot nest under a scalar value")
            block[token.key] = token.value if token.literal else coerce_scalar(token.value)
            pos += 1
        elif has_children:
            block[token.key], pos = _parse_block(tokens, pos + 1)
        else:
            block[token.key] = {}
            pos += 1

    return block, pos


def parse_markup(text: str) -> dict[str, Any]:
    """Parse markup text into nested dicts.

    Raises:
        MarkupParseError: If the text falls outside the supported subset

    Example:
        >>> parse_markup("info:\\n  title: Shop API\\npaths:\\n  /users:\\n    get:\\n      deprecated: true")
        {'info': {'title': 'Shop API'}, 'paths': {'/users': {'get': {'deprecated': True}}}}
    """
    tokens = tokenize_markup(text)
    if not tokens:
        return {}

    result, pos = _parse_block(tokens, 0)
    if pos < len(tokens):
        raise MarkupParseError(tokens[pos].line, "indentation does not match any open block")
    return result
