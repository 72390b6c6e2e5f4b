"""Parsing of the free-form ``extra-headers`` input.

Two formats are accepted and tried in a fixed order:

  1. A JSON object: ``{"X-Team": "core", "X-Retry": 2}``
  2. Newline separated ``Key: Value`` lines

When the whole input is a JSON object the line format is never attempted,
even if a value looks like ``a: b``.
"""

from __future__ import annotations

import json
import re
from typing import Any

from gatus_snitcher.errors import HeaderParseError

REDACTED = "REDACTED"

_LINE_SPLIT = re.compile(r"\r?\n")


def _header_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    return json.dumps(value, separators=(",", ":"))


def parse_json_headers(raw: str) -> dict[str, str] | None:
    """Parse *raw* as a JSON object, or return None if it is not one."""
    try:
        obj = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(obj, dict):
        return None

    return {
        key: _header_value(value)
        for key, value in obj.items()
        if value is not None
    }


def parse_line_headers(raw: str) -> dict[str, str]:
    """Parse ``Key: Value`` lines. Only the first colon separates key and value."""
    headers: dict[str, str] = {}
    for line in _LINE_SPLIT.split(raw):
        stripped = line.strip()
        if not stripped:
            continue
        idx = stripped.find(":")
        if idx <= 0:
            raise HeaderParseError(line)
        key = stripped[:idx].strip()
        value = stripped[idx + 1:].strip()
        if not key:
            continue
        headers[key] = value
    return headers


def parse_extra_headers(raw: str) -> dict[str, str]:
    trimmed = raw.strip()
    if not trimmed:
        return {}

    headers = parse_json_headers(trimmed)
    if headers is not None:
        return headers
    return parse_line_headers(trimmed)


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Mask every non-empty header value for logging."""
    return {key: REDACTED if value else "" for key, value in headers.items()}
