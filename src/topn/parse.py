"""Line and argument parsing."""

from __future__ import annotations

import json
import re

from topn.errors import ArgumentError, FormatError
from topn.models import Record

DELIMITER = ": "

_INT_RE = re.compile(r"\s*([+-]?[0-9]+)\s*")


def parse_line(line: str, line_number: int) -> Record | None:
    """Parse ``"<integer>: <json-object>"`` into a Record.

    Returns None for blank lines. Raises FormatError for anything else
    that does not parse.
    """
    if not line.strip():
        return None

    idx = line.find(DELIMITER)
    if idx == -1:
        raise FormatError("Invalid line format", line_number)
    prefix, payload_text = line[:idx], line[idx + len(DELIMITER):]

    m = _INT_RE.fullmatch(prefix)
    if m is None:
        raise FormatError("Invalid score format", line_number)
    try:
        score = int(m.group(1))
    except ValueError:  # over the int string-conversion digit limit
        raise FormatError("Invalid score format", line_number) from None

    try:
        payload = json.loads(payload_text)
    except (ValueError, RecursionError):
        raise FormatError("Invalid JSON", line_number) from None

    record_id = payload.get("id") if isinstance(payload, dict) else None
    if not isinstance(record_id, str) or not record_id:
        raise FormatError("Missing or invalid 'id' field", line_number)

    return Record(score=score, id=record_id, line=line_number)


def parse_count(text: str) -> int:
    """Parse the N argument; it must be a positive base-10 integer."""
    m = _INT_RE.fullmatch(text)
    try:
        n = int(m.group(1)) if m else 0
    except ValueError:
        n = 0
    if n <= 0:
        raise ArgumentError("N must be a positive integer")
    return n
