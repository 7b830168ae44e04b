"""Parse compact line range specifications such as ``"3,7-9,12"``."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..errors import LineRangeError

_SINGLE = re.compile(r"^([0-9]+)$")
_RANGE = re.compile(r"^([0-9]+)\s*-\s*([0-9]+)$")

# Upper bound on any line number; keeps range expansion bounded
MAX_LINE_NUMBER = 1_000_000


def parse_line_ranges(spec: str | None) -> List[int]:
    """Expand a range specification into a sorted, unique list of 1-based lines.

    Tokens are separated by commas and are either a single line number or an
    inclusive ``start-end`` range. Whitespace around tokens and around the
    hyphen is ignored. An empty or blank specification yields ``[]``, which
    callers treat as "keep every line".

    Raises:
        LineRangeError: If a token is malformed, contains a non-positive
            number or one above ``MAX_LINE_NUMBER``, or describes a range whose
            end precedes its start.
    """
    if spec is None or not spec.strip():
        return []

    selected: set[int] = set()
    for raw_token in spec.split(","):
        token = raw_token.strip()

        match = _SINGLE.match(token)
        if match:
            line = int(match.group(1))
            if line <= 0:
                raise LineRangeError(token, "line numbers start at 1")
            if line > MAX_LINE_NUMBER:
                raise LineRangeError(token, f"line numbers stop at {MAX_LINE_NUMBER}")
            selected.add(line)
            continue

        match = _RANGE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start <= 0 or end <= 0:
                raise LineRangeError(token, "line numbers start at 1")
            if end > MAX_LINE_NUMBER:
                raise LineRangeError(token, f"line numbers stop at {MAX_LINE_NUMBER}")
            if end < start:
                raise LineRangeError(token, "range end is before its start")
            selected.update(range(start, end + 1))
            continue

        raise LineRangeError(token, "expected a line number or a start-end range")

    return sorted(selected)


def format_line_ranges(lines: Iterable[int]) -> str:
    """Return the canonical compact form of a line set, e.g. ``"3-5,7"``."""
    ordered = sorted(set(lines))
    if not ordered:
        return ""

    parts: List[str] = []
    start = previous = ordered[0]
    for line in ordered[1:]:
        if line == previous + 1:
            previous = line
            continue
        parts.append(_format_run(start, previous))
        start = previous = line
    parts.append(_format_run(start, previous))

    return ",".join(parts)


def _format_run(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"


__all__ = ["MAX_LINE_NUMBER", "parse_line_ranges", "format_line_ranges"]
