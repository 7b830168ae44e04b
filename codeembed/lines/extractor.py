"""Select numbered lines out of a full source text."""

from __future__ import annotations

from typing import List, Sequence


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def extract_lines(full_text: str, lines: Sequence[int]) -> str:
    """Return the requested 1-based lines of ``full_text`` joined by newlines.

    An empty selection returns ``full_text`` untouched. Line numbers past the
    end of the text are skipped so a stale range against an edited source
    still renders whatever it can.
    """
    if not lines:
        return full_text

    source_lines = split_lines(full_text)
    line_count = len(source_lines)

    selected = [source_lines[index - 1] for index in lines if 1 <= index <= line_count]
    return "\n".join(selected)


__all__ = ["extract_lines", "split_lines"]
