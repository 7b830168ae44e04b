"""Line range parsing and line extraction."""

from .extractor import extract_lines, split_lines
from .ranges import format_line_ranges, parse_line_ranges

__all__ = [
    "extract_lines",
    "split_lines",
    "format_line_ranges",
    "parse_line_ranges",
]
