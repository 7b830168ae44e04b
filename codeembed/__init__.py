"""Embed line ranges of local or remote source files into documents."""

from .config import EmbedSettings
from .embed import EmbedRequest, EmbedResult
from .errors import (
    EmbedError,
    InvalidSpec,
    LineRangeError,
    Malformed,
    MissingSource,
    SourceUnavailable,
    diagnostic_message,
)
from .lines import extract_lines, format_line_ranges, parse_line_ranges
from .orchestration import DocumentRenderer, EmbedAssembler
from .source import LocalSource, LocalStore, RemoteFetcher, RemoteSource, SourceResolver

__all__ = [
    "EmbedSettings",
    "EmbedRequest",
    "EmbedResult",
    "EmbedError",
    "InvalidSpec",
    "LineRangeError",
    "Malformed",
    "MissingSource",
    "SourceUnavailable",
    "diagnostic_message",
    "extract_lines",
    "format_line_ranges",
    "parse_line_ranges",
    "DocumentRenderer",
    "EmbedAssembler",
    "LocalSource",
    "LocalStore",
    "RemoteFetcher",
    "RemoteSource",
    "SourceResolver",
]
