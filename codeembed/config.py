from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Tuple

from .source.descriptor import DEFAULT_LOCAL_SCHEME

logger = logging.getLogger("codeembed")

DEFAULT_LANGUAGES: Tuple[str, ...] = (
    "c", "cpp", "java", "python", "go", "ruby", "javascript", "js",
    "typescript", "ts", "shell", "sh", "bash",
)


@dataclass(slots=True)
class EmbedSettings:
    """Runtime configuration shared by the CLI, API and MCP server."""

    store_root: str = "."
    local_scheme: str = DEFAULT_LOCAL_SCHEME
    languages: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_LANGUAGES)
    http_timeout: float | None = None
    max_concurrency: int = 5
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EmbedSettings":
        def _int_env(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                logger.warning("Invalid integer for %s: %s", name, raw)
                return default

        def _optional_float(name: str) -> float | None:
            raw = os.getenv(name)
            if not raw:
                return None
            try:
                return float(raw)
            except ValueError:
                logger.warning("Invalid number for %s: %s", name, raw)
                return None

        languages = os.getenv("CODEEMBED_LANGUAGES")

        return cls(
            store_root=os.getenv("CODEEMBED_STORE_ROOT", "."),
            local_scheme=os.getenv("CODEEMBED_LOCAL_SCHEME", DEFAULT_LOCAL_SCHEME),
            languages=parse_languages(languages) if languages else DEFAULT_LANGUAGES,
            http_timeout=_optional_float("CODEEMBED_HTTP_TIMEOUT"),
            max_concurrency=max(1, _int_env("CODEEMBED_MAX_CONCURRENCY", 5)),
            log_level=os.getenv("CODEEMBED_LOG_LEVEL", "INFO"),
        )


def parse_languages(raw: str) -> Tuple[str, ...]:
    """Split a comma separated language list, dropping blanks and duplicates."""
    seen: list[str] = []
    for item in raw.split(","):
        language = item.strip()
        if language and language not in seen:
            seen.append(language)
    return tuple(seen)


__all__ = ["EmbedSettings", "DEFAULT_LANGUAGES", "parse_languages"]
