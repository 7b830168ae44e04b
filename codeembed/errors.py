"""Error kinds raised while assembling an embed."""

from __future__ import annotations


class EmbedError(Exception):
    """Base error for a failed embed request.

    Every subclass is terminal for its request. ``kind`` is a stable short
    identifier callers can switch on; ``message`` is the human readable
    detail.
    """

    kind = "embed_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingSource(EmbedError):
    """The request did not name a source location."""

    kind = "missing_source"

    def __init__(self, message: str = "no source location given") -> None:
        super().__init__(message)


class InvalidSpec(EmbedError):
    """The line range specification could not be parsed."""

    kind = "invalid_spec"

    def __init__(self, spec: str, reason: str) -> None:
        super().__init__(f"invalid line range {spec!r}: {reason}")
        self.spec = spec
        self.reason = reason


class SourceUnavailable(EmbedError):
    """The local entry was missing or the remote fetch failed."""

    kind = "source_unavailable"

    def __init__(self, reason: str, *, location: str = "", remote: bool = False) -> None:
        super().__init__(f"{reason}: {location}" if location else reason)
        self.reason = reason
        self.location = location
        self.remote = remote


class Malformed(EmbedError):
    """The request metadata itself was structurally invalid."""

    kind = "malformed"

    def __init__(self, message: str = "invalid YAML") -> None:
        super().__init__(message)


class LineRangeError(ValueError):
    """Raised by the range parser for tokens outside the accepted grammar."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"{reason}: {token!r}")
        self.token = token
        self.reason = reason


def diagnostic_message(error: EmbedError) -> str:
    """Return the short message shown to the author in place of the code block."""

    if isinstance(error, Malformed):
        return f"ERROR: invalid embedding ({error.message})"
    if isinstance(error, MissingSource):
        return "ERROR: invalid source path"
    if isinstance(error, SourceUnavailable):
        if error.remote:
            return f"ERROR: couldn't fetch '{error.location}'"
        return f"ERROR: couldn't read file '{error.location}'"
    if isinstance(error, InvalidSpec):
        return f"ERROR: invalid line range '{error.spec}': {error.reason}"
    return f"ERROR: {error.message}"


__all__ = [
    "EmbedError",
    "MissingSource",
    "InvalidSpec",
    "SourceUnavailable",
    "Malformed",
    "LineRangeError",
    "diagnostic_message",
]
