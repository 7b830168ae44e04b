"""Tagged description of where an embed's content lives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_LOCAL_SCHEME = "vault://"


@dataclass(frozen=True, slots=True)
class LocalSource:
    """A path inside the local store, with the scheme marker already removed."""

    path: str


@dataclass(frozen=True, slots=True)
class RemoteSource:
    """A URL fetched with a single GET request."""

    url: str


SourceDescriptor = Union[LocalSource, RemoteSource]


def classify_location(location: str, local_scheme: str = DEFAULT_LOCAL_SCHEME) -> SourceDescriptor:
    """Build the descriptor for ``location`` with a plain prefix test.

    Locations starting with ``local_scheme`` are local store paths; anything
    else is handed to the remote fetcher as-is.
    """
    if local_scheme and location.startswith(local_scheme):
        return LocalSource(path=location[len(local_scheme):])
    return RemoteSource(url=location)


__all__ = [
    "DEFAULT_LOCAL_SCHEME",
    "LocalSource",
    "RemoteSource",
    "SourceDescriptor",
    "classify_location",
]
