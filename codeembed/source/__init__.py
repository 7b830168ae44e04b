"""Source descriptors and the local/remote content resolver."""

from .descriptor import (
    DEFAULT_LOCAL_SCHEME,
    LocalSource,
    RemoteSource,
    SourceDescriptor,
    classify_location,
)
from .local_store import LocalStore
from .remote import RemoteFetcher
from .resolver import SourceResolver

__all__ = [
    "DEFAULT_LOCAL_SCHEME",
    "LocalSource",
    "RemoteSource",
    "SourceDescriptor",
    "classify_location",
    "LocalStore",
    "RemoteFetcher",
    "SourceResolver",
]
