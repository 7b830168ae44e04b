"""Turn a source descriptor into the full raw text of the source."""

from __future__ import annotations

import logging

import httpx

from ..errors import SourceUnavailable
from .descriptor import (
    DEFAULT_LOCAL_SCHEME,
    LocalSource,
    RemoteSource,
    SourceDescriptor,
    classify_location,
)
from .local_store import LocalStore
from .remote import RemoteFetcher

logger = logging.getLogger("codeembed")

REASON_NOT_FOUND = "not found"
REASON_UNREADABLE = "unreadable"
REASON_FETCH_FAILED = "fetch failed"


class SourceResolver:
    """Resolve local store paths and remote URLs into a single text buffer."""

    def __init__(
        self,
        store: LocalStore | None = None,
        fetcher: RemoteFetcher | None = None,
        *,
        local_scheme: str = DEFAULT_LOCAL_SCHEME,
    ) -> None:
        self.store = store or LocalStore()
        self.fetcher = fetcher or RemoteFetcher()
        self.local_scheme = local_scheme

    def descriptor_for(self, location: str) -> SourceDescriptor:
        return classify_location(location, self.local_scheme)

    async def resolve(self, descriptor: SourceDescriptor) -> str:
        """Return the complete content behind ``descriptor``.

        Raises:
            SourceUnavailable: If the local entry is missing or unreadable, or
                if the remote fetch fails for any reason.
        """
        if isinstance(descriptor, LocalSource):
            return await self._resolve_local(descriptor)
        if isinstance(descriptor, RemoteSource):
            return await self._resolve_remote(descriptor)
        raise TypeError(f"Unsupported source descriptor: {descriptor!r}")

    async def _resolve_local(self, descriptor: LocalSource) -> str:
        logger.debug("Resolving local source %s", descriptor.path)
        try:
            return await self.store.read_async(descriptor.path)
        except FileNotFoundError as exc:
            raise SourceUnavailable(REASON_NOT_FOUND, location=descriptor.path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(REASON_UNREADABLE, location=descriptor.path) from exc

    async def _resolve_remote(self, descriptor: RemoteSource) -> str:
        logger.debug("Resolving remote source %s", descriptor.url)
        try:
            return await self.fetcher.fetch(descriptor.url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SourceUnavailable(
                REASON_FETCH_FAILED, location=descriptor.url, remote=True
            ) from exc


__all__ = [
    "SourceResolver",
    "REASON_NOT_FOUND",
    "REASON_UNREADABLE",
    "REASON_FETCH_FAILED",
]
