"""Single-shot HTTP fetching of remote sources."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger("codeembed")


class RemoteFetcher:
    """Fetch a remote source's body text with one GET request.

    No retries and no caching: every call goes to the network. Redirects are
    followed with httpx's default limit. Timeouts come from httpx unless an
    explicit ``timeout`` is configured.

    A pre-built ``client`` may be supplied (and is then left open); otherwise a
    short-lived ``httpx.AsyncClient`` is created per request, optionally on top
    of ``transport``.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self._transport = transport
        self._timeout = timeout

    async def fetch(self, url: str) -> str:
        """Return the response body for ``url``.

        Raises:
            httpx.HTTPError: On transport failures, timeouts, invalid URLs and
                non-success status codes.
        """
        if self._client is not None:
            return await self._get(self._client, url)

        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            return await self._get(client, url)

    def _client_kwargs(self) -> dict:
        kwargs: dict = {"follow_redirects": True}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return kwargs

    @staticmethod
    async def _get(client: httpx.AsyncClient, url: str) -> str:
        logger.debug("Fetching remote source %s", url)
        response = await client.get(url)
        response.raise_for_status()
        return response.text


__all__ = ["RemoteFetcher"]
