import asyncio
import logging
from typing import List, Optional

from ..config import EmbedSettings
from ..embed import EmbedRequest, EmbedResult
from ..errors import InvalidSpec, LineRangeError, MissingSource
from ..lines import extract_lines, parse_line_ranges
from ..source import LocalStore, RemoteFetcher, SourceResolver


logger = logging.getLogger("codeembed")


class EmbedAssembler:
    """Run one embed request through resolve, parse, extract and titling.

    Each call is independent; the assembler holds no per-request state, so a
    single instance may serve concurrent requests.
    """

    def __init__(self, resolver: Optional[SourceResolver] = None) -> None:
        self.resolver = resolver or SourceResolver()

    @classmethod
    def from_settings(cls, settings: EmbedSettings) -> "EmbedAssembler":
        resolver = SourceResolver(
            LocalStore(settings.store_root),
            RemoteFetcher(timeout=settings.http_timeout),
            local_scheme=settings.local_scheme,
        )
        return cls(resolver)

    async def assemble(self, request: EmbedRequest) -> EmbedResult:
        """Produce the text and title for ``request``.

        Steps run strictly in order and the first failure ends the request:
        the source is resolved before the range is parsed, so a request with
        both a bad source and a bad range reports the source.

        Raises:
            MissingSource: If the request has no location.
            SourceUnavailable: If the source cannot be read or fetched.
            InvalidSpec: If the line range specification is malformed.
        """
        location = (request.location or "").strip()
        if not location:
            raise MissingSource()

        descriptor = self.resolver.descriptor_for(location)
        full_text = await self.resolver.resolve(descriptor)

        lines: List[int] = []
        if request.lines:
            try:
                lines = parse_line_ranges(request.lines)
            except LineRangeError as exc:
                raise InvalidSpec(request.lines, str(exc)) from exc

        text = extract_lines(full_text, lines)
        title = request.title if request.title and request.title.strip() else location

        logger.debug(
            "Assembled %s: %d of %d characters",
            location,
            len(text),
            len(full_text),
        )
        return EmbedResult(text=text, title=title, language=request.language)

    def assemble_sync(self, request: EmbedRequest) -> EmbedResult:
        """Convenience wrapper running :meth:`assemble` on a fresh event loop."""
        return asyncio.run(self.assemble(request))


__all__ = ["EmbedAssembler"]
